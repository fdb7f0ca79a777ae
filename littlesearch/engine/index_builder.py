"""
Index builder - merges per-document keyword counts into the master index.

Master index structure:
    {
        "deep": [Occurrence("doc1", 2), Occurrence("doc2", 1)],
        "world": [Occurrence("doc2", 1)],
        ...
    }

Every occurrence list stays in descending frequency order after each merge.
Documents are merged one at a time in manifest order, so the final index is
fully determined by the manifest (no dependence on dict/hash ordering).
"""

import logging
from typing import Container, Dict, Iterable, List, Tuple

from .keywords import count_keywords
from .occurrences import Occurrence, insert_last_occurrence

logger = logging.getLogger(__name__)

KeywordsIndex = Dict[str, List[Occurrence]]


def merge_keywords(kws: Dict[str, Occurrence], keywords_index: KeywordsIndex) -> None:
    """
    Merge the keyword occurrences of one document into the master index.

    A keyword seen for the first time gets a new single-element list.
    Otherwise the occurrence is appended to the keyword's list and moved
    into its descending-frequency position.

    Args:
        kws: Keyword occurrences of a single document (from count_keywords)
        keywords_index: Master index, modified in place
    """
    for keyword, occurrence in kws.items():
        occs = keywords_index.get(keyword)

        if occs is None:
            keywords_index[keyword] = [occurrence]
        else:
            occs.append(occurrence)
            insert_last_occurrence(occs)


def build_index(
    documents: Iterable[Tuple[str, Iterable[str]]],
    noise_words: Container[str],
) -> KeywordsIndex:
    """
    Build the master index from (document name, tokens) pairs.

    Args:
        documents: Documents in manifest order, each with its raw tokens
        noise_words: Lower-case noise words to exclude

    Returns:
        Master index {keyword: [Occurrence, ...]} in descending frequency order

    Example:
        >>> index = build_index([
        ...     ("doc1", "deep blue sea deep".split()),
        ...     ("doc2", "world of deep water".split()),
        ... ], set())
        >>> [str(o) for o in index["deep"]]
        ['(doc1,2)', '(doc2,1)']
    """
    keywords_index: KeywordsIndex = {}
    doc_count = 0

    for document, tokens in documents:
        merge_keywords(count_keywords(document, tokens, noise_words), keywords_index)
        doc_count += 1

    logger.debug(f"Built keyword index: {len(keywords_index)} keywords from {doc_count} documents")

    return keywords_index
