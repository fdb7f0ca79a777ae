"""
Top-5 search for "kw1 OR kw2".

Both keywords' occurrence lists are already sorted by descending frequency, so
the ranked union is the merge step of merge sort:

    deep:  [(doc1,2), (doc2,1)]
    world: [(doc2,1)]

    doc1 (2) vs doc2 (1)  -> doc1
    doc2 (1) vs doc2 (1)  -> doc2 (tie, first keyword wins)
    -       vs doc2 (1)  -> doc2 already in result, skip

    result: ["doc1", "doc2"]

Rules:
- A document appears at most once (at the rank of its best frequency)
- Equal frequencies are broken in favor of the first keyword
- At most 5 documents
- No matches: empty list
"""

from typing import Dict, List

from .occurrences import Occurrence

TOP_N = 5


def top5search(
    kw1: str,
    kw2: str,
    keywords_index: Dict[str, List[Occurrence]],
    limit: int = TOP_N,
) -> List[str]:
    """
    Rank documents containing kw1 or kw2 by descending frequency.

    Query keywords are only lower-cased; they are not checked against the
    noise-word list (a noise word is simply never found in the index).

    Args:
        kw1: First keyword (wins frequency ties)
        kw2: Second keyword
        keywords_index: Master index {keyword: [Occurrence, ...]}
        limit: Maximum number of documents to return (default: 5)

    Returns:
        Document names, best first, no duplicates, at most `limit` entries

    Example:
        >>> index = {
        ...     "deep": [Occurrence("doc1", 2), Occurrence("doc2", 1)],
        ...     "world": [Occurrence("doc2", 1)],
        ... }
        >>> top5search("Deep", "world", index)
        ['doc1', 'doc2']
    """
    occs1 = keywords_index.get(kw1.lower(), [])
    occs2 = keywords_index.get(kw2.lower(), [])

    result: List[str] = []
    i = j = 0

    while len(result) < limit and (i < len(occs1) or j < len(occs2)):
        if j >= len(occs2) or (i < len(occs1) and occs1[i].frequency >= occs2[j].frequency):
            document = occs1[i].document
            i += 1
        else:
            document = occs2[j].document
            j += 1

        if document not in result:
            result.append(document)

    return result
