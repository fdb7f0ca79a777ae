"""
LittleSearchEngine - keyword index over a document collection.

Two phases:
1. Build: make_index() loads noise words, then counts and merges every document
   listed in the manifest, in manifest order
2. Query: top5search() / occurrences() only read the index

The index is never modified after the build phase, so concurrent readers need
no locking once make_index() has returned.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

from ..storage import DocumentStorage, PathLike
from .index_builder import KeywordsIndex, merge_keywords
from .keywords import count_keywords, get_keyword
from .occurrences import Occurrence, insert_last_occurrence
from .ranking import TOP_N, top5search

logger = logging.getLogger(__name__)


class LittleSearchEngine:
    """
    Keyword index with top-5 "kw1 OR kw2" search.

    Attributes:
        keywords_index: {keyword: [Occurrence, ...]}, descending frequency
        noise_words: Lower-case words that are never indexed
        documents: Names of indexed documents, in manifest order
    """

    def __init__(self, storage: Optional[DocumentStorage] = None):
        """
        Args:
            storage: Source of manifests, noise words and documents
                (default: DocumentStorage relative to the working directory)
        """
        self.storage = storage or DocumentStorage()
        self.keywords_index: KeywordsIndex = {}
        self.noise_words: Set[str] = set()
        self.documents: List[str] = []

    def load_noise_words(self, words: Iterable[str]) -> None:
        """Add words to the noise-word set"""
        self.noise_words.update(w.lower() for w in words)

    def make_index(self, docs_file: PathLike, noise_words_file: PathLike) -> None:
        """
        Index all keywords of all documents listed in docs_file.

        Args:
            docs_file: Manifest with document names, whitespace separated;
                a name listed more than once is indexed once
            noise_words_file: Noise words, whitespace separated

        Raises:
            ResourceNotFoundError: If the manifest, the noise-word file or
                any listed document cannot be read
        """
        self.load_noise_words(self.storage.read_noise_words(noise_words_file))

        for doc_file in self.storage.read_manifest(docs_file):
            if doc_file in self.documents:
                logger.warning(f"Skipping duplicate manifest entry: {doc_file}")
                continue
            self.merge_keywords(self.load_keywords(doc_file))
            self.documents.append(doc_file)

        logger.info(
            f"Indexed {len(self.documents)} documents: "
            f"{len(self.keywords_index)} keywords, {len(self.noise_words)} noise words"
        )

    def load_keywords(self, doc_file: str) -> Dict[str, Occurrence]:
        """
        Count the keywords of one document.

        Returns:
            {keyword: Occurrence(doc_file, count)}

        Raises:
            ResourceNotFoundError: If the document cannot be read
        """
        kws = count_keywords(doc_file, self.storage.iter_document_tokens(doc_file), self.noise_words)
        logger.debug(f"Loaded {len(kws)} keywords from {doc_file}")
        return kws

    def merge_keywords(self, kws: Dict[str, Occurrence]) -> None:
        """Merge one document's keyword occurrences into the index"""
        merge_keywords(kws, self.keywords_index)

    def get_keyword(self, word: str) -> Optional[str]:
        """Normalized keyword for word, or None if it is not a keyword"""
        return get_keyword(word, self.noise_words)

    @staticmethod
    def insert_last_occurrence(occs: List[Occurrence]) -> List[int]:
        """Binary-insert the last occurrence; returns the probed midpoints"""
        return insert_last_occurrence(occs)

    def top5search(self, kw1: str, kw2: str) -> List[str]:
        """Up to 5 documents containing kw1 or kw2, highest frequency first"""
        return top5search(kw1, kw2, self.keywords_index, limit=TOP_N)

    def occurrences(self, keyword: str) -> List[Occurrence]:
        """Occurrence list of a keyword (copy), empty if not indexed"""
        return list(self.keywords_index.get(keyword.lower(), []))

    def stats(self) -> dict:
        return {
            "documents": len(self.documents),
            "keywords": len(self.keywords_index),
            "noise_words": len(self.noise_words),
        }
