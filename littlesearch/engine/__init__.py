"""
Keyword index and top-5 search over a small document collection.

Relevance is raw keyword frequency: a document ranks by how many times the
query keyword occurs in it. No IDF, no length normalization, no stemming.

Components:
- keywords: Keyword test (trailing punctuation, case, noise words) and
  per-document keyword counting
- occurrences: Occurrence records and binary insertion into a
  descending-frequency list
- index_builder: Merging per-document counts into the master index
- ranking: Top-5 "kw1 OR kw2" search (merge of two sorted lists)
- search_engine: LittleSearchEngine, build-then-query facade over the above
"""

from .keywords import get_keyword, count_keywords
from .occurrences import Occurrence, insert_last_occurrence, is_descending
from .index_builder import merge_keywords, build_index
from .ranking import top5search
from .search_engine import LittleSearchEngine

__all__ = [
    "get_keyword",
    "count_keywords",
    "Occurrence",
    "insert_last_occurrence",
    "is_descending",
    "merge_keywords",
    "build_index",
    "top5search",
    "LittleSearchEngine",
]
