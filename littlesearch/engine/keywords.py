"""
Keyword extraction for the inverted index.

Keyword test for a raw whitespace-delimited token:
1. Strip any run of TRAILING non-letters ("world!!" → "world", "of," → "of")
2. Lowercase conversion
3. Reject if empty ("..." → "")
4. Reject if any non-letter remains anywhere ("don't", "e-mail", "abc123def")
5. Reject noise words (exact match against the noise-word set)

Punctuation embedded inside a token is never cleaned up: it disqualifies the
whole token. Rejection is signalled by returning None, never by raising.
"""

import re
from typing import Container, Dict, Iterable, Optional

from .occurrences import Occurrence

# Trailing run of anything that is not an ASCII letter ("naïve" keeps its ï,
# "café" loses its é)
_TRAILING_NON_ALPHA = re.compile(r'[^a-zA-Z]+$')


def get_keyword(word: str, noise_words: Container[str]) -> Optional[str]:
    """
    Normalize a raw token and return it if it is an indexable keyword.

    Args:
        word: Raw token (no whitespace)
        noise_words: Lower-case noise words to exclude

    Returns:
        Lower-case keyword, or None if the token is rejected

    Examples:
        >>> get_keyword("Hello!!", set())
        'hello'
        >>> get_keyword("don't", set()) is None
        True
        >>> get_keyword("of,", {"of"}) is None
        True
    """
    keyword = _TRAILING_NON_ALPHA.sub('', word).lower()

    if not keyword.isalpha():
        return None

    if keyword in noise_words:
        return None

    return keyword


def count_keywords(
    document: str,
    tokens: Iterable[str],
    noise_words: Container[str],
) -> Dict[str, Occurrence]:
    """
    Count keyword occurrences in a single document.

    Args:
        document: Document name, stored on every Occurrence
        tokens: Raw tokens of the document, in reading order
        noise_words: Lower-case noise words to exclude

    Returns:
        Dict {keyword: Occurrence(document, count)}, keywords in first-seen order

    Example:
        >>> kws = count_keywords("doc1", "deep blue sea deep".split(), set())
        >>> {k: o.frequency for k, o in kws.items()}
        {'deep': 2, 'blue': 1, 'sea': 1}
    """
    kws: Dict[str, Occurrence] = {}

    for token in tokens:
        keyword = get_keyword(token, noise_words)
        if keyword is None:
            continue

        if keyword in kws:
            kws[keyword].frequency += 1
        else:
            kws[keyword] = Occurrence(document, 1)

    return kws
