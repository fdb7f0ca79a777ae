"""
Keyword occurrences and the ordered occurrence list.

Each keyword in the master index maps to a list of Occurrence objects kept in
descending order of frequency. New occurrences are appended to the end of the
list and then moved into place with a single binary-search-positioned insert:

    [(a,9), (b,5), (c,2), (d,6)]      # (d,6) just appended
    probe mid=1 -> 5 < 6 -> search left
    probe mid=0 -> 9 > 6 -> search right, stop
    [(a,9), (d,6), (b,5), (c,2)]      # inserted at index 1

Lookups: O(log n) comparisons. Insert: O(n) element shift (list.insert).
"""

from dataclasses import dataclass
from typing import List


@dataclass
class Occurrence:
    """Number of times a keyword occurs in one document"""
    document: str   # Document name (as listed in the manifest)
    frequency: int  # Incremented in place while a document is being counted

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occs: List[Occurrence]) -> List[int]:
    """
    Move the last occurrence of the list into its descending-frequency position.

    Elements 0..n-2 must already be in non-increasing frequency order; the
    element at n-1 is the one that was just appended. The insertion spot is
    found by binary search over 0..n-2:

    - midpoint frequency > key: continue in the right half
    - midpoint frequency < key: continue in the left half
    - midpoint frequency == key: stop, insert at the midpoint

    Without an exact match the element goes to the smallest index whose
    frequency is <= key (which may be n-1, i.e. it stays where it is).

    Args:
        occs: Occurrence list, modified in place

    Returns:
        Midpoint indexes probed by the binary search, in probe order.
        Empty if the list has a single element (nothing to search).

    Examples:
        >>> occs = [Occurrence("a", 9), Occurrence("b", 5), Occurrence("c", 2), Occurrence("d", 6)]
        >>> insert_last_occurrence(occs)
        [1, 0]
        >>> [str(o) for o in occs]
        ['(a,9)', '(d,6)', '(b,5)', '(c,2)']
    """
    probes: List[int] = []
    if len(occs) == 1:
        return probes

    key = occs[-1].frequency
    lo, hi = 0, len(occs) - 2

    while lo <= hi:
        mid = (lo + hi) // 2
        probes.append(mid)
        frequency = occs[mid].frequency

        if frequency > key:
            lo = mid + 1
        elif frequency < key:
            hi = mid - 1
        else:
            lo = mid
            break

    if lo != len(occs) - 1:
        occs.insert(lo, occs.pop())

    return probes


def is_descending(occs: List[Occurrence]) -> bool:
    """True if frequencies never increase along the list"""
    return all(
        occs[i].frequency >= occs[i + 1].frequency
        for i in range(len(occs) - 1)
    )
