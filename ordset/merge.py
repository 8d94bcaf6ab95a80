"""
Merge-scan algorithms over canonical sequences.

A canonical sequence is strictly increasing under ``key`` (identity when
``key`` is None). Every function here only compares keys with ``<``: two
elements are equal when neither key is less than the other. Inputs are
assumed canonical and are never modified.
"""

from bisect import bisect_left
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

KeyFunc = Optional[Callable[[T], object]]


def _keys(seq: Sequence[T], key: KeyFunc) -> Sequence:
    if key is None:
        return seq
    return [key(item) for item in seq]


def canonicalize(items: Iterable[T], key: KeyFunc = None) -> List[T]:
    """
    Sort ``items`` and drop elements equal to their predecessor.

    The sort is stable, so the first occurrence of each distinct value in
    input order is the one kept.
    """
    ordered = sorted(items, key=key)
    out: List[T] = []
    last = None
    for item in ordered:
        k = item if key is None else key(item)
        if out and not last < k:
            continue
        out.append(item)
        last = k
    return out


def bisect_position(seq: Sequence[T], item: T, key: KeyFunc = None) -> Tuple[int, bool]:
    """
    Locate ``item`` in a canonical sequence.

    Returns the rank at which ``item`` is or would be inserted, and whether
    an equal element is already stored there.
    """
    k = item if key is None else key(item)
    idx = bisect_left(seq, k, key=key)
    if idx == len(seq):
        return idx, False
    stored = seq[idx] if key is None else key(seq[idx])
    return idx, not k < stored


def union(left: Sequence[T], right: Sequence[T], key: KeyFunc = None) -> List[T]:
    lkeys, rkeys = _keys(left, key), _keys(right, key)
    n, m = len(left), len(right)
    out: List[T] = []
    i = j = 0
    while i < n and j < m:
        if lkeys[i] < rkeys[j]:
            out.append(left[i])
            i += 1
        elif rkeys[j] < lkeys[i]:
            out.append(right[j])
            j += 1
        else:
            out.append(left[i])
            i += 1
            j += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out


def intersection(left: Sequence[T], right: Sequence[T], key: KeyFunc = None) -> List[T]:
    lkeys, rkeys = _keys(left, key), _keys(right, key)
    n, m = len(left), len(right)
    out: List[T] = []
    i = j = 0
    while i < n and j < m:
        if lkeys[i] < rkeys[j]:
            i += 1
        elif rkeys[j] < lkeys[i]:
            j += 1
        else:
            out.append(left[i])
            i += 1
            j += 1
    return out


def difference(left: Sequence[T], right: Sequence[T], key: KeyFunc = None) -> List[T]:
    """Elements of ``left`` with no equal counterpart in ``right``."""
    lkeys, rkeys = _keys(left, key), _keys(right, key)
    n, m = len(left), len(right)
    out: List[T] = []
    i = j = 0
    while i < n and j < m:
        if lkeys[i] < rkeys[j]:
            out.append(left[i])
            i += 1
        elif rkeys[j] < lkeys[i]:
            j += 1
        else:
            i += 1
            j += 1
    out.extend(left[i:])
    return out


def symmetric_difference(
    left: Sequence[T], right: Sequence[T], key: KeyFunc = None
) -> List[T]:
    lkeys, rkeys = _keys(left, key), _keys(right, key)
    n, m = len(left), len(right)
    out: List[T] = []
    i = j = 0
    while i < n and j < m:
        if lkeys[i] < rkeys[j]:
            out.append(left[i])
            i += 1
        elif rkeys[j] < lkeys[i]:
            out.append(right[j])
            j += 1
        else:
            i += 1
            j += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out


def is_disjoint(left: Sequence[T], right: Sequence[T], key: KeyFunc = None) -> bool:
    # Keys are computed lazily so the scan stops on the first shared element.
    n, m = len(left), len(right)
    i = j = 0
    while i < n and j < m:
        a = left[i] if key is None else key(left[i])
        b = right[j] if key is None else key(right[j])
        if a < b:
            i += 1
        elif b < a:
            j += 1
        else:
            return False
    return True


def is_subset(left: Sequence[T], right: Sequence[T], key: KeyFunc = None) -> bool:
    """True when every element of ``left`` has an equal element in ``right``."""
    n, m = len(left), len(right)
    if n > m:
        return False
    i = j = 0
    while i < n:
        if j == m:
            return False
        a = left[i] if key is None else key(left[i])
        b = right[j] if key is None else key(right[j])
        if b < a:
            j += 1
        elif a < b:
            return False
        else:
            i += 1
            j += 1
    return True
