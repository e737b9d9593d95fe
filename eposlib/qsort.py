"""In-place quicksort using a three-way comparison function.

Bentley and McIlroy's engineered quicksort: median-of-three (ninther for
large inputs), fat partitioning around equal keys and an insertion-sort
fallback for small or already-ordered ranges.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")
Compare = Callable[[Any, Any], int]


def _insertion_sort(items: MutableSequence, lo: int, hi: int, cmp: Compare) -> None:
    for m in range(lo + 1, hi):
        pos = m
        while pos > lo and cmp(items[pos - 1], items[pos]) > 0:
            items[pos - 1], items[pos] = items[pos], items[pos - 1]
            pos -= 1


def _med3(items: MutableSequence, a: int, b: int, c: int, cmp: Compare) -> int:
    xa, xb, xc = items[a], items[b], items[c]
    if cmp(xa, xb) < 0:
        if cmp(xb, xc) < 0:
            return b
        return c if cmp(xa, xc) < 0 else a
    if cmp(xb, xc) > 0:
        return b
    return a if cmp(xa, xc) < 0 else c


def _vecswap(items: MutableSequence, a: int, b: int, n: int) -> None:
    if n > 0:
        items[a : a + n], items[b : b + n] = items[b : b + n], items[a : a + n]


def _sort(items: MutableSequence, lo: int, n: int, cmp: Compare) -> None:
    while True:
        if n < 7:
            _insertion_sort(items, lo, lo + n, cmp)
            return

        pm = lo + n // 2
        if n > 7:
            pl = lo
            pn = lo + n - 1
            if n > 40:
                d = n // 8
                pl = _med3(items, pl, pl + d, pl + 2 * d, cmp)
                pm = _med3(items, pm - d, pm, pm + d, cmp)
                pn = _med3(items, pn - 2 * d, pn - d, pn, cmp)
            pm = _med3(items, pl, pm, pn, cmp)
        items[lo], items[pm] = items[pm], items[lo]

        pa = pb = lo + 1
        pc = pd = lo + n - 1
        swapped = False
        while True:
            while pb <= pc and (r := cmp(items[pb], items[lo])) <= 0:
                if r == 0:
                    swapped = True
                    items[pa], items[pb] = items[pb], items[pa]
                    pa += 1
                pb += 1
            while pb <= pc and (r := cmp(items[pc], items[lo])) >= 0:
                if r == 0:
                    swapped = True
                    items[pc], items[pd] = items[pd], items[pc]
                    pd -= 1
                pc -= 1
            if pb > pc:
                break
            items[pb], items[pc] = items[pc], items[pb]
            swapped = True
            pb += 1
            pc -= 1

        if not swapped:
            _insertion_sort(items, lo, lo + n, cmp)
            return

        end = lo + n
        r = min(pa - lo, pb - pa)
        _vecswap(items, lo, pb - r, r)
        r = min(pd - pc, end - pd - 1)
        _vecswap(items, pb, end - r, r)

        left = pb - pa
        if left > 1:
            _sort(items, lo, left, cmp)
        right = pd - pc
        if right <= 1:
            return
        lo = end - right
        n = right


def qsort(items: MutableSequence[T], cmp: Compare) -> MutableSequence[T]:
    """Sort ``items`` in place by ``cmp`` and return the same sequence.

    ``cmp(a, b)`` returns a negative number, zero or a positive number as
    ``a`` sorts before, equal to or after ``b``. The sort is not stable.
    """
    _sort(items, 0, len(items), cmp)
    return items