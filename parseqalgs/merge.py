"""Stable merging of two sorted sequences."""

from __future__ import annotations

from typing import Any, Callable, List, Sequence

Less = Callable[[Any, Any], bool]

# Merges shorter than this are done with a single linear pass.
_MERGE_BASE = 2048


def _first_not_less(seq: Sequence, lo: int, hi: int, value: Any, less: Less) -> int:
    while lo < hi:
        mid = (lo + hi) // 2
        if less(seq[mid], value):
            lo = mid + 1
        else:
            hi = mid
    return lo


def _seq_merge_into(a, alo, ahi, b, blo, bhi, out, olo, less) -> None:
    i, j, k = alo, blo, olo
    while i < ahi and j < bhi:
        if less(b[j], a[i]):
            out[k] = b[j]
            j += 1
        else:
            out[k] = a[i]
            i += 1
        k += 1
    rest_a = ahi - i
    out[k : k + rest_a] = a[i:ahi]
    k += rest_a
    out[k : k + (bhi - j)] = b[j:bhi]


def _merge_into(a, alo, ahi, b, blo, bhi, out, olo, less) -> None:
    na = ahi - alo
    nb = bhi - blo
    if na + nb < _MERGE_BASE:
        _seq_merge_into(a, alo, ahi, b, blo, bhi, out, olo, less)
    elif na == 0:
        out[olo : olo + nb] = b[blo:bhi]
    elif nb == 0:
        out[olo : olo + na] = a[alo:ahi]
    else:
        ma = alo + na // 2
        # the first element of b not less than a[ma] keeps equal keys of a first
        mb = _first_not_less(b, blo, bhi, a[ma], less)
        if mb == blo:
            ma += 1
        _merge_into(a, alo, ma, b, blo, mb, out, olo, less)
        _merge_into(a, ma, ahi, b, mb, bhi, out, olo + (ma - alo) + (mb - blo), less)


def seq_merge(a: Sequence, b: Sequence, less: Less) -> List[Any]:
    """Merge two sorted sequences in one pass; on ties ``a`` comes first."""
    a, b = list(a), list(b)
    out: List[Any] = [None] * (len(a) + len(b))
    _seq_merge_into(a, 0, len(a), b, 0, len(b), out, 0, less)
    return out


def merge(a: Sequence, b: Sequence, less: Less) -> List[Any]:
    """Merge two sorted sequences by divide and conquer; stable."""
    a, b = list(a), list(b)
    out: List[Any] = [None] * (len(a) + len(b))
    _merge_into(a, 0, len(a), b, 0, len(b), out, 0, less)
    return out