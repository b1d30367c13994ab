"""Stable counting sort of items by small integer keys."""

from __future__ import annotations

import math
import os
from itertools import accumulate
from typing import Any, List, Sequence, Tuple

SEQ_THRESHOLD = 8192
_MIN_BUCKETS = 16


def _check_key(key: int, num_buckets: int) -> int:
    if not 0 <= key < num_buckets:
        raise ValueError(f"key {key} out of range for {num_buckets} buckets")
    return key


def seq_count(keys: Sequence[int], num_buckets: int) -> List[int]:
    """Number of keys falling in each of ``num_buckets`` buckets."""
    counts = [0] * num_buckets
    for k in keys:
        counts[_check_key(k, num_buckets)] += 1
    return counts


def _offsets(counts: Sequence[int]) -> List[int]:
    """Exclusive prefix sums of ``counts`` followed by the total."""
    return list(accumulate(counts, initial=0))


def _scatter(
    items: Sequence, keys: Sequence[int], starts: Sequence[int], out: List[Any]
) -> None:
    next_slot = list(starts)
    for x, k in zip(items, keys):
        out[next_slot[k]] = x
        next_slot[k] += 1


def _prepare(items: Sequence, keys: Sequence[int]) -> Tuple[List[Any], List[int]]:
    data = list(items)
    key_list = list(keys)
    if len(data) != len(key_list):
        raise ValueError("items and keys must have the same length")
    return data, key_list


def seq_count_sort(
    items: Sequence, keys: Sequence[int], num_buckets: int
) -> Tuple[List[Any], List[int]]:
    """Stably reorder ``items`` by ``keys`` in one sequential pass.

    Returns the reordered items and ``num_buckets + 1`` offsets: the start of
    each bucket followed by the total length.
    """
    data, key_list = _prepare(items, keys)
    offsets = _offsets(seq_count(key_list, num_buckets))
    out: List[Any] = [None] * len(data)
    _scatter(data, key_list, offsets, out)
    return out, offsets


def count_sort(
    items: Sequence, keys: Sequence[int], num_buckets: int
) -> Tuple[List[Any], List[int]]:
    """Stably reorder ``items`` by ``keys``, counting in blocks for large inputs.

    The number of buckets is padded to at least 16, so the offsets returned
    have ``max(num_buckets, 16) + 1`` entries, the last being the length.
    """
    data, key_list = _prepare(items, keys)
    n = len(data)
    num_buckets = max(num_buckets, _MIN_BUCKETS)
    threads = os.cpu_count() or 1

    root = math.isqrt(n - 1) + 1 if n > 0 else 0
    if n < (1 << 24):
        num_blocks = root // 16
    elif n < (1 << 28):
        num_blocks = root // 2
    else:
        num_blocks = root
    if 2 * num_blocks < threads:
        num_blocks *= 2

    if n < SEQ_THRESHOLD or num_blocks <= 1 or threads == 1:
        return seq_count_sort(data, key_list, num_buckets)

    block_size = (n - 1) // num_blocks + 1
    bounds = [(start, min(start + block_size, n)) for start in range(0, n, block_size)]
    block_counts = [seq_count(key_list[s:e], num_buckets) for s, e in bounds]

    totals = [sum(c[b] for c in block_counts) for b in range(num_buckets)]
    offsets = _offsets(totals)
    if offsets[-1] != n:
        raise RuntimeError("internal error: bucket counts do not add up")

    # destination of each block's share of each bucket, blocks in input order
    block_starts: List[List[int]] = [[0] * num_buckets for _ in bounds]
    for b in range(num_buckets):
        v = offsets[b]
        for blk, counts in enumerate(block_counts):
            block_starts[blk][b] = v
            v += counts[b]

    out: List[Any] = [None] * n
    for (s, e), starts in zip(bounds, block_starts):
        _scatter(data[s:e], key_list[s:e], starts, out)
    return out, offsets