"""Matrix transposition and the block-to-bucket transpose used by sorts."""

from __future__ import annotations

from itertools import accumulate
from typing import Any, List, Sequence, Tuple

# Inputs at least this long, with many blocks and buckets, take the
# offset-driven (block transpose) route.
_LARGE_INPUT = 1 << 22
_MANY_PARTS = 512


def _exclusive_scan(values: Sequence[int]) -> Tuple[List[int], int]:
    sums = list(accumulate(values, initial=0))
    return sums[:-1], sums[-1]


def transpose(source: Sequence[Any], rows: int, cols: int) -> List[Any]:
    """Transpose a row-major ``rows`` x ``cols`` matrix into a new list."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions cannot be negative")
    if len(source) < rows * cols:
        raise ValueError("source is shorter than rows * cols")
    return [source[i * cols + j] for j in range(cols) for i in range(rows)]


def block_transpose(
    source: Sequence[Any],
    offsets_a: Sequence[int],
    offsets_b: Sequence[int],
    rows: int,
    cols: int,
) -> List[Any]:
    """Transpose a matrix of variable-length blocks.

    Block ``(i, j)`` starts at ``offsets_a[i*cols + j]`` in ``source`` and ends
    where the next one starts (``offsets_a`` has ``rows*cols + 1`` entries). It
    is copied to ``offsets_b[j*rows + i]`` in the result.
    """
    src = list(source)
    dest: List[Any] = [None] * len(src)
    for i in range(rows):
        for j in range(cols):
            sa = offsets_a[i * cols + j]
            length = offsets_a[i * cols + j + 1] - sa
            sb = offsets_b[j * rows + i]
            if length < 0 or sa + length > len(src) or sb + length > len(dest):
                raise ValueError("block offsets out of range")
            dest[sb : sb + length] = src[sa : sa + length]
    return dest


def transpose_buckets(
    source: Sequence[Any],
    counts: Sequence[int],
    n: int,
    block_size: int,
    num_blocks: int,
    num_buckets: int,
) -> Tuple[List[Any], List[int]]:
    """Move elements from blocks to buckets.

    ``source`` holds ``num_blocks`` blocks of ``block_size`` elements, each
    already grouped by bucket. ``counts[i*num_buckets + j]`` is the number of
    elements of block ``i`` in bucket ``j``. Returns the elements ordered by
    bucket (block order kept inside each bucket) and the ``num_buckets + 1``
    bucket offsets, the last being ``n``.
    """
    m = num_buckets * num_blocks
    if len(counts) < m:
        raise ValueError("counts must have num_blocks * num_buckets entries")
    block_counts = list(counts[:m])
    src = list(source)
    dest_offsets, total = _exclusive_scan(transpose(block_counts, num_blocks, num_buckets))

    if n < _LARGE_INPUT or num_buckets <= _MANY_PARTS or num_blocks <= _MANY_PARTS:
        if num_blocks <= 0 or num_blocks & (num_blocks - 1):
            raise ValueError("in transpose_buckets: num_blocks must be a power of 2")
        if total != n:
            raise ValueError("in transpose_buckets: counts do not add up to n")
        dest: List[Any] = [None] * n
        for block in range(num_blocks):
            s_offset = block * block_size
            for bucket in range(num_buckets):
                d_offset = dest_offsets[block + num_blocks * bucket]
                length = block_counts[block * num_buckets + bucket]
                dest[d_offset : d_offset + length] = src[s_offset : s_offset + length]
                s_offset += length
    else:
        source_offsets, source_total = _exclusive_scan(block_counts)
        if total != n or source_total != n:
            raise ValueError("in transpose_buckets: counts do not add up to n")
        source_offsets.append(n)
        dest = block_transpose(src, source_offsets, dest_offsets, num_blocks, num_buckets)
        del dest[n:]

    offsets = [dest_offsets[bucket * num_blocks] for bucket in range(num_buckets)]
    offsets.append(n)
    return dest, offsets