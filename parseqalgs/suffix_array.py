"""Suffix array by prefix doubling over segments of still-equal suffixes.

Suffixes are first sorted on a packed prefix of their characters. Each round
then re-sorts only the groups (segments) of suffixes still tied, using the
rank of the suffix ``offset`` places ahead, and doubles ``offset``. Suffixes
drop out as soon as they are distinguished, so most inputs finish quickly.
"""

from __future__ import annotations

import math
from typing import List, MutableSequence, Sequence, Tuple, Union

_MAX_ROUNDS = 40
_PACKED_BITS = 96


def split_segment(
    ranks: MutableSequence[int],
    pairs: Sequence[Tuple[object, int]],
    start: int,
) -> List[Tuple[int, int]]:
    """Split a sorted segment of ``(key, suffix)`` pairs into runs of equal keys.

    The segment begins at position ``start`` of the suffix order. Every
    suffix gets the rank ``start + p + 1``, where ``p`` is the position in the
    segment where its run begins. Returns ``(start, length)`` for each run.
    """
    runs: List[Tuple[int, int]] = []
    name = 0
    for i, (key, suffix) in enumerate(pairs):
        if i > 0 and key != pairs[i - 1][0]:
            runs.append((start + name, i - name))
            name = i
        ranks[suffix] = start + name + 1
    if pairs:
        runs.append((start + name, len(pairs) - name))
    return runs


def suffix_array(text: Union[bytes, bytearray, str, Sequence[int]]) -> List[int]:
    """Start positions of the suffixes of ``text`` in sorted order.

    ``text`` is bytes, a sequence of byte values, or a string (encoded as
    UTF-8).
    """
    if isinstance(text, str):
        text = text.encode("utf-8")
    data = bytes(text)
    n = len(data)
    if n == 0:
        return []

    # renumber characters densely from 1, leaving 0 for past-the-end
    code = {c: i + 1 for i, c in enumerate(sorted(set(data)))}
    m = len(code) + 1
    nchars = max(1, math.floor(_PACKED_BITS / math.log2(m)))
    s = [code[c] for c in data] + [0] * nchars

    order = sorted(range(n), key=lambda i: s[i : i + nchars])
    ranks = [0] * n
    segments = split_segment(ranks, [(s[i : i + nchars], i) for i in order], 0)

    offset = nchars
    rounds = 0
    while True:
        if rounds > _MAX_ROUNDS:
            raise RuntimeError("suffix array: internal error, too many rounds")
        rounds += 1
        open_segments = [(st, length) for st, length in segments if length > 1]
        if not open_segments:
            break

        # read every rank before any segment rewrites them
        resorted = []
        for st, length in open_segments:
            pairs = [
                (ranks[i + offset] if i + offset < n else 0, i)
                for i in order[st : st + length]
            ]
            pairs.sort(key=lambda p: p[0])
            resorted.append((st, pairs))

        segments = []
        for st, pairs in resorted:
            order[st : st + len(pairs)] = [i for _key, i in pairs]
            segments.extend(split_segment(ranks, pairs, st))
        offset *= 2
    return order