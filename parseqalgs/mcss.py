"""Maximum contiguous subsequence sum by a single associative reduction."""

from __future__ import annotations

import argparse
import random
from functools import reduce
from typing import Optional, Sequence, Tuple

from .timer import Timer

_Summary = Tuple[float, float, float, float]


def _combine(a: _Summary, b: _Summary) -> _Summary:
    # (best, best prefix, best suffix, total)
    best_a, pre_a, suf_a, tot_a = a
    best_b, pre_b, suf_b, tot_b = b
    return (
        max(best_a, best_b, suf_a + pre_b),
        max(pre_a, tot_a + pre_b),
        max(suf_a + tot_b, suf_b),
        tot_a + tot_b,
    )


def mcss(values: Sequence[float]):
    """Largest sum of a contiguous run of ``values``; the empty run counts as 0."""
    zero = type(values[0])(0) if len(values) else 0
    identity = (zero, zero, zero, zero)
    return reduce(_combine, ((v, v, v, v) for v in values), identity)[0]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compute the MCSS of a random sequence and print it."""
    parser = argparse.ArgumentParser(prog="mcss", description="Maximum contiguous subsequence sum.")
    parser.add_argument("-r", dest="rounds", type=int, default=3, help="rounds")
    parser.add_argument("-n", dest="size", type=int, default=1, help="sequence length")
    args = parser.parse_args(argv)
    n = args.size
    if n < 1:
        parser.error("size must be positive")

    t = Timer("MCSS")
    rng = random.Random(0)
    values = [float(rng.getrandbits(64) % n - n // 2) for _ in range(n)]
    result = 0.0
    for _ in range(args.rounds):
        result = mcss(values)
        t.next("Total")
    print(f"{result:g}")
    return 0