"""Prime numbers by a recursive sieve."""

from __future__ import annotations

import argparse
import math
from typing import List, Optional, Sequence

from .timer import Timer


def prime_sieve(n: int) -> List[int]:
    """All primes up to and including ``n``.

    The primes up to ``sqrt(n)`` are found recursively and their multiples
    struck out.
    """
    if n < 2:
        return []
    small = prime_sieve(math.isqrt(n))
    flags = bytearray([1]) * (n + 1)
    flags[0] = flags[1] = 0
    for p in small:
        flags[2 * p :: p] = bytes(len(range(2 * p, n + 1, p)))
    return [i for i, f in enumerate(flags) if f]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Count the primes up to n, or write them to a file one per line."""
    parser = argparse.ArgumentParser(prog="primes", description="Primes up to n.")
    parser.add_argument("-r", dest="rounds", type=int, default=1, help="rounds")
    parser.add_argument("-o", dest="outfile", default="", help="output file")
    parser.add_argument("n", type=int)
    args = parser.parse_args(argv)

    t = Timer("primes", True)
    primes: List[int] = []
    for _ in range(args.rounds):
        primes = prime_sieve(args.n)
        t.next("calculate primes")

    if args.outfile:
        text = "".join(f"{p}\n" for p in primes)
        t.next("generate output string")
        with open(args.outfile, "w") as f:
            f.write(text)
        t.next("write file")
    else:
        print(f"number of primes = {len(primes)}")
    return 0