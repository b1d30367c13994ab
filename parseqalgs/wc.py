"""Count lines, space-separated words and characters of a text."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple, Union

from .timer import Timer

_SPACES = frozenset("\n\t ")


def word_count(text: Union[str, bytes]) -> Tuple[int, int, int]:
    """Return ``(lines, words, characters)``.

    Lines are newline characters; a word starts at a non-space character that
    is first or follows a space, tab or newline. Bytes count one per byte.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    lines = text.count("\n")
    words = sum(
        1
        for i, c in enumerate(text)
        if c not in _SPACES and (i == 0 or text[i - 1] in _SPACES)
    )
    return lines, words, len(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the counts of a file."""
    parser = argparse.ArgumentParser(prog="wc", description="Count lines, words and bytes.")
    parser.add_argument("-r", dest="rounds", type=int, default=1, help="rounds")
    parser.add_argument("infile")
    args = parser.parse_args(argv)

    t = Timer("word counts", True)
    with open(args.infile, "rb") as f:
        data = f.read()
    t.next("read file")

    lines = words = size = 0
    for _ in range(args.rounds):
        lines, words, size = word_count(data)
        t.next("calculate counts")

    print(f"  {lines}  {words} {size} {args.infile}")
    return 0