"""Deterministic reservations: run loop iterations in rounds with retries."""

from __future__ import annotations

import copy
import sys
from typing import Any


class Reservation:
    """A cell that remembers the smallest iteration index reserving it."""

    max_idx = sys.maxsize

    def __init__(self) -> None:
        self.r = self.max_idx

    def reserve(self, i: int) -> bool:
        """Lower the reservation to ``i``; True if it was lowered."""
        if i < self.r:
            self.r = i
            return True
        return False

    def reserved(self) -> bool:
        """True if some iteration holds the reservation."""
        return self.r < self.max_idx

    def reset(self) -> None:
        """Clear the reservation."""
        self.r = self.max_idx

    def freeze(self) -> None:
        """Block all further reservations."""
        self.r = -1

    def check(self, i: int) -> bool:
        """True if iteration ``i`` holds the reservation."""
        return self.r == i

    def check_reset(self, i: int) -> bool:
        """If iteration ``i`` holds the reservation, clear it and return True."""
        if self.r == i:
            self.r = self.max_idx
            return True
        return False


def speculative_for(
    step: Any,
    start: int,
    end: int,
    granularity: int,
    has_state: bool = True,
    max_tries: int = -1,
) -> int:
    """Run iterations ``start .. end-1`` of ``step`` in speculative rounds.

    Each round calls ``reserve(i)`` on a batch of iterations, then
    ``commit(i)`` on those whose reserve returned True. Iterations whose
    commit returns False are retried in the next round, ahead of new ones.
    With ``has_state`` each batch slot uses its own shallow copy of ``step``.
    The batch size shrinks when many commits fail and grows when few do.

    Returns the number of iterations tried, counting retries. Raises
    RuntimeError after more than ``max_tries`` rounds.
    """
    if max_tries < 0:
        max_tries = 100 + 200 * granularity
    max_round_size = (end - start) // granularity + 1
    current_round_size = max_round_size // 4
    states = [copy.copy(step) for _ in range(max_round_size)] if has_state else []

    rounds = 0
    number_done = start
    held: list = []
    total_processed = 0

    while number_done < end:
        if rounds > max_tries:
            raise RuntimeError(
                "speculative_for: too many iterations, increase max_tries"
            )
        rounds += 1
        size = min(current_round_size, end - number_done)
        total_processed += size
        number_keep = len(held)

        batch = [held[i] if i < number_keep else number_done + i for i in range(size)]
        workers = states[:size] if has_state else [step] * size

        keep = [w.reserve(i) for w, i in zip(workers, batch)]
        keep = [k and not w.commit(i) for k, w, i in zip(keep, workers, batch)]

        held = [i for i, k in zip(batch, keep) if k]
        number_keep = len(held)
        number_done += size - number_keep

        if size > 0:
            failed = number_keep / size
            if failed > 0.2:
                current_round_size = max(
                    current_round_size // 2, max(max_round_size // 64 + 1, number_keep)
                )
            elif failed < 0.1:
                current_round_size = min(current_round_size * 2, max_round_size)
    return total_processed