"""Wall-clock stopwatch that accumulates elapsed intervals and reports them."""

from __future__ import annotations

import time
from typing import Callable, Optional, TextIO


class Timer:
    """Accumulating stopwatch.

    Reports are printed as ``name: label: seconds``, with the seconds shown to
    four decimal places. When the label is empty it is left out.
    """

    def __init__(
        self,
        name: str = "timer",
        start: bool = True,
        *,
        clock: Callable[[], float] = time.time,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.name = name
        self.total_time = 0.0
        self.last_time = 0.0
        self.on = False
        self._clock = clock
        self._stream = stream
        if start:
            self.start()

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def start(self) -> None:
        """Start (or restart) the current interval."""
        self.on = True
        self.last_time = self._clock()

    def stop(self) -> float:
        """Stop the timer, add the current interval to the total and return it."""
        self.on = False
        elapsed = self._clock() - self.last_time
        self.total_time += elapsed
        return elapsed

    def reset(self) -> None:
        """Clear the accumulated total and turn the timer off."""
        self.total_time = 0.0
        self.on = False

    def get_total(self) -> float:
        """Total time, including the running interval if the timer is on."""
        if self.on:
            return self.total_time + self._clock() - self.last_time
        return self.total_time

    def get_next(self) -> float:
        """Time since the last checkpoint; starts a new interval. 0.0 when off."""
        if not self.on:
            return 0.0
        now = self._clock()
        elapsed = now - self.last_time
        self.total_time += elapsed
        self.last_time = now
        return elapsed

    def report(self, elapsed: float, label: str = "") -> None:
        """Print one report line for ``elapsed`` seconds."""
        prefix = f"{self.name}: {label}: " if label else f"{self.name}: "
        print(f"{prefix}{elapsed:.4f}", file=self._stream)

    def total(self) -> None:
        """Report the total under the label ``total`` and zero the total."""
        self.report(self.get_total(), "total")
        self.total_time = 0.0

    def report_total(self, label: str) -> None:
        """Report the total under the given label."""
        self.report(self.get_total(), label)

    def next(self, label: str) -> None:
        """Report the time since the last checkpoint, if the timer is on."""
        if self.on:
            self.report(self.get_next(), label)