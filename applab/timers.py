"""CPU timers that accumulate elapsed time across start/stop sessions."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from typing import Any, TextIO, TypeVar

T = TypeVar("T")


class Timer:
    """A named accumulating stopwatch; misuse is reported on stderr."""

    def __init__(self, name: str, clock: Callable[[], float] | None = None) -> None:
        self.name = name
        self._clock = clock or time.process_time
        self.start_time = 0.0
        self.stop_time = 0.0
        self.elapsed = 0.0
        self.running = False

    def start(self) -> None:
        """Start (or restart) the timer."""
        if self.running:
            print(f"Error, running timer {self.name} started.", file=sys.stderr)
        self.running = True
        self.start_time = self._clock()

    def stop(self) -> None:
        """Stop the timer and add the session to the elapsed total."""
        self.stop_time = self._clock()
        if not self.running:
            print(f"Error, stopped timer {self.name} stopped again.", file=sys.stderr)
        else:
            self.elapsed += self.stop_time - self.start_time
        self.running = False

    def reset(self) -> None:
        """Clear the accumulated elapsed time."""
        self.elapsed = 0.0

    def report(self, stream: TextIO | None = None) -> float:
        """Write the total elapsed time, stopping the timer if needed."""
        if self.running:
            self.stop()
        out = stream if stream is not None else sys.stderr
        out.write(f"Elapsed CPU Time {self.name} = {self.elapsed:.2f} seconds\n")
        return self.elapsed

    def report_per_iteration(self, repeats: int, stream: TextIO | None = None) -> float:
        """Write the elapsed time divided by ``repeats`` and return it."""
        if repeats <= 0:
            raise ValueError("repeats must be positive")
        if self.running:
            self.stop()
        per = self.elapsed / repeats
        out = stream if stream is not None else sys.stderr
        out.write(
            f"Elapsed CPU Time per Iteration ({self.name}, {repeats}) = {per:.6e} seconds\n"
        )
        return per

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


def time_repeated(timer: Timer, repeats: int, func: Callable[[], T]) -> T | None:
    """Call ``func`` ``repeats`` times under ``timer``; return the last result."""
    result: Any = None
    with timer:
        for _ in range(repeats):
            result = func()
    return result