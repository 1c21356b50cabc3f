"""Stopwatches accumulating CPU or wall-clock time."""

from __future__ import annotations

import time
from collections.abc import Callable


class Chrono:
    """A stopwatch that accumulates time read from ``clock`` while running."""

    def __init__(self, clock: Callable[[], float]) -> None:
        self._clock = clock
        self._start = 0.0
        self._total = 0.0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def reset(self) -> None:
        """Set the accumulated time to zero and stop the stopwatch."""
        self._total = 0.0
        self._running = False

    def start(self) -> None:
        """Start (or restart) accumulating time from now."""
        self._start = self._clock()
        self._running = True

    def stop(self) -> None:
        """Stop accumulating; time until the next start is not counted."""
        if not self._running:
            raise RuntimeError("start() must be called before stop()")
        self._total += self._clock() - self._start
        self._running = False

    def elapsed(self) -> float:
        """Return the accumulated time in seconds."""
        if self._running:
            now = self._clock()
            self._total += now - self._start
            self._start = now
        return self._total


class CpuChrono(Chrono):
    """Stopwatch measuring process CPU time (user plus system)."""

    def __init__(self, clock: Callable[[], float] = time.process_time) -> None:
        super().__init__(clock)


class RealChrono(Chrono):
    """Stopwatch measuring wall-clock time."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        super().__init__(clock)