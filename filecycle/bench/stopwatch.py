"""Monotonic stopwatch reporting whole milliseconds."""
from __future__ import annotations

import time
from typing import Callable


class Stopwatch:
    """Start / stop timer on a monotonic clock (`time.perf_counter`).

    `elapsed_ms` is truncated to an int; while running it reads the live
    value, after `stop()` it is frozen.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._t0: float | None = None
        self._elapsed: float = 0.0
        self.running = False

    def start(self) -> "Stopwatch":
        self._t0 = self._clock()
        self._elapsed = 0.0
        self.running = True
        return self

    def stop(self) -> float:
        if not self.running:
            raise RuntimeError("stopwatch was not started")
        self._elapsed = self._clock() - self._t0
        self.running = False
        return self._elapsed

    @property
    def elapsed(self) -> float:
        """Elapsed seconds."""
        if self.running:
            return self._clock() - self._t0
        return self._elapsed

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)

    def __enter__(self) -> "Stopwatch":
        return self.start()

    def __exit__(self, *exc) -> None:
        self.stop()
