"""Frame timing helpers: a resettable timer and a fixed-size sample window."""

from __future__ import annotations

import time
from collections import deque
from typing import Callable


class Timer:
    """Measures seconds elapsed since creation or the last reset."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last = clock()

    def elapsed(self) -> float:
        """Return the seconds since the last reset."""
        return self._clock() - self._last

    def reset(self) -> None:
        """Restart the timer from now."""
        self._last = self._clock()


class Sampler:
    """Keeps the most recent ``size`` samples, initially all zero."""

    def __init__(self, size: int = 16, initial: float = 0) -> None:
        if size < 1:
            raise ValueError(f"sampler size must be at least 1, got {size}")
        self.size = size
        self._samples: deque[float] = deque([initial] * size, maxlen=size)

    def push(self, n: float) -> None:
        """Record a sample, replacing the oldest one."""
        self._samples.append(n)

    def max(self) -> float:
        """Return the largest sample in the window."""
        return max(self._samples)

    def min(self) -> float:
        """Return the smallest sample in the window."""
        return min(self._samples)

    def average(self) -> float:
        """Return the mean over the whole window."""
        return sum(self._samples) / self.size