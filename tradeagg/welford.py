"""Online estimation of variance and standard deviation."""

from __future__ import annotations

import math


class WelfordOnline:
    """Welford's algorithm for running variance."""

    __slots__ = ("count", "mean", "s")

    def __init__(self) -> None:
        self.count = 0
        self.mean = 0.0
        self.s = 0.0

    def __repr__(self) -> str:
        return f"WelfordOnline(count={self.count}, mean={self.mean}, s={self.s})"

    def add(self, val: float) -> None:
        """Add an observation to the statistics."""
        self.count += 1
        old_mean = self.mean
        self.mean += (val - old_mean) / self.count
        self.s += (val - old_mean) * (val - self.mean)

    def variance(self) -> float:
        """Sample variance; zero with fewer than two observations."""
        if self.count > 1:
            return self.s / (self.count - 1.0)
        return 0.0

    def std_dev(self) -> float:
        """Sample standard deviation."""
        return math.sqrt(self.variance())

    def reset(self) -> None:
        """Forget all observations."""
        self.count = 0
        self.mean = 0.0
        self.s = 0.0