"""Endless data sources used by the charts."""

from __future__ import annotations

import math
import random
from typing import Iterator, List, Optional, Tuple


class RandomSignal:
    """Uniformly distributed integers in ``[lower, upper)``, forever."""

    def __init__(
        self, lower: int, upper: int, rng: Optional[random.Random] = None
    ) -> None:
        if lower >= upper:
            raise ValueError(f"empty range: lower {lower} >= upper {upper}")
        self.lower = lower
        self.upper = upper
        self._rng = rng if rng is not None else random.Random()

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self._rng.randrange(self.lower, self.upper)


class SinSignal:
    """Points ``(x, sin(x / period) * scale)`` with ``x`` advancing by ``interval``."""

    def __init__(self, interval: float, period: float, scale: float) -> None:
        self.x = 0.0
        self.interval = interval
        self.period = period
        self.scale = scale

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return self

    def __next__(self) -> Tuple[float, float]:
        point = (self.x, math.sin(self.x / self.period) * self.scale)
        self.x += self.interval
        return point

    def take(self, count: int) -> List[Tuple[float, float]]:
        """Return the next ``count`` points."""
        return [next(self) for _ in range(count)]