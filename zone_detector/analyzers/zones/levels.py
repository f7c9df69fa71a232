"""Ordered store of accepted zone prices used for proximity de-duplication."""

from bisect import bisect_left, insort
from typing import List

from zone_detector.utils.prices import relative_difference


class AcceptedLevels:
    """Raw prices of accepted zones, kept sorted for neighbour lookups.

    ``is_near`` answers "is any accepted price strictly within ``tolerance``
    of this candidate, relative to the candidate". The distance only depends
    on ``abs(accepted - candidate)``, so the closest accepted price on each
    side of the candidate decides the answer.
    """

    def __init__(self, tolerance: float):
        self.tolerance = tolerance
        self._prices: List[float] = []

    def __len__(self) -> int:
        return len(self._prices)

    def __iter__(self):
        return iter(self._prices)

    def add(self, price: float) -> None:
        insort(self._prices, float(price))

    def is_near(self, price: float) -> bool:
        pos = bisect_left(self._prices, price)
        neighbours = self._prices[max(pos - 1, 0):pos + 1]
        return any(relative_difference(level, price) < self.tolerance for level in neighbours)


__all__ = ["AcceptedLevels"]
