"""Checks for prior resistance behaviour at a price level."""

import numpy as np

from zone_detector.configuration import ZoneSettings
from zone_detector.utils.prices import relative_difference


def acted_as_resistance_before(
    prices: np.ndarray, index: int, price: float, settings: ZoneSettings
) -> bool:
    """Return True if ``price`` stopped an advance somewhere before ``index``.

    An earlier bar within ``history_tolerance`` of ``price`` counts as a
    touch; the level is confirmed once any later bar, still before
    ``index``, sits at least ``history_drop_threshold`` below that touch.
    """
    for i in range(index):
        touch = float(prices[i])
        if relative_difference(touch, price) > settings.history_tolerance:
            continue
        if i + 1 >= index:
            continue
        # deepest bar between the touch and the candidate
        lowest = float(prices[i + 1:index].min())
        if (touch - lowest) / touch >= settings.history_drop_threshold:
            return True
    return False


__all__ = ["acted_as_resistance_before"]
