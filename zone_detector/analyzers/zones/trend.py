"""Short-term trendline confirmation for candidate zones."""

from typing import Optional

import numpy as np

from zone_detector.configuration import ZoneSettings
from zone_detector.constants import DIRECTION_RESISTANCE, DIRECTION_SUPPORT


def trend_line_match(
    prices: np.ndarray,
    base_index: int,
    settings: ZoneSettings,
    range_: Optional[int] = None,
    direction: str = DIRECTION_SUPPORT,
) -> bool:
    """Check whether the bars after ``base_index`` roughly follow a linear trend.

    The expected price moves ``trend_step`` of the base price per bar, down
    for supports and up for resistances. Bars inside ``range_`` (base bar
    included) that land within ``trend_deviation`` of the expected value are
    counted, and at least ``trend_min_matches`` are required. Near the end of
    the series there are not enough bars to reach that count, so the check
    fails there.
    """
    if direction not in (DIRECTION_SUPPORT, DIRECTION_RESISTANCE):
        raise ValueError(f"Unknown trend direction: {direction!r}")

    window = settings.trend_range if range_ is None else range_
    stop = min(base_index + window, len(prices))
    if stop <= base_index + 1:
        return False

    base = float(prices[base_index])
    offsets = base * settings.trend_step * np.arange(1, stop - base_index)
    expected = base - offsets if direction == DIRECTION_SUPPORT else base + offsets
    actual = prices[base_index + 1:stop]

    matches = np.abs(actual - expected) / expected <= settings.trend_deviation
    return int(np.count_nonzero(matches)) >= settings.trend_min_matches


__all__ = ["trend_line_match"]
