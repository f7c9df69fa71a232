"""Forward scan that turns every bar into a candidate support/resistance level."""

from __future__ import annotations

import numpy as np

from zone_detector.constants import DIRECTION_RESISTANCE, DIRECTION_SUPPORT
from zone_detector.logger import get_logger
from zone_detector.utils.prices import canonical_price

from .history import acted_as_resistance_before
from .levels import AcceptedLevels
from .models import ResistanceZone, ScanResult, SupportZone, ZoneContext
from .trend import trend_line_match

logger = get_logger(__name__)


def scan_levels(context: ZoneContext) -> ScanResult:
    """Scan each bar as a base level and collect raw support/resistance zones.

    A touch is a later bar within ``touch_tolerance`` of the base price. A
    touch is confirmed once any bar after it moves ``reversal_threshold``
    away from the touch price (up for supports, down for resistances), and
    only counts while the base bar also starts a matching trendline. Levels
    with at least ``min_confirmations`` are emitted in base-bar order.

    Reversals come from suffix extrema, so each base costs one vectorised
    pass over the later bars plus a trend check over at most ``trend_range``
    bars; there is no per-touch search. The prior resistance check stays
    quadratic on the prefix for each emitted support, which suits bounded
    historical series rather than tick streams.
    """
    settings = context.settings
    prices = context.prices

    bounced = _reversal_mask(prices, settings.reversal_threshold, DIRECTION_SUPPORT)
    dropped = _reversal_mask(prices, settings.reversal_threshold, DIRECTION_RESISTANCE)

    accepted_supports = AcceptedLevels(settings.dedup_tolerance)
    accepted_resistances = AcceptedLevels(settings.dedup_tolerance)
    result = ScanResult()

    for i in range(context.size):
        base_price = float(prices[i])

        if base_price < context.min_valid_price:
            continue

        touches = np.abs(prices[i + 1:] - base_price) / base_price <= settings.touch_tolerance

        if not accepted_supports.is_near(base_price):
            bounce_count = _count_confirmations(
                context, i, touches, bounced[i + 1:], DIRECTION_SUPPORT
            )
            if bounce_count >= settings.min_confirmations:
                zone = SupportZone(
                    zone=canonical_price(base_price, settings.price_decimals),
                    bounce_count=bounce_count,
                    confirmed_resistance=acted_as_resistance_before(
                        prices, i, base_price, settings
                    ),
                )
                result.supports.append(zone)
                accepted_supports.add(base_price)
                logger.debug(
                    f"Support at {zone.zone} from bar {i}: {bounce_count} bounces, "
                    f"prior resistance={zone.confirmed_resistance}"
                )

        if not accepted_resistances.is_near(base_price):
            drop_count = _count_confirmations(
                context, i, touches, dropped[i + 1:], DIRECTION_RESISTANCE
            )
            if drop_count >= settings.min_confirmations:
                zone = ResistanceZone(
                    zone=canonical_price(base_price, settings.price_decimals),
                    drop_count=drop_count,
                )
                result.resistances.append(zone)
                accepted_resistances.add(base_price)
                logger.debug(f"Resistance at {zone.zone} from bar {i}: {drop_count} drops")

    return result


def _count_confirmations(
    context: ZoneContext,
    base_index: int,
    touches: np.ndarray,
    reversals: np.ndarray,
    direction: str,
) -> int:
    confirmed = int(np.count_nonzero(touches & reversals))
    if confirmed == 0:
        return 0
    # the trendline is anchored at the base bar, so it holds for every touch or none
    if not trend_line_match(context.prices, base_index, context.settings, direction=direction):
        return 0
    return confirmed


def _reversal_mask(prices: np.ndarray, threshold: float, direction: str) -> np.ndarray:
    """Flag bars followed, at any later bar, by a move of at least ``threshold``.

    The relative move grows monotonically with the later price, so the most
    extreme later bar decides whether a qualifying reversal exists at all.
    """
    size = len(prices)
    if direction == DIRECTION_SUPPORT:
        later = np.full(size, -np.inf)
        if size > 1:
            later[:-1] = np.maximum.accumulate(prices[::-1])[::-1][1:]
        return (later - prices) / prices >= threshold

    later = np.full(size, np.inf)
    if size > 1:
        later[:-1] = np.minimum.accumulate(prices[::-1])[::-1][1:]
    return (prices - later) / prices >= threshold


__all__ = ["scan_levels"]
