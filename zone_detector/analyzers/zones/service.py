"""Public entrypoint for support/resistance zone detection."""

from __future__ import annotations

from typing import Any, Optional

from zone_detector.configuration import ZoneSettings, get_zone_settings
from zone_detector.logger import get_logger

from .context import build_context
from .errors import InvalidPriceDataError
from .models import ZoneReport
from .pipeline import generate_zones

logger = get_logger(__name__)


def find_support_levels(price_data: Any, settings: Optional[ZoneSettings] = None) -> ZoneReport:
    """Detect support, resistance and overlap zones in an ordered price series.

    ``price_data`` is oldest-first; each observation exposes a last price
    (``lp`` unless ``settings.price_field`` says otherwise). Every collection
    of the returned report is sorted ascending by price. Raises
    ``InvalidPriceDataError`` for empty input or unusable prices.
    """
    settings = settings or get_zone_settings()

    try:
        context = build_context(price_data, settings)
    except InvalidPriceDataError as err:
        logger.error(f"Rejected price data: {err}")
        raise

    report = generate_zones(context)
    logger.info(
        f"Analysed {context.size} bars: {len(report.support_zones)} supports, "
        f"{len(report.resistance_zones)} resistances, "
        f"{len(report.highlighted_zones)} overlaps"
    )
    return report


__all__ = ["find_support_levels"]
