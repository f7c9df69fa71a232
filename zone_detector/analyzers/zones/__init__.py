"""Composable support/resistance zone pipeline."""

from .errors import InvalidPriceDataError, ZoneDetectionError
from .models import OverlapZone, ResistanceZone, SupportZone, ZoneReport
from .service import find_support_levels

__all__ = [
    "find_support_levels",
    "InvalidPriceDataError",
    "ZoneDetectionError",
    "OverlapZone",
    "ResistanceZone",
    "SupportZone",
    "ZoneReport",
]
