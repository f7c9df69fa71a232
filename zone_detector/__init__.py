"""Support and resistance zone detection over historical price series."""

from zone_detector.analyzers.zones import (
    InvalidPriceDataError,
    OverlapZone,
    ResistanceZone,
    SupportZone,
    ZoneDetectionError,
    ZoneReport,
    find_support_levels,
)
from zone_detector.configuration import ZoneSettings

__version__ = "0.1.0"

__all__ = [
    "find_support_levels",
    "InvalidPriceDataError",
    "OverlapZone",
    "ResistanceZone",
    "SupportZone",
    "ZoneDetectionError",
    "ZoneReport",
    "ZoneSettings",
]
