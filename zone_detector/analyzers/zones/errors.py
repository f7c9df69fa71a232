"""Exceptions raised by the zone detection pipeline."""


class ZoneDetectionError(Exception):
    """Base class for zone detection failures."""


class InvalidPriceDataError(ZoneDetectionError, ValueError):
    """Raised when the price series cannot be analysed."""


__all__ = ["ZoneDetectionError", "InvalidPriceDataError"]
