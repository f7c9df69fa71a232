"""Environment-driven settings for zone detection."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from functools import lru_cache

from dotenv import load_dotenv

from zone_detector.constants import (
    ANCIENT_PRICE_RATIO,
    DEDUP_TOLERANCE,
    HISTORY_DROP_THRESHOLD,
    HISTORY_TOLERANCE,
    MIN_CONFIRMATIONS,
    OVERLAP_TOLERANCE,
    PRICE_DECIMALS,
    PRICE_FIELD,
    REVERSAL_THRESHOLD,
    TOUCH_TOLERANCE,
    TREND_DEVIATION,
    TREND_MIN_MATCHES,
    TREND_RANGE,
    TREND_STEP,
)

# Ensure a local .env is honoured before any ZONE_* variable is read.
load_dotenv()

ENV_PREFIX = "ZONE_"


@dataclass(frozen=True)
class ZoneSettings:
    """Immutable container for every threshold the detector uses."""

    price_field: str = PRICE_FIELD
    price_decimals: int = PRICE_DECIMALS
    touch_tolerance: float = TOUCH_TOLERANCE
    reversal_threshold: float = REVERSAL_THRESHOLD
    min_confirmations: int = MIN_CONFIRMATIONS
    dedup_tolerance: float = DEDUP_TOLERANCE
    trend_range: int = TREND_RANGE
    trend_step: float = TREND_STEP
    trend_deviation: float = TREND_DEVIATION
    trend_min_matches: int = TREND_MIN_MATCHES
    history_tolerance: float = HISTORY_TOLERANCE
    history_drop_threshold: float = HISTORY_DROP_THRESHOLD
    ancient_price_ratio: float = ANCIENT_PRICE_RATIO
    overlap_tolerance: float = OVERLAP_TOLERANCE

    def __post_init__(self) -> None:
        if not self.price_field:
            raise ValueError("price_field must be a non-empty string")
        if self.price_decimals < 0:
            raise ValueError("price_decimals must be >= 0")
        for name in (
            "touch_tolerance",
            "reversal_threshold",
            "dedup_tolerance",
            "trend_step",
            "trend_deviation",
            "history_tolerance",
            "history_drop_threshold",
            "overlap_tolerance",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        for name in ("min_confirmations", "trend_range", "trend_min_matches"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1, got {getattr(self, name)!r}")
        if self.ancient_price_ratio < 0:
            raise ValueError("ancient_price_ratio must be >= 0")


def _env_value(name: str, default, cast):
    raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid value for {ENV_PREFIX}{name.upper()}: {raw!r}") from exc


def load_zone_settings() -> ZoneSettings:
    """Build settings from ``ZONE_*`` environment variables, falling back to defaults."""

    defaults = ZoneSettings()
    values = {}
    for field in fields(ZoneSettings):
        default = getattr(defaults, field.name)
        values[field.name] = _env_value(field.name, default, type(default))
    return ZoneSettings(**values)


@lru_cache(maxsize=1)
def get_zone_settings() -> ZoneSettings:
    """Return the process-wide settings derived from the current environment."""

    return load_zone_settings()


__all__ = ["ENV_PREFIX", "ZoneSettings", "get_zone_settings", "load_zone_settings"]
