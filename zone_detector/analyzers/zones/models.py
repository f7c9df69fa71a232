"""Dataclasses used across the zone detection pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np

from zone_detector.configuration import ZoneSettings
from zone_detector.constants import OVERLAP_TYPE


@dataclass
class ZoneContext:
    prices: np.ndarray
    latest_price: float
    min_valid_price: float
    settings: ZoneSettings

    @property
    def size(self) -> int:
        return len(self.prices)


@dataclass
class SupportZone:
    zone: str
    bounce_count: int
    confirmed_resistance: bool = False

    @property
    def price(self) -> float:
        return float(self.zone)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "zone": self.zone,
            "bounceCount": self.bounce_count,
            "confirmedResistance": self.confirmed_resistance,
        }


@dataclass
class ResistanceZone:
    zone: str
    drop_count: int

    @property
    def price(self) -> float:
        return float(self.zone)

    def to_dict(self) -> Dict[str, Any]:
        return {"zone": self.zone, "dropCount": self.drop_count}


@dataclass
class OverlapZone:
    zone: str
    support_bounce_count: int = 0
    resistance_drop_count: int = 0
    type: str = OVERLAP_TYPE

    @property
    def price(self) -> float:
        return float(self.zone)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "zone": self.zone,
            "supportBounceCount": self.support_bounce_count,
            "resistanceDropCount": self.resistance_drop_count,
            "type": self.type,
        }


@dataclass
class ScanResult:
    """Raw, unaggregated zones in the order their base index was scanned."""

    supports: List[SupportZone] = field(default_factory=list)
    resistances: List[ResistanceZone] = field(default_factory=list)


@dataclass
class ZoneReport:
    support_zones: List[SupportZone] = field(default_factory=list)
    resistance_zones: List[ResistanceZone] = field(default_factory=list)
    highlighted_zones: List[OverlapZone] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "supportZones": [zone.to_dict() for zone in self.support_zones],
            "resistanceZones": [zone.to_dict() for zone in self.resistance_zones],
            "highlightedZones": [zone.to_dict() for zone in self.highlighted_zones],
        }


__all__ = [
    "ZoneContext",
    "SupportZone",
    "ResistanceZone",
    "OverlapZone",
    "ScanResult",
    "ZoneReport",
]
