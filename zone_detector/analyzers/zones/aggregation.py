"""Merging of raw zones that share the same canonical price."""

from typing import Dict, Iterable, List

from .models import ResistanceZone, SupportZone


def aggregate_support_zones(zones: Iterable[SupportZone]) -> List[SupportZone]:
    """Club supports with identical price strings, summing bounces.

    A merged support keeps ``confirmed_resistance`` if any member had it.
    """
    merged: Dict[str, SupportZone] = {}
    for zone in zones:
        existing = merged.get(zone.zone)
        if existing is None:
            merged[zone.zone] = SupportZone(
                zone=zone.zone,
                bounce_count=zone.bounce_count,
                confirmed_resistance=zone.confirmed_resistance,
            )
        else:
            existing.bounce_count += zone.bounce_count
            existing.confirmed_resistance = existing.confirmed_resistance or zone.confirmed_resistance
    return sorted(merged.values(), key=lambda z: z.price)


def aggregate_resistance_zones(zones: Iterable[ResistanceZone]) -> List[ResistanceZone]:
    """Club resistances with identical price strings, summing drops."""
    merged: Dict[str, ResistanceZone] = {}
    for zone in zones:
        existing = merged.get(zone.zone)
        if existing is None:
            merged[zone.zone] = ResistanceZone(zone=zone.zone, drop_count=zone.drop_count)
        else:
            existing.drop_count += zone.drop_count
    return sorted(merged.values(), key=lambda z: z.price)


__all__ = ["aggregate_support_zones", "aggregate_resistance_zones"]
