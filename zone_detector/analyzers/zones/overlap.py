"""Detection of price levels that acted as both support and resistance."""

from typing import Dict, List, Sequence

from zone_detector.configuration import ZoneSettings
from zone_detector.utils.prices import relative_difference

from .models import OverlapZone, ResistanceZone, SupportZone


def match_overlaps(
    supports: Sequence[SupportZone],
    resistances: Sequence[ResistanceZone],
    settings: ZoneSettings,
) -> List[OverlapZone]:
    """Pair supports with resistances within ``overlap_tolerance`` of the support price.

    Results are keyed by the support price. Each matching resistance adds its
    drops and the support's bounces again, so a support matched by two
    resistances reports twice its own bounce count.
    """
    highlights: Dict[str, OverlapZone] = {}
    for support in supports:
        for resistance in resistances:
            if relative_difference(resistance.price, support.price) > settings.overlap_tolerance:
                continue
            overlap = highlights.setdefault(support.zone, OverlapZone(zone=support.zone))
            overlap.support_bounce_count += support.bounce_count
            overlap.resistance_drop_count += resistance.drop_count
    return sorted(highlights.values(), key=lambda z: z.price)


__all__ = ["match_overlaps"]
