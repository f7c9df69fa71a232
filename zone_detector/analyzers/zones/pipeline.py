"""Pipeline that turns a validated price context into a zone report."""

from .aggregation import aggregate_resistance_zones, aggregate_support_zones
from .models import ZoneContext, ZoneReport
from .overlap import match_overlaps
from .scanner import scan_levels


def generate_zones(context: ZoneContext) -> ZoneReport:
    """Run scan, aggregation and overlap matching over one price series."""
    raw = scan_levels(context)
    supports = aggregate_support_zones(raw.supports)
    resistances = aggregate_resistance_zones(raw.resistances)
    highlighted = match_overlaps(supports, resistances, context.settings)

    return ZoneReport(
        support_zones=supports,
        resistance_zones=resistances,
        highlighted_zones=highlighted,
    )


__all__ = ["generate_zones"]
