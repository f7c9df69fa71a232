import pandas as pd

from zone_detector.analyzers.zones.models import ZoneReport


def report_frames(report: ZoneReport) -> dict:
    """Return the report's collections as DataFrames keyed by section title."""
    data = report.to_dict()
    return {
        "Support Zones": pd.DataFrame(data["supportZones"], columns=["zone", "bounceCount", "confirmedResistance"]),
        "Resistance Zones": pd.DataFrame(data["resistanceZones"], columns=["zone", "dropCount"]),
        "Support/Resistance Overlaps": pd.DataFrame(
            data["highlightedZones"],
            columns=["zone", "supportBounceCount", "resistanceDropCount", "type"],
        ),
    }


def print_zone_report(report: ZoneReport) -> None:
    """
    Formats and prints the three zone collections to the console.

    Args:
        report (ZoneReport): Result of ``find_support_levels``.
    """

    for title, frame in report_frames(report).items():
        print("\n" + "=" * 45)
        print(f"--- {title} ---")
        print("=" * 45)
        if frame.empty:
            print("(none)")
        else:
            print(frame.to_string(index=False))
