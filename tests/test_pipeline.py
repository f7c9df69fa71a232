"""Tests for the scan -> aggregate -> overlap wiring."""

import os
import sys
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from zone_detector.analyzers.zones.context import build_context
from zone_detector.analyzers.zones.models import (
    OverlapZone,
    ResistanceZone,
    ScanResult,
    SupportZone,
    ZoneReport,
)
from zone_detector.analyzers.zones.pipeline import generate_zones
from zone_detector.configuration import ZoneSettings

from tests.fixtures import SUPPORT_SERIES


class TestGenerateZones(unittest.TestCase):
    def setUp(self):
        self.context = build_context(SUPPORT_SERIES, ZoneSettings())

    def test_duplicate_scan_output_is_merged_before_overlap(self):
        """Case: raw zones sharing a price string are clubbed, and overlaps use the merged counts."""
        raw = ScanResult(
            supports=[
                SupportZone(zone="120.00", bounce_count=3, confirmed_resistance=False),
                SupportZone(zone="100.00", bounce_count=3, confirmed_resistance=False),
                SupportZone(zone="100.00", bounce_count=4, confirmed_resistance=True),
            ],
            resistances=[
                ResistanceZone(zone="150.00", drop_count=5),
                ResistanceZone(zone="101.00", drop_count=2),
                ResistanceZone(zone="101.00", drop_count=3),
            ],
        )
        with patch("zone_detector.analyzers.zones.pipeline.scan_levels", return_value=raw) as mock_scan:
            report = generate_zones(self.context)

        mock_scan.assert_called_once_with(self.context)
        self.assertEqual(
            report,
            ZoneReport(
                support_zones=[
                    SupportZone(zone="100.00", bounce_count=7, confirmed_resistance=True),
                    SupportZone(zone="120.00", bounce_count=3, confirmed_resistance=False),
                ],
                resistance_zones=[
                    ResistanceZone(zone="101.00", drop_count=5),
                    ResistanceZone(zone="150.00", drop_count=5),
                ],
                highlighted_zones=[
                    OverlapZone(zone="100.00", support_bounce_count=7, resistance_drop_count=5),
                ],
            ),
        )

    def test_real_scan_feeds_report(self):
        report = generate_zones(self.context)
        self.assertEqual(report.support_zones, [SupportZone(zone="100.00", bounce_count=3)])
        self.assertEqual(report.resistance_zones, [])
        self.assertEqual(report.highlighted_zones, [])


if __name__ == "__main__":
    unittest.main()
