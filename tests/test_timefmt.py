"""Tests for duration and relative-time formatting."""

import unittest
from datetime import datetime, timedelta, timezone

from fast_tracker.timefmt import format_duration_h, format_relative

NOW = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)


class TestFormatDuration(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(format_duration_h(0), "00:00")
        self.assertEqual(format_duration_h(1.5), "01:30")
        self.assertEqual(format_duration_h(16), "16:00")

    def test_over_a_day(self):
        self.assertEqual(format_duration_h(36.25), "36:15")

    def test_minutes_rounded(self):
        self.assertEqual(format_duration_h(59.9 / 60), "01:00")
        self.assertEqual(format_duration_h(7.999), "08:00")

    def test_half_minutes_round_up(self):
        # 0.375h = 22.5 minutes
        self.assertEqual(format_duration_h(0.375), "00:23")


class TestFormatRelative(unittest.TestCase):
    def test_seconds(self):
        self.assertEqual(format_relative(NOW - timedelta(seconds=10), NOW), "a few seconds ago")

    def test_future_reads_as_just_now(self):
        self.assertEqual(format_relative(NOW + timedelta(minutes=5), NOW), "a few seconds ago")

    def test_minutes(self):
        self.assertEqual(format_relative(NOW - timedelta(minutes=1), NOW), "1 minute ago")
        self.assertEqual(format_relative(NOW - timedelta(minutes=5), NOW), "5 minutes ago")

    def test_half_minutes_round_up(self):
        self.assertEqual(format_relative(NOW - timedelta(seconds=150), NOW), "3 minutes ago")

    def test_hours(self):
        self.assertEqual(format_relative(NOW - timedelta(hours=1), NOW), "1 hour ago")
        self.assertEqual(format_relative(NOW - timedelta(hours=3), NOW), "3 hours ago")

    def test_days(self):
        self.assertEqual(format_relative(NOW - timedelta(days=1), NOW), "1 day ago")
        self.assertEqual(format_relative(NOW - timedelta(days=4), NOW), "4 days ago")


if __name__ == "__main__":
    unittest.main()
