"""Tests for data models."""

import unittest
from datetime import datetime, timedelta, timezone

from fast_tracker.models import FastRecord, parse_timestamp


class TestParseTimestamp(unittest.TestCase):
    def test_zulu_suffix(self):
        parsed = parse_timestamp("2026-03-01T20:00:00.000Z")
        self.assertEqual(parsed, datetime(2026, 3, 1, 20, 0, tzinfo=timezone.utc))

    def test_offset(self):
        parsed = parse_timestamp("2026-03-01T21:00:00+01:00")
        self.assertEqual(parsed.utcoffset(), timedelta(hours=1))

    def test_absent(self):
        self.assertIsNone(parse_timestamp(None))
        self.assertIsNone(parse_timestamp(""))

    def test_datetime_passthrough(self):
        moment = datetime(2026, 3, 1, 20, 0)
        self.assertIs(parse_timestamp(moment), moment)

    def test_garbage(self):
        with self.assertRaises(ValueError):
            parse_timestamp("yesterday evening")


class TestFastRecord(unittest.TestCase):
    def test_from_api_payload(self):
        fast = FastRecord.from_dict({
            "id": "ck42",
            "type": "16_8",
            "startAt": "2026-03-01T20:00:00.000Z",
            "endAt": None,
            "targetDurationHours": 16,
            "fastTargetEndAt": "2026-03-02T12:00:00.000Z",
            "eatingWindowStartAt": "2026-03-02T12:00:00.000Z",
            "eatingWindowEndAt": "2026-03-02T20:00:00.000Z",
            "notes": None,
        })
        self.assertEqual(fast.id, "ck42")
        self.assertEqual(fast.type, "16_8")
        self.assertEqual(fast.start_at, datetime(2026, 3, 1, 20, 0, tzinfo=timezone.utc))
        self.assertIsNone(fast.end_at)
        self.assertEqual(fast.target_duration_hours, 16.0)
        self.assertEqual(fast.eating_window_end_at - fast.fast_target_end_at, timedelta(hours=8))
        self.assertEqual(fast.notes, "")
        self.assertTrue(fast.is_open)

    def test_minimal_payload(self):
        fast = FastRecord.from_dict({"startAt": "2026-03-01T20:00:00Z", "endAt": "2026-03-02T10:00:00Z"})
        self.assertIsNone(fast.target_duration_hours)
        self.assertIsNone(fast.fast_target_end_at)
        self.assertFalse(fast.is_open)

    def test_missing_start(self):
        with self.assertRaises(ValueError):
            FastRecord.from_dict({"endAt": "2026-03-02T10:00:00Z"})


if __name__ == "__main__":
    unittest.main()
