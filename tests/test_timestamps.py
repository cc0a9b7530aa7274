"""
Unit tests for timestamp resolution.
"""

import unittest
from datetime import datetime, timedelta, timezone

import numpy as np
import pandas as pd

from drone_log_parser.utils.timestamps import parse_timestamp

EXPECTED = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


class TestParseTimestamp(unittest.TestCase):
    """Test the supported time encodings."""

    def test_empty_values(self):
        for value in (None, '', '   ', True, False, np.nan, pd.NaT):
            self.assertIsNone(parse_timestamp(value), repr(value))

    def test_epoch_seconds(self):
        self.assertEqual(parse_timestamp(1705312800), EXPECTED)
        self.assertEqual(parse_timestamp(1705312800.0), EXPECTED)

    def test_epoch_milliseconds(self):
        self.assertEqual(parse_timestamp(1705312800000), EXPECTED)

    def test_epoch_strings(self):
        self.assertEqual(parse_timestamp('1705312800'), EXPECTED)
        self.assertEqual(parse_timestamp('1705312800000'), EXPECTED)

    def test_iso_strings(self):
        self.assertEqual(parse_timestamp('2024-01-15T10:00:00Z'), EXPECTED)
        self.assertEqual(parse_timestamp('2024-01-15T12:00:00+02:00'), EXPECTED)

    def test_naive_strings_are_utc(self):
        self.assertEqual(parse_timestamp('2024-01-15 10:00:00'), EXPECTED)

    def test_result_is_timezone_aware(self):
        self.assertIsNotNone(parse_timestamp('2024-01-15 10:00:00').tzinfo)

    def test_datetime_objects(self):
        self.assertEqual(parse_timestamp(datetime(2024, 1, 15, 10, 0, 0)), EXPECTED)
        aware = datetime(2024, 1, 15, 11, 0, 0, tzinfo=timezone(timedelta(hours=1)))
        self.assertEqual(parse_timestamp(aware), EXPECTED)
        self.assertEqual(parse_timestamp(pd.Timestamp('2024-01-15 10:00:00', tz='UTC')), EXPECTED)

    def test_offset_relative_to_base(self):
        self.assertEqual(parse_timestamp(5000, base=EXPECTED), EXPECTED + timedelta(seconds=5))
        self.assertEqual(parse_timestamp(0, base=EXPECTED), EXPECTED)

    def test_offset_without_base(self):
        self.assertIsNone(parse_timestamp(5000))

    def test_ambiguous_numbers(self):
        # Between the offset and epoch-seconds ranges
        self.assertIsNone(parse_timestamp(5e8, base=EXPECTED))
        self.assertIsNone(parse_timestamp(-5))

    def test_unparseable_strings(self):
        self.assertIsNone(parse_timestamp('not a time'))
        self.assertIsNone(parse_timestamp('12:30:45'))
        self.assertIsNone(parse_timestamp('2024-99-99T99:99'))


if __name__ == '__main__':
    unittest.main()
