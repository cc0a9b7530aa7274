"""
Unit tests for the CSV tokenizer and field resolution.
"""

import unittest

import numpy as np

from drone_log_parser.utils.csv_reader import coerce_value, parse_csv
from drone_log_parser.utils.error_handling import MalformedInputError
from drone_log_parser.utils.fields import find_column, find_field, find_field_key


class TestCoerceValue(unittest.TestCase):
    """Test cell coercion."""

    def test_numeric_strings_become_float(self):
        self.assertEqual(coerce_value('42'), 42.0)
        self.assertEqual(coerce_value(' -122.4194 '), -122.4194)
        self.assertEqual(coerce_value('1e3'), 1000.0)
        self.assertEqual(coerce_value('.5'), 0.5)

    def test_text_is_trimmed(self):
        self.assertEqual(coerce_value('  Mavic 3 '), 'Mavic 3')
        self.assertEqual(coerce_value('12abc'), '12abc')

    def test_missing_values_become_empty(self):
        self.assertEqual(coerce_value(None), '')
        self.assertEqual(coerce_value(np.nan), '')
        self.assertEqual(coerce_value('   '), '')


class TestParseCSV(unittest.TestCase):
    """Test CSV tokenizing."""

    def test_basic_records(self):
        records = parse_csv("lat,lon,name\n37.5,-122.1,first\n37.6,-122.2,second\n")
        self.assertEqual(len(records), 2)
        self.assertEqual(records[0], {'lat': 37.5, 'lon': -122.1, 'name': 'first'})
        self.assertEqual(list(records[1].keys()), ['lat', 'lon', 'name'])

    def test_quoted_delimiter(self):
        records = parse_csv('name,lat\n"Pier 39, San Francisco",37.8\n')
        self.assertEqual(records[0]['name'], 'Pier 39, San Francisco')
        self.assertEqual(records[0]['lat'], 37.8)

    def test_doubled_quotes_unescaped(self):
        records = parse_csv('note,lat\n"say ""hi""",37.8\n')
        self.assertEqual(records[0]['note'], 'say "hi"')

    def test_blank_lines_and_whitespace(self):
        records = parse_csv("\n lat , lon \n\n 37.5 , -122.1 \n\n37.6,-122.2\n")
        self.assertEqual(len(records), 2)
        self.assertEqual(records[0], {'lat': 37.5, 'lon': -122.1})

    def test_missing_trailing_cells(self):
        records = parse_csv("a,b,c\n1,2\n")
        self.assertEqual(records[0], {'a': 1.0, 'b': 2.0, 'c': ''})

    def test_extra_cells_ignored(self):
        records = parse_csv("lat,lon,alt,message\n"
                            "37.5,-122.1,10,ok\n"
                            "37.6,-122.2,400,Low battery, returning home\n"
                            "37.7,-122.3,10,ok\n")
        self.assertEqual(len(records), 3)
        self.assertEqual(records[1], {'lat': 37.6, 'lon': -122.2, 'alt': 400.0,
                                      'message': 'Low battery'})

    def test_empty_cells_stay_empty(self):
        records = parse_csv("a,b\n1,\n")
        self.assertEqual(records[0]['b'], '')

    def test_custom_delimiter(self):
        records = parse_csv("lat;lon\n37.5;-122.1\n", delimiter=';')
        self.assertEqual(records[0], {'lat': 37.5, 'lon': -122.1})

    def test_header_only_raises(self):
        with self.assertRaises(MalformedInputError):
            parse_csv("lat,lon\n")

    def test_empty_raises(self):
        with self.assertRaises(MalformedInputError):
            parse_csv("")


class TestFieldResolution(unittest.TestCase):
    """Test alias-based field lookup."""

    def setUp(self):
        self.record = {
            'Latitude': 37.5,
            'lng': -122.1,
            'altitude': 0,
            'position': {'Latitude': 10.0, 'longitude': 20.0},
        }

    def test_exact_match(self):
        self.assertEqual(find_field(self.record, ['lng']), -122.1)

    def test_case_insensitive_match(self):
        self.assertEqual(find_field(self.record, ['latitude']), 37.5)
        self.assertEqual(find_field_key(self.record, ['latitude']), 'Latitude')

    def test_first_alias_wins(self):
        self.assertEqual(find_field(self.record, ['lon', 'lng', 'longitude']), -122.1)

    def test_zero_is_a_value(self):
        self.assertEqual(find_field(self.record, ['altitude'], default=99), 0)

    def test_nested_path(self):
        self.assertEqual(find_field(self.record, ['position.latitude']), 10.0)
        self.assertEqual(find_field_key(self.record, ['position.longitude']),
                         'position.longitude')

    def test_missing_returns_default(self):
        self.assertIsNone(find_field(self.record, ['speed']))
        self.assertEqual(find_field(self.record, ['speed', 'position.speed'], default=''), '')
        self.assertIsNone(find_field_key(self.record, ['speed']))

    def test_find_column_substring(self):
        headers = ['Time', 'GPS Latitude', 'GPS Longitude', 'Alt(ft)']
        self.assertEqual(find_column(headers, ['latitude', 'lat']), 'GPS Latitude')
        self.assertEqual(find_column(headers, ['altitude', 'alt']), 'Alt(ft)')
        self.assertIsNone(find_column(headers, ['speed']))


if __name__ == '__main__':
    unittest.main()
