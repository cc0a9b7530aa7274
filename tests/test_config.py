"""
Unit tests for parser configuration.
"""

import json
import shutil
import tempfile
import unittest
from pathlib import Path

from drone_log_parser.config import ParserConfig


class TestParserConfig(unittest.TestCase):
    """Test configuration defaults, validation and persistence."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_defaults(self):
        config = ParserConfig()
        self.assertEqual(config.max_path_points, 500)
        self.assertEqual(config.binary_sample_size, 1000)
        self.assertEqual(config.binary_control_ratio, 0.1)
        self.assertEqual(config.altitude_meters_threshold, 200.0)
        self.assertEqual(config.max_altitude_warning_feet, 50000.0)
        self.assertEqual(config.max_speed_warning_mph, 500.0)
        self.assertEqual(config.max_duration_warning_minutes, 480.0)
        self.assertFalse(config.emit_warnings)
        self.assertFalse(config.verbose)

    def test_rejects_non_positive_caps(self):
        with self.assertRaises(ValueError):
            ParserConfig(max_path_points=0)
        with self.assertRaises(ValueError):
            ParserConfig(binary_sample_size=-1)
        with self.assertRaises(ValueError):
            ParserConfig(max_speed_warning_mph=0)

    def test_rejects_bad_ratio(self):
        with self.assertRaises(ValueError):
            ParserConfig(binary_control_ratio=1.5)
        with self.assertRaises(ValueError):
            ParserConfig(binary_control_ratio=0)

    def test_save_and_load(self):
        path = Path(self.temp_dir) / "nested" / "config.json"
        config = ParserConfig(max_path_points=120, emit_warnings=True)
        config.to_file(str(path))

        with open(path) as f:
            saved = json.load(f)
        self.assertEqual(saved['max_path_points'], 120)

        loaded = ParserConfig.from_file(str(path))
        self.assertEqual(loaded, config)

    def test_load_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            ParserConfig.from_file(str(Path(self.temp_dir) / "missing.json"))

    def test_load_validates(self):
        path = Path(self.temp_dir) / "bad.json"
        path.write_text(json.dumps({'max_path_points': -5}))
        with self.assertRaises(ValueError):
            ParserConfig.from_file(str(path))

    def test_copy(self):
        config = ParserConfig(max_path_points=42)
        copied = config.copy()
        self.assertEqual(copied, config)
        self.assertIsNot(copied, config)


if __name__ == '__main__':
    unittest.main()
