"""
Unit tests for unit normalization.
"""

import math
import unittest

from drone_log_parser.utils.units import (
    FEET, KPH, METERS, MPH, MPS, detect_altitude_unit, detect_speed_unit,
    kph_to_mph, meters_to_feet, mps_to_mph, to_feet, to_float, to_mph
)


class TestConversions(unittest.TestCase):
    """Test conversion factors."""

    def test_meters_to_feet(self):
        self.assertAlmostEqual(meters_to_feet(100), 328.084)

    def test_mps_to_mph(self):
        self.assertAlmostEqual(mps_to_mph(10), 22.3694)

    def test_kph_to_mph(self):
        self.assertAlmostEqual(kph_to_mph(100), 62.1371)

    def test_apply_decisions(self):
        self.assertAlmostEqual(to_feet(10, METERS), 32.8084)
        self.assertEqual(to_feet(10, FEET), 10)
        self.assertAlmostEqual(to_mph(10, MPS), 22.3694)
        self.assertAlmostEqual(to_mph(10, KPH), 6.21371)
        self.assertEqual(to_mph(10, MPH), 10)

    def test_to_float(self):
        self.assertEqual(to_float('5'), 5.0)
        self.assertEqual(to_float(3), 3.0)
        self.assertTrue(math.isnan(to_float('abc')))
        self.assertTrue(math.isnan(to_float('')))
        self.assertTrue(math.isnan(to_float(None)))
        self.assertTrue(math.isnan(to_float(True)))


class TestAltitudeUnitDetection(unittest.TestCase):
    """Test altitude unit decisions and their recorded reasons."""

    def test_feet_header_hint(self):
        decision = detect_altitude_unit(['height_above_takeoff(feet)'], sample_value=50)
        self.assertEqual((decision.unit, decision.reason), (FEET, 'header'))

    def test_meter_header_hint(self):
        for header in ('altitude(m)', 'Height(meters)', 'altitude_meters'):
            decision = detect_altitude_unit([header], sample_value=5000)
            self.assertEqual((decision.unit, decision.reason), (METERS, 'header'), header)

    def test_unrelated_meter_columns_ignored(self):
        decision = detect_altitude_unit(['altitude', 'barometer', 'parameter_set'],
                                        sample_value=500)
        self.assertEqual((decision.unit, decision.reason), (FEET, 'magnitude'))

    def test_header_hint_beats_vendor_default(self):
        decision = detect_altitude_unit(['alt_ft'], vendor_default=METERS)
        self.assertEqual(decision.unit, FEET)

    def test_vendor_default(self):
        decision = detect_altitude_unit(['altitude'], sample_value=500, vendor_default=METERS)
        self.assertEqual((decision.unit, decision.reason), (METERS, 'vendor'))

    def test_magnitude_heuristic(self):
        low = detect_altitude_unit(['altitude'], sample_value=120)
        high = detect_altitude_unit(['altitude'], sample_value=350)
        self.assertEqual((low.unit, low.reason), (METERS, 'magnitude'))
        self.assertEqual((high.unit, high.reason), (FEET, 'magnitude'))

    def test_magnitude_threshold_configurable(self):
        decision = detect_altitude_unit(['altitude'], sample_value=120, threshold=100)
        self.assertEqual(decision.unit, FEET)

    def test_magnitude_disabled(self):
        decision = detect_altitude_unit(['altitude'], sample_value=120, use_magnitude=False)
        self.assertEqual((decision.unit, decision.reason), (FEET, 'default'))

    def test_no_sample_defaults_to_feet(self):
        decision = detect_altitude_unit(['altitude'], sample_value='')
        self.assertEqual((decision.unit, decision.reason), (FEET, 'default'))


class TestSpeedUnitDetection(unittest.TestCase):
    """Test speed unit decisions."""

    def test_header_hints(self):
        self.assertEqual(detect_speed_unit(['speed(mph)']).unit, MPH)
        self.assertEqual(detect_speed_unit(['Speed(m/s)']).unit, MPS)
        self.assertEqual(detect_speed_unit(['speed_mps']).unit, MPS)
        self.assertEqual(detect_speed_unit(['speed(km/h)']).unit, KPH)
        self.assertEqual(detect_speed_unit(['speed_kph']).unit, KPH)

    def test_vendor_default(self):
        decision = detect_speed_unit(['groundSpeed'], vendor_default=MPS)
        self.assertEqual((decision.unit, decision.reason), (MPS, 'vendor'))

    def test_default_is_mph(self):
        decision = detect_speed_unit(['speed'])
        self.assertEqual((decision.unit, decision.reason), (MPH, 'default'))


if __name__ == '__main__':
    unittest.main()
