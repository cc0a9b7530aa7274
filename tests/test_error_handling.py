"""
Unit tests for the error taxonomy and stage logging.
"""

import unittest

from drone_log_parser.utils.error_handling import (
    AdvisoryWarning, FlightLogError, MalformedInputError, NoGeospatialDataError,
    UnrecognizedStructureError, UnsupportedEncodingError, log_stage
)


class TestErrorTaxonomy(unittest.TestCase):
    """Test exception hierarchy."""

    def test_all_errors_share_base(self):
        for error_class in (UnsupportedEncodingError, MalformedInputError,
                            NoGeospatialDataError, UnrecognizedStructureError):
            self.assertTrue(issubclass(error_class, FlightLogError))
            self.assertTrue(issubclass(error_class, Exception))

    def test_advisory_warning_is_not_an_error(self):
        self.assertTrue(issubclass(AdvisoryWarning, UserWarning))
        self.assertFalse(issubclass(AdvisoryWarning, FlightLogError))

    def test_message_preserved(self):
        error = MalformedInputError("The flight log file is empty")
        self.assertEqual(str(error), "The flight log file is empty")


class TestLogStage(unittest.TestCase):
    """Test the stage logging context manager."""

    def test_success_logged(self):
        with self.assertLogs('drone_log_parser.utils.error_handling', level='DEBUG') as logs:
            with log_stage("detection"):
                pass

        self.assertIn("Starting stage: detection", logs.output[0])
        self.assertIn("Completed stage: detection", logs.output[-1])

    def test_failure_reraised_unchanged(self):
        with self.assertLogs('drone_log_parser.utils.error_handling', level='DEBUG') as logs:
            with self.assertRaises(NoGeospatialDataError):
                with log_stage("dji parsing"):
                    raise NoGeospatialDataError("No valid GPS coordinates found")

        self.assertTrue(any("NoGeospatialDataError" in line for line in logs.output))
        self.assertFalse(any("Completed stage" in line for line in logs.output))


if __name__ == '__main__':
    unittest.main()
