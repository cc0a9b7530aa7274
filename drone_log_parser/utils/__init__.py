"""
Utility functions and helpers for flight log parsing.

This module contains:
- Format and vendor detection
- CSV tokenizing and field resolution
- Unit conversion and timestamp parsing
- Geospatial calculations and path sampling
- Flight data validation and the error taxonomy
"""

from .coordinates import (
    calculate_max_distance_from_home, calculate_total_distance,
    haversine_distance_feet, is_valid_coordinate
)
from .csv_reader import parse_csv
from .detection import detect_source_and_format, is_binary_content
from .error_handling import (
    AdvisoryWarning, FlightLogError, MalformedInputError, NoGeospatialDataError,
    UnrecognizedStructureError, UnsupportedEncodingError
)
from .fields import find_field
from .sampling import sample_flight_path
from .timestamps import parse_timestamp
from .units import kph_to_mph, meters_to_feet, mps_to_mph
from .validation import FlightDataValidator, validate_flight_data

__all__ = [
    "calculate_max_distance_from_home", "calculate_total_distance",
    "haversine_distance_feet", "is_valid_coordinate", "parse_csv",
    "detect_source_and_format", "is_binary_content", "AdvisoryWarning",
    "FlightLogError", "MalformedInputError", "NoGeospatialDataError",
    "UnrecognizedStructureError", "UnsupportedEncodingError", "find_field",
    "sample_flight_path", "parse_timestamp", "kph_to_mph", "meters_to_feet",
    "mps_to_mph", "FlightDataValidator", "validate_flight_data",
]
