"""
Drone Log Parser - normalizes drone flight logs into one flight summary schema.

This package detects and parses flight telemetry exports from DJI (Airdata and
converted native CSV, JSON), Autel (Autel Sky JSON/CSV), Skydio (app CSV and
cloud JSON) and generic GPS loggers, normalizes units to feet and mph, and
extracts aggregate flight metrics and a bounded flight path.
"""

__version__ = "1.0.0"
__author__ = "Drone Log Parser Team"

from .config import ParserConfig
from .models import FlightSummary, ParseResult
from .pipeline import FlightLogParser, get_supported_formats, parse_flight_log

__all__ = [
    "ParserConfig", "FlightSummary", "ParseResult", "FlightLogParser",
    "get_supported_formats", "parse_flight_log",
]
