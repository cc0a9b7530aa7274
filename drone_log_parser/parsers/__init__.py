"""
Vendor flight log parsers.

This module contains parsers for:
- DJI (Airdata CSV, converted native CSV, JSON)
- Autel (Autel Sky JSON and CSV)
- Skydio (app CSV and cloud JSON)
- Generic GPS logs (any CSV/JSON with latitude/longitude)
"""

from .base import BaseFlightParser
from .dji_parser import DJIParser, is_dji_format
from .autel_parser import AutelParser, is_autel_format
from .skydio_parser import SkydioParser, is_skydio_format
from .generic_parser import GenericParser

__all__ = [
    "BaseFlightParser", "DJIParser", "AutelParser", "SkydioParser", "GenericParser",
    "is_dji_format", "is_autel_format", "is_skydio_format",
]
