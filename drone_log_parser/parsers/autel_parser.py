"""
Autel flight log parser.

Supports Autel Sky app JSON and CSV exports and Autel Explorer/Voyager app
exports (EVO Lite, EVO II, EVO Nano series). Autel JSON reports altitude and
distance in meters and speed in m/s.
"""

from ..models import FlightSummary
from ..utils.units import METERS, MPS
from .base import BaseFlightParser
from .field_maps import FIELD_MAPPINGS

AUTEL_INDICATORS = (
    'autel',
    'evo',
    'dronelatitude',
    'dronelongitude',
    'remainpower',
    'homedistance',
    'relativeheight',
)


def is_autel_format(content: str, file_name: str) -> bool:
    """
    Detect if content is Autel format.

    Args:
        content: File content
        file_name: File name

    Returns:
        True when the filename or content carries Autel indicators
    """
    lower_name = (file_name or '').lower()
    if 'autel' in lower_name or 'evo' in lower_name:
        return True

    lower = content.lower()
    return any(indicator in lower for indicator in AUTEL_INDICATORS)


class AutelParser(BaseFlightParser):
    """Parser for Autel Sky app exports."""

    source = 'autel'

    def _parse_json(self, content: str, file_name: str) -> FlightSummary:
        data = self._load_json(content)
        records = self._json_records(data, 'autel')
        metadata = self._extract_metadata(data, 'autel')

        field_map = FIELD_MAPPINGS['autel_json']
        units = self._detect_units(records, field_map,
                                   altitude_default=METERS, speed_default=MPS)
        return self._build_summary(records, field_map, units, 'json', metadata)

    def _parse_csv(self, content: str, file_name: str) -> FlightSummary:
        records = self._read_csv_records(content)

        field_map = FIELD_MAPPINGS['autel_csv']
        units = self._detect_units(records, field_map)
        return self._build_summary(records, field_map, units, 'csv')
