"""
Skydio flight log parser.

Supports Skydio app CSV exports and Skydio Cloud JSON exports for the
Skydio 2/2+ and X2 series. Skydio logs report meters and m/s unless the
column headers say otherwise.
"""

from ..models import FlightSummary
from ..utils.units import METERS, MPS
from .base import BaseFlightParser
from .field_maps import FIELD_MAPPINGS

SKYDIO_INDICATORS = (
    'skydio',
    'autonomy_mode',
    'tracking_mode',
    'subject_distance',
    'vehicle_latitude',
    'vehicle_longitude',
    'vehicle_heading',
)


def is_skydio_format(content: str, file_name: str) -> bool:
    """
    Detect if content is Skydio format.

    Args:
        content: File content
        file_name: File name

    Returns:
        True when the filename or content carries Skydio indicators
    """
    lower_name = (file_name or '').lower()
    if 'skydio' in lower_name or 's2' in lower_name or 'x2' in lower_name:
        return True

    lower = content.lower()
    return any(indicator in lower for indicator in SKYDIO_INDICATORS)


class SkydioParser(BaseFlightParser):
    """Parser for Skydio app and cloud exports."""

    source = 'skydio'

    def _parse_json(self, content: str, file_name: str) -> FlightSummary:
        data = self._load_json(content)
        records = self._json_records(data, 'skydio')
        metadata = self._extract_metadata(data, 'skydio')
        if metadata['drone_model'] is None:
            metadata['drone_model'] = 'Skydio'

        field_map = FIELD_MAPPINGS['skydio_cloud']
        units = self._detect_units(records, field_map,
                                   altitude_default=METERS, speed_default=MPS)
        return self._build_summary(records, field_map, units, 'json', metadata)

    def _parse_csv(self, content: str, file_name: str) -> FlightSummary:
        records = self._read_csv_records(content)

        field_map = FIELD_MAPPINGS['skydio_csv']
        units = self._detect_units(records, field_map,
                                   altitude_default=METERS, speed_default=MPS)
        return self._build_summary(records, field_map, units, 'csv')
