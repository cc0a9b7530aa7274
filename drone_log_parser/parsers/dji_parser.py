"""
DJI flight log parser.

Supports Airdata.com CSV exports, DJI native logs converted to CSV
(OSD./GPS. prefixed columns), generic CSV and DJI JSON exports.

Native DJI .txt logs are binary/encrypted and must be converted via
Airdata.com or a similar tool first.
"""

from typing import Dict, Any, List, Tuple

from ..models import FlightSummary
from ..utils.error_handling import UnrecognizedStructureError
from .base import BaseFlightParser
from .field_maps import FIELD_MAPPINGS, FieldMap

DJI_CONTENT_INDICATORS = ('dji', 'mavic', 'phantom', 'inspire', 'matrice',
                          'datetime(utc)', 'height_above_takeoff', 'osd.', 'flycstate')


def is_dji_format(content: str, file_name: str) -> bool:
    """
    Detect if content looks like a DJI export.

    Args:
        content: File content
        file_name: File name

    Returns:
        True when the filename or content carries DJI indicators
    """
    lower_name = (file_name or '').lower()
    if any(hint in lower_name for hint in ('dji', 'airdata', 'mavic', 'phantom')):
        return True

    lower = content.lower()
    return any(indicator in lower for indicator in DJI_CONTENT_INDICATORS)


class DJIParser(BaseFlightParser):
    """Parser for DJI CSV and JSON flight logs."""

    source = 'dji'

    def parse(self, content: str, file_name: str = 'unknown.csv') -> FlightSummary:
        if (content or '').lstrip().startswith('<'):
            raise UnrecognizedStructureError(
                "DJI XML flight logs are not supported. Please export the flight "
                "as CSV from Airdata.com or PhantomHelp Flight Reader."
            )
        return super().parse(content, file_name)

    def _parse_csv(self, content: str, file_name: str) -> FlightSummary:
        records = self._read_csv_records(content)
        return self._summarize_records(records, 'csv')

    def _parse_json(self, content: str, file_name: str) -> FlightSummary:
        data = self._load_json(content)
        records = self._json_records(data, 'dji')
        metadata = self._extract_metadata(data, 'dji')
        return self._summarize_records(records, 'json', metadata)

    def _summarize_records(self, records: List[Dict[str, Any]], fmt: str,
                           metadata: Dict[str, Any] = None) -> FlightSummary:
        mapping_name, field_map = self.select_field_mapping(records[0])
        self.logger.debug(f"Using '{mapping_name}' field mapping")

        units = self._detect_units(records, field_map)
        return self._build_summary(records, field_map, units, fmt, metadata)

    @staticmethod
    def select_field_mapping(first_record: Dict[str, Any]) -> Tuple[str, FieldMap]:
        """
        Select the field mapping whose exporter the headers resemble.

        Args:
            first_record: First data record

        Returns:
            Tuple of (mapping name, field mapping)
        """
        headers = [str(header).lower() for header in first_record.keys()]

        if any('datetime(utc)' in h or 'height_above_takeoff' in h for h in headers):
            return 'airdata', FIELD_MAPPINGS['airdata']

        if any('osd.' in h or 'gps.' in h for h in headers):
            return 'dji', FIELD_MAPPINGS['dji']

        return 'generic', FIELD_MAPPINGS['generic']
