"""
Generic GPS log parser.

Parser of last resort for any CSV or JSON file exposing a latitude/longitude
pair. Columns are discovered by bare substring matching with no vendor
aliasing, and only explicit header unit hints are honoured.
"""

from typing import Dict, Any, List

from ..models import FlightSummary
from ..utils.error_handling import UnrecognizedStructureError
from ..utils.fields import find_column
from .base import BaseFlightParser
from .field_maps import GENERIC_COLUMNS, FieldMap


class GenericParser(BaseFlightParser):
    """Parser for generic CSV/JSON GPS logs."""

    source = 'generic'

    def _parse_csv(self, content: str, file_name: str) -> FlightSummary:
        records = self._read_csv_records(content)
        return self._summarize_records(records, 'csv')

    def _parse_json(self, content: str, file_name: str) -> FlightSummary:
        data = self._load_json(content)
        records = self._json_records(data, 'generic')
        return self._summarize_records(records, 'json')

    def _summarize_records(self, records: List[Dict[str, Any]], fmt: str) -> FlightSummary:
        field_map = self.discover_columns(list(records[0].keys()))
        units = self._detect_units(records, field_map, use_magnitude=False)
        return self._build_summary(records, field_map, units, fmt)

    @staticmethod
    def discover_columns(headers: List[str]) -> FieldMap:
        """
        Build a field map from the columns present in the file.

        Args:
            headers: Column names of the first record

        Returns:
            Field map with one column per discovered logical field

        Raises:
            UnrecognizedStructureError: If no latitude/longitude columns exist
        """
        field_map = {}
        for logical_name, candidates in GENERIC_COLUMNS.items():
            column = find_column(headers, candidates)
            field_map[logical_name] = [column] if column else []

        if not field_map['latitude'] or not field_map['longitude']:
            raise UnrecognizedStructureError("Could not find latitude/longitude columns")

        return field_map
