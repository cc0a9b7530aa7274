"""
Base class for vendor flight log parsers.

Defines the common interface and the shared record-to-summary pipeline that
every vendor parser reuses. Vendor subclasses only choose field maps, native
units, JSON path probes and metadata keys.
"""

import json
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, Optional, List, Sequence

from ..config import ParserConfig
from ..models import FlightSummary, NormalizedPoint, UnitDecision
from ..utils.coordinates import (
    calculate_max_distance_from_home, calculate_total_distance, is_valid_coordinate
)
from ..utils.csv_reader import parse_csv
from ..utils.error_handling import (
    MalformedInputError, NoGeospatialDataError, UnrecognizedStructureError
)
from ..utils.fields import find_field, find_field_key
from ..utils.sampling import sample_flight_path
from ..utils.timestamps import parse_timestamp
from ..utils.units import (
    detect_altitude_unit, detect_speed_unit, kph_to_mph, meters_to_feet,
    mps_to_mph, to_feet, to_float, to_mph
)
from .field_maps import FieldMap, JSON_RECORD_PATHS, LATITUDE_KEYS, METADATA_KEYS


@dataclass
class FlightAccumulator:
    """Running aggregates for a single parse call."""
    points: List[NormalizedPoint] = field(default_factory=list)
    max_altitude: float = 0.0
    max_speed: float = 0.0
    max_reported_distance: float = 0.0
    min_battery: Optional[float] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    start_battery: Optional[float] = None
    end_battery: Optional[float] = None

    def add(self, point: NormalizedPoint):
        self.points.append(point)

        self.max_altitude = max(self.max_altitude, point.altitude_feet)
        self.max_speed = max(self.max_speed, point.speed_mph)
        if point.distance_from_home_feet is not None:
            self.max_reported_distance = max(self.max_reported_distance,
                                             point.distance_from_home_feet)
        if point.battery_percent is not None:
            if self.min_battery is None or point.battery_percent < self.min_battery:
                self.min_battery = point.battery_percent

        if point.timestamp is not None:
            if self.start_time is None:
                self.start_time = point.timestamp
                self.start_battery = point.battery_percent
            self.end_time = point.timestamp
            self.end_battery = point.battery_percent


@dataclass
class UnitContext:
    """Unit decisions applied to every record of one file."""
    altitude: UnitDecision
    speed: UnitDecision


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def duration_minutes(start: Optional[datetime], end: Optional[datetime]) -> int:
    """Whole minutes between two instants, 0 when either is missing."""
    if start is None or end is None:
        return 0
    minutes = (end - start).total_seconds() / 60
    return max(0, int(round_half_up(minutes)))


class BaseFlightParser(ABC):
    """Abstract base class for vendor flight log parsers."""

    source = 'unknown'

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Initialize the parser with optional configuration.

        Args:
            config: Optional parser configuration
        """
        self.config = config or ParserConfig()
        self.logger = logging.getLogger(__name__)

    def parse(self, content: str, file_name: str = 'unknown') -> FlightSummary:
        """
        Parse flight log content into a FlightSummary.

        Args:
            content: Decoded file content
            file_name: Original file name

        Returns:
            FlightSummary with aggregate metrics and a sampled flight path

        Raises:
            MalformedInputError: If the content is empty or has no data rows
            NoGeospatialDataError: If no valid GPS coordinates are found
            UnrecognizedStructureError: If no telemetry can be located
        """
        trimmed = (content or '').strip()
        if not trimmed:
            raise MalformedInputError("The flight log file is empty")

        self.logger.info(f"Parsing {file_name} with {type(self).__name__}")

        if trimmed.startswith('{') or trimmed.startswith('['):
            return self._parse_json(trimmed, file_name)
        return self._parse_csv(trimmed, file_name)

    @abstractmethod
    def _parse_csv(self, content: str, file_name: str) -> FlightSummary:
        """Parse CSV content."""
        pass

    @abstractmethod
    def _parse_json(self, content: str, file_name: str) -> FlightSummary:
        """Parse JSON content."""
        pass

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _read_csv_records(self, content: str) -> List[Dict[str, Any]]:
        records = parse_csv(content)
        if not records:
            raise MalformedInputError(f"No data records found in {self.source} CSV file")
        return records

    def _load_json(self, content: str) -> Any:
        try:
            return json.loads(content)
        except ValueError as e:
            raise MalformedInputError(f"Invalid JSON content: {e}") from e

    def _extract_records(self, data: Any, paths: Sequence[str]) -> Optional[List[Any]]:
        """
        Locate the telemetry array inside a JSON document.

        A top-level array is used directly. Otherwise each dotted path is
        probed in order, then every top-level array whose first element has a
        latitude-like key.

        Args:
            data: Decoded JSON document
            paths: Ordered dotted paths to probe

        Returns:
            The telemetry array, or None
        """
        if isinstance(data, list):
            return data
        if not isinstance(data, dict):
            return None

        for path in paths:
            candidate = find_field(data, [path])
            if isinstance(candidate, list) and candidate:
                self.logger.debug(f"Telemetry array found at '{path}'")
                return candidate

        for key, value in data.items():
            if isinstance(value, list) and value and isinstance(value[0], dict):
                if find_field_key(value[0], LATITUDE_KEYS) is not None:
                    self.logger.debug(f"Telemetry array found by scanning key '{key}'")
                    return value

        return None

    def _json_records(self, data: Any, paths_key: str) -> List[Dict[str, Any]]:
        records = self._extract_records(data, JSON_RECORD_PATHS[paths_key])
        records = [record for record in records or [] if isinstance(record, dict)]
        if not records:
            raise UnrecognizedStructureError(
                f"No flight telemetry data found in {self.source} JSON file"
            )
        return records

    def _extract_metadata(self, data: Any, keys_name: str) -> Dict[str, Any]:
        """
        Probe flight-level metadata fields in a JSON document.

        Args:
            data: Decoded JSON document
            keys_name: Key into METADATA_KEYS

        Returns:
            Dictionary with drone_model, firmware_version, serial_number,
            start_time, end_time and duration (minutes); missing values are None
        """
        metadata = {name: None for name in METADATA_KEYS[keys_name]}
        if not isinstance(data, dict):
            return metadata

        for name, aliases in METADATA_KEYS[keys_name].items():
            value = find_field(data, aliases)
            if value in (None, '') or isinstance(value, (dict, list)):
                continue
            metadata[name] = value

        for name in ('drone_model', 'firmware_version', 'serial_number'):
            if metadata[name] is not None:
                metadata[name] = str(metadata[name])

        metadata['start_time'] = parse_timestamp(metadata['start_time'])
        metadata['end_time'] = parse_timestamp(metadata['end_time'])

        duration = to_float(metadata['duration'])
        if math.isnan(duration) or duration <= 0:
            metadata['duration'] = None
        elif duration > 1000:
            # Long durations are reported in seconds
            metadata['duration'] = int(round_half_up(duration / 60))
        else:
            metadata['duration'] = int(round_half_up(duration))

        return metadata

    def _detect_units(self, records: List[Dict[str, Any]], field_map: FieldMap,
                      altitude_default: Optional[str] = None,
                      speed_default: Optional[str] = None,
                      use_magnitude: bool = True) -> UnitContext:
        """
        Decide altitude and speed units for a file.

        Hints in the matched altitude/speed column names win over hints
        anywhere in the header row.
        """
        first = records[0]
        headers = list(first.keys())

        altitude_key = find_field_key(first, field_map.get('altitude', []))
        altitude_headers = [altitude_key] if altitude_key else []
        altitude = detect_altitude_unit(altitude_headers, vendor_default=None, use_magnitude=False)
        if altitude.reason != 'header':
            altitude = detect_altitude_unit(
                headers,
                sample_value=find_field(first, field_map.get('altitude', [])),
                vendor_default=altitude_default,
                use_magnitude=use_magnitude,
                threshold=self.config.altitude_meters_threshold,
            )

        speed_key = find_field_key(first, field_map.get('speed', []))
        speed = detect_speed_unit([speed_key] if speed_key else [])
        if speed.reason != 'header':
            speed = detect_speed_unit(headers, vendor_default=speed_default)

        self.logger.debug(f"Unit decisions: altitude={altitude}, speed={speed}")
        return UnitContext(altitude=altitude, speed=speed)

    def _resolve_point(self, record: Dict[str, Any], field_map: FieldMap,
                       units: UnitContext,
                       base_time: Optional[datetime]) -> Optional[NormalizedPoint]:
        """
        Build a NormalizedPoint from one raw record.

        Returns None when the record has no valid coordinate.
        """
        lat = to_float(find_field(record, field_map['latitude']))
        lng = to_float(find_field(record, field_map['longitude']))
        if not is_valid_coordinate(lat, lng):
            return None

        altitude = to_float(find_field(record, field_map.get('altitude', [])))
        if not math.isnan(altitude):
            altitude = to_feet(altitude, units.altitude.unit)
        else:
            altitude = to_float(find_field(record, field_map.get('altitude_meters', [])))
            if not math.isnan(altitude):
                altitude = meters_to_feet(altitude)

        speed = to_float(find_field(record, field_map.get('speed', [])))
        if not math.isnan(speed):
            speed = to_mph(speed, units.speed.unit)
        else:
            speed_mps = to_float(find_field(record, field_map.get('speed_mps', [])))
            speed_kph = to_float(find_field(record, field_map.get('speed_kph', [])))
            if not math.isnan(speed_mps):
                speed = mps_to_mph(speed_mps)
            elif not math.isnan(speed_kph):
                speed = kph_to_mph(speed_kph)

        distance = to_float(find_field(record, field_map.get('distance', [])))
        if not math.isnan(distance):
            distance = to_feet(distance, units.altitude.unit)
        else:
            distance = to_float(find_field(record, field_map.get('distance_meters', [])))
            if not math.isnan(distance):
                distance = meters_to_feet(distance)

        battery = to_float(find_field(record, field_map.get('battery', [])))
        timestamp = parse_timestamp(find_field(record, field_map.get('timestamp', [])), base_time)

        return NormalizedPoint(
            latitude=lat,
            longitude=lng,
            altitude_feet=0.0 if math.isnan(altitude) else altitude,
            speed_mph=0.0 if math.isnan(speed) else speed,
            battery_percent=None if math.isnan(battery) else battery,
            distance_from_home_feet=None if math.isnan(distance) else distance,
            timestamp=timestamp,
        )

    def _build_summary(self, records: List[Dict[str, Any]], field_map: FieldMap,
                       units: UnitContext, fmt: str,
                       metadata: Optional[Dict[str, Any]] = None) -> FlightSummary:
        """
        Resolve every record and aggregate the flight metrics.

        Args:
            records: Raw records in file order
            field_map: Alias table to resolve fields with
            units: Unit decisions for this file
            fmt: 'csv' or 'json'
            metadata: Optional flight-level metadata from _extract_metadata

        Returns:
            FlightSummary

        Raises:
            NoGeospatialDataError: If no record has a valid coordinate
        """
        metadata = metadata or {}
        acc = FlightAccumulator()
        skipped = 0

        for record in records:
            if not isinstance(record, dict):
                skipped += 1
                continue
            point = self._resolve_point(record, field_map, units, acc.start_time)
            if point is None:
                skipped += 1
                continue
            acc.add(point)

        if not acc.points:
            raise NoGeospatialDataError(
                f"No valid GPS coordinates found in {self.source} flight log"
            )

        if skipped:
            self.logger.debug(f"Skipped {skipped} records without a valid coordinate")

        return self._summarize(acc, len(records), units, fmt, metadata)

    def _summarize(self, acc: FlightAccumulator, record_count: int, units: UnitContext,
                   fmt: str, metadata: Dict[str, Any]) -> FlightSummary:
        points = acc.points
        start_time = acc.start_time or metadata.get('start_time')
        end_time = acc.end_time or metadata.get('end_time')

        if acc.start_time is not None and acc.end_time is not None:
            duration = duration_minutes(acc.start_time, acc.end_time)
        else:
            duration = metadata.get('duration') or duration_minutes(start_time, end_time)

        start_battery, end_battery = acc.start_battery, acc.end_battery
        if acc.start_time is None:
            start_battery = next((p.battery_percent for p in points
                                  if p.battery_percent is not None), None)
            end_battery = next((p.battery_percent for p in reversed(points)
                                if p.battery_percent is not None), None)
        battery_used = None
        if start_battery is not None and end_battery is not None:
            battery_used = round_half_up(start_battery - end_battery)

        max_distance = acc.max_reported_distance or calculate_max_distance_from_home(points)

        summary = FlightSummary(
            start_time=start_time,
            end_time=end_time,
            duration_minutes=duration,
            takeoff_location=points[0].location,
            landing_location=points[-1].location,
            max_altitude_feet=int(round_half_up(acc.max_altitude)),
            max_speed_mph=round_half_up(acc.max_speed, 1),
            max_distance_feet=int(round_half_up(max_distance)),
            total_distance_feet=int(round_half_up(calculate_total_distance(points))),
            battery_start=start_battery,
            battery_end=end_battery,
            battery_used=battery_used,
            battery_min=acc.min_battery,
            flight_path=sample_flight_path(points, self.config.max_path_points),
            record_count=record_count,
            valid_point_count=len(points),
            source=self.source,
            format=fmt,
            drone_model=metadata.get('drone_model'),
            firmware_version=metadata.get('firmware_version'),
            serial_number=metadata.get('serial_number'),
            unit_decisions={'altitude': units.altitude, 'speed': units.speed},
        )

        self.logger.info(f"Parsed {summary.valid_point_count}/{record_count} valid points, "
                         f"{summary.duration_minutes} min, max altitude "
                         f"{summary.max_altitude_feet} ft")
        return summary
