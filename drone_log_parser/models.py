"""
Data model for parsed flight logs.

All objects are created during a single parse call and are not mutated
afterwards. ``to_dict`` methods produce JSON-serialisable dictionaries for
persistence layers and the CLI.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Optional, List


class EncodingType(str, Enum):
    """Physical encoding of an uploaded log."""
    BINARY = 'binary'
    CSV = 'csv'
    JSON = 'json'
    XML = 'xml'
    INVALID_JSON = 'invalid-json'
    UNKNOWN = 'unknown'


class VendorSource(str, Enum):
    """Drone ecosystem that produced a log."""
    DJI = 'dji'
    AUTEL = 'autel'
    SKYDIO = 'skydio'
    UNKNOWN = 'unknown'


class Confidence(str, Enum):
    """Agreement between filename and content vendor evidence."""
    HIGH = 'high'
    MEDIUM = 'medium'
    LOW = 'low'


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of format and vendor detection."""
    encoding_type: EncodingType
    vendor_source: VendorSource
    format_variant: str = 'unknown'
    confidence: Confidence = Confidence.LOW

    def to_dict(self) -> Dict[str, Any]:
        return {
            'encoding_type': self.encoding_type.value,
            'vendor_source': self.vendor_source.value,
            'format_variant': self.format_variant,
            'confidence': self.confidence.value,
        }


@dataclass(frozen=True)
class Location:
    """A latitude/longitude pair in decimal degrees."""
    latitude: float
    longitude: float

    def to_dict(self) -> Dict[str, Any]:
        return {'latitude': self.latitude, 'longitude': self.longitude}


@dataclass(frozen=True)
class NormalizedPoint:
    """One GPS sample after unit conversion into feet and mph."""
    latitude: float
    longitude: float
    altitude_feet: float = 0.0
    speed_mph: float = 0.0
    battery_percent: Optional[float] = None
    distance_from_home_feet: Optional[float] = None
    timestamp: Optional[datetime] = None

    @property
    def location(self) -> Location:
        return Location(self.latitude, self.longitude)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'latitude': self.latitude,
            'longitude': self.longitude,
            'altitude_feet': self.altitude_feet,
            'speed_mph': self.speed_mph,
            'battery_percent': self.battery_percent,
            'distance_from_home_feet': self.distance_from_home_feet,
            'timestamp': _isoformat(self.timestamp),
        }


@dataclass(frozen=True)
class UnitDecision:
    """
    Records which unit a column was read in and why.

    ``reason`` is one of ``header`` (explicit header hint), ``vendor`` (the
    vendor's native unit), ``magnitude`` (value-range heuristic) or
    ``default``.
    """
    unit: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {'unit': self.unit, 'reason': self.reason}


@dataclass
class FlightSummary:
    """Normalized aggregate output of one parsed flight log."""
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    duration_minutes: int
    takeoff_location: Optional[Location]
    landing_location: Optional[Location]
    max_altitude_feet: int
    max_speed_mph: float
    max_distance_feet: int
    total_distance_feet: int
    battery_start: Optional[float]
    battery_end: Optional[float]
    battery_used: Optional[float]
    flight_path: List[NormalizedPoint]
    record_count: int
    valid_point_count: int
    source: str
    format: str
    battery_min: Optional[float] = None
    drone_model: Optional[str] = None
    firmware_version: Optional[str] = None
    serial_number: Optional[str] = None
    unit_decisions: Dict[str, UnitDecision] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'start_time': _isoformat(self.start_time),
            'end_time': _isoformat(self.end_time),
            'duration_minutes': self.duration_minutes,
            'takeoff_location': self.takeoff_location.to_dict() if self.takeoff_location else None,
            'landing_location': self.landing_location.to_dict() if self.landing_location else None,
            'max_altitude_feet': self.max_altitude_feet,
            'max_speed_mph': self.max_speed_mph,
            'max_distance_feet': self.max_distance_feet,
            'total_distance_feet': self.total_distance_feet,
            'battery_start': self.battery_start,
            'battery_end': self.battery_end,
            'battery_used': self.battery_used,
            'battery_min': self.battery_min,
            'flight_path': [point.to_dict() for point in self.flight_path],
            'record_count': self.record_count,
            'valid_point_count': self.valid_point_count,
            'source': self.source,
            'format': self.format,
            'drone_model': self.drone_model,
            'firmware_version': self.firmware_version,
            'serial_number': self.serial_number,
            'unit_decisions': {name: decision.to_dict()
                               for name, decision in self.unit_decisions.items()},
        }


@dataclass
class ValidationResult:
    """Sanity-check outcome for a FlightSummary."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'valid': self.valid, 'errors': list(self.errors), 'warnings': list(self.warnings)}


@dataclass
class ParseResult:
    """
    Tagged result of a parse call.

    Successful results carry ``data`` and ``validation``; failed results carry
    ``error``. ``metadata`` is always present.
    """
    success: bool
    metadata: Dict[str, Any]
    data: Optional[FlightSummary] = None
    validation: Optional[ValidationResult] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: FlightSummary, validation: ValidationResult,
           metadata: Dict[str, Any]) -> 'ParseResult':
        return cls(success=True, data=data, validation=validation, metadata=metadata)

    @classmethod
    def failed(cls, error: str, metadata: Dict[str, Any]) -> 'ParseResult':
        return cls(success=False, error=error, metadata=metadata)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {
                'success': True,
                'data': self.data.to_dict(),
                'validation': self.validation.to_dict(),
                'metadata': dict(self.metadata),
            }
        return {'success': False, 'error': self.error, 'metadata': dict(self.metadata)}
