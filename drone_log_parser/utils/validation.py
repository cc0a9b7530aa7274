"""
Sanity checks for parsed flight summaries.

Missing structural fields are errors; implausible metrics are warnings that
usually point at unit-conversion or timestamp problems.
"""

import logging
from typing import Optional

from ..config import ParserConfig
from ..models import FlightSummary, ValidationResult

logger = logging.getLogger(__name__)


class FlightDataValidator:
    """Validates aggregate flight metrics."""

    def __init__(self, config: Optional[ParserConfig] = None):
        """Initialize validator with warning thresholds from config."""
        self.config = config or ParserConfig()

    def validate(self, flight_data: FlightSummary) -> ValidationResult:
        """
        Validate a parsed flight summary.

        Args:
            flight_data: Parsed flight data

        Returns:
            ValidationResult; never raises
        """
        errors = []
        warnings = []

        if flight_data.start_time is None:
            errors.append('Missing start time')
        if flight_data.takeoff_location is None:
            errors.append('Missing takeoff location')

        if flight_data.max_altitude_feet > self.config.max_altitude_warning_feet:
            warnings.append('Unusually high altitude detected - values may be in wrong units')
        if flight_data.max_speed_mph > self.config.max_speed_warning_mph:
            warnings.append('Unusually high speed detected - values may be in wrong units')
        if flight_data.duration_minutes > self.config.max_duration_warning_minutes:
            warnings.append(f"Flight duration exceeds "
                            f"{self.config.max_duration_warning_minutes:g} minutes - verify timestamps")

        for message in warnings:
            logger.warning(message)

        return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


def validate_flight_data(flight_data: FlightSummary,
                         config: Optional[ParserConfig] = None) -> ValidationResult:
    """Validate parsed flight data with default or given thresholds."""
    return FlightDataValidator(config).validate(flight_data)
