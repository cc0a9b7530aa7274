"""
Error taxonomy for flight log ingestion.

Parsers raise these exceptions; the pipeline catches them at its boundary and
turns them into failed ParseResult objects.
"""

import logging
import traceback
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class FlightLogError(Exception):
    """Base exception for flight log parsing errors."""
    pass


class UnsupportedEncodingError(FlightLogError):
    """Raised when content is binary and must be converted before upload."""
    pass


class MalformedInputError(FlightLogError):
    """Raised for invalid JSON, empty CSV files or files with no data rows."""
    pass


class NoGeospatialDataError(FlightLogError):
    """Raised when no valid GPS coordinate survives filtering."""
    pass


class UnrecognizedStructureError(FlightLogError):
    """Raised when no telemetry array or coordinate columns can be located."""
    pass


class AdvisoryWarning(UserWarning):
    """Non-fatal warning for out-of-range flight metrics."""
    pass


@contextmanager
def log_stage(stage_name: str):
    """
    Log entry, exit and failure of a parsing stage.

    Exceptions are logged at DEBUG with their traceback and re-raised unchanged.

    Args:
        stage_name: Human readable name of the stage
    """
    logger.debug(f"Starting stage: {stage_name}")
    try:
        yield
    except Exception as e:
        logger.debug(f"Stage {stage_name} failed with {type(e).__name__}: {e}")
        logger.debug(f"Full traceback: {traceback.format_exc()}")
        raise
    logger.debug(f"Completed stage: {stage_name}")
