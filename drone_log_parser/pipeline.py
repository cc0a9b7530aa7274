"""
Main entry point for flight log ingestion.

Detects the encoding and vendor of an uploaded flight log, routes it to the
matching vendor parser, validates the resulting summary and wraps everything
in a ParseResult. No exception escapes the public entry points.
"""

import logging
import time
import warnings
from typing import Dict, Any, Optional, Tuple

from .config import ParserConfig
from .models import DetectionResult, EncodingType, ParseResult, VendorSource
from .parsers import (
    AutelParser, BaseFlightParser, DJIParser, GenericParser, SkydioParser,
    is_autel_format, is_dji_format, is_skydio_format
)
from .utils.detection import detect_source_and_format
from .utils.error_handling import (
    AdvisoryWarning, FlightLogError, MalformedInputError, UnrecognizedStructureError,
    UnsupportedEncodingError, log_stage
)
from .utils.validation import FlightDataValidator

BINARY_MESSAGE = (
    "This appears to be a native DJI binary log file (.txt). "
    "Please convert it to CSV using Airdata.com first, then upload the CSV file."
)
INVALID_JSON_MESSAGE = (
    "The file appears to be JSON but is not valid. Please check the file format."
)
UNSUPPORTED_MESSAGE = (
    "Unsupported file format. Please upload a CSV or JSON file exported from "
    "Airdata, Autel Sky, Skydio, or your drone's companion app."
)


class FlightLogParser:
    """Detects, parses and validates flight logs from any supported vendor."""

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Initialize the flight log parser.

        Args:
            config: Parser configuration. If None, uses default config.
        """
        self.config = config or ParserConfig()
        self.logger = self._setup_logging()

        self.parsers = {
            'dji': DJIParser(self.config),
            'autel': AutelParser(self.config),
            'skydio': SkydioParser(self.config),
            'generic': GenericParser(self.config),
        }
        self.validator = FlightDataValidator(self.config)

    def parse(self, content: str, file_name: str = 'unknown') -> ParseResult:
        """
        Parse one flight log.

        Args:
            content: Decoded file content
            file_name: Original file name, used only as a detection hint

        Returns:
            ParseResult; failures are reported through ``success=False``
        """
        start = time.perf_counter()
        metadata: Dict[str, Any] = {'file_name': file_name}

        try:
            with log_stage("detection"):
                detection = detect_source_and_format(content, file_name, self.config)
            metadata.update(self._detection_metadata(detection))

            parser_used, parser = self._select_parser(content or '', file_name, detection)
            metadata['parser_used'] = parser_used

            with log_stage(f"{parser_used} parsing"):
                summary = parser.parse(content, file_name)

            with log_stage("validation"):
                validation = self.validator.validate(summary)
            self._emit_warnings(validation.warnings)

            metadata['parse_time_ms'] = self._elapsed_ms(start)
            self.logger.info(f"Parsed {file_name} with {parser_used} parser "
                             f"in {metadata['parse_time_ms']} ms")
            return ParseResult.ok(summary, validation, metadata)

        except FlightLogError as e:
            self.logger.warning(f"Failed to parse {file_name}: {e}")
            metadata['parse_time_ms'] = self._elapsed_ms(start)
            return ParseResult.failed(str(e), metadata)

        except Exception as e:
            self.logger.error(f"Unexpected error parsing {file_name}: {type(e).__name__}: {e}")
            self.logger.debug("Unexpected error details", exc_info=True)
            metadata['parse_time_ms'] = self._elapsed_ms(start)
            return ParseResult.failed(str(e) or type(e).__name__, metadata)

    def _select_parser(self, content: str, file_name: str,
                       detection: DetectionResult) -> Tuple[str, BaseFlightParser]:
        """
        Choose the vendor parser for a detected file.

        Raises:
            UnsupportedEncodingError: For binary content
            MalformedInputError: For content that looks like JSON but is not
            UnrecognizedStructureError: When no parser can handle the content
        """
        if detection.encoding_type == EncodingType.BINARY:
            raise UnsupportedEncodingError(BINARY_MESSAGE)
        if detection.encoding_type == EncodingType.INVALID_JSON:
            raise MalformedInputError(INVALID_JSON_MESSAGE)

        source = detection.vendor_source
        if source != VendorSource.UNKNOWN:
            return source.value, self.parsers[source.value]

        # Vendor not detected: retry with the parsers' own content sniffing
        if is_skydio_format(content, file_name):
            return 'skydio', self.parsers['skydio']
        if is_autel_format(content, file_name):
            return 'autel', self.parsers['autel']
        if is_dji_format(content, file_name):
            return 'dji', self.parsers['dji']
        if detection.encoding_type == EncodingType.CSV:
            return 'generic', self.parsers['generic']
        if detection.encoding_type == EncodingType.JSON:
            return 'generic-json', self.parsers['generic']

        raise UnrecognizedStructureError(UNSUPPORTED_MESSAGE)

    def _emit_warnings(self, messages):
        if not self.config.emit_warnings:
            return
        for message in messages:
            warnings.warn(message, AdvisoryWarning, stacklevel=3)

    @staticmethod
    def _detection_metadata(detection: DetectionResult) -> Dict[str, Any]:
        return {
            'encoding_type': detection.encoding_type.value,
            'format': detection.format_variant,
            'source': detection.vendor_source.value,
            'parser_used': None,
            'confidence': detection.confidence.value,
        }

    @staticmethod
    def _elapsed_ms(start: float) -> float:
        return round((time.perf_counter() - start) * 1000, 3)

    def _setup_logging(self) -> logging.Logger:
        """
        Set up logging configuration.

        The package handler is installed only the first time and only when the
        application has not configured logging itself. A level already set on
        the package logger is left alone.
        """
        logger = logging.getLogger('drone_log_parser')

        if not logger.handlers and not logging.getLogger().handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            if logger.level == logging.NOTSET:
                logger.setLevel(logging.INFO if self.config.verbose else logging.WARNING)

        return logger


def parse_flight_log(content: str, file_name: str = 'unknown',
                     config: Optional[ParserConfig] = None) -> ParseResult:
    """
    Parse a flight log and extract flight data.

    Args:
        content: Decoded file content
        file_name: Original file name
        config: Optional parser configuration

    Returns:
        ParseResult with the FlightSummary, validation and metadata on success,
        or the error message and metadata on failure
    """
    return FlightLogParser(config).parse(content, file_name)


def get_supported_formats() -> Dict[str, Dict[str, Any]]:
    """Describe the export families the parsers understand."""
    return {
        'dji': {
            'name': 'DJI',
            'extensions': ['.csv'],
            'description': 'Export your flight logs via Airdata.com or PhantomHelp Flight Reader',
            'models': ['Mavic', 'Mini', 'Air', 'Phantom', 'Inspire', 'Matrice'],
            'instructions': [
                'Go to Airdata.com and sync your flights',
                'Select a flight and click "Download CSV"',
                'Upload the downloaded CSV file here',
            ],
        },
        'autel': {
            'name': 'Autel',
            'extensions': ['.json', '.csv'],
            'description': 'Export flight logs from the Autel Sky app',
            'models': ['EVO Lite', 'EVO II', 'EVO Nano', 'EVO Max'],
            'instructions': [
                'Open the Autel Sky app',
                'Go to Flight Records',
                'Export the flight as JSON or CSV',
            ],
        },
        'skydio': {
            'name': 'Skydio',
            'extensions': ['.csv', '.json'],
            'description': 'Export flight logs from the Skydio app or cloud',
            'models': ['Skydio 2', 'Skydio 2+', 'Skydio X2'],
            'instructions': [
                'Open the Skydio app or cloud.skydio.com',
                'Go to Flight History',
                'Download flight data as CSV',
            ],
        },
        'generic': {
            'name': 'Generic GPS',
            'extensions': ['.csv', '.json'],
            'description': 'Any CSV or JSON file with latitude and longitude data',
            'requirements': ['latitude/lat column', 'longitude/lng/lon column'],
        },
    }
