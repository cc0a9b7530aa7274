"""
Format and vendor detection for uploaded flight logs.

Classifies content as binary, JSON, CSV or XML and guesses which vendor
produced it from filename and content hints. Detection never raises.
"""

import json
import logging
from typing import Optional, Tuple

from ..config import ParserConfig
from ..models import Confidence, DetectionResult, EncodingType, VendorSource

logger = logging.getLogger(__name__)

# Checked in order; more specific vendors first so generic DJI model words
# like "mini" do not shadow them.
FILENAME_HINTS: Tuple[Tuple[VendorSource, Tuple[str, ...]], ...] = (
    (VendorSource.SKYDIO, ('skydio', 's2_', 'x2_')),
    (VendorSource.AUTEL, ('autel', 'evo_', 'evo-')),
    (VendorSource.DJI, ('dji', 'airdata', 'mavic', 'phantom')),
)

CONTENT_HINTS: Tuple[Tuple[VendorSource, Tuple[str, ...]], ...] = (
    (VendorSource.SKYDIO, ('skydio', 'autonomy_mode', 'tracking_mode',
                           'subject_distance', 'vehicle_latitude')),
    (VendorSource.AUTEL, ('autel', '"dronelatitude"', 'remainpower',
                          'homedistance', 'relativeheight')),
    (VendorSource.DJI, ('dji', 'mavic', 'phantom', 'mini', 'inspire', 'matrice')),
)

# (variant, header substrings that select it)
CSV_VARIANTS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ('airdata', ('datetime(utc)', 'height_above_takeoff')),
    ('dji-native', ('osd.', 'flycstate')),
    ('skydio', ('autonomy_mode', 'vehicle_latitude')),
    ('autel', ('dronelatitude', 'remainpower')),
)

VARIANT_VENDORS = {
    'airdata': VendorSource.DJI,
    'dji-native': VendorSource.DJI,
    'dji-xml': VendorSource.DJI,
    'skydio': VendorSource.SKYDIO,
    'autel': VendorSource.AUTEL,
}


def is_binary_content(content: str, sample_size: int = 1000,
                      threshold: float = 0.1) -> bool:
    """
    Check whether content looks like a binary file decoded as text.

    Args:
        content: Decoded file content
        sample_size: Number of leading characters to inspect
        threshold: Fraction of control characters above which content is binary

    Returns:
        True if the share of control characters (excluding tab, LF and CR)
        in the sample exceeds ``threshold``
    """
    sample = content[:sample_size]
    if not sample:
        return False

    non_printable = sum(1 for char in sample
                        if ord(char) < 32 and char not in '\t\n\r')
    return non_printable / len(sample) > threshold


def detect_csv_variant(header_line: str) -> str:
    """
    Identify the exporter of a CSV file from its header line.

    Args:
        header_line: First line of the CSV file

    Returns:
        Variant name such as 'airdata', 'dji-native' or 'generic-gps'
    """
    lower = header_line.lower()
    for variant, indicators in CSV_VARIANTS:
        if any(indicator in lower for indicator in indicators):
            return variant

    if 'lat' in lower and ('lon' in lower or 'lng' in lower):
        return 'generic-gps'

    return 'unknown'


def detect_source_from_filename(file_name: str) -> VendorSource:
    """Guess the vendor from filename tokens."""
    lower_name = (file_name or '').lower()
    for vendor, hints in FILENAME_HINTS:
        if any(hint in lower_name for hint in hints):
            return vendor
    return VendorSource.UNKNOWN


def detect_source_from_content(content: str) -> VendorSource:
    """Guess the vendor from keywords anywhere in the content."""
    lower = content.lower()
    for vendor, hints in CONTENT_HINTS:
        if any(hint in lower for hint in hints):
            return vendor
    return VendorSource.UNKNOWN


def _classify_encoding(trimmed: str, config: ParserConfig) -> Tuple[EncodingType, str]:
    if is_binary_content(trimmed, config.binary_sample_size, config.binary_control_ratio):
        return EncodingType.BINARY, 'dji-native-binary'

    if trimmed.startswith('{') or trimmed.startswith('['):
        try:
            json.loads(trimmed)
            return EncodingType.JSON, 'unknown'
        except ValueError:
            return EncodingType.INVALID_JSON, 'unknown'

    if ',' in trimmed:
        header_line = trimmed.split('\n', 1)[0]
        return EncodingType.CSV, detect_csv_variant(header_line)

    if trimmed.startswith('<'):
        return EncodingType.XML, 'dji-xml'

    return EncodingType.UNKNOWN, 'unknown'


def detect_source_and_format(content: str, file_name: str = 'unknown',
                             config: Optional[ParserConfig] = None) -> DetectionResult:
    """
    Detect encoding, exporter variant, vendor and detection confidence.

    Args:
        content: Decoded file content
        file_name: Original file name; used as a hint only
        config: Optional parser configuration for binary thresholds

    Returns:
        DetectionResult
    """
    config = config or ParserConfig()
    content = content or ''
    trimmed = content.strip()

    encoding_type, variant = _classify_encoding(trimmed, config)

    filename_source = detect_source_from_filename(file_name)
    content_source = VendorSource.UNKNOWN
    if encoding_type != EncodingType.BINARY:
        content_source = detect_source_from_content(trimmed)
        if content_source == VendorSource.UNKNOWN:
            content_source = VARIANT_VENDORS.get(variant, VendorSource.UNKNOWN)

    if filename_source != VendorSource.UNKNOWN:
        source = filename_source
    else:
        source = content_source

    if filename_source != VendorSource.UNKNOWN and filename_source == content_source:
        confidence = Confidence.HIGH
    elif filename_source != VendorSource.UNKNOWN or content_source != VendorSource.UNKNOWN:
        confidence = Confidence.MEDIUM
    else:
        confidence = Confidence.LOW

    result = DetectionResult(encoding_type=encoding_type, vendor_source=source,
                             format_variant=variant, confidence=confidence)
    logger.debug(f"Detected {result} for {file_name}")
    return result
