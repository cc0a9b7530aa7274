"""
Unit normalization for altitude, distance and speed.

Output units are always feet and mph. The unit of an input column is chosen
from explicit header hints first, then the vendor's native unit, then a
value-magnitude heuristic. Every choice is returned as a UnitDecision so the
reason stays inspectable.
"""

import logging
from typing import Any, Iterable, Optional

import numpy as np

from ..models import UnitDecision

logger = logging.getLogger(__name__)

FEET_PER_METER = 3.28084
MPH_PER_MPS = 2.23694
MPH_PER_KPH = 0.621371

FEET = 'feet'
METERS = 'meters'
MPH = 'mph'
MPS = 'm/s'
KPH = 'km/h'

FEET_HINTS = ('(feet)', '(ft)', '_ft')
METER_HINTS = ('(meters)', '(meter)', '(m)', '_meters')
MPH_HINTS = ('(mph)', 'mi/h')
MPS_HINTS = ('(m/s)', 'm/s', 'mps')
KPH_HINTS = ('(km/h)', 'km/h', 'kph')


def meters_to_feet(meters: float) -> float:
    return meters * FEET_PER_METER


def mps_to_mph(mps: float) -> float:
    return mps * MPH_PER_MPS


def kph_to_mph(kph: float) -> float:
    return kph * MPH_PER_KPH


def to_float(value: Any) -> float:
    """
    Convert a raw record value to float, returning NaN when not numeric.

    Args:
        value: Raw value from a record

    Returns:
        Parsed float or NaN
    """
    if value is None or isinstance(value, bool):
        return np.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return np.nan


def _has_hint(headers: Iterable[str], hints: Iterable[str]) -> bool:
    lowered = [header.lower() for header in headers]
    return any(hint in header for header in lowered for hint in hints)


def detect_altitude_unit(headers: Iterable[str], sample_value: Any = None,
                         vendor_default: Optional[str] = None,
                         use_magnitude: bool = True,
                         threshold: float = 200.0) -> UnitDecision:
    """
    Decide whether altitude-like columns are in feet or meters.

    Args:
        headers: Column names to inspect for unit hints
        sample_value: A representative altitude value (usually the first row)
        vendor_default: Native unit of the vendor export, if known
        use_magnitude: Whether to fall back to the value-magnitude heuristic
        threshold: Values below this are assumed to be meters

    Returns:
        UnitDecision with unit 'feet' or 'meters'
    """
    headers = list(headers)
    if _has_hint(headers, FEET_HINTS):
        return UnitDecision(FEET, 'header')
    if _has_hint(headers, METER_HINTS):
        return UnitDecision(METERS, 'header')
    if vendor_default is not None:
        return UnitDecision(vendor_default, 'vendor')

    if use_magnitude:
        value = to_float(sample_value)
        if not np.isnan(value):
            # Ambiguous for low imperial or high metric logs; the reason is
            # surfaced on the summary instead of being resolved here.
            unit = METERS if value < threshold else FEET
            logger.debug(f"Altitude unit inferred from magnitude {value}: {unit}")
            return UnitDecision(unit, 'magnitude')

    return UnitDecision(FEET, 'default')


def detect_speed_unit(headers: Iterable[str],
                      vendor_default: Optional[str] = None) -> UnitDecision:
    """
    Decide which unit speed columns are in.

    Args:
        headers: Column names to inspect for unit hints
        vendor_default: Native unit of the vendor export, if known

    Returns:
        UnitDecision with unit 'mph', 'm/s' or 'km/h'
    """
    headers = list(headers)
    if _has_hint(headers, MPH_HINTS):
        return UnitDecision(MPH, 'header')
    if _has_hint(headers, MPS_HINTS):
        return UnitDecision(MPS, 'header')
    if _has_hint(headers, KPH_HINTS):
        return UnitDecision(KPH, 'header')
    if vendor_default is not None:
        return UnitDecision(vendor_default, 'vendor')
    return UnitDecision(MPH, 'default')


def to_feet(value: float, unit: str) -> float:
    """Convert a length in ``unit`` to feet."""
    if unit == METERS:
        return meters_to_feet(value)
    return value


def to_mph(value: float, unit: str) -> float:
    """Convert a speed in ``unit`` to mph."""
    if unit == MPS:
        return mps_to_mph(value)
    if unit == KPH:
        return kph_to_mph(value)
    return value
