"""
Timestamp resolution for heterogeneous log time encodings.

Every value resolves to a timezone-aware UTC datetime or None. Failures never
raise; an unparseable timestamp only affects its own point.
"""

import logging
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pandas as pd

logger = logging.getLogger(__name__)

_EPOCH_SECONDS = re.compile(r'^\d{10}$')
_EPOCH_MILLIS = re.compile(r'^\d{13}$')
_HAS_YEAR = re.compile(r'\d{4}')

MIN_EPOCH_SECONDS = 1e9
MAX_EPOCH_SECONDS = 1e10
MIN_EPOCH_MILLIS = 1e12
MAX_OFFSET_MILLIS = 1e8


def _ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _from_epoch(value: float, unit: str) -> Optional[datetime]:
    try:
        return pd.to_datetime(value, unit=unit, utc=True).to_pydatetime()
    except (ValueError, OverflowError):
        return None


def _parse_string(text: str) -> Optional[datetime]:
    parsed = pd.to_datetime(text, utc=True, errors='coerce')
    if parsed is pd.NaT or pd.isna(parsed):
        return None
    return parsed.to_pydatetime()


def parse_timestamp(value: Any, base: Optional[datetime] = None) -> Optional[datetime]:
    """
    Parse a timestamp from various formats.

    Args:
        value: datetime, epoch seconds/milliseconds, millisecond offset or
            date string
        base: First timestamp seen in the current log, used for relative
            millisecond offsets

    Returns:
        UTC datetime or None
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        if pd.isna(value):
            return None
        if isinstance(value, pd.Timestamp):
            value = value.to_pydatetime()
        return _ensure_utc(value)

    if isinstance(value, (int, float)):
        if math.isnan(value) or math.isinf(value):
            return None
        if MIN_EPOCH_SECONDS < value < MAX_EPOCH_SECONDS:
            return _from_epoch(value, 's')
        if value > MIN_EPOCH_MILLIS:
            return _from_epoch(value, 'ms')
        if base is not None and 0 <= value < MAX_OFFSET_MILLIS:
            return base + timedelta(milliseconds=value)
        return None

    text = str(value).strip()
    if not text:
        return None

    if 'T' in text or '-' in text:
        parsed = _parse_string(text)
        if parsed is not None:
            return parsed

    if _EPOCH_SECONDS.match(text):
        return _from_epoch(int(text), 's')
    if _EPOCH_MILLIS.match(text):
        return _from_epoch(int(text), 'ms')

    if _HAS_YEAR.search(text):
        return _parse_string(text)

    logger.debug(f"Unparseable timestamp: {text!r}")
    return None
