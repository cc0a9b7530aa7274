"""
Field resolution across vendor-specific column names.

A logical field (latitude, altitude, battery, ...) is looked up through an
ordered alias list. Each alias is tried as an exact key, then
case-insensitively, then as a dotted path into nested objects.
"""

from typing import Dict, Any, Optional, Sequence, Tuple

_MISSING = object()


def _lookup_key(record: Dict[str, Any], name: str) -> Tuple[Optional[str], Any]:
    if name in record:
        return name, record[name]

    lower_name = name.lower()
    for key, value in record.items():
        if isinstance(key, str) and key.lower() == lower_name:
            return key, value

    return None, _MISSING


def _lookup_path(record: Dict[str, Any], path: str) -> Any:
    current = record
    for part in path.split('.'):
        if not isinstance(current, dict):
            return _MISSING
        _, current = _lookup_key(current, part)
        if current is _MISSING:
            return _MISSING
    return current


def find_field_key(record: Dict[str, Any], aliases: Sequence[str]) -> Optional[str]:
    """
    Return the record key matched by the first alias that is present.

    Only flat keys are considered; dotted aliases that resolve through nested
    objects return the alias itself.

    Args:
        record: Raw record
        aliases: Ordered candidate field names

    Returns:
        Matched key or None
    """
    for name in aliases:
        key, _ = _lookup_key(record, name)
        if key is not None:
            return key
        if '.' in name and _lookup_path(record, name) is not _MISSING:
            return name
    return None


def find_field(record: Dict[str, Any], aliases: Sequence[str], default: Any = None) -> Any:
    """
    Find a field value using multiple possible field names.

    Args:
        record: Raw record
        aliases: Ordered candidate field names
        default: Value returned when no alias matches

    Returns:
        The first matching value, or ``default``
    """
    for name in aliases:
        _, value = _lookup_key(record, name)
        if value is not _MISSING:
            return value
        if '.' in name:
            value = _lookup_path(record, name)
            if value is not _MISSING:
                return value
    return default


def find_column(headers: Sequence[str], candidates: Sequence[str]) -> Optional[str]:
    """
    Find a header by bare-substring matching.

    Each candidate is tried in order against every lowercased header; a
    header matches when it equals the candidate or contains it.

    Args:
        headers: Column names as they appear in the file
        candidates: Lowercase candidate substrings in priority order

    Returns:
        The original header name or None
    """
    for name in candidates:
        for header in headers:
            lower = header.lower()
            if lower == name or name in lower:
                return header
    return None
