"""
CSV tokenizer for flight log exports.

Turns CSV text into an ordered list of header -> value records. Quoted fields
may contain the delimiter and doubled quotes are unescaped.
"""

import csv
import logging
import re
from io import StringIO
from typing import Dict, Any, List

import pandas as pd

from .error_handling import MalformedInputError

logger = logging.getLogger(__name__)

_NUMERIC_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')


def coerce_value(raw: Any) -> Any:
    """
    Trim a cell and convert it to float when it looks numeric.

    Args:
        raw: Cell value as read from the file

    Returns:
        float for numeric-looking text, otherwise the trimmed string
    """
    if raw is None or (not isinstance(raw, str) and pd.isna(raw)):
        return ''
    value = str(raw).strip()
    if value and _NUMERIC_PATTERN.match(value):
        return float(value)
    return value


def parse_csv(text: str, delimiter: str = ',') -> List[Dict[str, Any]]:
    """
    Parse CSV text into records keyed by header name.

    Blank lines are skipped, extra cells past the header width are ignored
    and missing trailing cells become empty strings.

    Args:
        text: Raw CSV content
        delimiter: Field delimiter

    Returns:
        List of records in file order

    Raises:
        MalformedInputError: If there is no header plus at least one data line
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise MalformedInputError("CSV must have at least a header row and one data row")

    width = len(next(csv.reader([lines[0]], delimiter=delimiter)))

    try:
        df = pd.read_csv(
            StringIO('\n'.join(lines)),
            sep=delimiter,
            index_col=False,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine='python',
            # Cells past the header width are ignored, the row is kept
            usecols=list(range(width)),
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise MalformedInputError(f"Could not read CSV content: {e}") from e

    df.columns = [str(column).strip() for column in df.columns]

    records = []
    for row in df.to_dict(orient='records'):
        record = {header: coerce_value(value) for header, value in row.items()}
        if all(value == '' for value in record.values()):
            continue
        records.append(record)

    logger.debug(f"Tokenized {len(records)} CSV records with {len(df.columns)} columns")
    return records
