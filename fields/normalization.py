"""
Best-effort coercion of loosely typed spreadsheet cells.

Supplier workbooks mix native numbers, numeric strings with thousands
separators and units ("1,234.56 USD"), percentages on either a 0-1 or a 0-100
scale, and free text. Every helper here returns None instead of raising when a
value cannot be interpreted; callers exclude such rows from the affected metric.
"""

from __future__ import annotations

import math
import re
from typing import Any, Iterable, Optional, Union

from domain.summary import Row

Number = Union[int, float]

_NUMBER_RE = re.compile(r"-?\d+(\.\d+)?")

# Values above this are read as 0-100 percentages; exactly 1 still means 100%.
PERCENT_SCALE_THRESHOLD = 1.00001


def is_number(value: Any) -> bool:
    """True for native int/float cells (booleans and NaN excluded)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and not math.isnan(value)


def coerce_number(value: Any) -> Optional[Number]:
    """Convert a native number or a numeric-looking string. Return None if not possible."""
    if value is None:
        return None
    if is_number(value):
        return value
    if isinstance(value, str):
        match = _NUMBER_RE.search(value.replace(",", ""))
        if match:
            return float(match.group(0))
    return None


def coerce_percent_fraction(value: Any) -> Optional[float]:
    """
    Convert a percentage cell to a 0-1 fraction.

    "85", 85 and 0.85 all become 0.85. Negative values are rejected.
    """
    num = coerce_number(value)
    if num is None:
        return None
    if num > PERCENT_SCALE_THRESHOLD:
        return num / 100.0
    if num < 0:
        return None
    return num


def normalize_text(value: Any) -> str:
    """Trim and lower-case a cell for case-insensitive matching ('' for empty cells)."""
    if not value:
        return ""
    return str(value).strip().lower()


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (0.5 -> 1, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def first_present(row: Row, aliases: Iterable[str]) -> Any:
    """Value of the first alias that exists as a column in the row, even if the cell is empty."""
    for key in aliases:
        if key in row:
            return row[key]
    return None


def first_truthy(row: Row, aliases: Iterable[str], default: Any = None) -> Any:
    """Value of the first alias whose cell is non-empty; `default` if none is."""
    for key in aliases:
        value = row.get(key)
        if value:
            return value
    return default
