"""Normalization helpers.

Strict parsing for dataset values.  Unlike display-side formatting these
never coerce bad input to zero or ``None``: a value that cannot be parsed
raises :class:`ValueError` so loading fails fast.
"""

from __future__ import annotations

import math
import numbers
from typing import Any


def parse_number(value: Any) -> float:
    """Parse a finite number from a numeric value or numeric string."""
    if isinstance(value, bool):
        raise ValueError(f"expected a number, got {value!r}")
    if isinstance(value, numbers.Real):
        result = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("expected a number, got an empty value")
        try:
            result = float(text)
        except ValueError:
            raise ValueError(f"expected a number, got {value!r}") from None
    else:
        raise ValueError(f"expected a number, got {type(value).__name__}")
    if not math.isfinite(result):
        raise ValueError(f"expected a finite number, got {value!r}")
    return result


def parse_year(value: Any) -> int:
    """Parse a whole-number year (``1990``, ``"1990"`` and ``"1990.0"`` all work)."""
    result = parse_number(value)
    if not result.is_integer():
        raise ValueError(f"year must be a whole number, got {value!r}")
    return int(result)


def parse_name(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a region name, got {type(value).__name__}")
    name = value.strip()
    if not name:
        raise ValueError("region name must be non-empty")
    return name
