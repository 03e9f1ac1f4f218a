from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} debe tener al menos {min_len} caracteres")
    return value


def optional_text(value: Any) -> Optional[str]:
    """Trimmed string or None when blank."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def finite_number(value: Any) -> Optional[float]:
    """Coerce to a finite float; None for anything else.

    Booleans are rejected even though they are ints in Python.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def as_float(value: Any, default: float = 0.0) -> float:
    number = finite_number(value)
    return default if number is None else number


def strip_all_whitespace(value: Any) -> str:
    return "".join(str(value or "").split())


def round_half_up(value: float, digits: int = 0) -> float:
    """Commercial rounding (2.5 -> 3); the built-in round() goes to even."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
