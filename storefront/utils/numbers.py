import math
from typing import Optional

# Largest value an INTEGER column holds on every supported backend
MAX_INTEGER = 2**31 - 1


def to_int(value) -> Optional[int]:
    """Integer value of ``value``, or None. Integer-like strings and floats count."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def to_float(value) -> Optional[float]:
    """Finite float value of ``value``, or None."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def in_integer_range(value: Optional[int], minimum: int = 1) -> bool:
    return value is not None and minimum <= value <= MAX_INTEGER
