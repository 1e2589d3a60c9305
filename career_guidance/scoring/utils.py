"""Numeric helpers shared by the scoring and wellness modules."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Union

Number = Union[int, float, Decimal]


def to_decimal(value: Number, places: int = 4) -> Decimal:
    """Convert a number to Decimal with explicit precision and ROUND_HALF_UP rounding.

    Args:
        value: Numeric value to convert.
        places: Number of decimal places to quantize to.

    Returns:
        Decimal with the specified precision.
    """
    if isinstance(value, Decimal):
        return value.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places,
        rounding=ROUND_HALF_UP,
    )


def clamp(value: float, min_val: float = 0.0, max_val: float = 100.0) -> float:
    """Clamp a value to [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def percentage(part: float, whole: float) -> float:
    """``part / whole × 100`` with zero-division protection.

    Returns 0.0 when ``whole`` is 0 (e.g. no responses).
    """
    if whole == 0:
        return 0.0
    return part / whole * 100


def mean(values: Iterable[Number]) -> Optional[float]:
    """Arithmetic mean, or None for an empty iterable."""
    items = list(values)
    if not items:
        return None
    return sum(items) / len(items)
