import math
from typing import Any, Union

from ..core.exceptions import MissingInputError

Number = Union[int, float]


def require_text(value: Any, field_name: str) -> str:
    if not value:
        raise MissingInputError(field_name)
    return str(value)


def coerce_number(value: Any, default: Number) -> Number:
    """
    Read a loosely typed numeric input.

    Missing, blank and non-numeric values fall back to ``default``;
    booleans are not numbers here.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(str(value).strip())
    except ValueError:
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return int(number) if number.is_integer() else number


def clamp(value: Number, minimum: Number, maximum: Number) -> Number:
    return max(minimum, min(maximum, value))
