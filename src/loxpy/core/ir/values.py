"""
Runtime values.

Lox values map onto plain Python objects:

    Number  -> float, always rounded to IEEE-754 single precision
    String  -> str
    Boolean -> bool
    Nil     -> None
"""

from __future__ import annotations

import math
import struct
from decimal import Decimal

Value = float | str | bool | None

# Enough significant digits to round-trip any 32-bit float.
_MAX_F32_DIGITS = 9


def to_f32(value: float) -> float:
    """Round a Python float to the nearest 32-bit float."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def is_number(value: Value) -> bool:
    return isinstance(value, float)


def type_name(value: Value) -> str:
    """Name of a value's runtime type."""
    if value is None:
        return "Nil"
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, str):
        return "String"
    return "Number"


def format_number(value: float) -> str:
    """
    Render a 32-bit float as the shortest decimal that reads back the same.

    Integral values drop the fractional part and no exponent notation is used:
    7.0 -> "7", 0.1 -> "0.1", 1e20 -> "100000000000000000000".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = repr(value)
    for digits in range(1, _MAX_F32_DIGITS + 1):
        candidate = f"{value:.{digits}g}"
        if to_f32(float(candidate)) == value:
            text = candidate
            break

    return format(Decimal(text), "f")


def format_value(value: Value) -> str:
    """Render a runtime value for output."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return format_number(value)
