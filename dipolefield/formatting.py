from __future__ import annotations

import math
from typing import Tuple


def to_exponential(value: float, digits: int = 3) -> str:
    """
    Scientific notation in the style of JavaScript's Number.toExponential:
    `digits` fraction digits in the mantissa and an unpadded, signed exponent.

        to_exponential(8e-5, 3)  -> "8.000e-5"
        to_exponential(1.0, 1)   -> "1.0e+0"
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    mantissa, exp = f"{value:.{digits}e}".split("e")
    exp_i = int(exp)
    sign = "+" if exp_i >= 0 else "-"
    return f"{mantissa}e{sign}{abs(exp_i)}"


def format_field(value_T: float, digits: int = 3) -> str:
    return f"{to_exponential(value_T, digits)} Tesla"


def format_tick(value_T: float, digits: int = 1) -> str:
    return to_exponential(value_T, digits)


def format_number(value: float) -> str:
    """Slider label value: whole numbers without a trailing '.0'."""
    v = float(value)
    if v.is_integer():
        return str(int(v))
    return repr(v)


def format_tooltip(distance_cm: float, value_T: float, digits: int = 3) -> Tuple[str, str, str]:
    """
    Returns (label, value, name) for a hovered point, e.g.
    ("Distance: 5 cm", "8.000e-5 Tesla", "Field Strength").
    """
    return (
        f"Distance: {format_number(distance_cm)} cm",
        format_field(value_T, digits),
        "Field Strength",
    )
