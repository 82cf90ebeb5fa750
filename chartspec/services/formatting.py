"""Text tokens for numbers and timestamps.

Values are formatted once, while datasets and labels are built, so the template only ever
pastes finished tokens.
"""
from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any

_SCIENTIFIC_MIN_EXP = -4
_SCIENTIFIC_MAX_EXP = 6


def format_number(value: Any) -> str:
    """Shortest round-trip text for a number in `%g` form: exponent notation below 1e-4 and from 1e6 up."""

    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"

    exact = Decimal(repr(number))
    exponent = exact.adjusted()
    if _SCIENTIFIC_MIN_EXP <= exponent < _SCIENTIFIC_MAX_EXP:
        text = format(exact, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    sign, digits, _ = exact.as_tuple()
    mantissa = "".join(str(d) for d in digits).rstrip("0") or "0"
    body = mantissa[0] + ("." + mantissa[1:] if len(mantissa) > 1 else "")
    exp_sign = "+" if exponent >= 0 else "-"
    return f"{'-' if sign else ''}{body}e{exp_sign}{abs(exponent):02d}"


def format_timestamp(value: Any) -> str:
    """ISO-8601 local time with fractional seconds, trailing zeros trimmed and no zone suffix."""

    if isinstance(value, str):
        return value
    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    nanos = value.microsecond * 1000 + int(getattr(value, "nanosecond", 0) or 0)
    if nanos:
        text += "." + f"{nanos:09d}".rstrip("0")
    return text


def quote_token(text: str) -> str:
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"
