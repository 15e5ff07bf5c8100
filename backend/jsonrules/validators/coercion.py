"""Numeric coercion and canonical value rendering.

Pure helpers shared by the kind checkers and the enum comparison. Nothing
here raises for document values: coercion failure is a plain ``None``.
"""

import math
from decimal import Decimal
from numbers import Real
from typing import Any, Optional

# Integral floats below this magnitude render without exponent or fraction
_PLAIN_INTEGRAL_LIMIT = 1e21


def to_number(value: Any) -> Optional[float]:
    """Coerce a decoded JSON value to a float for range comparisons.

    Accepts ints, floats, Decimals (``json.loads(parse_float=Decimal)``) and
    any other ``numbers.Real``. Booleans are rejected even though ``bool`` is
    an ``int`` subclass.

    Returns:
        The float value, or None when the value is not numeric.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (Real, Decimal)):
        try:
            return float(value)
        except (OverflowError, ValueError):
            return None
    return None


def is_integral(number: float) -> bool:
    """True when the number has no fractional part."""
    return math.isfinite(number) and number.is_integer()


def format_number(number: Any) -> str:
    """Render a number in its shortest form: ``18.0`` → ``18``, ``0.01`` → ``0.01``."""
    if isinstance(number, Decimal):
        number = float(number)
    # Large ints render like the float they compare as
    if isinstance(number, int) and not isinstance(number, bool) and abs(number) >= _PLAIN_INTEGRAL_LIMIT:
        try:
            number = float(number)
        except OverflowError:
            return str(number)
    if isinstance(number, float):
        if is_integral(number) and abs(number) < _PLAIN_INTEGRAL_LIMIT:
            return str(int(number))
        return repr(number)
    return str(number)


def format_value(value: Any) -> str:
    """Canonical textual form of a JSON-like value.

    Scalars render as their JSON spelling (strings unquoted), lists as
    ``[a b c]`` and mappings as ``{k:v ...}`` with sorted keys.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (Real, Decimal)):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(format_value(item) for item in value) + "]"
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda kv: str(kv[0]))
        return "{" + " ".join(f"{k}:{format_value(v)}" for k, v in items) + "}"
    return str(value)


def describe_kind(value: Any) -> str:
    """JSON kind name of a decoded value (``object``, ``array``, ...)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (Real, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def values_equal(value: Any, allowed: Any, strict: bool = False) -> bool:
    """Compare a document value with one enum member.

    By default both sides are compared by their canonical textual form, so
    ``1`` matches ``"1"``. With ``strict`` the JSON kinds must agree too.
    """
    if strict and describe_kind(value) != describe_kind(allowed):
        return False
    return format_value(value) == format_value(allowed)
