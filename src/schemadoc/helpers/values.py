"""
Literal values rendered for interpolation into documentation prose.

Numbers follow JavaScript's text form (``2.0`` renders as ``2``, ``1e-05`` as
``0.00001``) so that generated docs read the same regardless of whether a value
was parsed as an int or a float.
"""

from __future__ import annotations

import math
from decimal import Decimal

from schemadoc.core.serde import json_dumps_compact
from schemadoc.core.typing import JsonScalar, JsonValue

__all__ = [
    "format_number",
    "stringify",
    "prettify_value",
]


def format_number(value: int | float) -> str:
    """
    Format a number the way JavaScript's ``String(n)`` does for common values.

    Examples:
        >>> format_number(2.0), format_number(1.5), format_number(0.00001)
        ('2', '1.5', '0.00001')
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def stringify(value: JsonValue) -> str:
    """
    Convert a scalar to its literal text: strings as is, booleans lower-case,
    ``None`` as ``null``, numbers via format_number.
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return _array_text(value)
    return json_dumps_compact(value)


def _array_text(values: list[JsonValue] | tuple[JsonValue, ...]) -> str:
    return "[" + ",".join(stringify(item) for item in values) + "]"


def prettify_value(value: JsonValue, strict: bool = True) -> JsonScalar:
    """
    Render a literal value for interpolation into descriptive text.

    Args:
        value (JsonValue): JSON-representable value.
        strict (bool): Quote strings when True.

    Returns:
        JsonScalar: Quoted string; numbers and booleans unchanged; arrays as
        ``[a,b,c]`` with unquoted members; anything else as compact JSON.

    Examples:
        >>> prettify_value("foobar")
        '"foobar"'
        >>> prettify_value(["foobar", 2137, False])
        '[foobar,2137,false]'
        >>> prettify_value({"str": "foobar"})
        '{"str":"foobar"}'
    """
    if isinstance(value, str):
        return f'"{value}"' if strict else value
    if isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, (list, tuple)):
        return _array_text(value)
    return json_dumps_compact(value)
