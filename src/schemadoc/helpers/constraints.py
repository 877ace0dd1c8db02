"""
Human-readable descriptions of validation keywords.

Groups are evaluated independently and emitted in a fixed order, at most one
phrase each: numeric range, multiple-of, string length, item count, property
count.

Examples
--------
>>> from schemadoc.core.model import Schema
>>> from schemadoc.helpers.constraints import humanize_constraints
>>> humanize_constraints(Schema.from_json({"minimum": 2, "exclusiveMaximum": 5}))
['[ 2 .. 5 )']
>>> humanize_constraints(Schema.from_json({"maxItems": 2, "uniqueItems": True}))
['<= 2 unique items']
"""

from __future__ import annotations

import re
from typing import Any

from schemadoc.core.model import Schema

from .values import format_number

__all__ = ["humanize_constraints"]

# Multiples such as 0.1, 0.01, 0.001 read better as a decimal precision.
_DECIMAL_STEP_RE = re.compile(r"^0\.0*1$")


def _bound(inclusive: Any, exclusive: Any) -> tuple[Any, bool]:
    # Draft-04 spells exclusivity as a boolean flag on the inclusive bound.
    if isinstance(exclusive, bool):
        return inclusive, exclusive and inclusive is not None
    if exclusive is not None:
        return exclusive, True
    return inclusive, False


def _humanize_number_range(schema: Schema) -> str | None:
    low, low_exclusive = _bound(schema.minimum, schema.exclusive_minimum)
    high, high_exclusive = _bound(schema.maximum, schema.exclusive_maximum)

    if low is not None and high is not None:
        left = "(" if low_exclusive else "["
        right = ")" if high_exclusive else "]"
        return f"{left} {format_number(low)} .. {format_number(high)} {right}"
    if low is not None:
        return f"{'>' if low_exclusive else '>='} {format_number(low)}"
    if high is not None:
        return f"{'<' if high_exclusive else '<='} {format_number(high)}"
    return None


def _humanize_multiple_of(multiple_of: Any) -> str | None:
    if multiple_of is None:
        return None
    text = format_number(multiple_of)
    if _DECIMAL_STEP_RE.match(text):
        return f"decimal places <= {len(text.split('.')[1])}"
    return f"multiple of {text}"


def _humanize_count(unit: str, low: int | None, high: int | None) -> str | None:
    if low is not None and high is not None:
        if low == high:
            return f"{low} {unit}"
        return f"[ {low} .. {high} ] {unit}"
    if high is not None:
        return f"<= {high} {unit}"
    if low is not None:
        if low == 1:
            return "non-empty"
        return f">= {low} {unit}"
    return None


def humanize_constraints(schema: Any) -> list[str]:
    """
    Describe a schema's validation keywords in prose.

    Args:
        schema (Any): Schema node; anything else yields no constraints.

    Returns:
        list[str]: Phrases in the order range, multiple-of, length, items,
        properties. Empty when nothing is humanizable.

    Examples:
        >>> from schemadoc.core.model import Schema
        >>> humanize_constraints(Schema.from_json({"minLength": 1}))
        ['non-empty']
        >>> humanize_constraints(Schema.from_json({"multipleOf": 0.0001}))
        ['decimal places <= 4']
    """
    if not isinstance(schema, Schema):
        return []

    items_unit = "unique items" if schema.unique_items else "items"
    phrases = (
        _humanize_number_range(schema),
        _humanize_multiple_of(schema.multiple_of),
        _humanize_count("characters", schema.min_length, schema.max_length),
        _humanize_count(items_unit, schema.min_items, schema.max_items),
        _humanize_count("properties", schema.min_properties, schema.max_properties),
    )
    return [phrase for phrase in phrases if phrase]
