"""
Canonical type signatures for schema nodes.

Computes the string shown as a schema's type in generated documentation,
e.g. ``string``, ``number | null``, ``array<string>``,
``tuple<object, string, ...optional<ANY>>`` or ``string oneOf``.

Resolution
----------
1) Non-schema input renders UNKNOWN; ``True`` and keyword-free objects render
   ANY; ``False`` renders NEVER.
2) ``{"not": <any>}`` renders NEVER regardless of sibling keywords.
3) ``type`` wins over ``const``, which wins over ``enum``. Unions keep first-seen
   order and drop ``integer`` when ``number`` is present.
4) Nothing decidable renders the empty string (a valid, displayable result);
   so does an explicitly empty ``type`` list, without consulting const/enum.
5) A combinator keyword appends its name: ``"<base> oneOf"`` or ``"oneOf"``.

The result depends only on the node, never on settings or call history.

Examples
--------
>>> from schemadoc.core.model import Schema
>>> from schemadoc.helpers.types import to_schema_type
>>> to_schema_type(Schema.from_json({"type": ["integer", "number"]}))
'number'
>>> to_schema_type(Schema.from_json({"not": {}, "type": "string"}))
'NEVER'
>>> to_schema_type(Schema.from_json({"enum": [1.5, "foobar", True]}))
'number | string | boolean'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from schemadoc.core.keywords import (
    CONSTRAINING_KEYWORDS,
    KEYWORD_IMPLIED_TYPES,
    Combinator,
    SchemaCustomTypes,
)
from schemadoc.core.model import Schema

from .introspect import get_custom_extensions

logger = logging.getLogger(__name__)

__all__ = [
    "to_schema_type",
    "is_any_schema",
    "combinator_of",
    "json_type_name",
    "inferred_type_names",
    "is_expandable",
]

_UNION_SEPARATOR = " | "

_EXPANDING_KEYWORDS: tuple[str, ...] = (
    *(c.value for c in Combinator),
    "not",
    "if",
    "then",
    "else",
)


def _dedupe_preserving_order(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def json_type_name(value: Any) -> str:
    """
    Primitive JSON type name of a Python value.

    Examples:
        >>> [json_type_name(v) for v in (True, 2, 1.5, "a", None, [], {})]
        ['boolean', 'number', 'number', 'string', 'null', 'array', 'object']
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    return "object"


def is_any_schema(node: Any) -> bool:
    """
    Check whether a node accepts any value.

    Args:
        node (Any): Schema node.

    Returns:
        bool: True for ``True`` and for objects carrying no constraining keyword
        (annotations, extensions and private markers do not constrain).
    """
    if node is True:
        return True
    if isinstance(node, Schema):
        return not any(node.has(keyword) for keyword in CONSTRAINING_KEYWORDS)
    return False


def combinator_of(schema: Schema) -> Combinator | None:
    """First combinator keyword present on the node (oneOf, anyOf, allOf)."""
    for combinator in Combinator:
        if schema.has(combinator.value):
            return combinator
    return None


def _declared_types(schema: Schema) -> list[str] | None:
    declared = schema.type
    if isinstance(declared, str):
        return [declared]
    if declared is None:
        return None
    names = _dedupe_preserving_order(declared)
    if "integer" in names and "number" in names:
        names.remove("integer")
    return names


def _const_type(value: Any) -> str:
    # Constants render as literal text, so scalars are shown as strings.
    name = json_type_name(value)
    return name if name in ("array", "object") else "string"


def _element_type(node: Any) -> str:
    return to_schema_type(node) or SchemaCustomTypes.UNKNOWN.value


def _tuple_type(items: list[Schema | bool | Any], schema: Schema) -> str:
    parts = [_element_type(item) for item in items] or [SchemaCustomTypes.UNKNOWN.value]
    additional = schema.additional_items
    if additional is not False:
        if isinstance(additional, Schema):
            tail = _element_type(additional)
        else:
            tail = SchemaCustomTypes.ANY.value
        parts.append(f"...optional<{tail}>")
    return f"tuple<{', '.join(parts)}>"


def _array_type(schema: Schema) -> str:
    items = schema.items
    if items is None:
        return f"array<{SchemaCustomTypes.ANY.value}>"
    if isinstance(items, list):
        return _tuple_type(items, schema)
    return f"array<{_element_type(items)}>"


def _render_type(name: str, schema: Schema) -> str:
    if name == "array":
        return _array_type(schema)
    return name


def _base_type(schema: Schema) -> str:
    names = _declared_types(schema)
    if names is not None:
        return _UNION_SEPARATOR.join(_render_type(name, schema) for name in names)
    if schema.has("const"):
        return _const_type(schema.const)
    if schema.enum:
        return _UNION_SEPARATOR.join(
            _dedupe_preserving_order(json_type_name(v) for v in schema.enum)
        )
    return ""


def to_schema_type(schema: Any) -> str:
    """
    Compute the canonical type signature of a schema node.

    Args:
        schema (Any): Schema, bool, or anything else.

    Returns:
        str: A sentinel (ANY / NEVER / UNKNOWN), a type expression, or "" when no
        concrete type can be inferred.

    Examples:
        >>> from schemadoc.core.model import Schema
        >>> to_schema_type(Schema.from_json({"type": "array"}))
        'array<ANY>'
        >>> to_schema_type(Schema.from_json({"type": "string", "oneOf": []}))
        'string oneOf'
        >>> to_schema_type(None)
        'UNKNOWN'
    """
    if isinstance(schema, bool):
        return (SchemaCustomTypes.ANY if schema else SchemaCustomTypes.NEVER).value
    if not isinstance(schema, Schema):
        logger.debug("cannot infer a type for %s", type(schema).__name__)
        return SchemaCustomTypes.UNKNOWN.value
    if is_any_schema(schema):
        return SchemaCustomTypes.ANY.value
    # TODO: render negation of a constraining schema (e.g. "not string").
    if schema.has("not") and is_any_schema(schema.not_):
        return SchemaCustomTypes.NEVER.value

    base = _base_type(schema)
    combinator = combinator_of(schema)
    if combinator is None:
        return base
    if base:
        return f"{base} {combinator.value}"
    return combinator.value


def inferred_type_names(schema: Schema) -> list[str]:
    """
    Primitive type names a schema may describe, without rendering.

    Uses ``type`` when declared, otherwise the type of ``const`` / ``enum`` members,
    otherwise the types implied by type-specific keywords (e.g. ``properties``).
    """
    names = _declared_types(schema)
    if names is not None:
        return names
    if schema.has("const"):
        return [json_type_name(schema.const)]
    if schema.enum:
        return _dedupe_preserving_order(json_type_name(v) for v in schema.enum)
    return _dedupe_preserving_order(
        implied for keyword, implied in KEYWORD_IMPLIED_TYPES.items() if schema.has(keyword)
    )


def is_expandable(schema: Any) -> bool:
    """
    Check whether a renderer should offer to expand the node into sub-rows.

    Returns:
        bool: True for objects and arrays, for nodes using combinators,
        negation or conditionals, and for nodes with visible custom extensions.
    """
    if not isinstance(schema, Schema):
        return False
    names = inferred_type_names(schema)
    if "object" in names or "array" in names:
        return True
    if any(schema.has(keyword) for keyword in _EXPANDING_KEYWORDS):
        return True
    return bool(get_custom_extensions(schema))
