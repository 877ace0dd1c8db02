"""
Auxiliary metadata read from an existing schema node.

Provides the user-facing ``x-`` extensions of a node, the reverse view of the
legacy array-form ``dependencies`` keyword, and the labels a renderer prints
above each branch of a combinator.

Notes:
    - Results are "no result" (``None``) rather than empty containers when the
      node carries nothing relevant.
    - Extensions under the reserved prefixes (``x-parser-``, ``x-schema-private-``)
      are never user-facing.
"""

from __future__ import annotations

from typing import Any

from schemadoc.config import HelperSettings
from schemadoc.core.model import Schema
from schemadoc.core.typing import JsonDict

__all__ = [
    "get_custom_extensions",
    "get_dependent_required",
    "applicator_schema_name",
]


def get_custom_extensions(schema: Any, settings: HelperSettings | None = None) -> JsonDict | None:
    """
    Return the user-facing ``x-`` extensions of a node in declaration order.

    Args:
        schema (Any): Schema node.
        settings (HelperSettings | None): Adds extra hidden prefixes.

    Returns:
        JsonDict | None: Extensions outside the hidden prefixes, or None when
        there are none (or the input is not a Schema).

    Examples:
        >>> from schemadoc.core.model import Schema
        >>> s = Schema.from_json({"type": "string", "x-foo": True, "x-parser-id": 1})
        >>> get_custom_extensions(s)
        {'x-foo': True}
    """
    if not isinstance(schema, Schema):
        return None
    hidden = (settings or HelperSettings()).hidden_prefixes()
    found = {
        key: value
        for key, value in schema.extensions().items()
        if not key.startswith(hidden)
    }
    return found or None


def get_dependent_required(property_name: str, schema: Any) -> list[str] | None:
    """
    List the properties whose presence makes `property_name` required.

    Only the array form of ``dependencies`` is considered; schema-form entries
    are handled by synthesis.get_dependent_schemas.

    Args:
        property_name (str): Property to look up.
        schema (Any): Object schema carrying ``dependencies``.

    Returns:
        list[str] | None: Owners P with property_name in dependencies[P], in
        declaration order without duplicates, or None when there are none.

    Examples:
        >>> from schemadoc.core.model import Schema
        >>> s = Schema.from_json({"dependencies": {"foo": ["bar"], "zor": ["bar", "foo"]}})
        >>> get_dependent_required("bar", s)
        ['foo', 'zor']
        >>> get_dependent_required("zor", s) is None
        True
    """
    if not isinstance(schema, Schema) or not schema.dependencies:
        return None
    owners: list[str] = []
    for owner, dependency in schema.dependencies.items():
        if isinstance(dependency, list) and property_name in dependency and owner not in owners:
            owners.append(owner)
    return owners or None


def applicator_schema_name(
    idx: int, first_case: str, other_cases: str, title: str | None = None
) -> str:
    """
    Label for the idx-th branch of a combinator.

    Examples:
        >>> applicator_schema_name(0, "Adheres to", "Or to", "Cat")
        'Adheres to Cat:'
        >>> applicator_schema_name(1, "Adheres to", "Or to")
        'Or to:'
    """
    suffix = f" {title}:" if title else ":"
    return f"{first_case if idx == 0 else other_cases}{suffix}"
