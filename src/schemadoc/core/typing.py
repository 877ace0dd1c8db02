"""
Lightweight typing aliases used across the schema model and helpers.

Provides JSON aliases and the `UNDEFINED` sentinel that distinguishes "no value
given" from an explicit JSON ``null`` (``None``). This module contains no runtime
logic and is zero-IO.

Notes:
    - `UNDEFINED` is pydantic-core's own sentinel, re-exported so callers do not
      need to reach into pydantic internals.
    - Keep the surface small and stable to avoid churn in dependents.

Examples:
    >>> from schemadoc.core.typing import UNDEFINED, JsonDict
    >>> UNDEFINED is UNDEFINED
    True
    >>> def payload() -> JsonDict:
    ...     return {"type": "string"}
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticUndefined

__all__ = [
    "JsonDict",
    "JsonScalar",
    "JsonValue",
    "UNDEFINED",
]

# Convenient JSON-like mapping alias. Kept intentionally broad for serde boundaries.
JsonDict = dict[str, Any]
JsonScalar = str | int | float | bool | None
JsonValue = JsonScalar | list[Any] | dict[str, Any]

# Marker for "argument not supplied" (the JS `undefined` of a literal example).
UNDEFINED: Any = PydanticUndefined
