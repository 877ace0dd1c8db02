"""
Exception types raised at the construction boundaries of schemadoc.

The helpers in `schemadoc.helpers` are total and never raise for unexpected
shapes (they return sentinels, empty strings or ``None``). Exceptions are
reserved for building models and loading settings:

- SchemaModelError when a value cannot be turned into a schema node.
- ConfigError when an explicitly requested settings file is missing or invalid.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Pydantic validation failures inside `Schema.from_json` are re-raised as
      SchemaModelError with the original error chained.

Examples:
    >>> from schemadoc.core.errors import SchemaModelError
    >>> try:
    ...     raise SchemaModelError("schema must be a JSON object or boolean")
    ... except ValueError as e:
    ...     msg = str(e)
    >>> "JSON object" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "SchemaDocError",
    "SchemaModelError",
    "ConfigError",
]


class SchemaDocError(Exception):
    """Base class for schemadoc errors."""


class SchemaModelError(SchemaDocError, ValueError):
    """A value could not be interpreted as a schema node."""


class ConfigError(SchemaDocError):
    """
    Raised when helper settings cannot be loaded.

    Examples:
        - An explicit TOML path that does not exist
        - A TOML file that fails to parse
    """
