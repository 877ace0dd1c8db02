"""
schemadoc core defaults.

Defines the reserved extension namespaces and the literal text used when an
example value has no printable form. This module is zero-IO and uses only the
Python standard library.

Notes:
    - `schemadoc.config.HelperSettings` sources its defaults from here.
    - Keys under `PARSER_EXTENSION_PREFIX` are written by document parsers; keys
      under `PRIVATE_EXTENSION_PREFIX` are renderer hints written by
      `schemadoc.helpers.synthesis`. Neither is a user-facing extension.
"""

from __future__ import annotations

__all__ = [
    "EXTENSION_PREFIX",
    "PARSER_EXTENSION_PREFIX",
    "PRIVATE_EXTENSION_PREFIX",
    "RESERVED_EXTENSION_PREFIXES",
    "NULL_LITERAL",
    "UNDEFINED_LITERAL",
]

# Specification extensions ("x-foo") are any key with this prefix.
EXTENSION_PREFIX: str = "x-"

PARSER_EXTENSION_PREFIX: str = "x-parser-"
PRIVATE_EXTENSION_PREFIX: str = "x-schema-private-"

RESERVED_EXTENSION_PREFIXES: tuple[str, ...] = (
    PARSER_EXTENSION_PREFIX,
    PRIVATE_EXTENSION_PREFIX,
)

# Literal shown for a JSON null example.
NULL_LITERAL: str = "NULL"

# Literal shown when no example value was supplied at all.
UNDEFINED_LITERAL: str = ""
