"""
Closed vocabularies of the schema helpers.

Defines the sentinel type names, the combinator keywords, the private marker
keys, and the table of keywords that imply a primitive type.
Everything here is zero-IO and stdlib-only.

Responsibilities
- Name the sentinels rendered when no concrete type can be produced.
- List the keywords that make a schema "constraining" (i.e. not equivalent to ANY).
- Name the private renderer markers written by the synthesizer.

Design principles
-----------------
1) Sentinels are StrEnum members: they compare equal to, and format as, their value.
2) Combinators are listed in suffix priority order (oneOf, anyOf, allOf).
3) The keyword tables use JSON spellings (camelCase), matching the wire form.

Examples
--------
>>> from schemadoc.core.keywords import SchemaCustomTypes, Combinator
>>> f"array<{SchemaCustomTypes.ANY}>"
'array<ANY>'
>>> [c.value for c in Combinator]
['oneOf', 'anyOf', 'allOf']
"""

from __future__ import annotations

from enum import Enum, StrEnum
from typing import Final

__all__ = [
    "SchemaCustomTypes",
    "Combinator",
    "PrivateMarker",
    "KEYWORD_IMPLIED_TYPES",
    "CONSTRAINING_KEYWORDS",
]


class SchemaCustomTypes(StrEnum):
    """
    Sentinel type names rendered when inference cannot produce a concrete type.

    Notes:
        - ANY: ``True`` schemas and objects without constraining keywords.
        - NEVER: ``False`` schemas and ``{"not": <any>}``.
        - UNKNOWN: inputs that are not schema nodes at all.
    """

    ANY = "ANY"
    NEVER = "NEVER"
    UNKNOWN = "UNKNOWN"


class Combinator(StrEnum):
    """Combinator keywords, in the order they are checked for the type suffix."""

    ONE_OF = "oneOf"
    ANY_OF = "anyOf"
    ALL_OF = "allOf"


class PrivateMarker(Enum):
    """
    Renderer hints written only by schemadoc.helpers.synthesis.

    Serialized values are the JSON keys on the synthesized schema; the model
    exposes them as declared fields (see schemadoc.core.model.Schema).
    """

    RENDER_TYPE = "x-schema-private-render-type"
    RENDER_ADDITIONAL_INFO = "x-schema-private-render-additional-info"
    RAW_VALUE = "x-schema-private-raw-value"
    PARAMETER_LOCATION = "x-schema-private-parameter-location"


# Keywords that only make sense for one primitive type.
KEYWORD_IMPLIED_TYPES: Final[dict[str, str]] = {
    "maxLength": "string",
    "minLength": "string",
    "pattern": "string",
    "contentMediaType": "string",
    "contentEncoding": "string",
    "multipleOf": "number",
    "maximum": "number",
    "exclusiveMaximum": "number",
    "minimum": "number",
    "exclusiveMinimum": "number",
    "items": "array",
    "maxItems": "array",
    "minItems": "array",
    "uniqueItems": "array",
    "contains": "array",
    "additionalItems": "array",
    "maxProperties": "object",
    "minProperties": "object",
    "required": "object",
    "properties": "object",
    "patternProperties": "object",
    "propertyNames": "object",
    "dependencies": "object",
    "additionalProperties": "object",
}

# A schema carrying none of these is equivalent to ANY.
CONSTRAINING_KEYWORDS: Final[frozenset[str]] = frozenset(
    {"type", "const", "enum", "not", "if", "then", "else"}
    | {c.value for c in Combinator}
    | set(KEYWORD_IMPLIED_TYPES)
)
