"""
Pydantic v2 models for schema nodes, channel parameters and server variables.

A schema node is either a `Schema` (a JSON object) or a Python ``bool``
(``True`` accepts anything, ``False`` accepts nothing). Every polymorphic
keyword is declared as an explicit union, so consumers match over a closed set
of shapes instead of probing raw JSON. Booleans are strict: ``"yes"``, ``1`` or
``0`` never become boolean schemas.

Inside keyword containers (``properties``, ``items``, ``oneOf``, ...) an entry
that is neither an object nor a boolean is kept as opaque data instead of
failing the whole tree; helpers render such entries as UNKNOWN.

Responsibilities
- Define `Schema` with snake_case attributes and JSON (camelCase / ``$`` /
  reserved word) aliases; keep unknown keys and ``x-`` extensions verbatim.
- Expose the renderer's private markers as declared fields, not as free-form
  extensions.
- Convert between the JSON form and the model (`Schema.from_json`, `to_json`).

Style
- Zero-IO (stdlib + pydantic only).
- Models are frozen; helpers build new trees instead of editing existing ones.

References
- keywords: src/schemadoc/core/keywords.py (PrivateMarker, keyword tables)
- errors: src/schemadoc/core/errors.py (SchemaModelError)
- tests: tests/core/test_model.py
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .constants import EXTENSION_PREFIX
from .errors import SchemaModelError
from .keywords import PrivateMarker
from .typing import JsonDict

__all__ = [
    "Schema",
    "SchemaNode",
    "ChannelParameter",
    "ServerVariable",
]


class Schema(BaseModel):
    """
    JSON-Schema object node.

    Attributes:
        type (str | list[str] | None): Single type name or ordered union.
        properties (dict[str, Schema | bool | Any] | None): Named property schemas;
            non-schema entries are kept as given.
        items (Schema | bool | list[Schema | bool | Any] | None): Uniform item schema,
            or per-position schemas (tuple form).
        additional_items (Schema | bool | None): Tail policy for tuple form.
        const (Any): Constant value; presence is tracked even when ``None``.
        enum (list[Any] | None): Allowed values.
        not_ (Schema | bool | None): Negated schema (JSON key ``not``).
        one_of, any_of, all_of (list[Schema | bool | Any] | None): Combinators.
        dependencies (dict[str, list[str] | Schema | bool | Any] | None): Legacy
            dependencies; array form lists required names, schema form adds a schema.
        render_type, render_additional_info, raw_value, parameter_location:
            Private renderer markers under ``x-schema-private-``.

    Notes:
        - Keys absent from the input are absent from `to_json()` (exclude_unset).
        - Unknown keys are kept in `model_extra` in declaration order.

    Examples:
        >>> from schemadoc.core.model import Schema
        >>> s = Schema.from_json({"type": "array", "items": [{"type": "string"}, True]})
        >>> isinstance(s.items, list), s.items[1]
        (True, True)
        >>> Schema.from_json({"minLength": 1, "x-foo": 1}).to_json()
        {'minLength': 1, 'x-foo': 1}
    """

    model_config = ConfigDict(extra="allow", frozen=True, alias_generator=to_camel)

    # Core / annotations
    id_: str | None = Field(default=None, alias="$id")
    schema_dialect: str | None = Field(default=None, alias="$schema")
    ref: str | None = Field(default=None, alias="$ref")
    comment: str | None = Field(default=None, alias="$comment")
    title: str | None = None
    description: str | None = None
    default: Any = None
    examples: list[Any] | None = None
    read_only: bool | None = None
    write_only: bool | None = None
    deprecated: bool | None = None

    # Type
    type: str | list[str] | None = None
    const: Any = None
    enum: list[Any] | None = None
    format: str | None = None

    # Numbers
    multiple_of: int | float | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    exclusive_minimum: bool | int | float | None = None
    exclusive_maximum: bool | int | float | None = None

    # Strings
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    content_media_type: str | None = None
    content_encoding: str | None = None

    # Arrays
    items: Schema | StrictBool | list[Schema | StrictBool | Any] | None = None
    additional_items: Schema | StrictBool | None = None
    contains: Schema | StrictBool | None = None
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool | None = None

    # Objects
    properties: dict[str, Schema | StrictBool | Any] | None = None
    pattern_properties: dict[str, Schema | StrictBool | Any] | None = None
    additional_properties: Schema | StrictBool | None = None
    property_names: Schema | StrictBool | None = None
    required: list[str] | None = None
    min_properties: int | None = None
    max_properties: int | None = None
    dependencies: dict[str, list[str] | Schema | StrictBool | Any] | None = None
    definitions: dict[str, Schema | StrictBool | Any] | None = None

    # Composition
    not_: Schema | StrictBool | None = Field(default=None, alias="not")
    one_of: list[Schema | StrictBool | Any] | None = None
    any_of: list[Schema | StrictBool | Any] | None = None
    all_of: list[Schema | StrictBool | Any] | None = None
    if_: Schema | StrictBool | None = Field(default=None, alias="if")
    then: Schema | StrictBool | None = None
    else_: Schema | StrictBool | None = Field(default=None, alias="else")

    # Private renderer markers
    render_type: bool | None = Field(default=None, alias=PrivateMarker.RENDER_TYPE.value)
    render_additional_info: bool | None = Field(
        default=None, alias=PrivateMarker.RENDER_ADDITIONAL_INFO.value
    )
    raw_value: bool | None = Field(default=None, alias=PrivateMarker.RAW_VALUE.value)
    parameter_location: str | None = Field(
        default=None, alias=PrivateMarker.PARAMETER_LOCATION.value
    )

    @field_validator("items", "one_of", "any_of", "all_of", mode="wrap")
    @classmethod
    def _node_list_entries(cls, value: Any, handler: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [cls._node_or_raw(entry) for entry in value]
        return handler(value)

    @field_validator(
        "properties", "pattern_properties", "dependencies", "definitions", mode="wrap"
    )
    @classmethod
    def _node_map_entries(cls, value: Any, handler: Any) -> Any:
        if isinstance(value, Mapping):
            return {str(key): cls._node_or_raw(entry) for key, entry in value.items()}
        return handler(value)

    @classmethod
    def _node_or_raw(cls, entry: Any) -> Any:
        # Entries that are neither objects nor booleans are kept as opaque data.
        if isinstance(entry, (Schema, bool)):
            return entry
        if isinstance(entry, Mapping):
            return cls.model_validate(dict(entry))
        return copy.deepcopy(entry)

    @classmethod
    def from_json(cls, value: Any) -> Schema | bool:
        """
        Build a schema node from its JSON form.

        Args:
            value (Any): JSON object (mapping) or boolean.

        Returns:
            Schema | bool: A validated Schema, or the boolean unchanged.

        Raises:
            SchemaModelError: If value is neither a mapping nor a boolean, or if
                a keyword has the wrong shape.
        """
        if isinstance(value, bool):
            return value
        if not isinstance(value, Mapping):
            raise SchemaModelError(
                f"schema must be a JSON object or boolean, got {type(value).__name__}"
            )
        try:
            return cls.model_validate(dict(value))
        except ValidationError as e:
            raise SchemaModelError(str(e)) from e

    def to_json(self) -> JsonDict:
        """Return the JSON form: aliased keys, only keywords present on input."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    def has(self, keyword: str) -> bool:
        """
        Check whether a JSON keyword was present on input.

        Args:
            keyword (str): JSON spelling (e.g. "minLength", "not", "x-foo").

        Returns:
            bool: True when present, including an explicit ``null`` value.
        """
        name = _FIELD_BY_KEYWORD.get(keyword)
        if name is not None:
            return name in self.model_fields_set
        return keyword in (self.model_extra or {})

    def get(self, keyword: str, default: Any = None) -> Any:
        """Return the value of a JSON keyword, or default when absent."""
        if not self.has(keyword):
            return default
        name = _FIELD_BY_KEYWORD.get(keyword)
        if name is not None:
            return getattr(self, name)
        return (self.model_extra or {})[keyword]

    def keywords(self) -> list[str]:
        """JSON keywords present on this node."""
        declared = [
            field.alias or name
            for name, field in type(self).model_fields.items()
            if name in self.model_fields_set
        ]
        return declared + list(self.model_extra or {})

    def extensions(self) -> JsonDict:
        """
        Return every ``x-`` key on this node, private markers included.

        Notes:
            Private markers come first, followed by the remaining extensions in
            declaration order.
        """
        found: JsonDict = {}
        for marker in PrivateMarker:
            name = _FIELD_BY_KEYWORD[marker.value]
            if name in self.model_fields_set:
                found[marker.value] = getattr(self, name)
        for key, value in (self.model_extra or {}).items():
            if key.startswith(EXTENSION_PREFIX):
                found[key] = value
        return found


_FIELD_BY_KEYWORD: dict[str, str] = {
    (field.alias or name): name for name, field in Schema.model_fields.items()
}

SchemaNode = Schema | bool


class ChannelParameter(BaseModel):
    """
    Named parameter of a channel address.

    Attributes:
        schema_ (Schema | bool | None): Parameter schema (JSON key ``schema``).
        location (str | None): Runtime expression locating the value in a
            message, e.g. ``$message.payload#/user/id``.
        description (str | None): Human-readable description.

    Examples:
        >>> from schemadoc.core.model import ChannelParameter
        >>> p = ChannelParameter(schema={"type": "string"}, location="$message.payload#/id")
        >>> p.schema_.type
        'string'
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    schema_: Schema | StrictBool | None = Field(default=None, alias="schema")
    location: str | None = None
    description: str | None = None


class ServerVariable(BaseModel):
    """
    Variable used in a server URL template.

    Attributes:
        enum (list[str] | None): Allowed substitution values.
        default (str | None): Default substitution value.
        description (str | None): Human-readable description.
        examples (list[str] | None): Example values.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    enum: list[str] | None = None
    default: str | None = None
    description: str | None = None
    examples: list[str] | None = None

    def to_json(self) -> JsonDict:
        """Return the JSON form with only the keys present on input."""
        return self.model_dump(by_alias=True, exclude_unset=True)
