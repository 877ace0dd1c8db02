"""
Schema nodes synthesized from values that are not schemas.

Builds the trees a documentation renderer walks when it shows a literal example,
the parameters of a channel, the variables of a server URL, or the schema-form
entries of the legacy ``dependencies`` keyword.

Responsibilities
- Mark synthesized nodes with the private renderer hints (PrivateMarker):
  raw values are shown as text, wrapper objects hide their own type row.
- Return fresh trees: nothing in a result is shared with the input or with the
  result of another call.

Notes
- Example values are rendered as ``string`` constants; the literal text follows
  JavaScript conventions (``true``, ``2137``).
- Cyclic example values are not supported.

Examples
--------
>>> from schemadoc.helpers.synthesis import json_to_schema
>>> json_to_schema(["bar", 2137]).to_json()["items"][1]["const"]
'2137'
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from schemadoc.config import HelperSettings
from schemadoc.core.keywords import PrivateMarker
from schemadoc.core.model import ChannelParameter, Schema, ServerVariable
from schemadoc.core.typing import UNDEFINED, JsonDict, JsonValue

from .values import stringify

__all__ = [
    "json_to_schema",
    "parameters_to_schema",
    "server_variables_to_schema",
    "get_dependent_schemas",
]

_RENDER_TYPE = PrivateMarker.RENDER_TYPE.value
_RENDER_ADDITIONAL_INFO = PrivateMarker.RENDER_ADDITIONAL_INFO.value
_RAW_VALUE = PrivateMarker.RAW_VALUE.value
_PARAMETER_LOCATION = PrivateMarker.PARAMETER_LOCATION.value


def _raw_value(text: str) -> JsonDict:
    return {
        "type": "string",
        "const": text,
        _RAW_VALUE: True,
        _RENDER_TYPE: False,
    }


def _wrapper(json: JsonDict) -> JsonDict:
    json[_RENDER_ADDITIONAL_INFO] = False
    json[_RENDER_TYPE] = False
    return json


def _node_json(node: Schema | bool | None) -> JsonDict:
    if isinstance(node, Schema):
        return copy.deepcopy(node.to_json())
    if node is False:
        return {"not": {}}
    return {}


def _json_field(value: JsonValue, settings: HelperSettings) -> JsonDict:
    if value is UNDEFINED:
        return _raw_value(settings.undefined_literal)
    if value is None:
        return _raw_value(settings.null_literal)
    if isinstance(value, Mapping):
        properties = {str(key): _json_field(item, settings) for key, item in value.items()}
        return _wrapper({"type": "object", "properties": properties})
    if isinstance(value, (list, tuple)):
        items = [_json_field(item, settings) for item in value]
        return _wrapper({"type": "array", "items": items})
    return _raw_value(stringify(value))


def json_to_schema(
    value: JsonValue = UNDEFINED, settings: HelperSettings | None = None
) -> Schema:
    """
    Build a schema that displays a literal example value.

    Args:
        value (JsonValue): JSON value; omit it (UNDEFINED) for "no example".
        settings (HelperSettings | None): Supplies the null/undefined literals.

    Returns:
        Schema: Raw-value string schemas for scalars; tuple-form arrays and
        objects with one property per key, recursively.

    Examples:
        >>> json_to_schema(None).const
        'NULL'
        >>> json_to_schema().const
        ''
        >>> json_to_schema(True).to_json()
        {'type': 'string', 'const': 'true', 'x-schema-private-render-type': False, 'x-schema-private-raw-value': True}
    """
    return Schema.model_validate(_json_field(value, settings or HelperSettings()))


def parameters_to_schema(
    parameters: Mapping[str, ChannelParameter | Mapping[str, Any]] | None,
) -> Schema | None:
    """
    Build an object schema with one required property per channel parameter.

    Args:
        parameters: Parameter name → ChannelParameter (or its JSON form).

    Returns:
        Schema | None: Object schema whose properties are the parameter schemas,
        augmented with the description and the parameter-location marker when
        present; None when there are no parameters.
    """
    if not parameters:
        return None
    properties: JsonDict = {}
    for name, parameter in parameters.items():
        if not isinstance(parameter, ChannelParameter):
            parameter = ChannelParameter.model_validate(parameter)
        entry = _node_json(parameter.schema_)
        if parameter.description is not None:
            entry["description"] = parameter.description
        if parameter.location is not None:
            entry[_PARAMETER_LOCATION] = parameter.location
        properties[name] = entry
    return Schema.model_validate(
        _wrapper({"type": "object", "properties": properties, "required": list(properties)})
    )


def server_variables_to_schema(
    variables: Mapping[str, ServerVariable | Mapping[str, Any]] | None,
) -> Schema | None:
    """
    Build an object schema describing the variables of a server URL template.

    Every variable becomes a required ``string`` property carrying its enum,
    default, description and examples.
    """
    if not variables:
        return None
    properties: JsonDict = {}
    for name, variable in variables.items():
        if not isinstance(variable, ServerVariable):
            variable = ServerVariable.model_validate(variable)
        entry = copy.deepcopy(variable.to_json())
        entry["type"] = "string"
        properties[name] = entry
    return Schema.model_validate(
        _wrapper({"type": "object", "properties": properties, "required": list(properties)})
    )


def get_dependent_schemas(schema: Any) -> Schema | None:
    """
    Collect the schema-form entries of ``dependencies`` into one object schema.

    Args:
        schema (Any): Object schema carrying ``dependencies``.

    Returns:
        Schema | None: Object schema with one property per schema-form entry
        (array-form entries are skipped), or None when there are none.
    """
    if not isinstance(schema, Schema) or not schema.dependencies:
        return None
    records: JsonDict = {}
    for name, dependency in schema.dependencies.items():
        if isinstance(dependency, Schema):
            records[name] = copy.deepcopy(dependency.to_json())
        elif isinstance(dependency, bool):
            records[name] = dependency
    if not records:
        return None
    return Schema.model_validate(_wrapper({"type": "object", "properties": records}))
