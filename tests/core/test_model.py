import pytest
from pydantic import ValidationError

from schemadoc.core.errors import SchemaModelError
from schemadoc.core.model import ChannelParameter, Schema, ServerVariable


def test_from_json_keeps_booleans() -> None:
    assert Schema.from_json(True) is True
    assert Schema.from_json(False) is False


@pytest.mark.parametrize("value", [None, 1, "string", ["type"]])
def test_from_json_rejects_non_schema_values(value) -> None:
    with pytest.raises(SchemaModelError):
        Schema.from_json(value)


def test_from_json_wraps_validation_errors() -> None:
    with pytest.raises(SchemaModelError) as info:
        Schema.from_json({"minLength": "many"})
    assert isinstance(info.value.__cause__, ValidationError)
    assert isinstance(info.value, ValueError)


def test_polymorphic_items() -> None:
    single = Schema.from_json({"items": {"type": "string"}})
    tuple_form = Schema.from_json({"items": [{"type": "string"}, True]})
    assert isinstance(single.items, Schema)
    assert isinstance(tuple_form.items, list)
    assert tuple_form.items[1] is True


def test_additional_items_variants() -> None:
    assert Schema.from_json({"additionalItems": False}).additional_items is False
    assert Schema.from_json({"additionalItems": True}).additional_items is True
    assert isinstance(Schema.from_json({"additionalItems": {}}).additional_items, Schema)
    assert Schema.from_json({}).additional_items is None


@pytest.mark.parametrize(
    "json",
    [
        {"not": "yes"},
        {"not": 1},
        {"additionalItems": 0},
        {"items": "yes"},
        {"additionalProperties": "false"},
        {"if": 1, "then": {}},
    ],
)
def test_boolean_schemas_are_strict(json) -> None:
    with pytest.raises(SchemaModelError):
        Schema.from_json(json)


def test_container_entries_are_not_coerced_to_booleans() -> None:
    schema = Schema.from_json({"items": ["yes", 0, 1, True], "oneOf": [0, {}]})
    assert schema.items == ["yes", 0, 1, True]
    assert schema.items[3] is True
    assert schema.one_of[0] == 0 and schema.one_of[0] is not False
    assert isinstance(schema.one_of[1], Schema)


def test_non_schema_property_entries_are_kept_as_data() -> None:
    json = {
        "properties": {
            "type": "object",
            "properties": {"name": {"type": "string"}},
            "required": ["name"],
        }
    }
    schema = Schema.from_json(json)
    assert schema.properties["type"] == "object"
    assert schema.properties["required"] == ["name"]
    assert isinstance(schema.properties["properties"], Schema)
    assert schema.to_json() == json


def test_opaque_entries_do_not_share_state_with_input() -> None:
    json = {"properties": {"tags": ["a"]}}
    schema = Schema.from_json(json)
    schema.properties["tags"].append("b")
    assert json["properties"]["tags"] == ["a"]


def test_invalid_nested_schema_still_fails() -> None:
    with pytest.raises(SchemaModelError):
        Schema.from_json({"properties": {"a": {"minLength": "many"}}})


def test_dependencies_variants() -> None:
    schema = Schema.from_json({"dependencies": {"a": ["b"], "c": {"required": ["d"]}}})
    assert schema.dependencies["a"] == ["b"]
    assert isinstance(schema.dependencies["c"], Schema)


def test_aliases_and_reserved_words() -> None:
    schema = Schema.from_json(
        {"not": {}, "if": {}, "else": {}, "$ref": "#/a", "minLength": 1, "oneOf": []}
    )
    assert isinstance(schema.not_, Schema)
    assert isinstance(schema.if_, Schema)
    assert isinstance(schema.else_, Schema)
    assert schema.ref == "#/a"
    assert schema.min_length == 1
    assert schema.one_of == []


def test_to_json_only_present_keys() -> None:
    json = {
        "type": "object",
        "properties": {"a": {"type": "array", "items": [{"const": None}]}},
        "x-foo": {"nested": [1]},
    }
    assert Schema.from_json(json).to_json() == json


def test_has_tracks_explicit_null() -> None:
    schema = Schema.from_json({"const": None, "x-empty": None})
    assert schema.has("const")
    assert schema.has("x-empty")
    assert not schema.has("enum")
    assert not schema.has("x-missing")


def test_get_by_json_keyword() -> None:
    schema = Schema.from_json({"minLength": 3, "x-foo": "bar"})
    assert schema.get("minLength") == 3
    assert schema.get("x-foo") == "bar"
    assert schema.get("maxLength", 7) == 7


def test_keywords_lists_declared_then_extra() -> None:
    schema = Schema.from_json({"foo": 1, "type": "string", "x-a": 2})
    assert schema.keywords() == ["type", "foo", "x-a"]


def test_extensions_include_private_markers() -> None:
    schema = Schema.from_json(
        {"x-foo": 1, "bar": 2, "x-schema-private-raw-value": True, "x-parser-id": "a"}
    )
    assert schema.raw_value is True
    assert schema.extensions() == {
        "x-schema-private-raw-value": True,
        "x-foo": 1,
        "x-parser-id": "a",
    }


def test_models_are_frozen() -> None:
    schema = Schema.from_json({"type": "string"})
    with pytest.raises(ValidationError):
        schema.type = "number"


def test_channel_parameter_aliases() -> None:
    parameter = ChannelParameter.model_validate(
        {"schema": {"type": "string"}, "location": "$message.header#/id"}
    )
    assert isinstance(parameter.schema_, Schema)
    assert parameter.location == "$message.header#/id"
    assert parameter.description is None


def test_server_variable_to_json() -> None:
    variable = ServerVariable(default="8883", **{"x-note": "tls"})
    assert variable.to_json() == {"default": "8883", "x-note": "tls"}
