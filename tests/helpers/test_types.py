import pytest

from schemadoc.core.keywords import SchemaCustomTypes
from schemadoc.core.model import Schema
from schemadoc.helpers.types import (
    inferred_type_names,
    is_any_schema,
    is_expandable,
    to_schema_type,
)


def _type(json) -> str:
    return to_schema_type(Schema.from_json(json))


@pytest.mark.parametrize("value", [None, {}, "string", 42, ["type"]])
def test_non_schema_input_is_unknown(value) -> None:
    assert to_schema_type(value) == SchemaCustomTypes.UNKNOWN


def test_boolean_schemas() -> None:
    assert to_schema_type(True) == "ANY"
    assert to_schema_type(False) == "NEVER"


@pytest.mark.parametrize(
    "json",
    [
        {},
        {"foo": "bar", "x-ext": "someExt"},
        {"description": "only annotations", "title": "T"},
        {"x-schema-private-render-type": False},
    ],
)
def test_schemas_without_constraining_keywords_are_any(json) -> None:
    assert _type(json) == SchemaCustomTypes.ANY


@pytest.mark.parametrize(
    "json",
    [
        {"not": {}},
        {"not": {}, "type": "string"},
        {"not": {"foo": "bar", "x-ext": "someExt"}},
        {"not": True},
        {"not": {}, "oneOf": []},
    ],
)
def test_negated_any_is_never(json) -> None:
    assert _type(json) == SchemaCustomTypes.NEVER


def test_flat_and_union_types() -> None:
    assert _type({"type": "string"}) == "string"
    assert _type({"type": ["string", "boolean", "number"]}) == "string | boolean | number"


def test_union_deduplicates_in_first_seen_order() -> None:
    assert _type({"type": ["null", "string", "null"]}) == "null | string"


@pytest.mark.parametrize(
    "types,expected",
    [
        (["integer", "number"], "number"),
        (["number", "integer"], "number"),
        (["integer", "string", "number"], "string | number"),
        (["integer"], "integer"),
    ],
)
def test_integer_collapses_into_number(types, expected) -> None:
    assert _type({"type": types}) == expected


def test_undecidable_schema_is_empty_string() -> None:
    json = {"pattern": "^foo", "properties": {}, "items": {"multipleOf": 2}}
    assert _type(json) == ""


def test_arrays() -> None:
    assert _type({"type": "array"}) == "array<ANY>"
    assert _type({"type": "array", "items": {"type": ["string", "number"]}}) == (
        "array<string | number>"
    )
    assert _type({"type": "array", "items": {"type": "array", "items": {"type": "integer"}}}) == (
        "array<array<integer>>"
    )


def test_array_of_undecidable_items_is_unknown() -> None:
    assert _type({"type": "array", "items": {"minLength": 2}}) == "array<UNKNOWN>"


def test_array_inside_union_renders_items() -> None:
    assert _type({"type": ["array", "null"], "items": {"type": "string"}}) == (
        "array<string> | null"
    )


_TUPLE = [{"type": "object"}, {"type": "string"}, {}]


def test_tuple_without_additional_items() -> None:
    assert _type({"type": "array", "items": _TUPLE}) == (
        "tuple<object, string, ANY, ...optional<ANY>>"
    )


def test_tuple_with_additional_items_schema() -> None:
    json = {"type": "array", "items": _TUPLE, "additionalItems": {"type": "string"}}
    assert _type(json) == "tuple<object, string, ANY, ...optional<string>>"


def test_tuple_with_additional_items_true() -> None:
    json = {"type": "array", "items": _TUPLE, "additionalItems": True}
    assert _type(json) == "tuple<object, string, ANY, ...optional<ANY>>"


def test_tuple_with_additional_items_false() -> None:
    json = {"type": "array", "items": _TUPLE, "additionalItems": False}
    assert _type(json) == "tuple<object, string, ANY>"


def test_tuple_with_boolean_members() -> None:
    json = {"type": "array", "items": [True, False], "additionalItems": False}
    assert _type(json) == "tuple<ANY, NEVER>"


def test_combinator_suffix() -> None:
    assert _type({"type": "string", "oneOf": []}) == "string oneOf"
    assert _type({"oneOf": []}) == "oneOf"
    assert _type({"anyOf": [{"type": "string"}]}) == "anyOf"
    assert _type({"type": "object", "allOf": [{}]}) == "object allOf"


def test_combinator_priority() -> None:
    assert _type({"allOf": [], "oneOf": []}) == "oneOf"


def test_const_renders_as_string() -> None:
    assert _type({"const": "foobar"}) == "string"
    assert _type({"const": 5}) == "string"
    assert _type({"const": None}) == "string"


def test_type_wins_over_const_and_enum() -> None:
    assert _type({"type": "integer", "const": 5}) == "integer"
    assert _type({"type": "string", "enum": [1, 2]}) == "string"


def test_enum_types_in_first_occurrence_order() -> None:
    assert _type({"enum": [1.5, "foobar", True]}) == "number | string | boolean"
    assert _type({"enum": ["a", "b", None, "c", 1]}) == "string | null | number"
    assert _type({"enum": [2, 3]}) == "number"


def test_empty_enum_is_undecidable() -> None:
    assert _type({"enum": []}) == ""


def test_empty_type_list_ignores_const_and_enum() -> None:
    assert _type({"type": []}) == ""
    assert _type({"type": [], "const": "a"}) == ""
    assert _type({"type": [], "enum": [1, "a"]}) == ""
    assert _type({"type": [], "enum": [1], "oneOf": []}) == "oneOf"
    assert inferred_type_names(Schema.from_json({"type": [], "minLength": 1})) == []


def test_non_schema_container_entries_render_unknown() -> None:
    json = {"type": "array", "items": ["yes", 0], "additionalItems": False}
    assert _type(json) == "tuple<UNKNOWN, UNKNOWN>"
    assert _type({"type": "array", "items": [1, True]}) == "tuple<UNKNOWN, ANY, ...optional<ANY>>"


def test_deterministic_and_reentrant() -> None:
    schema = Schema.from_json(
        {
            "type": ["array", "integer", "number"],
            "items": [{"enum": ["a", 1]}, {"type": "array"}],
            "additionalItems": {"oneOf": []},
            "anyOf": [],
        }
    )
    first = to_schema_type(schema)
    assert first == (
        "tuple<string | number, array<ANY>, ...optional<oneOf>> | number anyOf"
    )
    assert all(to_schema_type(schema) == first for _ in range(5))


def test_is_any_schema() -> None:
    assert is_any_schema(True)
    assert is_any_schema(Schema.from_json({"x-foo": 1}))
    assert not is_any_schema(False)
    assert not is_any_schema(None)
    assert not is_any_schema(Schema.from_json({"minimum": 0}))


def test_inferred_type_names_from_keywords() -> None:
    schema = Schema.from_json({"properties": {}, "minLength": 1})
    assert inferred_type_names(schema) == ["string", "object"]


@pytest.mark.parametrize(
    "json,expected",
    [
        ({"type": "object"}, True),
        ({"type": ["string", "array"]}, True),
        ({"properties": {"a": {}}}, True),
        ({"oneOf": [{"type": "string"}]}, True),
        ({"not": {"type": "string"}}, True),
        ({"type": "string", "x-foo": 1}, True),
        ({"type": "string"}, False),
        ({"type": "string", "x-parser-schema-id": "<anonymous>"}, False),
        ({"const": "a"}, False),
    ],
)
def test_is_expandable(json, expected) -> None:
    assert is_expandable(Schema.from_json(json)) is expected


def test_is_expandable_rejects_non_schema() -> None:
    assert is_expandable(True) is False
    assert is_expandable(None) is False
