import schemadoc
from schemadoc import Schema, humanize_constraints, to_schema_type


def test_public_api_exports_exist() -> None:
    for name in schemadoc.__all__:
        assert hasattr(schemadoc, name), name


def test_end_to_end_rendering() -> None:
    schema = Schema.from_json(
        {"type": "array", "items": {"type": ["string", "null"]}, "maxItems": 3}
    )
    assert to_schema_type(schema) == "array<string | null>"
    assert humanize_constraints(schema) == ["<= 3 items"]


def test_inputs_are_not_mutated() -> None:
    json = {
        "type": "object",
        "dependencies": {"a": ["b"], "c": {"type": "string"}},
        "x-foo": [1],
    }
    schema = Schema.from_json(json)
    before = schema.to_json()
    to_schema_type(schema)
    humanize_constraints(schema)
    schemadoc.get_dependent_schemas(schema)
    schemadoc.get_dependent_required("b", schema)
    schemadoc.get_custom_extensions(schema)
    schemadoc.is_expandable(schema)
    assert schema.to_json() == before
