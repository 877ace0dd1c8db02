"""
schemadoc.helpers — type signatures, constraint prose and synthesized schemas.

## Responsibilities
- types: canonical type-signature strings (to_schema_type) and expandability.
- constraints: human-readable validation keyword phrases.
- values: literal values formatted for prose.
- synthesis: schemas built from examples, channel parameters, server variables
  and schema-form dependencies.
- introspect: custom extensions, dependent-required owners, combinator labels.

## Notes
- Every helper is a pure function of its inputs: no IO, no shared state, and
  inputs are never mutated.
- Unexpected shapes yield UNKNOWN, "" or None instead of exceptions.
"""

from __future__ import annotations

from .constraints import humanize_constraints
from .introspect import applicator_schema_name, get_custom_extensions, get_dependent_required
from .synthesis import (
    get_dependent_schemas,
    json_to_schema,
    parameters_to_schema,
    server_variables_to_schema,
)
from .types import is_any_schema, is_expandable, to_schema_type
from .values import prettify_value

__all__ = [
    "to_schema_type",
    "is_any_schema",
    "is_expandable",
    "humanize_constraints",
    "prettify_value",
    "json_to_schema",
    "parameters_to_schema",
    "server_variables_to_schema",
    "get_dependent_schemas",
    "get_custom_extensions",
    "get_dependent_required",
    "applicator_schema_name",
]
