"""
schemadoc — render JSON-Schema-like definitions into documentation text.

## Public API
- Schema, ChannelParameter, ServerVariable — pydantic object model (schemadoc.core.model).
- SchemaCustomTypes — ANY / NEVER / UNKNOWN sentinels.
- HelperSettings — optional knobs for the helpers (schemadoc.config).
- Helpers (schemadoc.helpers): to_schema_type, humanize_constraints, prettify_value,
  json_to_schema, parameters_to_schema, server_variables_to_schema,
  get_dependent_schemas, get_custom_extensions, get_dependent_required,
  is_expandable, applicator_schema_name.

## Import DAG discipline
- core depends on stdlib + pydantic only.
- config depends on core; helpers depend on core and config.

## Examples
```python
from schemadoc import Schema, to_schema_type, humanize_constraints
s = Schema.from_json({"type": "array", "items": {"type": ["string", "null"]}, "maxItems": 3})
to_schema_type(s)         # 'array<string | null>'
humanize_constraints(s)   # ['<= 3 items']
```
"""

from __future__ import annotations

from .config import HelperSettings
from .core.keywords import SchemaCustomTypes
from .core.model import ChannelParameter, Schema, ServerVariable
from .helpers import (
    applicator_schema_name,
    get_custom_extensions,
    get_dependent_required,
    get_dependent_schemas,
    humanize_constraints,
    is_expandable,
    json_to_schema,
    parameters_to_schema,
    prettify_value,
    server_variables_to_schema,
    to_schema_type,
)

__all__ = [
    "Schema",
    "ChannelParameter",
    "ServerVariable",
    "SchemaCustomTypes",
    "HelperSettings",
    "to_schema_type",
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
