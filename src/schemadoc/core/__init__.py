"""
Core package aggregator for schemadoc contracts (vocabulary, model, serde, errors).

## Contracts (single source of truth)
- Keywords — sentinel types, combinators, private markers, keyword tables.
- Model — pydantic Schema / ChannelParameter / ServerVariable.
- Serde — compact JSON rendering for prose.
- Constants/Errors/Typing — reserved prefixes, exception types, JSON aliases.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Model attributes are lower_snake; JSON keys keep their JSON-Schema spelling.
- Private renderer markers are declared model fields, not free-form extensions.

## Downstream usage
- schemadoc.helpers — reads Schema nodes and builds new ones via Schema.model_validate.
- schemadoc.config — sources defaults from constants.

## Examples
```python
from schemadoc.core.model import Schema
from schemadoc.core.keywords import SchemaCustomTypes
node = Schema.from_json({"type": "string", "x-foo": 1})
node.extensions()  # {'x-foo': 1}
SchemaCustomTypes.ANY == "ANY"  # True
```
"""
