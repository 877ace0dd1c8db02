"""
Compact JSON serialization for values interpolated into documentation prose.

`json_dumps_compact` keeps key insertion order and uses compact separators, so
``{"str": "foobar"}`` renders as ``{"str":"foobar"}``.

Notes:
    - No side effects; stdlib-only.
    - Non-ASCII text is kept as-is (ensure_ascii=False).
"""

from __future__ import annotations

import json

from .typing import JsonValue

__all__ = ["json_dumps_compact"]


def json_dumps_compact(obj: JsonValue) -> str:
    """
    Serialize a JSON value compactly, preserving key insertion order.

    Args:
        obj (JsonValue): JSON-serializable value.

    Returns:
        str: JSON string with separators=(",", ":") and ensure_ascii=False.

    Examples:
        >>> json_dumps_compact({"str": "foobar", "n": 1})
        '{"str":"foobar","n":1}'
    """
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
