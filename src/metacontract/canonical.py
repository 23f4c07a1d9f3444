"""Compact JSON serialization for record content (deterministic)."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import TypeAlias

from pydantic import BaseModel
from pydantic.types import JsonValue

# Read-only JSON type: covariant Mapping/Sequence so list[str], dict[str,str]
# etc. work without cast.
JSONReadOnly: TypeAlias = (
    Mapping[str, "JSONReadOnly"]
    | Sequence["JSONReadOnly"]
    | str
    | int
    | float
    | bool
    | None
)

CompactJSONInput = BaseModel | Sequence[BaseModel] | JSONReadOnly


def _to_json_value(obj: CompactJSONInput) -> JsonValue:
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Mapping):
        return {str(key): _to_json_value(value) for key, value in obj.items()}
    if isinstance(obj, Sequence):
        return [_to_json_value(item) for item in obj]
    raise TypeError(f"Unsupported type for compact JSON: {type(obj).__name__}")


def compact_json(obj: CompactJSONInput) -> str:
    """Serialize to compact JSON text. Field order is preserved, keys are not sorted.

    Models serialize in declaration order, so the output is stable for a given
    input. Non-ASCII text is emitted as-is. Raises on NaN/Infinity.

    Args:
        obj: Model, list of models, or JSON-like structure to serialize.

    Returns:
        Compact JSON text.

    Raises:
        TypeError: On unsupported type.
    """
    return json.dumps(
        _to_json_value(obj),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
