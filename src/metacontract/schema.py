"""Transaction payload schema gate for execute calls."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

from metacontract.errors import (
    MALFORMED_PAYLOAD_MESSAGE,
    NO_CONTENT_MESSAGE,
    SCHEMA_VIOLATION_MESSAGE,
    ContractError,
    ContractErrorCode,
)

# Containers may nest at most this deep; the 128th level is rejected.
MAX_NESTING_DEPTH = 127
_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


@dataclass(frozen=True)
class ContentPayload:
    """Recognized content fields of an execute payload.

    A field is None when absent or not a JSON string.
    """

    image: str | None = None
    text: str | None = None


def _reject_constant(name: str) -> float:
    # NaN/Infinity are not JSON.
    raise ValueError(f"non-standard JSON constant {name!r}")


def _check_strict_json(value: object) -> None:
    """Reject decoded JSON that a strict UTF-8 parser would refuse.

    Raises:
        ValueError: On nesting beyond MAX_NESTING_DEPTH or unpaired surrogates.
    """
    stack: list[tuple[object, int]] = [(value, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, str):
            if _LONE_SURROGATE.search(node):
                raise ValueError("unpaired surrogate in string")
            continue
        if isinstance(node, dict):
            children = [*node.keys(), *node.values()]
        elif isinstance(node, list):
            children = node
        else:
            continue
        if depth + 1 > MAX_NESTING_DEPTH:
            raise ValueError("recursion limit exceeded")
        stack.extend((child, depth + 1) for child in children)


def parse_content_payload(raw: str) -> ContentPayload:
    """Parse raw transaction data and extract the recognized content fields.

    Args:
        raw: Raw payload text as submitted.

    Returns:
        Content fields found in the payload; at least one is not None.

    Raises:
        ContractError: MALFORMED_PAYLOAD when the text is not strict JSON,
            SCHEMA_VIOLATION when it is not an object, NO_CONTENT when neither
            recognized field is a string.
    """
    try:
        value = json.loads(raw, parse_constant=_reject_constant)
        _check_strict_json(value)
    except (ValueError, RecursionError) as exc:
        raise ContractError(
            ContractErrorCode.MALFORMED_PAYLOAD,
            MALFORMED_PAYLOAD_MESSAGE,
            data={"detail": str(exc)},
        ) from exc
    if not isinstance(value, dict):
        raise ContractError(
            ContractErrorCode.SCHEMA_VIOLATION,
            SCHEMA_VIOLATION_MESSAGE,
            data={"type": type(value).__name__},
        )
    image = value.get("image")
    text = value.get("text")
    payload = ContentPayload(
        image=image if isinstance(image, str) else None,
        text=text if isinstance(text, str) else None,
    )
    if payload.image is None and payload.text is None:
        raise ContractError(ContractErrorCode.NO_CONTENT, NO_CONTENT_MESSAGE)
    return payload
