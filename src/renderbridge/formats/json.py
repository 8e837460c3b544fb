"""JSON format adapter."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from renderbridge.serializer import Serializer

if TYPE_CHECKING:
    from renderbridge.serializer import KindLike

_plain = Serializer()


def to_json(value: Any, kind: KindLike, *, indent: int | None = None) -> str:
    """Serialize a record, or list of records, to a JSON string.

    Args:
        value: Record, list of records, or None
        kind: Record kind of ``value``
        indent: JSON indentation level (default None for compact)

    Returns:
        JSON string representation

    """
    return json.dumps(_plain.serialize(value, kind), indent=indent)


def from_json(
    s: str,
    kind: KindLike,
    mode: str | None = None,
    *,
    serializer: Serializer | None = None,
) -> Any:
    """Deserialize a JSON string produced by :func:`to_json`.

    Args:
        s: JSON string to deserialize
        kind: Record kind encoded in ``s``
        mode: Parse mode when ``kind`` is an expression
        serializer: Serializer holding the expression parser, required
            whenever the records contain expressions

    Raises:
        json.JSONDecodeError: If string is not valid JSON
        UnsupportedKindError: If ``kind`` is not a known record kind

    """
    return (serializer or _plain).deserialize(json.loads(s), kind, mode)
