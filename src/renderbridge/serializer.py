"""Type-tagged dispatcher between render records and plain wire values."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

import renderbridge.expressions  # noqa: F401  registers the expression codec
from renderbridge.codecs import RecordCodec
from renderbridge.errors import UnsupportedKindError
from renderbridge.kinds import RecordKind
from renderbridge.records import Record

if TYPE_CHECKING:
    from renderbridge.expressions import ExpressionParser

logger = logging.getLogger(__name__)

KindLike: TypeAlias = RecordKind | str | type[Record]


def _check_exhaustive() -> None:
    """Fail at import if any record kind lacks a record class or a codec."""
    checks = ((Record.registry, "record class"), (RecordCodec.registry, "codec"))
    for registry, what in checks:
        missing = [kind.value for kind in RecordKind if kind not in registry]
        if missing:
            msg = f"Record kinds without a {what}: {missing}"
            raise RuntimeError(msg)


_check_exhaustive()


def resolve_kind(kind: Any) -> RecordKind:
    """Normalize a kind given as enum member, tag string or record class.

    Raises:
        UnsupportedKindError: If ``kind`` is not one of the known record kinds

    """
    if isinstance(kind, type) and issubclass(kind, Record) and kind is not Record:
        return kind.kind
    if isinstance(kind, RecordKind):
        return kind
    if isinstance(kind, str):
        try:
            return RecordKind(kind)
        except ValueError:
            raise UnsupportedKindError(kind) from None
    raise UnsupportedKindError(kind)


class Serializer:
    """Converts records to plain values and back.

    Absent values, lists and maps are handled here; a single record is
    handed to the codec registered for its kind. The expression parser is
    only needed to deserialize expressions, so a serializer on the sending
    side can be built without one.
    """

    def __init__(self, parser: ExpressionParser | None = None) -> None:
        self.parser = parser
        self._codecs: dict[RecordKind, RecordCodec] = {
            kind: codec_cls(self)
            for kind, codec_cls in RecordCodec.registry.items()
        }

    def codec(self, kind: KindLike) -> RecordCodec:
        """Return the codec for ``kind``."""
        return self._codecs[resolve_kind(kind)]

    def serialize(self, value: Any, kind: KindLike) -> Any:
        """Serialize a record, or a list of records, of the given kind.

        Args:
            value: Record, list/tuple of records, or None
            kind: Record kind of ``value`` (or of its elements)

        Returns:
            Wire dict, list of wire dicts, or None

        Raises:
            UnsupportedKindError: If ``kind`` is not a known record kind

        """
        if value is None:
            return None
        codec = self.codec(kind)
        if isinstance(value, list | tuple):
            return [self.serialize(item, codec.kind) for item in value]
        logger.debug("Serializing %s", codec.kind)
        return codec.serialize(value)

    def deserialize(
        self,
        value: Any,
        kind: KindLike,
        mode: str | None = None,
    ) -> Any:
        """Deserialize a wire value of the given kind.

        Args:
            value: Wire dict, list of wire dicts, or None
            kind: Record kind of ``value`` (or of its elements)
            mode: Parse mode for expressions, ignored for other kinds

        Returns:
            Record, list of records, or None

        Raises:
            UnsupportedKindError: If ``kind`` is not a known record kind
            NoDeserializerForModeError: If an expression is deserialized with
                an unknown or disabled ``mode``
            KeyError: If a wire dict lacks an expected field

        """
        if value is None:
            return None
        codec = self.codec(kind)
        if isinstance(value, list | tuple):
            return [self.deserialize(item, codec.kind, mode) for item in value]
        logger.debug("Deserializing %s", codec.kind)
        return codec.deserialize(value, mode)

    def map_to_plain(
        self,
        mapping: Mapping[str, Any] | None,
        kind: KindLike | None = None,
    ) -> dict[str, Any] | None:
        """Copy a map into a new plain dict, serializing values if ``kind`` is given."""
        if mapping is None:
            return None
        if kind is None:
            return dict(mapping)
        return {key: self.serialize(value, kind) for key, value in mapping.items()}

    def plain_to_map(
        self,
        plain: Mapping[str, Any] | None,
        kind: KindLike | None = None,
        mode: str | None = None,
    ) -> dict[str, Any] | None:
        """Build a map from a plain dict, deserializing values if ``kind`` is given."""
        if plain is None:
            return None
        if kind is None:
            return dict(plain)
        return {
            key: self.deserialize(value, kind, mode) for key, value in plain.items()
        }


_default = Serializer()


def serialize(value: Any, kind: KindLike) -> Any:
    """Serialize with a serializer that has no parser.

    Serializing never needs a parser, so this covers every kind.
    """
    return _default.serialize(value, kind)


def deserialize(
    value: Any,
    kind: KindLike,
    mode: str | None = None,
    *,
    parser: ExpressionParser | None = None,
) -> Any:
    """Deserialize, using a serializer bound to ``parser`` when one is given."""
    serializer = _default if parser is None else Serializer(parser)
    return serializer.deserialize(value, kind, mode)
