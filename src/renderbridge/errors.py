"""Exceptions raised while moving records across the worker boundary."""

from __future__ import annotations

from typing import Any


class RenderBridgeError(Exception):
    """Base class for all renderbridge errors."""


class UnsupportedKindError(RenderBridgeError, ValueError):
    """A record kind outside the closed set was requested."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        name = getattr(kind, "__name__", None) or repr(kind)
        super().__init__(f"No serializer for record kind {name}")


class NoDeserializerForModeError(RenderBridgeError, ValueError):
    """An expression was deserialized with an unknown or disabled parse mode."""

    def __init__(self, mode: Any) -> None:
        self.mode = mode
        shown = str(mode) if isinstance(mode, str) else mode
        super().__init__(f"No AST deserializer for mode {shown!r}")


class ParserNotConfiguredError(RenderBridgeError, RuntimeError):
    """An expression needs re-parsing but no parser was injected."""


class MissingParserEntryPointError(RenderBridgeError, AttributeError):
    """The injected parser lacks the entry point an expression needs."""

    def __init__(self, entry_point: str) -> None:
        self.entry_point = entry_point
        super().__init__(f"Injected parser has no {entry_point}() entry point")
