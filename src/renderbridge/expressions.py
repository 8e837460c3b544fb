"""Expression codec.

Parsed expression trees never cross the boundary. Only the source text and
its location are sent, and the receiving side re-parses them with the
parser entry point selected by the parse mode.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from renderbridge.codecs import RecordCodec
from renderbridge.errors import (
    MissingParserEntryPointError,
    NoDeserializerForModeError,
    ParserNotConfiguredError,
)
from renderbridge.kinds import ParseMode, RecordKind

if TYPE_CHECKING:
    from renderbridge.records import ASTWithSource
    from renderbridge.serializer import Serializer
    from renderbridge.wire import WireASTWithSource

logger = logging.getLogger(__name__)


class ExpressionParser(Protocol):
    """Entry points of the expression parser used to rebuild expressions.

    Event handlers are re-parsed with an optional ``parse_action`` entry
    point; parsers without it can rebuild everything except event bindings.
    """

    def parse_interpolation(self, input: str, location: Any) -> ASTWithSource: ...

    def parse_binding(self, input: str, location: Any) -> ASTWithSource: ...

    def parse_simple_binding(self, input: str, location: Any) -> ASTWithSource: ...


class ASTWithSourceCodec(RecordCodec, kind=RecordKind.AST_WITH_SOURCE):
    """Codec for :class:`ASTWithSource`.

    Holds a reference to the parser injected into the serializer; it never
    creates one.
    """

    def __init__(self, serializer: Serializer) -> None:
        super().__init__(serializer)
        self.parser = serializer.parser

    def serialize(self, record: ASTWithSource) -> WireASTWithSource:
        return {"input": record.source, "location": record.location}

    def deserialize(
        self,
        data: WireASTWithSource,
        mode: str | None = None,
    ) -> ASTWithSource:
        """Re-parse the source text with the entry point named by ``mode``.

        Raises:
            NoDeserializerForModeError: If ``mode`` is unknown or is
                ``templateBindings``, which is not wired to the parser.
            ParserNotConfiguredError: If no parser was injected.

        """
        match mode:
            case ParseMode.INTERPOLATION:
                entry_point = "parse_interpolation"
            case ParseMode.BINDING:
                entry_point = "parse_binding"
            case ParseMode.SIMPLE_BINDING:
                entry_point = "parse_simple_binding"
            case ParseMode.TEMPLATE_BINDINGS:
                raise NoDeserializerForModeError(mode)
            case _:
                raise NoDeserializerForModeError(mode)
        return self._parse(entry_point, data)

    def deserialize_action(self, data: WireASTWithSource) -> ASTWithSource:
        """Re-parse an event handler with the parser's ``parse_action``.

        Raises:
            ParserNotConfiguredError: If no parser was injected.
            MissingParserEntryPointError: If the parser has no ``parse_action``.

        """
        return self._parse("parse_action", data)

    def _parse(self, entry_point: str, data: WireASTWithSource) -> ASTWithSource:
        if self.parser is None:
            msg = f"Cannot call {entry_point}(): no parser was injected"
            raise ParserNotConfiguredError(msg)
        parse = getattr(self.parser, entry_point, None)
        if parse is None:
            raise MissingParserEntryPointError(entry_point)
        logger.debug(
            "Re-parsing %r at %r with %s",
            data["input"],
            data["location"],
            entry_point,
        )
        return parse(data["input"], data["location"])
