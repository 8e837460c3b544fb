"""Record kinds and expression parse modes."""

from __future__ import annotations

from enum import StrEnum


class RecordKind(StrEnum):
    """Closed set of record kinds that can cross the worker boundary."""

    VIEW_DEFINITION = "ViewDefinition"
    DIRECTIVE_METADATA = "DirectiveMetadata"
    ELEMENT_BINDER = "ElementBinder"
    DIRECTIVE_BINDER = "DirectiveBinder"
    PROTO_VIEW_DTO = "ProtoViewDto"
    AST_WITH_SOURCE = "ASTWithSource"
    ELEMENT_PROPERTY_BINDING = "ElementPropertyBinding"
    EVENT_BINDING = "EventBinding"


class ParseMode(StrEnum):
    """Parser entry point used to rebuild an expression on deserialization."""

    INTERPOLATION = "interpolation"
    BINDING = "binding"
    SIMPLE_BINDING = "simpleBinding"
    # Known to the parser but not wired up for deserialization.
    TEMPLATE_BINDINGS = "templateBindings"
