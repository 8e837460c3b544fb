"""In-memory render records with automatic kind registration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, dataclass_transform

from renderbridge.kinds import RecordKind


@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class Record:
    """Base for transportable records. Each subclass is bound to one kind."""

    kind: ClassVar[RecordKind]
    registry: ClassVar[dict[RecordKind, type[Record]]] = {}

    def __init_subclass__(cls, kind: RecordKind) -> None:
        """Register record subclass under its kind."""
        dataclass(frozen=True)(cls)
        cls.kind = kind

        if (existing := Record.registry.get(kind)) and existing is not cls:
            msg = (
                f"Kind '{kind}' already registered to {existing}. "
                "Each record kind maps to exactly one class."
            )
            raise ValueError(msg)

        Record.registry[kind] = cls


class ProtoViewType(IntEnum):
    """Role of a proto view in the view tree."""

    HOST = 0
    COMPONENT = 1
    EMBEDDED = 2


class DirectiveType(IntEnum):
    """Whether directive metadata describes a plain directive or a component."""

    DIRECTIVE = 0
    COMPONENT = 1


class PropertyBindingType(IntEnum):
    """Target of an element property binding."""

    PROPERTY = 0
    ATTRIBUTE = 1
    CLASS = 2
    STYLE = 3


class ASTWithSource(Record, kind=RecordKind.AST_WITH_SOURCE):
    """Parsed expression paired with the text and location it came from.

    Only ``source`` and ``location`` cross the boundary; ``ast`` is rebuilt
    by the parser on the receiving side.
    """

    ast: Any
    source: str
    location: Any = None


class ElementPropertyBinding(Record, kind=RecordKind.ELEMENT_PROPERTY_BINDING):
    """Binding of an expression to an element property, attribute, class or style."""

    type: PropertyBindingType
    ast_with_source: ASTWithSource
    property: str
    unit: str | None = None


class EventBinding(Record, kind=RecordKind.EVENT_BINDING):
    """Event handler expression bound to a (possibly targeted) event name."""

    full_name: str
    source: ASTWithSource


class DirectiveMetadata(Record, kind=RecordKind.DIRECTIVE_METADATA):
    """Compiler-facing description of a directive or component."""

    id: Any
    selector: str | None = None
    compile_children: bool = True
    events: list[str] | None = None
    properties: list[str] | None = None
    read_attributes: list[str] | None = None
    type: DirectiveType | None = None
    call_on_destroy: bool = False
    call_on_check: bool = False
    call_on_init: bool = False
    call_on_all_changes_done: bool = False
    change_detection: str | None = None
    export_as: str | None = None
    host_properties: dict[str, str] | None = None
    host_listeners: dict[str, str] | None = None
    host_actions: dict[str, str] | None = None
    host_attributes: dict[str, str] | None = None


class ViewDefinition(Record, kind=RecordKind.VIEW_DEFINITION):
    """Template of a component view together with the directives it uses."""

    component_id: str
    template_abs_url: str | None = None
    template: str | None = None
    directives: list[DirectiveMetadata] | None = None
    style_abs_urls: list[str] | None = None
    styles: list[str] | None = None


class DirectiveBinder(Record, kind=RecordKind.DIRECTIVE_BINDER):
    """Bindings of one directive applied to an element."""

    directive_index: int
    property_bindings: dict[str, ASTWithSource] = field(default_factory=dict)
    event_bindings: list[EventBinding] = field(default_factory=list)
    host_property_bindings: list[ElementPropertyBinding] = field(default_factory=list)


class ProtoViewDto(Record, kind=RecordKind.PROTO_VIEW_DTO):
    """Compiled proto view.

    ``render`` is a handle into the render context and is never transported.
    """

    type: ProtoViewType
    element_binders: list[ElementBinder] = field(default_factory=list)
    variable_bindings: dict[str, str] = field(default_factory=dict)
    text_bindings: list[ASTWithSource] = field(default_factory=list)
    render: Any = None


class ElementBinder(Record, kind=RecordKind.ELEMENT_BINDER):
    """Bindings collected for one element of a proto view."""

    index: int
    parent_index: int
    distance_to_parent: int
    directives: list[DirectiveBinder] = field(default_factory=list)
    nested_proto_view: ProtoViewDto | None = None
    property_bindings: list[ElementPropertyBinding] = field(default_factory=list)
    variable_bindings: dict[str, str] = field(default_factory=dict)
    event_bindings: list[EventBinding] = field(default_factory=list)
    read_attributes: dict[str, str] = field(default_factory=dict)
