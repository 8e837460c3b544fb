"""Per-record codecs with automatic kind registration.

Each codec maps exactly one flat record shape to its wire dict and back.
Absent values, lists and maps are handled by the serializer, so nested
fields are always routed back through it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, cast

from renderbridge.kinds import ParseMode, RecordKind
from renderbridge.records import (
    DirectiveBinder,
    DirectiveMetadata,
    DirectiveType,
    ElementBinder,
    ElementPropertyBinding,
    EventBinding,
    PropertyBindingType,
    ProtoViewDto,
    ProtoViewType,
    ViewDefinition,
)

if TYPE_CHECKING:
    from renderbridge.expressions import ASTWithSourceCodec
    from renderbridge.serializer import Serializer
    from renderbridge.wire import (
        WireDirectiveBinder,
        WireDirectiveMetadata,
        WireElementBinder,
        WireElementPropertyBinding,
        WireEventBinding,
        WireProtoViewDto,
        WireViewDefinition,
    )


class RecordCodec(ABC):
    """Base for record codecs.

    Concrete subclasses register under one record kind; a subclass declared
    without a kind is an unregistered intermediate base.
    """

    kind: ClassVar[RecordKind]
    registry: ClassVar[dict[RecordKind, type[RecordCodec]]] = {}

    def __init_subclass__(cls, kind: RecordKind | None = None) -> None:
        """Register codec subclass under its kind."""
        if kind is None:
            return
        cls.kind = kind

        if (existing := RecordCodec.registry.get(kind)) and existing is not cls:
            msg = f"Kind '{kind}' already has a codec: {existing}."
            raise ValueError(msg)

        RecordCodec.registry[kind] = cls

    def __init__(self, serializer: Serializer) -> None:
        self.serializer = serializer

    @abstractmethod
    def serialize(self, record: Any) -> dict[str, Any]:
        """Convert one record to its wire dict."""
        ...

    @abstractmethod
    def deserialize(self, data: Any, mode: str | None = None) -> Any:
        """Rebuild one record from its wire dict.

        ``mode`` only matters for expressions and is ignored by record codecs.
        """
        ...


def _enum_value(value: int | None) -> int | None:
    return None if value is None else int(value)


def _copy(items: list[Any] | None) -> list[Any] | None:
    return None if items is None else list(items)


class ViewDefinitionCodec(RecordCodec, kind=RecordKind.VIEW_DEFINITION):
    """Codec for :class:`ViewDefinition`."""

    def serialize(self, record: ViewDefinition) -> WireViewDefinition:
        return {
            "componentId": record.component_id,
            "templateAbsUrl": record.template_abs_url,
            "template": record.template,
            "directives": self.serializer.serialize(
                record.directives,
                RecordKind.DIRECTIVE_METADATA,
            ),
            "styleAbsUrls": _copy(record.style_abs_urls),
            "styles": _copy(record.styles),
        }

    def deserialize(
        self,
        data: WireViewDefinition,
        mode: str | None = None,
    ) -> ViewDefinition:
        return ViewDefinition(
            component_id=data["componentId"],
            template_abs_url=data["templateAbsUrl"],
            template=data["template"],
            directives=self.serializer.deserialize(
                data["directives"],
                RecordKind.DIRECTIVE_METADATA,
            ),
            style_abs_urls=_copy(data["styleAbsUrls"]),
            styles=_copy(data["styles"]),
        )


class DirectiveMetadataCodec(RecordCodec, kind=RecordKind.DIRECTIVE_METADATA):
    """Codec for :class:`DirectiveMetadata`. Host maps hold plain strings."""

    def serialize(self, record: DirectiveMetadata) -> WireDirectiveMetadata:
        to_plain = self.serializer.map_to_plain
        return {
            "id": record.id,
            "selector": record.selector,
            "compileChildren": record.compile_children,
            "hostProperties": to_plain(record.host_properties),
            "hostListeners": to_plain(record.host_listeners),
            "hostActions": to_plain(record.host_actions),
            "hostAttributes": to_plain(record.host_attributes),
            "properties": _copy(record.properties),
            "readAttributes": _copy(record.read_attributes),
            "type": _enum_value(record.type),
            "exportAs": record.export_as,
            "callOnDestroy": record.call_on_destroy,
            "callOnCheck": record.call_on_check,
            "callOnInit": record.call_on_init,
            "callOnAllChangesDone": record.call_on_all_changes_done,
            "changeDetection": record.change_detection,
            "events": _copy(record.events),
        }

    def deserialize(
        self,
        data: WireDirectiveMetadata,
        mode: str | None = None,
    ) -> DirectiveMetadata:
        to_map = self.serializer.plain_to_map
        directive_type = data["type"]
        return DirectiveMetadata(
            id=data["id"],
            selector=data["selector"],
            compile_children=data["compileChildren"],
            host_properties=to_map(data["hostProperties"]),
            host_listeners=to_map(data["hostListeners"]),
            host_actions=to_map(data["hostActions"]),
            host_attributes=to_map(data["hostAttributes"]),
            properties=_copy(data["properties"]),
            read_attributes=_copy(data["readAttributes"]),
            type=None if directive_type is None else DirectiveType(directive_type),
            export_as=data["exportAs"],
            call_on_destroy=data["callOnDestroy"],
            call_on_check=data["callOnCheck"],
            call_on_init=data["callOnInit"],
            call_on_all_changes_done=data["callOnAllChangesDone"],
            change_detection=data["changeDetection"],
            events=_copy(data["events"]),
        )


class DirectiveBinderCodec(RecordCodec, kind=RecordKind.DIRECTIVE_BINDER):
    """Codec for :class:`DirectiveBinder`."""

    def serialize(self, record: DirectiveBinder) -> WireDirectiveBinder:
        return {
            "directiveIndex": record.directive_index,
            "propertyBindings": self.serializer.map_to_plain(
                record.property_bindings,
                RecordKind.AST_WITH_SOURCE,
            ),
            "eventBindings": self.serializer.serialize(
                record.event_bindings,
                RecordKind.EVENT_BINDING,
            ),
            "hostPropertyBindings": self.serializer.serialize(
                record.host_property_bindings,
                RecordKind.ELEMENT_PROPERTY_BINDING,
            ),
        }

    def deserialize(
        self,
        data: WireDirectiveBinder,
        mode: str | None = None,
    ) -> DirectiveBinder:
        return DirectiveBinder(
            directive_index=data["directiveIndex"],
            property_bindings=self.serializer.plain_to_map(
                data["propertyBindings"],
                RecordKind.AST_WITH_SOURCE,
                ParseMode.BINDING,
            ),
            event_bindings=self.serializer.deserialize(
                data["eventBindings"],
                RecordKind.EVENT_BINDING,
            ),
            host_property_bindings=self.serializer.deserialize(
                data["hostPropertyBindings"],
                RecordKind.ELEMENT_PROPERTY_BINDING,
            ),
        )


class ElementBinderCodec(RecordCodec, kind=RecordKind.ELEMENT_BINDER):
    """Codec for :class:`ElementBinder`. Recurses into nested proto views."""

    def serialize(self, record: ElementBinder) -> WireElementBinder:
        ser = self.serializer
        return {
            "index": record.index,
            "parentIndex": record.parent_index,
            "distanceToParent": record.distance_to_parent,
            "directives": ser.serialize(
                record.directives,
                RecordKind.DIRECTIVE_BINDER,
            ),
            "nestedProtoView": ser.serialize(
                record.nested_proto_view,
                RecordKind.PROTO_VIEW_DTO,
            ),
            "propertyBindings": ser.serialize(
                record.property_bindings,
                RecordKind.ELEMENT_PROPERTY_BINDING,
            ),
            "variableBindings": ser.map_to_plain(record.variable_bindings),
            "eventBindings": ser.serialize(
                record.event_bindings,
                RecordKind.EVENT_BINDING,
            ),
            "readAttributes": ser.map_to_plain(record.read_attributes),
        }

    def deserialize(
        self,
        data: WireElementBinder,
        mode: str | None = None,
    ) -> ElementBinder:
        ser = self.serializer
        return ElementBinder(
            index=data["index"],
            parent_index=data["parentIndex"],
            distance_to_parent=data["distanceToParent"],
            directives=ser.deserialize(
                data["directives"],
                RecordKind.DIRECTIVE_BINDER,
            ),
            nested_proto_view=ser.deserialize(
                data["nestedProtoView"],
                RecordKind.PROTO_VIEW_DTO,
            ),
            property_bindings=ser.deserialize(
                data["propertyBindings"],
                RecordKind.ELEMENT_PROPERTY_BINDING,
            ),
            variable_bindings=ser.plain_to_map(data["variableBindings"]),
            event_bindings=ser.deserialize(
                data["eventBindings"],
                RecordKind.EVENT_BINDING,
            ),
            read_attributes=ser.plain_to_map(data["readAttributes"]),
        )


class ProtoViewDtoCodec(RecordCodec, kind=RecordKind.PROTO_VIEW_DTO):
    """Codec for :class:`ProtoViewDto`.

    The render handle is not transported: it is written as None and always
    rebuilt as None.
    """

    def serialize(self, record: ProtoViewDto) -> WireProtoViewDto:
        return {
            "render": None,
            "elementBinders": self.serializer.serialize(
                record.element_binders,
                RecordKind.ELEMENT_BINDER,
            ),
            "variableBindings": self.serializer.map_to_plain(record.variable_bindings),
            "textBindings": self.serializer.serialize(
                record.text_bindings,
                RecordKind.AST_WITH_SOURCE,
            ),
            "type": int(record.type),
        }

    def deserialize(
        self,
        data: WireProtoViewDto,
        mode: str | None = None,
    ) -> ProtoViewDto:
        return ProtoViewDto(
            render=None,
            element_binders=self.serializer.deserialize(
                data["elementBinders"],
                RecordKind.ELEMENT_BINDER,
            ),
            variable_bindings=self.serializer.plain_to_map(data["variableBindings"]),
            text_bindings=self.serializer.deserialize(
                data["textBindings"],
                RecordKind.AST_WITH_SOURCE,
                ParseMode.INTERPOLATION,
            ),
            type=ProtoViewType(data["type"]),
        )


class ElementPropertyBindingCodec(
    RecordCodec,
    kind=RecordKind.ELEMENT_PROPERTY_BINDING,
):
    """Codec for :class:`ElementPropertyBinding`."""

    def serialize(self, record: ElementPropertyBinding) -> WireElementPropertyBinding:
        return {
            "type": int(record.type),
            "astWithSource": self.serializer.serialize(
                record.ast_with_source,
                RecordKind.AST_WITH_SOURCE,
            ),
            "property": record.property,
            "unit": record.unit,
        }

    def deserialize(
        self,
        data: WireElementPropertyBinding,
        mode: str | None = None,
    ) -> ElementPropertyBinding:
        return ElementPropertyBinding(
            type=PropertyBindingType(data["type"]),
            ast_with_source=self.serializer.deserialize(
                data["astWithSource"],
                RecordKind.AST_WITH_SOURCE,
                ParseMode.BINDING,
            ),
            property=data["property"],
            unit=data["unit"],
        )


class EventBindingCodec(RecordCodec, kind=RecordKind.EVENT_BINDING):
    """Codec for :class:`EventBinding`.

    Handlers are re-parsed with the parser's action entry point, which is
    not one of the public parse modes.
    """

    def serialize(self, record: EventBinding) -> WireEventBinding:
        return {
            "fullName": record.full_name,
            "source": self.serializer.serialize(
                record.source,
                RecordKind.AST_WITH_SOURCE,
            ),
        }

    def deserialize(
        self,
        data: WireEventBinding,
        mode: str | None = None,
    ) -> EventBinding:
        expressions = cast(
            "ASTWithSourceCodec",
            self.serializer.codec(RecordKind.AST_WITH_SOURCE),
        )
        source = data["source"]
        return EventBinding(
            full_name=data["fullName"],
            source=None if source is None else expressions.deserialize_action(source),
        )

