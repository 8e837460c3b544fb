"""Wire shapes of every record kind.

These are the plain dictionaries handed to the transport. Keys are the
literal camelCase names read by the other side of the boundary.
"""

from __future__ import annotations

from typing import Any, TypedDict


class WireASTWithSource(TypedDict):
    """Serialized expression: source text and location only."""

    input: str
    location: Any


class WireElementPropertyBinding(TypedDict):
    """Serialized element property binding."""

    type: int
    astWithSource: WireASTWithSource
    property: str
    unit: str | None


class WireEventBinding(TypedDict):
    """Serialized event binding."""

    fullName: str
    source: WireASTWithSource


class WireDirectiveMetadata(TypedDict):
    """Serialized directive metadata."""

    id: Any
    selector: str | None
    compileChildren: bool
    hostProperties: dict[str, str] | None
    hostListeners: dict[str, str] | None
    hostActions: dict[str, str] | None
    hostAttributes: dict[str, str] | None
    properties: list[str] | None
    readAttributes: list[str] | None
    type: int | None
    exportAs: str | None
    callOnDestroy: bool
    callOnCheck: bool
    callOnInit: bool
    callOnAllChangesDone: bool
    changeDetection: str | None
    events: list[str] | None


class WireViewDefinition(TypedDict):
    """Serialized view definition."""

    componentId: str
    templateAbsUrl: str | None
    template: str | None
    directives: list[WireDirectiveMetadata] | None
    styleAbsUrls: list[str] | None
    styles: list[str] | None


class WireDirectiveBinder(TypedDict):
    """Serialized directive binder."""

    directiveIndex: int
    propertyBindings: dict[str, WireASTWithSource] | None
    eventBindings: list[WireEventBinding] | None
    hostPropertyBindings: list[WireElementPropertyBinding] | None


class WireProtoViewDto(TypedDict):
    """Serialized proto view. ``render`` is always None."""

    render: None
    elementBinders: list[WireElementBinder] | None
    variableBindings: dict[str, str] | None
    textBindings: list[WireASTWithSource] | None
    type: int


class WireElementBinder(TypedDict):
    """Serialized element binder."""

    index: int
    parentIndex: int
    distanceToParent: int
    directives: list[WireDirectiveBinder] | None
    nestedProtoView: WireProtoViewDto | None
    propertyBindings: list[WireElementPropertyBinding] | None
    variableBindings: dict[str, str] | None
    eventBindings: list[WireEventBinding] | None
    readAttributes: dict[str, str] | None
