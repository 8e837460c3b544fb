"""renderbridge - move render records across a worker boundary as plain values."""

from renderbridge.errors import (
    MissingParserEntryPointError,
    NoDeserializerForModeError,
    ParserNotConfiguredError,
    RenderBridgeError,
    UnsupportedKindError,
)
from renderbridge.expressions import ExpressionParser
from renderbridge.formats.json import (
    from_json,
    to_json,
)
from renderbridge.kinds import (
    ParseMode,
    RecordKind,
)
from renderbridge.records import (
    ASTWithSource,
    DirectiveBinder,
    DirectiveMetadata,
    DirectiveType,
    ElementBinder,
    ElementPropertyBinding,
    EventBinding,
    PropertyBindingType,
    ProtoViewDto,
    ProtoViewType,
    Record,
    ViewDefinition,
)
from renderbridge.serializer import (
    Serializer,
    deserialize,
    resolve_kind,
    serialize,
)

__all__ = [
    # Records
    "ASTWithSource",
    "DirectiveBinder",
    "DirectiveMetadata",
    "DirectiveType",
    "ElementBinder",
    "ElementPropertyBinding",
    "EventBinding",
    # Parser boundary
    "ExpressionParser",
    # Errors
    "MissingParserEntryPointError",
    "NoDeserializerForModeError",
    # Kinds
    "ParseMode",
    "ParserNotConfiguredError",
    "PropertyBindingType",
    "ProtoViewDto",
    "ProtoViewType",
    "Record",
    "RecordKind",
    "RenderBridgeError",
    # Serialization
    "Serializer",
    "UnsupportedKindError",
    "ViewDefinition",
    "deserialize",
    "from_json",
    "resolve_kind",
    "serialize",
    "to_json",
]
