"""Tests for the Serializer dispatcher and map helpers."""

from __future__ import annotations

from typing import Any

import pytest

from renderbridge import (
    ASTWithSource,
    DirectiveMetadata,
    ProtoViewDto,
    ProtoViewType,
    RecordKind,
    Serializer,
    UnsupportedKindError,
    ViewDefinition,
    deserialize,
    resolve_kind,
    serialize,
)
from renderbridge.codecs import RecordCodec
from renderbridge.records import Record


class TestAbsentValues:
    """None short-circuits before any dispatch."""

    @pytest.mark.parametrize("kind", list(RecordKind))
    def test_serialize_none(self, serializer: Serializer, kind: RecordKind) -> None:
        """Test that None serializes to None for every kind."""
        assert serializer.serialize(None, kind) is None

    @pytest.mark.parametrize("kind", list(RecordKind))
    def test_deserialize_none(self, serializer: Serializer, kind: RecordKind) -> None:
        """Test that None deserializes to None for every kind."""
        assert serializer.deserialize(None, kind) is None

    def test_none_expression_ignores_mode(self, serializer: Serializer) -> None:
        """Test that an absent expression never looks at the parse mode."""
        assert serializer.deserialize(None, RecordKind.AST_WITH_SOURCE, "bogus") is None

    def test_map_helpers_pass_none_through(self, serializer: Serializer) -> None:
        """Test that absent maps stay absent in both directions."""
        assert serializer.map_to_plain(None) is None
        assert serializer.plain_to_map(None, RecordKind.AST_WITH_SOURCE) is None


class TestSequences:
    """Lists are serialized element-wise with the same kind."""

    def test_serialize_list_preserves_order(self, serializer: Serializer) -> None:
        """Test that a list serializes to the list of serialized elements."""
        metas = [DirectiveMetadata(id=i, selector=f"[d{i}]") for i in range(3)]

        result = serializer.serialize(metas, RecordKind.DIRECTIVE_METADATA)

        assert result == [
            serializer.serialize(m, RecordKind.DIRECTIVE_METADATA) for m in metas
        ]
        assert [item["id"] for item in result] == [0, 1, 2]

    def test_serialize_tuple_becomes_list(self, serializer: Serializer) -> None:
        """Test that tuples are sent as plain lists."""
        views = (ViewDefinition(component_id="a"), ViewDefinition(component_id="b"))

        result = serializer.serialize(views, RecordKind.VIEW_DEFINITION)

        assert isinstance(result, list)
        assert [item["componentId"] for item in result] == ["a", "b"]

    def test_serialize_empty_list(self, serializer: Serializer) -> None:
        """Test that an empty list stays an empty list."""
        assert serializer.serialize([], RecordKind.ELEMENT_BINDER) == []

    def test_deserialize_list_preserves_order(self, serializer: Serializer) -> None:
        """Test that a list of wire dicts deserializes in order."""
        metas = [DirectiveMetadata(id=i) for i in range(3)]
        plain = serializer.serialize(metas, RecordKind.DIRECTIVE_METADATA)

        assert serializer.deserialize(plain, RecordKind.DIRECTIVE_METADATA) == metas

    def test_deserialize_list_forwards_mode(
        self,
        serializer: Serializer,
        parser: Any,
    ) -> None:
        """Test that the parse mode reaches every element of a list."""
        plain = [{"input": "a", "location": 1}, {"input": "b", "location": 2}]

        result = serializer.deserialize(plain, RecordKind.AST_WITH_SOURCE, "binding")

        assert [r.source for r in result] == ["a", "b"]
        assert parser.calls == [("binding", "a", 1), ("binding", "b", 2)]


class TestKinds:
    """Kind resolution and rejection of unknown kinds."""

    def test_resolve_enum_member(self) -> None:
        """Test that enum members resolve to themselves."""
        assert resolve_kind(RecordKind.PROTO_VIEW_DTO) is RecordKind.PROTO_VIEW_DTO

    def test_resolve_tag_string(self) -> None:
        """Test that tag strings resolve to their kind."""
        assert resolve_kind("ElementBinder") is RecordKind.ELEMENT_BINDER

    def test_resolve_record_class(self) -> None:
        """Test that record classes resolve to their kind."""
        assert resolve_kind(ProtoViewDto) is RecordKind.PROTO_VIEW_DTO
        assert resolve_kind(ASTWithSource) is RecordKind.AST_WITH_SOURCE

    @pytest.mark.parametrize("kind", [dict, int, "Unknown", 3, Record])
    def test_serialize_unsupported_kind(
        self,
        serializer: Serializer,
        kind: Any,
    ) -> None:
        """Test that a kind outside the closed set is rejected."""
        with pytest.raises(UnsupportedKindError) as exc_info:
            serializer.serialize({"a": 1}, kind)
        assert exc_info.value.kind is kind

    @pytest.mark.parametrize("kind", [dict, "Unknown", object])
    def test_deserialize_unsupported_kind(
        self,
        serializer: Serializer,
        kind: Any,
    ) -> None:
        """Test that deserialization rejects a kind outside the closed set."""
        with pytest.raises(UnsupportedKindError):
            serializer.deserialize({"a": 1}, kind)

    def test_unsupported_kind_is_value_error(self, serializer: Serializer) -> None:
        """Test that callers catching ValueError also see unsupported kinds."""
        with pytest.raises(ValueError, match="No serializer for record kind"):
            serializer.serialize([1], float)

    def test_every_kind_has_codec_and_record(self) -> None:
        """Test that the closed set of kinds is fully covered."""
        assert set(RecordCodec.registry) == set(RecordKind)
        assert set(Record.registry) == set(RecordKind)

    def test_duplicate_codec_rejected(self) -> None:
        """Test that registering a second codec for a kind fails."""
        with pytest.raises(ValueError, match="already has a codec"):

            class AnotherViewCodec(RecordCodec, kind=RecordKind.VIEW_DEFINITION):
                pass

    def test_codec_missing_deserialize_is_abstract(self) -> None:
        """Test that a codec without deserialize cannot be instantiated."""

        class SerializeOnlyCodec(RecordCodec):
            def serialize(self, record: Any) -> dict[str, Any]:
                return {}

        with pytest.raises(TypeError, match="abstract"):
            SerializeOnlyCodec(Serializer())
        assert SerializeOnlyCodec not in RecordCodec.registry.values()

    def test_duplicate_record_rejected(self) -> None:
        """Test that registering a second record class for a kind fails."""
        with pytest.raises(ValueError, match="already registered"):

            class AnotherView(Record, kind=RecordKind.VIEW_DEFINITION):
                component_id: str


class TestMapHelpers:
    """map_to_plain / plain_to_map."""

    def test_map_to_plain_copies_primitives(self, serializer: Serializer) -> None:
        """Test that values are copied as-is without a kind."""
        source = {"a": "1", "b": "2"}

        result = serializer.map_to_plain(source)

        assert result == source
        assert result is not source

    def test_map_to_plain_does_not_mutate(self, serializer: Serializer) -> None:
        """Test that the input map is left untouched."""
        expr = ASTWithSource(ast=None, source="x", location="loc")
        source = {"x": expr}

        serializer.map_to_plain(source, RecordKind.AST_WITH_SOURCE)

        assert source == {"x": expr}

    def test_map_to_plain_serializes_values(self, serializer: Serializer) -> None:
        """Test that values go through serialize when a kind is given."""
        source = {"x": ASTWithSource(ast=None, source="a+b", location="loc")}

        result = serializer.map_to_plain(source, RecordKind.AST_WITH_SOURCE)

        assert result == {"x": {"input": "a+b", "location": "loc"}}

    def test_plain_to_map_copies_primitives(self, serializer: Serializer) -> None:
        """Test that a plain dict becomes an equal, separate dict."""
        plain = {"$implicit": "item", "i": "index"}

        result = serializer.plain_to_map(plain)

        assert result == plain
        assert result is not plain

    def test_plain_to_map_deserializes_values(
        self,
        serializer: Serializer,
        parser: Any,
    ) -> None:
        """Test that values go through deserialize with the given mode."""
        plain = {"x": {"input": "a", "location": "l1"}}

        result = serializer.plain_to_map(plain, RecordKind.AST_WITH_SOURCE, "binding")

        assert result == {
            "x": ASTWithSource(ast=("binding", "a"), source="a", location="l1"),
        }
        assert parser.calls == [("binding", "a", "l1")]

    def test_record_map_round_trip(self, serializer: Serializer) -> None:
        """Test that a map of records survives map_to_plain then plain_to_map."""
        views = {
            "host": ProtoViewDto(type=ProtoViewType.HOST),
            "component": ProtoViewDto(
                type=ProtoViewType.COMPONENT,
                variable_bindings={"a": "b"},
            ),
        }

        plain = serializer.map_to_plain(views, RecordKind.PROTO_VIEW_DTO)
        result = serializer.plain_to_map(plain, RecordKind.PROTO_VIEW_DTO)

        assert result == views


class TestModuleFunctions:
    """Module-level serialize/deserialize."""

    def test_serialize_without_parser(self) -> None:
        """Test that serialization never needs a parser."""
        expr = ASTWithSource(ast=object(), source="a", location=None)

        assert serialize(expr, RecordKind.AST_WITH_SOURCE) == {
            "input": "a",
            "location": None,
        }

    def test_deserialize_with_parser_argument(self, parser: Any) -> None:
        """Test that a parser can be supplied per call."""
        result = deserialize(
            {"input": "x", "location": None},
            RecordKind.AST_WITH_SOURCE,
            "simpleBinding",
            parser=parser,
        )

        assert result.ast == ("simpleBinding", "x")

    def test_deserialize_plain_record(self) -> None:
        """Test that records without expressions need no parser."""
        plain = serialize(ViewDefinition(component_id="c"), RecordKind.VIEW_DEFINITION)

        assert deserialize(plain, ViewDefinition) == ViewDefinition(component_id="c")
