"""Shared fixtures: a recording stand-in for the expression parser."""

from __future__ import annotations

from typing import Any

import pytest

from renderbridge import ASTWithSource, Serializer


class FakeParser:
    """Parser double that records calls and returns a structural tree."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, Any]] = []

    def _parse(self, entry: str, input: str, location: Any) -> ASTWithSource:
        self.calls.append((entry, input, location))
        return ASTWithSource(ast=(entry, input), source=input, location=location)

    def parse_interpolation(self, input: str, location: Any) -> ASTWithSource:
        return self._parse("interpolation", input, location)

    def parse_binding(self, input: str, location: Any) -> ASTWithSource:
        return self._parse("binding", input, location)

    def parse_simple_binding(self, input: str, location: Any) -> ASTWithSource:
        return self._parse("simpleBinding", input, location)

    def parse_action(self, input: str, location: Any) -> ASTWithSource:
        return self._parse("action", input, location)

    def parse_template_bindings(self, input: str, location: Any) -> ASTWithSource:
        return self._parse("templateBindings", input, location)


@pytest.fixture
def parser() -> FakeParser:
    return FakeParser()


@pytest.fixture
def serializer(parser: FakeParser) -> Serializer:
    return Serializer(parser)
