"""
Shared type definitions, protocols and enumerations.

The parsing collaborator hands the analysis core tree-sitter nodes; the core
only relies on the small surface described by `TreeSitterNodeProtocol`, which
keeps the analysis testable with plain stub objects.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import ParsedFile

type LanguageLoader = Callable[[], object] | None
"""A callable returning a tree-sitter language handle, or None when unavailable."""


class NodeKind(StrEnum):
    """The closed set of node kinds the complexity classifier distinguishes.

    Values are tree-sitter-go node type names. Every other node type maps to
    `OTHER`.
    """

    FUNCTION_DECLARATION = "function_declaration"
    METHOD_DECLARATION = "method_declaration"
    IF_STATEMENT = "if_statement"
    FOR_STATEMENT = "for_statement"
    EXPRESSION_CASE = "expression_case"
    TYPE_CASE = "type_case"
    DEFAULT_CASE = "default_case"
    COMMUNICATION_CASE = "communication_case"
    BINARY_EXPRESSION = "binary_expression"
    OTHER = "other"

    @classmethod
    def of(cls, node_type: str) -> NodeKind:
        """Maps a raw tree-sitter node type onto the enumeration."""
        try:
            return cls(node_type)
        except ValueError:
            return cls.OTHER


class TreeSitterNodeProtocol(Protocol):
    """A protocol defining the essential properties of a tree-sitter Node."""

    @property
    def type(self) -> str: ...
    @property
    def children(self) -> list[TreeSitterNodeProtocol]: ...
    @property
    def text(self) -> bytes | None: ...

    def child_by_field_name(self, name: str) -> TreeSitterNodeProtocol | None: ...


class SourceParserProtocol(Protocol):
    """Anything able to turn a source file into a `ParsedFile`."""

    def parse_file(self, path: Path) -> ParsedFile: ...
