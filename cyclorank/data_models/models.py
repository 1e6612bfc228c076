"""
This module defines the core data models used throughout the application.

The models include:
-   `SourcePosition`: A 1-based file/line/column location.
-   `Declaration` and `ParsedFile`: What the parsing collaborator hands to the
    analysis core.
-   `FunctionRecord`: One immutable entry per analyzed function or method.
-   `ReportOptions`: The `over`/`top`/`avg` selection parameters of a run.
-   `RankedResult` and `AnalysisReport`: The outputs of ranking and of a run.
-   `LanguageSpec`: Parsing characteristics of a supported language.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cyclorank.core import constants as cs
from cyclorank.infrastructure import exceptions as ex

if TYPE_CHECKING:
    from .types_defs import TreeSitterNodeProtocol


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """
    A location in a source file, used for display and to tell records apart.

    Attributes:
        filename (str): The file name as given by the caller.
        line (int): 1-based line number.
        column (int): 1-based byte column.
    """

    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return cs.POSITION_FORMAT.format(
            filename=self.filename, line=self.line, column=self.column
        )


@dataclass(frozen=True, slots=True)
class Declaration:
    """
    A top-level declaration of a parsed file.

    Attributes:
        kind (cs.DeclarationKind): Function, method, or anything else.
        node (TreeSitterNodeProtocol): The declaration's syntax subtree.
        name (str): The declared name; empty for non-function declarations.
        position (SourcePosition): Where the declaration starts.
        receiver_type (TreeSitterNodeProtocol | None): The written receiver type
            of a method, or None.
    """

    kind: cs.DeclarationKind
    node: TreeSitterNodeProtocol
    name: str
    position: SourcePosition
    receiver_type: TreeSitterNodeProtocol | None = None

    @property
    def is_function(self) -> bool:
        return self.kind in (cs.DeclarationKind.FUNCTION, cs.DeclarationKind.METHOD)


@dataclass(frozen=True, slots=True)
class ParsedFile:
    """
    A parsed source file: its package name and its top-level declarations in order.
    """

    filename: str
    package_name: str
    declarations: tuple[Declaration, ...] = ()


@dataclass(frozen=True, slots=True)
class FunctionRecord:
    """
    The complexity statistics of one function or method.

    Attributes:
        package_name (str): The enclosing package.
        display_name (str): `Name` for functions, `(Recv).Name` for methods.
        complexity (int): Cyclomatic complexity, at least 1.
        position (SourcePosition): Where the declaration starts.
        index (int): Discovery order within the run, the tie-break for ranking.
    """

    package_name: str
    display_name: str
    complexity: int
    position: SourcePosition
    index: int = 0

    def __post_init__(self) -> None:
        if self.complexity < 1:
            raise ValueError(ex.INVALID_COMPLEXITY.format(value=self.complexity))

    def __str__(self) -> str:
        return cs.RECORD_LINE.format(
            complexity=self.complexity,
            package=self.package_name,
            function=self.display_name,
            position=self.position,
        )

    def to_dict(self) -> dict[str, str | int]:
        return {
            "complexity": self.complexity,
            "package": self.package_name,
            "function": self.display_name,
            "file": self.position.filename,
            "line": self.position.line,
            "column": self.position.column,
        }


@dataclass(frozen=True, slots=True)
class ReportOptions:
    """
    Selection parameters for a report.

    Attributes:
        over (int): Keep only records with complexity strictly greater than this.
        top (int | None): Keep at most this many records; None or negative is unbounded.
        avg (bool): Whether to compute the average complexity.
    """

    over: int = 0
    top: int | None = None
    avg: bool = False


@dataclass(frozen=True, slots=True)
class RankedResult:
    """The retained records, highest complexity first, and the passed count."""

    records: tuple[FunctionRecord, ...]
    passed: int


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Everything a run produces for the output sink."""

    ranked: RankedResult
    total: int
    average: float | None = None


@dataclass(frozen=True)
class LanguageSpec:
    """
    Defines the parsing characteristics of a language.

    Attributes:
        language (cs.SupportedLanguage): The language.
        file_extensions (tuple[str, ...]): Extensions picked up by directory scans.
        function_node_types (frozenset[str]): Node types of free functions.
        method_node_types (frozenset[str]): Node types of methods with receivers.
        test_file_suffix (str): File stem suffix marking test files.
    """

    language: cs.SupportedLanguage
    file_extensions: tuple[str, ...]
    function_node_types: frozenset[str] = field(default_factory=frozenset)
    method_node_types: frozenset[str] = field(default_factory=frozenset)
    test_file_suffix: str = ""
