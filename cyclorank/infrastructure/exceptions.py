"""
Error types raised by cyclorank and the message templates they carry.

Every error derives from `CycloRankError` so the command surface can report
any failure of a run with a single handler.
"""

NO_GRAMMAR = (
    "The tree-sitter grammar for {lang} is not available. "
    "Install it with `pip install tree-sitter-{lang}`."
)
GRAMMAR_INIT_FAILED = "Could not initialise the {lang} grammar: {error}"
SYNTAX_ERROR = "syntax error near {snippet!r}"
MISSING_TOKEN = "missing {token!r}"
MISSING_PACKAGE = "expected 'package' clause"
READ_FAILED = "cannot read file: {error}"
NO_DATA_FOR_SUMMARY = "no data for summary: no functions were analyzed"
INVALID_COMPLEXITY = "complexity must be >= 1, got {value}"


class CycloRankError(Exception):
    """Base class for all cyclorank errors."""


class GrammarUnavailableError(CycloRankError):
    """Raised when the tree-sitter grammar for a language cannot be loaded."""


class SourceParseError(CycloRankError):
    """Raised when a source file cannot be read or does not parse cleanly.

    Attributes:
        filename (str): The file as it was named by the caller.
        line (int): 1-based line of the failure, 0 when unknown.
        column (int): 1-based column of the failure, 0 when unknown.
        reason (str): Human-readable description of the failure.
    """

    def __init__(self, filename: str, reason: str, line: int = 0, column: int = 0):
        self.filename = filename
        self.reason = reason
        self.line = line
        self.column = column
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line:
            return f"{self.filename}:{self.line}:{self.column}: {self.reason}"
        return f"{self.filename}: {self.reason}"


class NoDataForSummaryError(CycloRankError):
    """Raised when a summary is requested over an empty set of records."""
