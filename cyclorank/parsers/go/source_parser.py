from __future__ import annotations

from pathlib import Path

from loguru import logger
from tree_sitter import Node, Parser

from cyclorank.core import constants as cs
from cyclorank.core import logs as ls
from cyclorank.data_models.models import Declaration, ParsedFile
from cyclorank.infrastructure import exceptions as ex
from cyclorank.infrastructure.language_spec import get_language_spec
from cyclorank.infrastructure.parser_loader import load_parser

from ..utils import node_position, safe_decode_text

_SNIPPET_LENGTH = 20


class GoSourceParser:
    """Turns Go source files into `ParsedFile`s using tree-sitter-go.

    A file with any syntax error is rejected as a whole; the analysis core never
    sees a partially recovered tree.
    """

    def __init__(self, parser: Parser | None = None) -> None:
        self.parser = parser or load_parser(cs.SupportedLanguage.GO)
        self.spec = get_language_spec(cs.SupportedLanguage.GO)

    def parse_file(self, path: Path) -> ParsedFile:
        filename = str(path)
        logger.debug(ls.PARSING_FILE.format(path=filename))
        try:
            source = path.read_bytes()
        except OSError as e:
            raise ex.SourceParseError(
                filename, ex.READ_FAILED.format(error=e.strerror or e)
            ) from e
        return self.parse_source(source, filename)

    def parse_source(self, source: bytes, filename: str) -> ParsedFile:
        """Parses raw Go source.

        Args:
            source (bytes): The file contents.
            filename (str): The name used in positions and error messages.

        Raises:
            SourceParseError: If the source has syntax errors or no package clause.

        Returns:
            ParsedFile: The package name and top-level declarations in source order.
        """
        root = self.parser.parse(source).root_node
        if root.has_error:
            raise _syntax_error(root, filename)

        package_name = _package_name(root)
        if package_name is None:
            raise ex.SourceParseError(filename, ex.MISSING_PACKAGE, line=1, column=1)

        declarations = tuple(
            self._declaration(child, filename)
            for child in root.children
            if child.is_named
            and child.type not in (cs.TS_GO_PACKAGE_CLAUSE, cs.TS_GO_COMMENT)
        )
        return ParsedFile(
            filename=filename, package_name=package_name, declarations=declarations
        )

    def _declaration(self, node: Node, filename: str) -> Declaration:
        position = node_position(node, filename)
        if node.type in self.spec.function_node_types:
            kind = cs.DeclarationKind.FUNCTION
        elif node.type in self.spec.method_node_types:
            kind = cs.DeclarationKind.METHOD
        else:
            return Declaration(
                kind=cs.DeclarationKind.OTHER, node=node, name="", position=position
            )

        name = safe_decode_text(node.child_by_field_name(cs.FIELD_NAME)) or ""
        receiver_type = (
            _receiver_type(node) if kind == cs.DeclarationKind.METHOD else None
        )
        return Declaration(
            kind=kind,
            node=node,
            name=name,
            position=position,
            receiver_type=receiver_type,
        )


def _package_name(root: Node) -> str | None:
    for child in root.children:
        if child.type != cs.TS_GO_PACKAGE_CLAUSE:
            continue
        for part in child.children:
            if part.type == cs.TS_GO_PACKAGE_IDENTIFIER:
                return safe_decode_text(part)
    return None


def _receiver_type(method: Node) -> Node | None:
    # Only the first receiver parameter matters; Go allows exactly one.
    receiver = method.child_by_field_name(cs.FIELD_RECEIVER)
    if receiver is None:
        return None
    for param in receiver.children:
        if param.type == cs.TS_GO_PARAMETER_DECLARATION:
            return param.child_by_field_name(cs.FIELD_TYPE)
    return None


def _syntax_error(root: Node, filename: str) -> ex.SourceParseError:
    stack = [root]
    while stack:
        current = stack.pop()
        if current.is_missing:
            reason = ex.MISSING_TOKEN.format(token=current.type)
            return _error_at(current, filename, reason)
        if current.is_error:
            reason = ex.SYNTAX_ERROR.format(snippet=_snippet(current))
            return _error_at(current, filename, reason)
        stack.extend(
            child
            for child in reversed(current.children)
            if child.has_error or child.is_missing
        )
    return _error_at(root, filename, ex.SYNTAX_ERROR.format(snippet=""))


def _error_at(node: Node, filename: str, reason: str) -> ex.SourceParseError:
    position = node_position(node, filename)
    return ex.SourceParseError(
        filename, reason, line=position.line, column=position.column
    )


def _snippet(node: Node) -> str:
    text = safe_decode_text(node) or ""
    first_line = text.splitlines()[0] if text else ""
    return first_line[:_SNIPPET_LENGTH]
