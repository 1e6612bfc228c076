from __future__ import annotations

from cyclorank.core import constants as cs
from cyclorank.data_models.models import Declaration, FunctionRecord, ParsedFile
from cyclorank.data_models.types_defs import TreeSitterNodeProtocol

from ..parsers.utils import safe_decode_text
from .aggregator import ComplexityAggregator
from .walker import function_complexity


def receiver_string(type_node: TreeSitterNodeProtocol | None) -> str:
    """Renders a method receiver type as `T` or `*T`.

    Any other written shape (generic instantiation, qualified or parenthesized
    type, or a missing type) renders as `BADRECV`. A pointer keeps its `*` in
    front of whatever its target renders to, so `*List[T]` gives `*BADRECV`.
    """
    if type_node is None:
        return cs.BAD_RECEIVER
    match type_node.type:
        case cs.TS_GO_TYPE_IDENTIFIER:
            return safe_decode_text(type_node) or cs.BAD_RECEIVER
        case cs.TS_GO_POINTER_TYPE:
            target = next(
                (c for c in type_node.children if c.type != cs.TS_GO_POINTER_TOKEN),
                None,
            )
            if target is None:
                return cs.BAD_RECEIVER
            return f"*{receiver_string(target)}"
        case _:
            return cs.BAD_RECEIVER


def display_name(declaration: Declaration) -> str:
    """Returns `Name` for functions and `(Recv).Name` for methods."""
    if declaration.kind == cs.DeclarationKind.METHOD:
        return f"({receiver_string(declaration.receiver_type)}).{declaration.name}"
    return declaration.name


def collect_declarations(
    parsed_file: ParsedFile, aggregator: ComplexityAggregator
) -> int:
    """Scores every function and method of a parsed file.

    Args:
        parsed_file (ParsedFile): The file's package name and declarations.
        aggregator (ComplexityAggregator): Receives one record per function.

    Returns:
        int: The number of records appended.
    """
    collected = 0
    for declaration in parsed_file.declarations:
        if not declaration.is_function:
            continue
        aggregator.append(
            FunctionRecord(
                package_name=parsed_file.package_name,
                display_name=display_name(declaration),
                complexity=function_complexity(declaration.node),
                position=declaration.position,
                index=aggregator.next_index,
            )
        )
        collected += 1
    return collected
