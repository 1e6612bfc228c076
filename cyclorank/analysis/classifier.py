from __future__ import annotations

from typing import assert_never

from cyclorank.core import constants as cs
from cyclorank.data_models.types_defs import NodeKind, TreeSitterNodeProtocol


def decision_weight(node: TreeSitterNodeProtocol) -> int:
    """Returns how much a single node adds to cyclomatic complexity.

    Function and method declarations count once for their entry point. Every
    `if`, every `for` (counted or range), every case clause of a switch
    (`default` included), every communication clause of a select, and every
    short-circuit `&&` / `||` adds one. Everything else adds nothing.

    Args:
        node (TreeSitterNodeProtocol): Any syntax node.

    Returns:
        int: 0 or 1.
    """
    kind = NodeKind.of(node.type)
    match kind:
        case (
            NodeKind.FUNCTION_DECLARATION
            | NodeKind.METHOD_DECLARATION
            | NodeKind.IF_STATEMENT
            | NodeKind.FOR_STATEMENT
            | NodeKind.EXPRESSION_CASE
            | NodeKind.TYPE_CASE
            | NodeKind.DEFAULT_CASE
            | NodeKind.COMMUNICATION_CASE
        ):
            return 1
        case NodeKind.BINARY_EXPRESSION:
            return 1 if _operator(node) in cs.LOGICAL_OPERATORS else 0
        case NodeKind.OTHER:
            return 0
        case _:
            assert_never(kind)


def _operator(node: TreeSitterNodeProtocol) -> str | None:
    operator = node.child_by_field_name(cs.FIELD_OPERATOR)
    return operator.type if operator is not None else None
