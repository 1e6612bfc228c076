from __future__ import annotations

from cyclorank.data_models.types_defs import TreeSitterNodeProtocol

from ..parsers.utils import iter_descendants
from .classifier import decision_weight


def function_complexity(declaration: TreeSitterNodeProtocol) -> int:
    """Calculates the cyclomatic complexity of one function or method.

    Every node of the declaration's subtree is visited once, the declaration
    node included, so a function without branches scores 1. Function literals
    nested in the body are part of the same subtree and count toward the
    enclosing declaration.
    """
    return sum(decision_weight(node) for node in iter_descendants(declaration))
