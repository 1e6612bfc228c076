from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache

from cyclorank.core import constants as cs
from cyclorank.data_models.models import SourcePosition
from cyclorank.data_models.types_defs import TreeSitterNodeProtocol


@lru_cache(maxsize=10000)
def _cached_decode_bytes(text_bytes: bytes) -> str:
    return text_bytes.decode(cs.ENCODING_UTF8, errors="replace")


def safe_decode_text(node: TreeSitterNodeProtocol | None) -> str | None:
    """
    Safely decodes the text content of a Tree-sitter node.

    Args:
        node (TreeSitterNodeProtocol | None): The node to extract text from.

    Returns:
        str | None: The decoded string or None if node is None or has no text.
    """
    if node is None or (text_bytes := node.text) is None:
        return None
    if isinstance(text_bytes, bytes):
        return _cached_decode_bytes(text_bytes)
    return str(text_bytes)


def node_position(node, filename: str) -> SourcePosition:
    """Converts a node's 0-based start point into a 1-based `SourcePosition`."""
    row, column = node.start_point
    return SourcePosition(filename=filename, line=row + 1, column=column + 1)


def iter_descendants(
    root: TreeSitterNodeProtocol,
) -> Iterator[TreeSitterNodeProtocol]:
    """Yields `root` and every node below it in depth-first pre-order."""
    stack: list[TreeSitterNodeProtocol] = [root]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))
