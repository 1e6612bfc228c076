from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from cyclorank.data_models.models import FunctionRecord, SourcePosition


@dataclass
class NodeStub:
    type: str
    text: bytes | None = None
    children: list[NodeStub] = field(default_factory=list)
    fields: dict[str, NodeStub] = field(default_factory=dict)

    def child_by_field_name(self, name: str) -> NodeStub | None:
        return self.fields.get(name)


def logical(op: str, left: NodeStub | None = None, right: NodeStub | None = None) -> NodeStub:
    left = left or NodeStub("identifier", text=b"a")
    right = right or NodeStub("identifier", text=b"b")
    operator = NodeStub(op)
    return NodeStub(
        "binary_expression",
        children=[left, operator, right],
        fields={"left": left, "operator": operator, "right": right},
    )


def block(*statements: NodeStub) -> NodeStub:
    return NodeStub("block", children=list(statements))


def func_decl(name: str, *statements: NodeStub) -> NodeStub:
    name_node = NodeStub("identifier", text=name.encode())
    body = block(*statements)
    return NodeStub(
        "function_declaration",
        children=[NodeStub("func"), name_node, NodeStub("parameter_list"), body],
        fields={"name": name_node, "body": body},
    )


def make_record(
    complexity: int,
    name: str = "f",
    index: int = 0,
    package: str = "main",
    filename: str = "main.go",
) -> FunctionRecord:
    return FunctionRecord(
        package_name=package,
        display_name=name,
        complexity=complexity,
        position=SourcePosition(filename, index + 1, 1),
        index=index,
    )


def records_from(complexities: list[int]) -> list[FunctionRecord]:
    return [
        make_record(c, name=f"f{i}", index=i) for i, c in enumerate(complexities)
    ]


@pytest.fixture
def go_parser():
    pytest.importorskip("tree_sitter_go")
    from cyclorank.parsers.go import GoSourceParser

    return GoSourceParser()


@pytest.fixture
def write_go(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(relative: str, source: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source)
        return path

    return _write
