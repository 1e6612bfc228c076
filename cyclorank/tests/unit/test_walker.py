from __future__ import annotations

from cyclorank.analysis.walker import function_complexity
from cyclorank.tests.conftest import NodeStub, block, func_decl, logical


def _if(condition: NodeStub | None = None, alternative: NodeStub | None = None) -> NodeStub:
    condition = condition or NodeStub("identifier", text=b"ok")
    children = [NodeStub("if"), condition, block()]
    fields = {"condition": condition}
    if alternative is not None:
        children += [NodeStub("else"), alternative]
        fields["alternative"] = alternative
    return NodeStub("if_statement", children=children, fields=fields)


def _for(clause: str = "for_clause") -> NodeStub:
    return NodeStub("for_statement", children=[NodeStub("for"), NodeStub(clause), block()])


def test_function_without_branches_scores_one() -> None:
    assert function_complexity(func_decl("plain")) == 1


def test_if_and_two_loops_score_four() -> None:
    decl = func_decl("loops", _if(), _for("for_clause"), _for("range_clause"))

    assert function_complexity(decl) == 4


def test_else_if_chain_counts_each_if() -> None:
    chain = _if(alternative=_if(alternative=block()))

    assert function_complexity(func_decl("chain", chain)) == 3


def test_switch_counts_every_case_including_default() -> None:
    switch = NodeStub(
        "expression_switch_statement",
        children=[
            NodeStub("switch"),
            NodeStub("expression_case"),
            NodeStub("expression_case"),
            NodeStub("default_case"),
        ],
    )

    assert function_complexity(func_decl("switcher", switch)) == 4


def test_select_counts_every_communication_clause() -> None:
    select = NodeStub(
        "select_statement",
        children=[NodeStub("communication_case"), NodeStub("communication_case")],
    )

    assert function_complexity(func_decl("selector", select)) == 3


def test_logical_operators_inside_conditions_are_counted() -> None:
    condition = logical("||", left=logical("&&"))

    assert function_complexity(func_decl("cond", _if(condition=condition))) == 4


def test_function_literal_is_attributed_to_enclosing_declaration() -> None:
    literal = NodeStub("func_literal", children=[block(_if(), _for())])

    assert function_complexity(func_decl("outer", literal)) == 3


def test_score_equals_one_plus_decision_points() -> None:
    switch = NodeStub(
        "type_switch_statement",
        children=[NodeStub("type_case"), NodeStub("default_case")],
    )
    decl = func_decl(
        "mixed",
        _if(condition=logical("&&"), alternative=_if()),
        _for("range_clause"),
        switch,
    )
    branches, loops, clauses, operators = 2, 1, 2, 1

    assert function_complexity(decl) == 1 + branches + loops + clauses + operators
