from __future__ import annotations

from pathlib import Path

import pytest

from cyclorank.analysis.analysis_runner import AnalysisRunner
from cyclorank.core import constants as cs
from cyclorank.data_models.models import Declaration, ParsedFile, ReportOptions, SourcePosition
from cyclorank.infrastructure.exceptions import SourceParseError
from cyclorank.tests.conftest import NodeStub, func_decl


def _branchy(name: str, branches: int) -> NodeStub:
    return func_decl(name, *[NodeStub("if_statement") for _ in range(branches)])


class FakeParser:
    """Returns canned parse results keyed by file name."""

    def __init__(self, files: dict[str, list[tuple[str, int]]]) -> None:
        self.files = files
        self.parsed: list[str] = []

    def parse_file(self, path: Path) -> ParsedFile:
        self.parsed.append(path.name)
        if path.name not in self.files:
            raise SourceParseError(str(path), "cannot read file")
        declarations = tuple(
            Declaration(
                kind=cs.DeclarationKind.FUNCTION,
                node=_branchy(name, branches),
                name=name,
                position=SourcePosition(str(path), line, 1),
            )
            for line, (name, branches) in enumerate(self.files[path.name], start=1)
        )
        return ParsedFile(str(path), path.stem, declarations)


def test_analyze_collects_in_path_order() -> None:
    parser = FakeParser({"a.go": [("a1", 0), ("a2", 3)], "b.go": [("b1", 1)]})
    runner = AnalysisRunner(parser)

    records = runner.analyze([Path("b.go"), Path("a.go")])

    assert [r.display_name for r in records] == ["b1", "a1", "a2"]
    assert [r.complexity for r in records] == [2, 1, 4]
    assert [r.package_name for r in records] == ["b", "a", "a"]


def test_same_file_twice_is_counted_twice() -> None:
    runner = AnalysisRunner(FakeParser({"a.go": [("a1", 0)]}))

    records = runner.analyze([Path("a.go"), Path("a.go")])

    assert len(records) == 2


def test_report_applies_options_and_averages_before_filtering() -> None:
    parser = FakeParser({"a.go": [("low", 0), ("high", 4), ("mid", 2)]})
    runner = AnalysisRunner(parser)

    report = runner.report([Path("a.go")], ReportOptions(over=2, top=1, avg=True))

    assert [r.display_name for r in report.ranked.records] == ["high"]
    assert report.ranked.passed == 2
    assert report.total == 3
    assert report.average == pytest.approx(3.0)


def test_report_without_functions_has_no_average() -> None:
    runner = AnalysisRunner(FakeParser({"a.go": []}))

    report = runner.report([Path("a.go")], ReportOptions(avg=True))

    assert report.average is None
    assert report.total == 0


def test_parse_failure_stops_the_run() -> None:
    parser = FakeParser({"a.go": [("a1", 0)], "c.go": [("c1", 0)]})
    runner = AnalysisRunner(parser)

    with pytest.raises(SourceParseError):
        runner.analyze([Path("a.go"), Path("broken.go"), Path("c.go")])

    assert parser.parsed == ["a.go", "broken.go"]
