from __future__ import annotations

import pytest

from cyclorank.core import constants as cs
from cyclorank.core.config import AppConfig
from cyclorank.data_models.models import ReportOptions


def test_defaults() -> None:
    config = AppConfig(_env_file=None)

    assert config.resolve_report_options() == ReportOptions(over=0, top=None, avg=False)
    assert config.EXCLUDE == cs.DEFAULT_EXCLUDE_DIRS
    assert not config.RECURSIVE


def test_environment_overrides_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CYCLORANK_OVER", "10")
    monkeypatch.setenv("CYCLORANK_TOP", "5")
    monkeypatch.setenv("CYCLORANK_AVG", "true")

    config = AppConfig(_env_file=None)

    assert config.resolve_report_options() == ReportOptions(over=10, top=5, avg=True)


def test_command_line_values_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CYCLORANK_OVER", "10")
    config = AppConfig(_env_file=None)

    options = config.resolve_report_options(over=0, top=3)

    assert options == ReportOptions(over=0, top=3, avg=False)
