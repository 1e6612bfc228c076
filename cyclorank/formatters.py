from __future__ import annotations

import json

from cyclorank.analysis.summary import format_average
from cyclorank.core import constants as cs
from cyclorank.data_models.models import AnalysisReport


class ReportFormatter:
    """Renders an `AnalysisReport` for the output sink."""

    @staticmethod
    def to_lines(report: AnalysisReport) -> list[str]:
        """One `<complexity> <package> <function> <file:line:column>` line per
        retained record, then `Average: X` when an average was computed.
        """
        lines = [str(record) for record in report.ranked.records]
        if report.average is not None:
            lines.append(
                cs.AVERAGE_LINE.format(average=format_average(report.average))
            )
        return lines

    @staticmethod
    def to_json(report: AnalysisReport, indent: int | None = 2) -> str:
        payload = {
            cs.JSON_KEY_FUNCTIONS: [r.to_dict() for r in report.ranked.records],
            cs.JSON_KEY_PASSED: report.ranked.passed,
            cs.JSON_KEY_TOTAL: report.total,
            cs.JSON_KEY_AVERAGE: (
                round(report.average, 3) if report.average is not None else None
            ),
        }
        return json.dumps(payload, indent=indent)

    @classmethod
    def render(cls, report: AnalysisReport, output_format: cs.OutputFormat) -> str:
        match output_format:
            case cs.OutputFormat.JSON:
                return cls.to_json(report)
            case cs.OutputFormat.TEXT:
                return "\n".join(cls.to_lines(report))
