from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from cyclorank.core import constants as cs
from cyclorank.core import logs as ls
from cyclorank.data_models.models import AnalysisReport, FunctionRecord, ReportOptions
from cyclorank.data_models.types_defs import SourceParserProtocol
from cyclorank.infrastructure.decorators import timing_decorator
from cyclorank.infrastructure.language_spec import get_language_spec

from ..utils.path_utils import iter_source_files
from .aggregator import ComplexityAggregator
from .collector import collect_declarations
from .ranking import rank_records
from .summary import average_complexity


class AnalysisRunner:
    """Runs one complexity analysis over a list of files and directories.

    Files are parsed and collected strictly one after another; the first
    parse failure aborts the run by propagating `SourceParseError`.
    """

    def __init__(
        self,
        source_parser: SourceParserProtocol,
        recursive: bool = False,
        skip_tests: bool = False,
        exclude_dirs: frozenset[str] = frozenset(),
        language: cs.SupportedLanguage = cs.SupportedLanguage.GO,
    ) -> None:
        self.source_parser = source_parser
        self.recursive = recursive
        self.skip_tests = skip_tests
        self.exclude_dirs = exclude_dirs
        self.spec = get_language_spec(language)

    @timing_decorator
    def analyze(self, paths: Iterable[Path]) -> tuple[FunctionRecord, ...]:
        """Collects one record per function found under `paths`.

        Args:
            paths (Iterable[Path]): Files and directories in command-line order.

        Raises:
            SourceParseError: If any file cannot be read or parsed.

        Returns:
            tuple[FunctionRecord, ...]: All records, in discovery order.
        """
        aggregator = ComplexityAggregator()
        files = 0
        for source_file in iter_source_files(
            paths,
            self.spec,
            recursive=self.recursive,
            skip_tests=self.skip_tests,
            exclude_dirs=self.exclude_dirs,
        ):
            parsed = self.source_parser.parse_file(source_file)
            count = collect_declarations(parsed, aggregator)
            logger.debug(ls.FILE_ANALYZED.format(path=source_file, count=count))
            files += 1

        logger.info(ls.RUN_COMPLETE.format(files=files, functions=len(aggregator)))
        return aggregator.snapshot()

    def report(self, paths: Iterable[Path], options: ReportOptions) -> AnalysisReport:
        """Analyzes `paths` and applies ranking, filtering and the optional average.

        The average is computed over every record, before filtering, and is
        left out when no function was found.
        """
        records = self.analyze(paths)
        ranked = rank_records(records, top=options.top, over=options.over)

        average: float | None = None
        if options.avg:
            if records:
                average = average_complexity(records)
            else:
                logger.warning(ls.NO_FUNCTIONS_FOR_AVERAGE)

        return AnalysisReport(ranked=ranked, total=len(records), average=average)
