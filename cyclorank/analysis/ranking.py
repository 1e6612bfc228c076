from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from cyclorank.core import logs as ls
from cyclorank.data_models.models import FunctionRecord, RankedResult


def sort_by_complexity(
    records: Sequence[FunctionRecord],
) -> tuple[FunctionRecord, ...]:
    """Returns a new tuple ordered by descending complexity.

    Equal complexities keep their discovery order. The input is left untouched.
    """
    return tuple(sorted(records, key=lambda r: (-r.complexity, r.index)))


def rank_records(
    records: Sequence[FunctionRecord], top: int | None = None, over: int = 0
) -> RankedResult:
    """Selects the records to report.

    Records are sorted by descending complexity; the ones with complexity
    greater than `over` form a prefix of that order, whose length is the passed
    count. `top`, when non-negative, then caps how many of them are retained.

    Args:
        records (Sequence[FunctionRecord]): The full, unfiltered set.
        top (int | None): Maximum number of records to keep; None or negative
            means no cap.
        over (int): Complexity floor, exclusive.

    Returns:
        RankedResult: Retained records, highest first, and the passed count.
    """
    ordered = sort_by_complexity(records)

    passed = 0
    for record in ordered:
        if record.complexity <= over:
            break
        passed += 1

    kept = passed if top is None or top < 0 else min(top, passed)
    logger.debug(
        ls.RANKED.format(total=len(ordered), passed=passed, over=over, kept=kept)
    )
    return RankedResult(records=ordered[:kept], passed=passed)


def exceeds_threshold(result: RankedResult, over: int) -> bool:
    """True when a floor was requested and at least one record was reported."""
    return over > 0 and len(result.records) > 0
