from __future__ import annotations

import math
from collections.abc import Sequence

from cyclorank.core import constants as cs
from cyclorank.data_models.models import FunctionRecord
from cyclorank.infrastructure import exceptions as ex


def average_complexity(records: Sequence[FunctionRecord]) -> float:
    """Mean complexity over all records, regardless of any filtering.

    Raises:
        NoDataForSummaryError: If `records` is empty.
    """
    if not records:
        raise ex.NoDataForSummaryError(ex.NO_DATA_FOR_SUMMARY)
    return sum(record.complexity for record in records) / len(records)


def format_average(
    average: float, digits: int = cs.AVERAGE_SIGNIFICANT_DIGITS
) -> str:
    """Renders `average` with `digits` significant digits, trailing zeros kept.

    Integral parts longer than `digits` are never truncated: 3.0 -> '3.00',
    2.666 -> '2.67', 12.5 -> '12.5', 9.996 -> '10.0', 1234.5 -> '1234'.
    """
    if average == 0:
        return f"{average:.{digits - 1}f}"
    magnitude = math.floor(math.log10(abs(average)))
    decimals = max(0, digits - 1 - magnitude)
    # rounding may carry into the next power of ten
    if abs(round(average, decimals)) >= 10 ** (magnitude + 1):
        decimals = max(0, decimals - 1)
    return f"{average:.{decimals}f}"
