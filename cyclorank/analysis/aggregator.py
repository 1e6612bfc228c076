from __future__ import annotations

from cyclorank.data_models.models import FunctionRecord


class ComplexityAggregator:
    """Owns the records of one analysis run.

    Records are kept in discovery order and never deduplicated: a file analyzed
    twice contributes two records per function. Consumers only ever get an
    immutable snapshot.
    """

    def __init__(self) -> None:
        self._records: list[FunctionRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    @property
    def next_index(self) -> int:
        """Discovery index the next appended record should carry."""
        return len(self._records)

    def append(self, record: FunctionRecord) -> None:
        self._records.append(record)

    def snapshot(self) -> tuple[FunctionRecord, ...]:
        return tuple(self._records)
