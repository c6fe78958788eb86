"""Period aggregates over trailing day windows."""

from collections.abc import Callable, Iterable
from datetime import date
from typing import TypeVar

from fitness_signals.domain.errors import InvalidParameterError
from fitness_signals.domain.records import Record
from fitness_signals.domain.results import GoalProgress, PeriodCount, PeriodSum
from fitness_signals.services.calendar import (
    require_date,
    require_number,
    require_positive,
    within_last_n_days,
)

RecordT = TypeVar("RecordT", bound=Record)


def _in_window(
    records: Iterable[RecordT], reference: date, window_days: int
) -> list[RecordT]:
    require_date(reference, "reference")
    require_positive(window_days, "window_days")
    return [
        record
        for record in records
        if within_last_n_days(record.date, reference, window_days)
    ]


def count_within(
    records: Iterable[Record], reference: date, window_days: int
) -> PeriodCount:
    """Count records dated within the window ending at ``reference``."""
    return PeriodCount(
        count=len(_in_window(records, reference, window_days)),
        window_days=window_days,
    )


def sum_within(
    records: Iterable[RecordT],
    reference: date,
    window_days: int,
    value: Callable[[RecordT], float],
) -> PeriodSum:
    """Sum ``value(record)`` over records dated within the window."""
    selected = _in_window(records, reference, window_days)
    values = [require_number(value(record), "record value") for record in selected]
    return PeriodSum(
        total=sum(values),
        count=len(selected),
        window_days=window_days,
    )


def goal_progress(current: float, target: float, window_days: int) -> GoalProgress:
    """Return progress of ``current`` toward ``target`` over a window."""
    require_positive(window_days, "window_days")
    if target <= 0:
        raise InvalidParameterError(f"target must be positive, got {target}")
    return GoalProgress(current=current, target=target, window_days=window_days)
