"""Rolling trend averages for metric samples."""

from collections.abc import Iterable
from datetime import date

from fitness_signals.domain.records import MetricKind, MetricSample
from fitness_signals.domain.results import TrendResult
from fitness_signals.services.calendar import (
    require_date,
    require_number,
    require_positive,
    within_last_n_days,
)


def samples_of_kind(
    samples: Iterable[MetricSample], kind: MetricKind
) -> list[MetricSample]:
    """Return the samples of a single kind."""
    return [sample for sample in samples if sample.kind == kind]


def compute_trend(
    samples: Iterable[MetricSample], reference: date, window_days: int
) -> TrendResult:
    """Average sample values over the ``window_days`` ending at ``reference``.

    Samples sharing a date are not collapsed: each one contributes to the
    mean. Callers are expected to supply at most one sample per date per kind.
    """
    require_date(reference, "reference")
    require_positive(window_days, "window_days")

    values = [
        require_number(sample.value, "sample value")
        for sample in samples
        if within_last_n_days(sample.date, reference, window_days)
    ]
    if not values:
        return TrendResult(average=None, sample_count=0)
    return TrendResult(average=sum(values) / len(values), sample_count=len(values))
