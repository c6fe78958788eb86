"""Tests for period aggregates."""

from datetime import date, timedelta

import pytest

from fitness_signals.domain.errors import InvalidParameterError
from fitness_signals.domain.records import MetricKind
from fitness_signals.services.periods import count_within, goal_progress, sum_within
from tests.conftest import sample, workout


def test_stale_workouts_are_not_counted() -> None:
    reference = date(2024, 6, 20)
    workouts = [
        workout((reference - timedelta(days=9 + offset)).isoformat())
        for offset in range(10)
    ]

    result = count_within(workouts, reference, window_days=7)

    assert result.count == 0
    assert result.window_days == 7


def test_count_within_window() -> None:
    workouts = [
        workout("2024-06-14"),
        workout("2024-06-15"),
        workout("2024-06-20"),
        workout("2024-06-13"),
    ]

    assert count_within(workouts, date(2024, 6, 20), 7).count == 3


def test_count_works_for_metric_records() -> None:
    samples = [sample("2024-06-01", 180), sample("2024-06-15", 178)]
    assert count_within(samples, date(2024, 6, 20), 30).count == 2


def test_sum_within_sums_field() -> None:
    workouts = [
        workout("2024-06-18", minutes=30),
        workout("2024-06-19", minutes=45.5),
        workout("2024-06-01", minutes=90),
    ]

    result = sum_within(
        workouts, date(2024, 6, 20), 7, lambda event: event.duration_minutes
    )

    assert result.total == pytest.approx(75.5)
    assert result.count == 2


def test_sum_within_empty_window() -> None:
    result = sum_within(
        [sample("2024-06-19", 8000, MetricKind.STEPS)],
        date(2024, 7, 20),
        7,
        lambda s: s.value,
    )

    assert result.total == 0
    assert result.count == 0


def test_non_positive_window_rejected() -> None:
    with pytest.raises(InvalidParameterError):
        count_within([workout("2024-06-19")], date(2024, 6, 20), 0)


def test_goal_progress() -> None:
    progress = goal_progress(9, 12, 30)

    assert progress.fraction == pytest.approx(0.75)
    assert not progress.achieved
    assert goal_progress(13, 12, 30).achieved


def test_goal_progress_rejects_non_positive_target() -> None:
    with pytest.raises(InvalidParameterError):
        goal_progress(3, 0, 30)


def test_sum_within_rejects_non_numeric_field() -> None:
    workouts = [workout("2024-06-19", minutes=None)]

    with pytest.raises(InvalidParameterError):
        sum_within(
            workouts, date(2024, 6, 20), 7, lambda event: event.duration_minutes
        )
