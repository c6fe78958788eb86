"""Signal summary assembled from a record snapshot."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Protocol, TypeVar
from uuid import UUID

from fitness_signals.config import Settings
from fitness_signals.domain.errors import InvalidParameterError
from fitness_signals.domain.records import MetricKind, MetricSample, WorkoutEvent
from fitness_signals.domain.results import (
    GoalProgress,
    PeriodCount,
    PeriodSum,
    StreakResult,
    TrendResult,
)
from fitness_signals.services.periods import count_within, goal_progress, sum_within
from fitness_signals.services.streak import compute_streak
from fitness_signals.services.trends import compute_trend, samples_of_kind

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordSource(Protocol):
    """Snapshot provider for a user's records."""

    def list_workouts(self, user_id: UUID) -> list[WorkoutEvent]:
        """Return all workouts for the user."""

    def list_metrics(self, user_id: UUID) -> list[MetricSample]:
        """Return all metric samples for the user."""


@dataclass(frozen=True)
class SignalsSummary:
    """Computed signals for a user; a metric is None when it failed."""

    reference: date
    streak: StreakResult | None
    weight_trend: TrendResult | None
    body_fat_trend: TrendResult | None
    sleep_trend: TrendResult | None
    resting_hr_trend: TrendResult | None
    workouts_last_week: PeriodCount | None
    workouts_last_month: PeriodCount | None
    minutes_last_week: PeriodSum | None
    monthly_goal: GoalProgress | None
    failed: tuple[str, ...] = ()


@dataclass
class DashboardService:
    """Service that computes every signal for a user in isolation."""

    source: RecordSource
    settings: Settings

    def get_summary(self, user_id: UUID, reference: date) -> SignalsSummary:
        """Return all signals as of ``reference``."""
        workouts = self.source.list_workouts(user_id)
        metrics = self.source.list_metrics(user_id)
        failed: list[str] = []
        settings = self.settings

        def attempt(name: str, compute: Callable[[], T]) -> T | None:
            try:
                return compute()
            except InvalidParameterError:
                _logger.exception(
                    "Failed to compute %s", name, extra={"user_id": user_id}
                )
                failed.append(name)
                return None

        def trend(kind: MetricKind, window_days: int) -> TrendResult:
            return compute_trend(samples_of_kind(metrics, kind), reference, window_days)

        month = attempt(
            "workouts_last_month",
            lambda: count_within(workouts, reference, settings.month_window_days),
        )
        goal = None
        if month is None:
            failed.append("monthly_goal")
        else:
            goal = attempt(
                "monthly_goal",
                lambda: goal_progress(
                    month.count,
                    settings.monthly_workout_goal,
                    settings.month_window_days,
                ),
            )

        return SignalsSummary(
            reference=reference,
            streak=attempt(
                "streak",
                lambda: compute_streak(
                    workouts, reference, settings.min_workouts_per_week
                ),
            ),
            weight_trend=attempt(
                "weight_trend",
                lambda: trend(MetricKind.WEIGHT, settings.weight_window_days),
            ),
            body_fat_trend=attempt(
                "body_fat_trend",
                lambda: trend(MetricKind.BODY_FAT, settings.body_fat_window_days),
            ),
            sleep_trend=attempt(
                "sleep_trend",
                lambda: trend(MetricKind.SLEEP_DURATION, settings.sleep_window_days),
            ),
            resting_hr_trend=attempt(
                "resting_hr_trend",
                lambda: trend(
                    MetricKind.RESTING_HEART_RATE, settings.resting_hr_window_days
                ),
            ),
            workouts_last_week=attempt(
                "workouts_last_week",
                lambda: count_within(workouts, reference, settings.week_window_days),
            ),
            workouts_last_month=month,
            minutes_last_week=attempt(
                "minutes_last_week",
                lambda: sum_within(
                    workouts,
                    reference,
                    settings.week_window_days,
                    lambda workout: workout.duration_minutes,
                ),
            ),
            monthly_goal=goal,
            failed=tuple(failed),
        )
