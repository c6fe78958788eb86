"""Weekly consistency streak."""

import logging
from collections import Counter
from collections.abc import Iterable
from datetime import date, timedelta

from fitness_signals.domain.errors import InvalidParameterError
from fitness_signals.domain.records import WorkoutEvent
from fitness_signals.domain.results import StreakResult
from fitness_signals.services.calendar import (
    days_between,
    require_date,
    require_positive,
    week_start,
)

DEFAULT_MIN_WORKOUTS_PER_WEEK = 3

_logger = logging.getLogger(__name__)


def weekly_counts(workouts: Iterable[WorkoutEvent]) -> dict[date, int]:
    """Return workout counts keyed by the Monday of each week."""
    return dict(Counter(week_start(workout.date) for workout in workouts))


def compute_streak(
    workouts: Iterable[WorkoutEvent],
    today: date,
    min_workouts_per_week: int = DEFAULT_MIN_WORKOUTS_PER_WEEK,
) -> StreakResult:
    """Count consecutive qualifying weeks walking back from the week of ``today``.

    A week qualifies when it holds at least ``min_workouts_per_week`` workouts.
    The current week is judged on whatever it holds so far, so the streak can
    read zero mid-week. The walk stops at the first week that does not
    qualify, and never goes past the week of the earliest workout.
    """
    today = require_date(today, "today")
    require_positive(min_workouts_per_week, "min_workouts_per_week")

    events = list(workouts)
    for workout in events:
        require_date(workout.date, "workout date")
        if days_between(today, workout.date) > 0:
            raise InvalidParameterError(
                f"Workout dated {workout.date} is after reference date {today}"
            )

    counts = weekly_counts(events)
    if not counts:
        return StreakResult(week_count=0)

    earliest = min(counts)
    week = week_start(today)
    streak = 0
    while week >= earliest and counts.get(week, 0) >= min_workouts_per_week:
        streak += 1
        week -= timedelta(days=7)

    _logger.debug(
        "Streak computed: today=%s weeks=%s threshold=%s",
        today,
        streak,
        min_workouts_per_week,
    )
    return StreakResult(week_count=streak)
