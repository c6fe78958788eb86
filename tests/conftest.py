"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

import pytest

from fitness_signals.config import Settings
from fitness_signals.domain.records import MetricKind, MetricSample, WorkoutEvent
from fitness_signals.services.dashboard import DashboardService, RecordSource


@dataclass
class InMemoryRecordSource(RecordSource):
    """In-memory record source for tests."""

    workouts: list[WorkoutEvent] = field(default_factory=list)
    metrics: list[MetricSample] = field(default_factory=list)
    reads: list[UUID] = field(default_factory=list)

    def list_workouts(self, user_id: UUID) -> list[WorkoutEvent]:
        self.reads.append(user_id)
        return list(self.workouts)

    def list_metrics(self, user_id: UUID) -> list[MetricSample]:
        return list(self.metrics)


def workout(day: str, minutes: float = 45, kind: str = "strength") -> WorkoutEvent:
    return WorkoutEvent(
        date=date.fromisoformat(day), duration_minutes=minutes, type=kind
    )


def sample(
    day: str, value: float, kind: MetricKind = MetricKind.WEIGHT
) -> MetricSample:
    return MetricSample(date=date.fromisoformat(day), value=value, kind=kind)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        min_workouts_per_week=3,
        weight_window_days=30,
        body_fat_window_days=30,
        sleep_window_days=7,
        resting_hr_window_days=7,
        week_window_days=7,
        month_window_days=30,
        monthly_workout_goal=12,
    )


@pytest.fixture
def record_source() -> InMemoryRecordSource:
    return InMemoryRecordSource()


@pytest.fixture
def dashboard_service(
    record_source: InMemoryRecordSource, settings: Settings
) -> DashboardService:
    return DashboardService(source=record_source, settings=settings)
