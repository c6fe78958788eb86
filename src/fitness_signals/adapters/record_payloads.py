"""Pydantic models for stored record documents."""

import datetime
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fitness_signals.domain.errors import InvalidParameterError
from fitness_signals.domain.records import MetricKind, MetricSample, WorkoutEvent


class WorkoutPayload(BaseModel):
    """Workout document payload."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: datetime.date
    duration_minutes: float = Field(alias="durationMinutes", ge=0)
    type: str
    source: str = "manual"

    def to_domain(self) -> WorkoutEvent:
        return WorkoutEvent(
            date=self.date,
            duration_minutes=self.duration_minutes,
            type=self.type,
            source=self.source,
        )


class MetricPayload(BaseModel):
    """Metric sample document payload."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: datetime.date
    value: float
    kind: MetricKind

    def to_domain(self) -> MetricSample:
        return MetricSample(date=self.date, value=self.value, kind=self.kind)


def to_workouts(documents: Iterable[Mapping[str, object]]) -> list[WorkoutEvent]:
    """Validate workout documents and return domain events."""
    try:
        return [WorkoutPayload.model_validate(doc).to_domain() for doc in documents]
    except ValidationError as exc:
        raise InvalidParameterError(f"Invalid workout document: {exc}") from exc


def to_metrics(documents: Iterable[Mapping[str, object]]) -> list[MetricSample]:
    """Validate metric documents and return domain samples."""
    try:
        return [MetricPayload.model_validate(doc).to_domain() for doc in documents]
    except ValidationError as exc:
        raise InvalidParameterError(f"Invalid metric document: {exc}") from exc
