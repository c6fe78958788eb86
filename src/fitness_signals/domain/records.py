"""Domain models for fitness records."""

import datetime
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class MetricKind(StrEnum):
    """Kinds of metric samples tracked for a user."""

    WEIGHT = "weight"
    BODY_FAT = "body_fat"
    RESTING_HEART_RATE = "resting_heart_rate"
    SLEEP_DURATION = "sleep_duration"
    STEPS = "steps"
    HRV = "hrv"


class Record(Protocol):
    """Any date-stamped record consumed by the engines."""

    @property
    def date(self) -> datetime.date:
        """Calendar date the record belongs to."""


@dataclass(frozen=True)
class WorkoutEvent:
    """A completed workout on a calendar date."""

    date: datetime.date
    duration_minutes: float
    type: str
    source: str = "manual"


@dataclass(frozen=True)
class MetricSample:
    """A single numeric body or physiological measurement."""

    date: datetime.date
    value: float
    kind: MetricKind
