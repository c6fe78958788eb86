"""Result records returned by the signal engines."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StreakResult:
    """Number of consecutive qualifying weeks ending at the current week."""

    week_count: int


@dataclass(frozen=True)
class TrendResult:
    """Rolling average over a trailing window.

    ``average`` is ``None`` when no samples fell inside the window, so that
    "no data" never reads as an average of zero.
    """

    average: float | None
    sample_count: int

    @property
    def has_data(self) -> bool:
        return self.sample_count > 0


@dataclass(frozen=True)
class PeriodCount:
    """Number of records inside a trailing window."""

    count: int
    window_days: int


@dataclass(frozen=True)
class PeriodSum:
    """Sum of a numeric field over records inside a trailing window."""

    total: float
    count: int
    window_days: int


@dataclass(frozen=True)
class GoalProgress:
    """Progress of a windowed value against a target."""

    current: float
    target: float
    window_days: int

    @property
    def fraction(self) -> float:
        return self.current / self.target

    @property
    def achieved(self) -> bool:
        return self.current >= self.target
