"""Calendar helpers shared by the signal engines.

Everything here operates on calendar dates only. Weeks start on Monday.
"""

from datetime import date, datetime, timedelta

from fitness_signals.domain.errors import InvalidParameterError


def require_date(value: object, name: str = "date") -> date:
    """Return ``value`` if it is a plain calendar date."""
    # datetime subclasses date but carries a time of day.
    if isinstance(value, datetime) or not isinstance(value, date):
        raise InvalidParameterError(f"{name} must be a calendar date, got {value!r}")
    return value


def require_positive(value: object, name: str) -> int:
    """Return ``value`` if it is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameterError(f"{name} must be positive, got {value}")
    return value


def require_number(value: object, name: str) -> float:
    """Return ``value`` if it is a real number."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    return value


def parse_date(value: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` string into a date."""
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidParameterError(f"Malformed date: {value!r}") from exc


def week_start(day: date) -> date:
    """Return the Monday of the week containing ``day``."""
    day = require_date(day)
    return day - timedelta(days=day.weekday())


def days_between(a: date, b: date) -> int:
    """Return the signed number of days from ``a`` to ``b``."""
    return (require_date(b) - require_date(a)).days


def within_last_n_days(day: date, reference: date, n: int) -> bool:
    """Return True when ``day`` falls in the ``n`` days ending at ``reference``.

    The reference date itself counts as the first day of the window.
    """
    require_positive(n, "n")
    return 0 <= days_between(day, reference) < n
