"""UTC calendar-day helpers."""

import re
from datetime import UTC, date, datetime, time, timedelta

from calorie_ledger.clock import Clock
from calorie_ledger.domain.errors import ValidationError

_DAY_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_day(raw: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string."""
    if not _DAY_PATTERN.fullmatch(raw):
        raise ValidationError(f"Invalid date {raw!r}, expected YYYY-MM-DD")
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError(f"Invalid date {raw!r}") from exc


def day_boundaries(day: date) -> tuple[datetime, datetime]:
    """Return the half-open ``[start, end)`` UTC window covering ``day``."""
    start = datetime.combine(day, time.min, tzinfo=UTC)
    return start, start + timedelta(days=1)


def today(clock: Clock) -> date:
    """Return the current UTC calendar date according to ``clock``."""
    return as_utc(clock()).date()


def resolve_day(raw: str | None, clock: Clock) -> date:
    """Return the requested day, or today when none is given."""
    if raw is None:
        return today(clock)
    return parse_day(raw)


def as_utc(value: datetime) -> datetime:
    """Normalize a timestamp to an aware UTC instant; naive values are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def contains(window: tuple[datetime, datetime], instant: datetime) -> bool:
    """Return True when ``instant`` falls inside the half-open window."""
    start, end = window
    return start <= as_utc(instant) < end
