"""Clock capability used to stamp entries and default dates."""

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current aware UTC instant."""
    return datetime.now(tz=UTC)
