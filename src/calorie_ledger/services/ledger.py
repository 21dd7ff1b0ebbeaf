"""Food entry ledger service."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from calorie_ledger.clock import Clock, utc_now
from calorie_ledger.domain.dates import as_utc, day_boundaries, resolve_day
from calorie_ledger.domain.entries import CreateFoodEntryRequest, FoodEntry
from calorie_ledger.domain.errors import ValidationError

logger = logging.getLogger(__name__)


class FoodEntryRepository(Protocol):
    """Persistence interface for food entries."""

    def insert(self, name: str, calories: int, created_at: datetime) -> FoodEntry:
        """Persist a new entry and return it with its assigned id."""

    def list_all(self) -> list[FoodEntry]:
        """Return every entry, newest first."""

    def list_between(self, start: datetime, end: datetime) -> list[FoodEntry]:
        """Return entries with ``start <= created_at < end``, oldest first."""

    def sum_calories_between(self, start: datetime, end: datetime) -> int:
        """Return the calorie sum for ``start <= created_at < end``."""


def validate_create_request(request: CreateFoodEntryRequest) -> None:
    """Raise ValidationError when a create request is malformed."""
    if not isinstance(request.name, str) or not request.name:
        raise ValidationError("Food name is required")
    calories = request.calories
    if isinstance(calories, bool) or not isinstance(calories, int):
        raise ValidationError("Calories must be an integer")
    if calories < 0:
        raise ValidationError("Calories must be a non-negative integer")


@dataclass
class LedgerService:
    """Service for recording and listing food entries."""

    repository: FoodEntryRepository
    clock: Clock = field(default=utc_now)

    def create_entry(
        self, request: CreateFoodEntryRequest, created_at: datetime | None = None
    ) -> FoodEntry:
        """Validate and persist a food entry.

        ``created_at`` defaults to the clock's current instant. Supplying it
        is meant for backfilling and fixtures.
        """
        validate_create_request(request)
        stamp = as_utc(created_at if created_at is not None else self.clock())
        entry = self.repository.insert(request.name, request.calories, stamp)
        logger.info(
            "Recorded food entry",
            extra={"entry_id": entry.id, "calories": entry.calories},
        )
        return entry

    def list_entries(self) -> list[FoodEntry]:
        """Return all entries, most recent first."""
        return self.repository.list_all()

    def list_entries_by_date(self, day: str | None = None) -> list[FoodEntry]:
        """Return the entries of one UTC day, earliest first.

        ``day`` is a ``YYYY-MM-DD`` string; today is used when omitted.
        """
        start, end = day_boundaries(resolve_day(day, self.clock))
        return self.repository.list_between(start, end)
