"""Daily calorie totals."""

from dataclasses import dataclass, field

from calorie_ledger.clock import Clock, utc_now
from calorie_ledger.domain.dates import day_boundaries, resolve_day
from calorie_ledger.domain.entries import DailyTotal
from calorie_ledger.services.ledger import FoodEntryRepository


@dataclass
class DailyTotalService:
    """Service computing calorie totals per UTC day."""

    repository: FoodEntryRepository
    clock: Clock = field(default=utc_now)

    def total_for(self, day: str | None = None) -> DailyTotal:
        """Return the calorie total for ``day`` (today when omitted)."""
        resolved = resolve_day(day, self.clock)
        start, end = day_boundaries(resolved)
        total = self.repository.sum_calories_between(start, end)
        return DailyTotal(day=resolved, total_calories=total or 0)
