"""Domain models for food entries."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class FoodEntry:
    """A single recorded food consumption event."""

    id: int
    name: str
    calories: int
    created_at: datetime


@dataclass(frozen=True)
class CreateFoodEntryRequest:
    """Caller-supplied fields for a new food entry."""

    name: str
    calories: int


@dataclass(frozen=True)
class DailyTotal:
    """Summed calories for one UTC calendar day."""

    day: date
    total_calories: int
