"""Request and response models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field, StrictInt

from calorie_ledger.domain.entries import (
    CreateFoodEntryRequest,
    DailyTotal,
    FoodEntry,
)


class CreateFoodEntryInput(BaseModel):
    """Payload for recording a food entry."""

    name: str = Field(min_length=1)
    calories: StrictInt = Field(ge=0)

    def to_request(self) -> CreateFoodEntryRequest:
        return CreateFoodEntryRequest(name=self.name, calories=self.calories)


class FoodEntryOut(BaseModel):
    """Serialized food entry."""

    id: int
    name: str
    calories: int
    created_at: datetime

    @classmethod
    def from_entry(cls, entry: FoodEntry) -> "FoodEntryOut":
        return cls(
            id=entry.id,
            name=entry.name,
            calories=entry.calories,
            created_at=entry.created_at,
        )


class DailyTotalOut(BaseModel):
    """Serialized daily calorie total."""

    date: str
    total_calories: int

    @classmethod
    def from_total(cls, total: DailyTotal) -> "DailyTotalOut":
        return cls(date=total.day.isoformat(), total_calories=total.total_calories)
