"""Supabase repository for food entries."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from calorie_ledger.domain.dates import as_utc
from calorie_ledger.domain.entries import FoodEntry
from calorie_ledger.domain.errors import StorageError
from calorie_ledger.services.ledger import FoodEntryRepository

# PostgREST caps unbounded selects, so scans are read in keyset pages of this size.
PAGE_SIZE = 1000

_COLUMNS = "id, name, calories, created_at"


@dataclass
class SupabaseFoodEntryRepository(FoodEntryRepository):
    """Supabase implementation for the food entry ledger."""

    client: Client
    table_name: str = "food_entries"

    def insert(self, name: str, calories: int, created_at: datetime) -> FoodEntry:
        """Insert an entry row and return it with its database id."""
        try:
            response = (
                self.client.table(self.table_name)
                .insert(
                    {
                        "name": name,
                        "calories": calories,
                        "created_at": created_at.isoformat(),
                    }
                )
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StorageError("Failed to create food entry") from exc
        if not response.data:
            raise StorageError("Failed to create food entry")
        return _parse_row(response.data[0])

    def list_all(self) -> list[FoodEntry]:
        """Return every entry ordered newest first."""

        def page_after(last: dict[str, object] | None) -> Any:
            query = self.client.table(self.table_name).select(_COLUMNS)
            if last is not None:
                query = query.or_(_keyset_filter(last, "lt"))
            return query.order("created_at", desc=True).order("id", desc=True)

        return [_parse_row(row) for row in self._fetch_pages(page_after)]

    def list_between(self, start: datetime, end: datetime) -> list[FoodEntry]:
        """Return entries in ``[start, end)`` ordered oldest first."""

        def page_after(last: dict[str, object] | None) -> Any:
            query = (
                self.client.table(self.table_name)
                .select(_COLUMNS)
                .gte("created_at", start.isoformat())
                .lt("created_at", end.isoformat())
            )
            if last is not None:
                query = query.or_(_keyset_filter(last, "gt"))
            return query.order("created_at", desc=False).order("id", desc=False)

        return [_parse_row(row) for row in self._fetch_pages(page_after)]

    def sum_calories_between(self, start: datetime, end: datetime) -> int:
        """Return the calorie sum for entries in ``[start, end)``."""

        def page_after(last: dict[str, object] | None) -> Any:
            query = (
                self.client.table(self.table_name)
                .select("id, calories")
                .gte("created_at", start.isoformat())
                .lt("created_at", end.isoformat())
            )
            if last is not None:
                query = query.gt("id", last["id"])
            return query.order("id", desc=False)

        rows = self._fetch_pages(page_after)
        return sum(int(row.get("calories") or 0) for row in rows)

    def _fetch_pages(
        self, page_after: Callable[[dict[str, object] | None], Any]
    ) -> list[dict[str, object]]:
        rows: list[dict[str, object]] = []
        last: dict[str, object] | None = None
        while True:
            try:
                response = page_after(last).limit(PAGE_SIZE).execute()
            except (APIError, httpx.HTTPError) as exc:
                raise StorageError("Failed to read food entries") from exc
            page = response.data or []
            rows.extend(page)
            if len(page) < PAGE_SIZE:
                return rows
            last = page[-1]


def _keyset_filter(last: dict[str, object], op: str) -> str:
    """Select rows past ``last`` in ``(created_at, id)`` order."""
    stamp = last["created_at"]
    return (
        f'created_at.{op}."{stamp}",'
        f'and(created_at.eq."{stamp}",id.{op}.{last["id"]})'
    )


def _parse_row(row: dict[str, object]) -> FoodEntry:
    created_at_raw = row.get("created_at")
    if not isinstance(created_at_raw, str) or not created_at_raw:
        raise StorageError(f"Food entry {row.get('id')} has no created_at")
    return FoodEntry(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        calories=int(row.get("calories") or 0),
        created_at=as_utc(datetime.fromisoformat(created_at_raw)),
    )
