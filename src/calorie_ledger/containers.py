"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from calorie_ledger.adapters.supabase_food_entry_repository import (
    SupabaseFoodEntryRepository,
)
from calorie_ledger.clock import Clock, utc_now
from calorie_ledger.config import Settings
from calorie_ledger.services.ledger import LedgerService
from calorie_ledger.services.totals import DailyTotalService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ledger_service: LedgerService
    daily_total_service: DailyTotalService
    clock: Clock = utc_now


def build_container(
    settings: Settings | None = None, clock: Clock = utc_now
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    repository = SupabaseFoodEntryRepository(
        supabase_client, table_name=resolved_settings.food_entries_table
    )
    return AppContainer(
        settings=resolved_settings,
        ledger_service=LedgerService(repository, clock=clock),
        daily_total_service=DailyTotalService(repository, clock=clock),
        clock=clock,
    )
