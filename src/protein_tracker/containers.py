"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from protein_tracker.adapters.sqlite_entry_repository import SqliteEntryRepository
from protein_tracker.adapters.sqlite_schema import ensure_schema
from protein_tracker.adapters.sqlite_settings_repository import (
    SqliteSettingsRepository,
)
from protein_tracker.adapters.sqlite_store import SqliteStore, get_default_store
from protein_tracker.config import Settings
from protein_tracker.services.clock import Clock, SystemClock
from protein_tracker.services.entries import EntryService
from protein_tracker.services.overview import OverviewService
from protein_tracker.services.settings import SettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: SqliteStore
    clock: Clock
    settings_service: SettingsService
    entry_service: EntryService
    overview_service: OverviewService
    close_resources: Callable[[], None]

    def ensure_schema(self) -> None:
        """Create tables and the default settings row if missing."""
        ensure_schema(self.store, self.settings.default_goal_protein_g)


def build_container(
    settings: Settings | None = None,
    clock: Clock | None = None,
    store: SqliteStore | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_store = store or get_default_store(resolved_settings.db_path)
    resolved_clock = clock or SystemClock(resolved_settings.timezone)
    settings_service = SettingsService(SqliteSettingsRepository(resolved_store))
    entry_service = EntryService(
        repository=SqliteEntryRepository(resolved_store),
        clock=resolved_clock,
        history_days=resolved_settings.history_days,
    )
    overview_service = OverviewService(
        settings_service=settings_service,
        entry_service=entry_service,
    )

    def close_resources() -> None:
        resolved_store.close()

    return AppContainer(
        settings=resolved_settings,
        store=resolved_store,
        clock=resolved_clock,
        settings_service=settings_service,
        entry_service=entry_service,
        overview_service=overview_service,
        close_resources=close_resources,
    )
