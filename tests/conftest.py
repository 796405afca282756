"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta

import pytest

from protein_tracker.adapters.sqlite_schema import ensure_schema
from protein_tracker.adapters.sqlite_store import SqliteStore
from protein_tracker.config import Settings
from protein_tracker.containers import AppContainer, build_container
from protein_tracker.domain.entries import Entry
from protein_tracker.domain.stats import DayHistory
from protein_tracker.services.clock import Clock
from protein_tracker.services.entries import EntryRepository, EntryService
from protein_tracker.services.settings import SettingsRepository, SettingsService


@dataclass
class FixedClock(Clock):
    """Clock pinned to a day whose timestamps advance one second per call."""

    current_day: date = date(2024, 1, 10)
    current_time: datetime = datetime(2024, 1, 10, 12, 0, tzinfo=UTC)

    def today(self) -> date:
        return self.current_day

    def now(self) -> datetime:
        stamp = self.current_time
        self.current_time = stamp + timedelta(seconds=1)
        return stamp


@dataclass
class InMemorySettingsRepository(SettingsRepository):
    """In-memory settings repository for tests."""

    goal: float | None = 120.0

    def get_goal(self) -> float | None:
        return self.goal

    def set_goal(self, goal_protein_g: float) -> bool:
        if self.goal is None:
            return False
        self.goal = goal_protein_g
        return True


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory entry repository for tests."""

    entries: dict[int, Entry] = field(default_factory=dict)
    next_id: int = 1

    def create_entry(self, day, name, protein_g, calories, created_at) -> Entry:
        entry = Entry(
            id=self.next_id,
            day=day,
            name=name,
            protein_g=protein_g,
            calories=calories,
            created_at=created_at,
        )
        self.entries[entry.id] = entry
        self.next_id += 1
        return entry

    def get_entry(self, entry_id: int) -> Entry | None:
        return self.entries.get(entry_id)

    def update_entry(self, entry_id, name, protein_g, calories) -> bool:
        current = self.entries.get(entry_id)
        if current is None:
            return False
        self.entries[entry_id] = Entry(
            id=current.id,
            day=current.day,
            name=name,
            protein_g=protein_g,
            calories=calories,
            created_at=current.created_at,
        )
        return True

    def delete_entry(self, entry_id: int) -> None:
        self.entries.pop(entry_id, None)

    def delete_all_entries(self) -> int:
        removed = len(self.entries)
        self.entries.clear()
        return removed

    def list_entries_for_day(self, day: date) -> list[Entry]:
        rows = [entry for entry in self.entries.values() if entry.day == day]
        return sorted(rows, key=lambda e: (e.created_at, e.id), reverse=True)

    def list_day_totals(self, today: date, range_days: int) -> list[DayHistory]:
        try:
            start = today - timedelta(days=range_days - 1)
        except OverflowError:
            start = date.min
        grouped: dict[date, list[Entry]] = {}
        for entry in self.entries.values():
            if start <= entry.day <= today:
                grouped.setdefault(entry.day, []).append(entry)
        return [
            DayHistory(
                day=day,
                protein_g=sum(e.protein_g for e in rows),
                calories=sum(e.calories or 0.0 for e in rows),
                entry_count=len(rows),
            )
            for day, rows in sorted(grouped.items(), reverse=True)
        ]


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(db_path=str(tmp_path / "protein.db"))


@pytest.fixture
def store(settings: Settings) -> Iterator[SqliteStore]:
    sqlite_store = SqliteStore(settings.db_path)
    yield sqlite_store
    sqlite_store.close()


@pytest.fixture
def migrated_store(store: SqliteStore) -> SqliteStore:
    ensure_schema(store)
    return store


@pytest.fixture
def entry_service(clock: FixedClock) -> EntryService:
    return EntryService(repository=InMemoryEntryRepository(), clock=clock)


@pytest.fixture
def settings_service() -> SettingsService:
    return SettingsService(InMemorySettingsRepository())


@pytest.fixture
def container(
    settings: Settings, clock: FixedClock, store: SqliteStore
) -> Iterator[AppContainer]:
    app = build_container(settings, clock=clock, store=store)
    app.ensure_schema()
    yield app
    app.close_resources()
