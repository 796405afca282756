"""Entry logging and aggregation service."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol

from protein_tracker.config import DEFAULT_HISTORY_DAYS
from protein_tracker.domain.entries import Entry
from protein_tracker.domain.formatting import coerce_day
from protein_tracker.domain.stats import DailyTotals, DayHistory
from protein_tracker.errors import NotFoundError
from protein_tracker.services.clock import Clock
from protein_tracker.services.validation import (
    check_calories,
    check_protein,
    check_range_days,
    clean_name,
)

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for logged entries."""

    def create_entry(  # noqa: PLR0913
        self,
        day: date,
        name: str,
        protein_g: float,
        calories: float | None,
        created_at: datetime,
    ) -> Entry:
        """Insert an entry and return the stored record."""

    def get_entry(self, entry_id: int) -> Entry | None:
        """Return an entry by id."""

    def update_entry(
        self, entry_id: int, name: str, protein_g: float, calories: float | None
    ) -> bool:
        """Update editable fields and return False when the id is missing."""

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry if it exists."""

    def delete_all_entries(self) -> int:
        """Delete every entry and return how many were removed."""

    def list_entries_for_day(self, day: date) -> list[Entry]:
        """Return entries for a day, most recent first."""

    def list_day_totals(self, today: date, range_days: int) -> list[DayHistory]:
        """Return per-day sums for the `range_days` days ending today, newest first."""


@dataclass
class EntryService:
    """Service for logging entries and deriving daily aggregates."""

    repository: EntryRepository
    clock: Clock
    history_days: int = DEFAULT_HISTORY_DAYS

    def create(
        self,
        day: date | str | None,
        name: str,
        protein_g: float,
        calories: float | None = None,
    ) -> Entry:
        """Validate and log a new entry; `day` defaults to today."""
        cleaned = clean_name(name)
        protein = check_protein(protein_g)
        kcal = check_calories(calories)
        bucket = self.clock.today() if day is None else coerce_day(day)
        entry = self.repository.create_entry(
            day=bucket,
            name=cleaned,
            protein_g=protein,
            calories=kcal,
            created_at=self.clock.now(),
        )
        _logger.info("Entry created: id=%s day=%s", entry.id, entry.day)
        return entry

    def update(
        self,
        entry_id: int,
        name: str,
        protein_g: float,
        calories: float | None = None,
    ) -> Entry:
        """Edit name, protein and calories of an existing entry."""
        cleaned = clean_name(name)
        protein = check_protein(protein_g)
        kcal = check_calories(calories)
        if not self.repository.update_entry(entry_id, cleaned, protein, kcal):
            raise NotFoundError("entry", entry_id)
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            raise NotFoundError("entry", entry_id)
        _logger.info("Entry updated: id=%s", entry_id)
        return entry

    def delete(self, entry_id: int) -> None:
        """Delete an entry; missing ids are ignored."""
        self.repository.delete_entry(entry_id)
        _logger.info("Entry deleted: id=%s", entry_id)

    def clear_all(self) -> int:
        """Delete every logged entry, keeping the goal."""
        removed = self.repository.delete_all_entries()
        _logger.info("All entries cleared: removed=%s", removed)
        return removed

    def get(self, entry_id: int) -> Entry | None:
        return self.repository.get_entry(entry_id)

    def list_for_day(self, day: date | str) -> list[Entry]:
        """Return the day's entries, most recent first."""
        return self.repository.list_entries_for_day(coerce_day(day))

    def daily_totals(self, day: date | str) -> DailyTotals:
        """Sum protein and calories over the day's current entries."""
        bucket = coerce_day(day)
        return sum_entries(bucket, self.repository.list_entries_for_day(bucket))

    def history(self, range_days: int | None = None) -> list[DayHistory]:
        """Return per-day totals for the last `range_days` days, newest first."""
        days = check_range_days(
            self.history_days if range_days is None else range_days
        )
        return self.repository.list_day_totals(self.clock.today(), days)


def sum_entries(day: date, entries: list[Entry]) -> DailyTotals:
    protein = 0.0
    calories = 0.0
    for entry in entries:
        protein += entry.protein_g
        calories += entry.calories or 0.0
    return DailyTotals(day=day, protein_g=protein, calories=calories)
