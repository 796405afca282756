"""SQLite repository for logged entries."""

import sqlite3
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

from protein_tracker.adapters.sqlite_store import SqliteStore
from protein_tracker.domain.entries import Entry
from protein_tracker.domain.formatting import format_day
from protein_tracker.domain.stats import DayHistory
from protein_tracker.services.entries import EntryRepository

_ENTRY_COLUMNS = "id, day, name, protein_g, calories, created_at"


@dataclass
class SqliteEntryRepository(EntryRepository):
    """SQLite implementation for entries and their aggregates."""

    store: SqliteStore

    def create_entry(  # noqa: PLR0913
        self,
        day: date,
        name: str,
        protein_g: float,
        calories: float | None,
        created_at: datetime,
    ) -> Entry:
        """Insert an entry row."""
        created_at = created_at.astimezone(UTC)
        with self.store.get_conn() as conn:
            cur = conn.execute(
                "INSERT INTO entries (day, name, protein_g, calories, created_at) "
                "VALUES (?, ?, ?, ?, ?)",
                (format_day(day), name, protein_g, calories, created_at.isoformat()),
            )
            entry_id = cur.lastrowid
        if entry_id is None:
            raise RuntimeError("Failed to create entry")
        return Entry(
            id=int(entry_id),
            day=day,
            name=name,
            protein_g=protein_g,
            calories=calories,
            created_at=created_at,
        )

    def get_entry(self, entry_id: int) -> Entry | None:
        """Return an entry by id."""
        with self.store.get_conn() as conn:
            row = conn.execute(
                f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE id = ?", (entry_id,)
            ).fetchone()
        return _parse_row(row) if row else None

    def update_entry(
        self, entry_id: int, name: str, protein_g: float, calories: float | None
    ) -> bool:
        """Update the editable columns of an entry."""
        with self.store.get_conn() as conn:
            cur = conn.execute(
                "UPDATE entries SET name = ?, protein_g = ?, calories = ? WHERE id = ?",
                (name, protein_g, calories, entry_id),
            )
        return cur.rowcount > 0

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry row if present."""
        with self.store.get_conn() as conn:
            conn.execute("DELETE FROM entries WHERE id = ?", (entry_id,))

    def delete_all_entries(self) -> int:
        """Delete every entry row."""
        with self.store.get_conn() as conn:
            cur = conn.execute("DELETE FROM entries")
        return max(cur.rowcount, 0)

    def list_entries_for_day(self, day: date) -> list[Entry]:
        """Return entries for a day, most recent first."""
        with self.store.get_conn() as conn:
            rows = conn.execute(
                f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE day = ? "
                "ORDER BY created_at DESC, id DESC",
                (format_day(day),),
            ).fetchall()
        return [_parse_row(row) for row in rows]

    def list_day_totals(self, today: date, range_days: int) -> list[DayHistory]:
        """Return per-day sums inside the window ending today."""
        params = {
            "start": format_day(_window_start(today, range_days)),
            "today": format_day(today),
        }
        with self.store.get_conn() as conn:
            rows = conn.execute(
                "SELECT day, SUM(protein_g) AS protein_g, "
                "COALESCE(SUM(calories), 0) AS calories, COUNT(*) AS entry_count "
                "FROM entries "
                "WHERE day BETWEEN :start AND :today "
                "GROUP BY day ORDER BY day DESC",
                params,
            ).fetchall()
        return [
            DayHistory(
                day=date.fromisoformat(row["day"]),
                protein_g=float(row["protein_g"]),
                calories=float(row["calories"]),
                entry_count=int(row["entry_count"]),
            )
            for row in rows
        ]


def _parse_row(row: sqlite3.Row) -> Entry:
    calories = row["calories"]
    return Entry(
        id=int(row["id"]),
        day=date.fromisoformat(row["day"]),
        name=row["name"],
        protein_g=float(row["protein_g"]),
        calories=float(calories) if calories is not None else None,
        created_at=datetime.fromisoformat(row["created_at"]),
    )


def _window_start(today: date, range_days: int) -> date:
    """First day of the window; windows reaching past year 1 start there."""
    try:
        return today - timedelta(days=range_days - 1)
    except OverflowError:
        return date.min
