"""SQLite repository for the settings row."""

import sqlite3
from dataclasses import dataclass

from protein_tracker.adapters.sqlite_schema import SETTINGS_ID
from protein_tracker.adapters.sqlite_store import SqliteStore
from protein_tracker.services.settings import SettingsRepository


@dataclass
class SqliteSettingsRepository(SettingsRepository):
    """SQLite implementation for the daily goal."""

    store: SqliteStore

    def get_goal(self) -> float | None:
        """Return the stored goal; None before the schema exists."""
        with self.store.get_conn() as conn:
            if not _settings_table_exists(conn):
                return None
            row = conn.execute(
                "SELECT goal_protein_g FROM settings WHERE id = ?", (SETTINGS_ID,)
            ).fetchone()
        if row is None:
            return None
        return float(row["goal_protein_g"])

    def set_goal(self, goal_protein_g: float) -> bool:
        """Overwrite the stored goal."""
        with self.store.get_conn() as conn:
            if not _settings_table_exists(conn):
                return False
            cur = conn.execute(
                "UPDATE settings SET goal_protein_g = ? WHERE id = ?",
                (goal_protein_g, SETTINGS_ID),
            )
        return cur.rowcount > 0


def _settings_table_exists(conn: sqlite3.Connection) -> bool:
    row = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'settings'"
    ).fetchone()
    return row is not None
