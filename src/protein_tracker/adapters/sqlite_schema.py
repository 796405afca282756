"""Schema creation for the SQLite store."""

from protein_tracker.adapters.sqlite_store import SqliteStore
from protein_tracker.config import DEFAULT_GOAL_PROTEIN_G

SETTINGS_ID = 1


def ensure_schema(
    store: SqliteStore, default_goal_protein_g: float = DEFAULT_GOAL_PROTEIN_G
) -> None:
    """Create missing tables and seed the settings row; safe to repeat."""
    with store.get_conn() as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS settings (
                id INTEGER PRIMARY KEY NOT NULL,
                goal_protein_g REAL NOT NULL
            );
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS entries (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                day TEXT NOT NULL,
                name TEXT NOT NULL,
                protein_g REAL NOT NULL,
                calories REAL,
                created_at TEXT NOT NULL
            );
            """
        )
        conn.execute("CREATE INDEX IF NOT EXISTS idx_entries_day ON entries(day);")
        conn.execute(
            "INSERT INTO settings (id, goal_protein_g) "
            "SELECT ?, ? WHERE NOT EXISTS (SELECT 1 FROM settings WHERE id = ?)",
            (SETTINGS_ID, default_goal_protein_g, SETTINGS_ID),
        )
