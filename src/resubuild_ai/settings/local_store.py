"""SQLite key-value store for the API key and preferred model."""

from __future__ import annotations

import os
import sqlite3
import time
from pathlib import Path

DEFAULT_DB_PATH = Path.home() / ".resubuild" / "settings.db"

API_KEY_SETTING = "gemini_api_key"
PREFERRED_MODEL_SETTING = "preferred_model"
ENV_KEY_NAMES = ("GEMINI_API_KEY", "API_KEY")


class LocalSettingsStore:
    """Persistent local settings, readable as a PreferenceProvider."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
            """)

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path))

    def _get(self, key: str) -> str | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT value FROM settings WHERE key = ?", (key,)
            ).fetchone()
        return row[0] if row else None

    def _put(self, key: str, value: str) -> None:
        with self._connect() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO settings (key, value, updated_at)
                   VALUES (?, ?, ?)""",
                (key, value, time.time()),
            )

    def _delete(self, key: str) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM settings WHERE key = ?", (key,))

    # --- API key ---

    def get_api_key(self) -> str | None:
        return self._get(API_KEY_SETTING) or None

    def save_api_key(self, key: str) -> None:
        key = key.strip()
        if not key:
            raise ValueError("API key must not be empty")
        self._put(API_KEY_SETTING, key)

    def remove_api_key(self) -> None:
        self._delete(API_KEY_SETTING)

    def has_api_key(self) -> bool:
        """True when a key is stored or provided by the environment."""
        if self.get_api_key():
            return True
        return any(os.environ.get(name) for name in ENV_KEY_NAMES)

    # --- Model preference ---

    def get_preferred_model(self) -> str | None:
        return self._get(PREFERRED_MODEL_SETTING) or None

    def set_preferred_model(self, model: str) -> None:
        model = model.strip()
        if not model:
            raise ValueError("Model identifier must not be empty")
        self._put(PREFERRED_MODEL_SETTING, model)

    def clear(self) -> int:
        """Remove every stored setting. Returns count of deleted rows."""
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM settings")
            return cursor.rowcount
