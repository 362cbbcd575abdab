"""Data access layer for gym-tracker.

Schedule data and settings live under separate keys of one key-value
table, so saving one never rewrites the other.
"""

import json
from pathlib import Path

import aiosqlite
from loguru import logger

from ..models.schedule import WeekSchedule
from ..models.settings import AppSettings
from .engine import get_db_path

SCHEDULE_KEY = "gym_tracker_data_v1"
SETTINGS_KEY = "gym_tracker_settings_v1"


class KeyValueRepository:
    """Repository for JSON documents stored by key."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, key: str):
        """Get the decoded document for a key, or None if absent."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return json.loads(row["value"])

    async def set(self, key: str, value) -> None:
        """Store a document under a key, replacing any previous value."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, json.dumps(value, ensure_ascii=False)),
            )
            await db.commit()

    async def delete(self, key: str) -> None:
        """Remove a key."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            await db.commit()


class ScheduleRepository:
    """Repository for the weekly schedule document."""

    def __init__(self, db_path: Path | None = None):
        self.kv = KeyValueRepository(db_path)

    @property
    def db_path(self) -> Path:
        return self.kv.db_path

    async def load(self) -> WeekSchedule | None:
        """Load the stored schedule, or None on first run."""
        data = await self.kv.get(SCHEDULE_KEY)
        if data is None:
            return None
        return WeekSchedule.from_list(data)

    async def save(self, schedule: WeekSchedule) -> None:
        """Write the full schedule."""
        await self.kv.set(SCHEDULE_KEY, schedule.to_list())
        logger.debug(f"Saved schedule ({len(schedule.days)} days)")

    async def clear(self) -> None:
        """Remove the stored schedule entirely."""
        await self.kv.delete(SCHEDULE_KEY)
        logger.info("Stored schedule cleared")


class SettingsRepository:
    """Repository for user settings."""

    def __init__(self, db_path: Path | None = None):
        self.kv = KeyValueRepository(db_path)

    async def load(self) -> AppSettings | None:
        """Load stored settings, or None on first run."""
        data = await self.kv.get(SETTINGS_KEY)
        if not isinstance(data, dict):
            return None
        return AppSettings.from_dict(data)

    async def save(self, settings: AppSettings) -> None:
        """Write settings."""
        await self.kv.set(SETTINGS_KEY, settings.to_dict())
