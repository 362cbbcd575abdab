"""Database layer for gym-tracker."""

from .engine import get_db_path, init_db
from .repositories import (
    KeyValueRepository,
    SCHEDULE_KEY,
    SETTINGS_KEY,
    ScheduleRepository,
    SettingsRepository,
)

__all__ = [
    "get_db_path",
    "init_db",
    "KeyValueRepository",
    "SCHEDULE_KEY",
    "ScheduleRepository",
    "SETTINGS_KEY",
    "SettingsRepository",
]
