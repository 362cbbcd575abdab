"""Application services for gym-tracker."""

from .progress import HistoryPeriod, ProgressSummary, filter_history, summarize_history
from .schedule_store import ScheduleStore
from .settings_store import SettingsStore

__all__ = [
    "filter_history",
    "HistoryPeriod",
    "ProgressSummary",
    "ScheduleStore",
    "SettingsStore",
    "summarize_history",
]
