"""Weight progression statistics for an exercise history."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

from dateutil.relativedelta import relativedelta

from ..models.schedule import WeightLog, to_calendar_date


class HistoryPeriod(str, Enum):
    """Time window for viewing history."""

    ALL = "all"
    WEEK = "week"
    MONTH = "month"
    THREE_MONTHS = "3months"
    CUSTOM = "custom"


@dataclass
class ProgressSummary:
    """Headline numbers for a run of history entries."""

    max_weight: float
    last_weight: float
    first_weight: float
    improvement: float  # percent, one decimal
    entries: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "max_weight": self.max_weight,
            "last_weight": self.last_weight,
            "first_weight": self.first_weight,
            "improvement": self.improvement,
            "entries": self.entries,
        }


def period_start(period: HistoryPeriod, today: date | datetime | str) -> date | None:
    """First date included by a rolling period, or None for no lower bound."""
    today = to_calendar_date(today)
    if period == HistoryPeriod.WEEK:
        return today - timedelta(days=7)
    if period == HistoryPeriod.MONTH:
        return today - relativedelta(months=1)
    if period == HistoryPeriod.THREE_MONTHS:
        return today - relativedelta(months=3)
    return None


def filter_history(
    history: list[WeightLog],
    period: HistoryPeriod,
    today: date | datetime | str,
    start: date | str | None = None,
    end: date | str | None = None,
) -> list[WeightLog]:
    """Select the history entries that fall inside a period.

    Custom periods use ``start`` and ``end`` as inclusive bounds; either may
    be omitted.
    """
    period = HistoryPeriod(period)

    if period == HistoryPeriod.ALL:
        return list(history)

    if period == HistoryPeriod.CUSTOM:
        lower = to_calendar_date(start) if start else None
        upper = to_calendar_date(end) if end else None
        return [
            log
            for log in history
            if (lower is None or log.date >= lower) and (upper is None or log.date <= upper)
        ]

    cutoff = period_start(period, today)
    return [log for log in history if log.date >= cutoff]


def summarize_history(
    history: list[WeightLog],
    filtered: list[WeightLog] | None = None,
) -> ProgressSummary | None:
    """Summarize progression.

    Uses ``filtered`` when it has entries and falls back to the full history
    otherwise. Returns None when there is no history at all.
    """
    if not history:
        return None

    data = filtered if filtered else history
    first = data[0].weight
    last = data[-1].weight
    improvement = round((last - first) / first * 100, 1) if first > 0 else 0.0

    return ProgressSummary(
        max_weight=max(log.weight for log in data),
        last_weight=last,
        first_weight=first,
        improvement=improvement,
        entries=len(data),
    )
