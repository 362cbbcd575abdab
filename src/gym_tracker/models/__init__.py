"""Data models for gym-tracker."""

from .schedule import (
    DaySchedule,
    Exercise,
    ExerciseDraft,
    MuscleType,
    Position,
    WEEKDAY_IDS,
    WeekSchedule,
    WeightLog,
    initial_days,
    to_calendar_date,
)
from .settings import AppSettings

__all__ = [
    "AppSettings",
    "DaySchedule",
    "Exercise",
    "ExerciseDraft",
    "initial_days",
    "MuscleType",
    "Position",
    "to_calendar_date",
    "WEEKDAY_IDS",
    "WeekSchedule",
    "WeightLog",
]
