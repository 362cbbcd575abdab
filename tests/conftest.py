"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path

from gym_tracker.db import ScheduleRepository, SettingsRepository, init_db
from gym_tracker.models.schedule import (
    Exercise,
    ExerciseDraft,
    MuscleType,
    Position,
    WeekSchedule,
)
from gym_tracker.services import ScheduleStore, SettingsStore


@pytest.fixture
def temp_data_dir():
    """Create a temporary data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_db_path(temp_data_dir):
    """Create a temporary database path."""
    return temp_data_dir / "gym_tracker.db"


@pytest.fixture
async def initialized_db(temp_db_path):
    """A temporary database with the schema created."""
    await init_db(temp_db_path)
    return temp_db_path


@pytest.fixture
async def schedule_store(initialized_db):
    """A loaded schedule store backed by a temporary database."""
    store = ScheduleStore(ScheduleRepository(initialized_db))
    await store.load()
    return store


@pytest.fixture
async def settings_store(initialized_db):
    """A loaded settings store backed by a temporary database."""
    store = SettingsStore(SettingsRepository(initialized_db))
    await store.load()
    return store


@pytest.fixture
def bench_draft():
    """Draft for a new bench press exercise."""
    return ExerciseDraft(
        name="Bench Press",
        sets=4,
        reps=8,
        muscle_type=MuscleType.CHEST,
        position=Position.MIDDLE,
        secondary_muscles="triceps",
    )


@pytest.fixture
def week():
    """Default week with one exercise on Monday and one on Tuesday."""
    schedule = WeekSchedule()
    schedule.find_day("mon").exercises.append(
        Exercise(
            id="bench",
            name="Bench Press",
            muscle_type=MuscleType.CHEST,
            position=Position.MIDDLE,
            sets=4,
            reps=8,
        )
    )
    schedule.find_day("tue").exercises.append(
        Exercise(
            id="squat",
            name="Squat",
            muscle_type=MuscleType.LEGS,
            position=Position.LOWER,
            sets=5,
            reps=5,
            weight=80,
        )
    )
    return schedule


@pytest.fixture
def exported_week():
    """Serialized schedule as found in a backup file."""
    return [
        {
            "id": "mon",
            "name": "Push",
            "isRest": False,
            "exercises": [
                {
                    "id": "abc123",
                    "name": "Incline Press",
                    "sets": 3,
                    "reps": 10,
                    "weight": 40,
                    "muscleType": "chest",
                    "secondaryMuscles": "",
                    "position": "upper",
                    "history": [
                        {"date": "2024-03-01", "weight": 37.5},
                        {"date": "2024-03-08", "weight": 40},
                    ],
                }
            ],
        },
        {"id": "sun", "name": "Sunday", "isRest": True, "exercises": []},
    ]
