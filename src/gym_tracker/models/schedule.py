"""Weekly schedule, exercise and weight history models."""

import math
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from ..errors import ScheduleImportError, ScheduleValidationError


class MuscleType(str, Enum):
    """Primary muscle group an exercise targets."""

    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    ABS = "abs"

    @classmethod
    def parse(cls, value: "str | MuscleType") -> "MuscleType":
        """Parse an enum value, name, or Arabic label."""
        return _parse_enum(cls, value, MUSCLE_TYPE_LABELS)


class Position(str, Enum):
    """Body or grip position of an exercise."""

    UPPER = "upper"
    MIDDLE = "middle"
    LOWER = "lower"
    FRONT = "front"
    BACK = "back"

    @classmethod
    def parse(cls, value: "str | Position") -> "Position":
        """Parse an enum value, name, or Arabic label."""
        return _parse_enum(cls, value, POSITION_LABELS)


# Labels written by the Arabic web version of the app
MUSCLE_TYPE_LABELS = {
    "صدر": MuscleType.CHEST,
    "ظهر": MuscleType.BACK,
    "أرجل": MuscleType.LEGS,
    "أكتاف": MuscleType.SHOULDERS,
    "ذراع": MuscleType.ARMS,
    "بطن": MuscleType.ABS,
}

POSITION_LABELS = {
    "علوي": Position.UPPER,
    "وسط": Position.MIDDLE,
    "سفلي": Position.LOWER,
    "أمامي": Position.FRONT,
    "خلفي": Position.BACK,
}

WEEKDAY_IDS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

DEFAULT_DAY_NAMES = {
    "mon": "Monday",
    "tue": "Tuesday",
    "wed": "Wednesday",
    "thu": "Thursday",
    "fri": "Friday",
    "sat": "Saturday",
    "sun": "Sunday",
}

DEFAULT_REST_DAYS = {"sun"}


def _parse_enum(enum_cls, value, labels):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip()
        if key in labels:
            return labels[key]
        try:
            return enum_cls(key.lower())
        except ValueError:
            pass
        if key.upper() in enum_cls.__members__:
            return enum_cls[key.upper()]
    raise ScheduleValidationError(f"Invalid {enum_cls.__name__} value: {value!r}")


def to_calendar_date(value: date | datetime | str) -> date:
    """Normalize a date, datetime or ISO string to a calendar date.

    Timezone-aware datetimes are converted to the local timezone before the
    time of day is dropped, so "today" always means the local calendar day.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as e:
            raise ScheduleValidationError(f"Invalid date: {value!r}") from e
        return to_calendar_date(parsed)
    raise ScheduleValidationError(f"Invalid date: {value!r}")


def _require_weight(value, field_name: str = "weight") -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ScheduleValidationError(f"{field_name} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise ScheduleValidationError(f"{field_name} must be a non-negative number")
    return float(value)


def _require_count(value, field_name: str) -> int:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ScheduleValidationError(f"{field_name} must be a whole number, got {value!r}")
    if value < 1:
        raise ScheduleValidationError(f"{field_name} must be at least 1")
    return value


def _require_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ScheduleValidationError(f"'{key}' must be a string")
    return value


def new_exercise_id() -> str:
    """Generate a new exercise identifier."""
    return uuid.uuid4().hex


@dataclass
class WeightLog:
    """A single dated weight observation."""

    date: date
    weight: float

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"date": self.date.isoformat(), "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "WeightLog":
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise ScheduleValidationError("History entries must be objects")
        if "date" not in data or "weight" not in data:
            raise ScheduleValidationError("History entries need 'date' and 'weight'")
        return cls(
            date=to_calendar_date(data["date"]),
            weight=_require_weight(data["weight"]),
        )


@dataclass
class Exercise:
    """An exercise definition with its weight history.

    History is kept oldest first and holds at most one entry per calendar
    date. ``weight`` mirrors the last entry after every recorded weight.
    """

    name: str
    muscle_type: MuscleType
    position: Position
    sets: int = 3
    reps: int = 12
    weight: float = 0.0
    secondary_muscles: str = ""
    image: str | None = None
    history: list[WeightLog] = field(default_factory=list)
    id: str = field(default_factory=new_exercise_id)

    @property
    def last_log(self) -> WeightLog | None:
        """Most recent history entry."""
        return self.history[-1] if self.history else None

    def record_weight(self, weight: float, today: date | datetime | str) -> WeightLog:
        """Record the weight lifted on ``today``.

        A date already in the history has its entry overwritten instead of
        getting a second one. New dates must not be earlier than the last
        entry, so history stays in date order.

        Returns:
            The history entry that now holds the weight

        Raises:
            ScheduleValidationError: If the weight is negative or ``today``
                is a new date earlier than the last entry
        """
        weight = _require_weight(weight)
        day = to_calendar_date(today)

        for entry in self.history:
            if entry.date == day:
                entry.weight = weight
                break
        else:
            last = self.last_log
            if last is not None and day < last.date:
                raise ScheduleValidationError(
                    f"Cannot log {day.isoformat()} before the last entry "
                    f"({last.date.isoformat()})"
                )
            entry = WeightLog(date=day, weight=weight)
            self.history.append(entry)

        self.weight = self.history[-1].weight
        return entry

    def to_dict(self) -> dict:
        """Convert to dictionary for storage and export."""
        data = {
            "id": self.id,
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "muscleType": self.muscle_type.value,
            "secondaryMuscles": self.secondary_muscles,
            "position": self.position.value,
            "history": [log.to_dict() for log in self.history],
        }
        if self.image:
            data["image"] = self.image
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary, validating every field."""
        if not isinstance(data, dict):
            raise ScheduleValidationError("Exercises must be objects")

        for key in ("id", "name", "sets", "reps", "weight", "muscleType", "position"):
            if key not in data:
                raise ScheduleValidationError(f"Exercise is missing '{key}'")

        exercise_id = _require_str(data, "id")
        name = _require_str(data, "name")
        if not exercise_id or not name.strip():
            raise ScheduleValidationError("Exercise 'id' and 'name' must not be empty")

        secondary = data.get("secondaryMuscles")
        if secondary is not None and not isinstance(secondary, str):
            raise ScheduleValidationError("'secondaryMuscles' must be a string")
        secondary = secondary or ""

        image = data.get("image")
        if image is not None and not isinstance(image, str):
            raise ScheduleValidationError("'image' must be a string")
        image = image or None

        raw_history = data.get("history") or []
        if not isinstance(raw_history, list):
            raise ScheduleValidationError("'history' must be a list")
        history = [WeightLog.from_dict(entry) for entry in raw_history]
        dates = [log.date for log in history]
        if len(set(dates)) != len(dates):
            raise ScheduleValidationError(
                f"Exercise '{name}' has more than one history entry for a date"
            )

        return cls(
            id=exercise_id,
            name=name,
            sets=_require_count(data["sets"], "sets"),
            reps=_require_count(data["reps"], "reps"),
            weight=_require_weight(data["weight"]),
            muscle_type=MuscleType.parse(data["muscleType"]),
            secondary_muscles=secondary,
            position=Position.parse(data["position"]),
            image=image,
            history=history,
        )


@dataclass
class ExerciseDraft:
    """Candidate exercise submitted for creation or update.

    Fields left as None keep the current value on update and take the
    creation default on create.
    """

    name: str = ""
    sets: int = 3
    reps: int = 12
    muscle_type: MuscleType = MuscleType.CHEST
    position: Position = Position.MIDDLE
    secondary_muscles: str | None = None
    weight: float | None = None
    image: str | None = None
    history: list[WeightLog] | None = None
    id: str | None = None

    @classmethod
    def from_exercise(cls, exercise: Exercise) -> "ExerciseDraft":
        """Prefill a draft for editing an existing exercise."""
        return cls(
            id=exercise.id,
            name=exercise.name,
            sets=exercise.sets,
            reps=exercise.reps,
            muscle_type=exercise.muscle_type,
            position=exercise.position,
            secondary_muscles=exercise.secondary_muscles,
            weight=exercise.weight,
            image=exercise.image,
        )


@dataclass
class DaySchedule:
    """One weekday of the schedule."""

    id: str
    name: str
    is_rest: bool = False
    exercises: list[Exercise] = field(default_factory=list)

    def find_exercise(self, exercise_id: str) -> Exercise | None:
        """Find an exercise of this day by ID."""
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    def exercise_index(self, exercise_id: str) -> int:
        """Position of an exercise in this day, or -1."""
        for i, exercise in enumerate(self.exercises):
            if exercise.id == exercise_id:
                return i
        return -1

    def to_dict(self) -> dict:
        """Convert to dictionary for storage and export."""
        return {
            "id": self.id,
            "name": self.name,
            "isRest": self.is_rest,
            "exercises": [e.to_dict() for e in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DaySchedule":
        """Create from dictionary, validating every field."""
        if not isinstance(data, dict):
            raise ScheduleValidationError("Days must be objects")

        day_id = _require_str(data, "id")
        if day_id not in WEEKDAY_IDS:
            raise ScheduleValidationError(f"Unknown day id: {day_id!r}")

        name = data.get("name", DEFAULT_DAY_NAMES[day_id])
        if not isinstance(name, str):
            raise ScheduleValidationError("Day 'name' must be a string")

        is_rest = data.get("isRest", False)
        if not isinstance(is_rest, bool):
            raise ScheduleValidationError("Day 'isRest' must be true or false")

        raw_exercises = data.get("exercises", [])
        if not isinstance(raw_exercises, list):
            raise ScheduleValidationError("Day 'exercises' must be a list")

        return cls(
            id=day_id,
            name=name,
            is_rest=is_rest,
            exercises=[Exercise.from_dict(e) for e in raw_exercises],
        )


def initial_days() -> list[DaySchedule]:
    """Seed week: six empty training days and a rest day."""
    return [
        DaySchedule(
            id=day_id,
            name=DEFAULT_DAY_NAMES[day_id],
            is_rest=day_id in DEFAULT_REST_DAYS,
        )
        for day_id in WEEKDAY_IDS
    ]


@dataclass
class WeekSchedule:
    """The full week of days and the rules for editing it.

    Lookups that miss return None/False instead of raising; rejected edits
    raise ScheduleValidationError before anything is changed.
    """

    days: list[DaySchedule] = field(default_factory=initial_days)

    def find_day(self, day_id: str) -> DaySchedule | None:
        """Find a day by ID."""
        for day in self.days:
            if day.id == day_id:
                return day
        return None

    def find_exercise(self, day_id: str, exercise_id: str) -> Exercise | None:
        """Find an exercise within a day."""
        day = self.find_day(day_id)
        if day is None:
            return None
        return day.find_exercise(exercise_id)

    def work_days(self) -> list[DaySchedule]:
        """Days that are not flagged as rest days."""
        return [day for day in self.days if not day.is_rest]

    def record_weight(
        self,
        day_id: str,
        exercise_id: str,
        weight: float,
        today: date | datetime | str,
    ) -> WeightLog | None:
        """Record a weight for an exercise; None if it cannot be found."""
        exercise = self.find_exercise(day_id, exercise_id)
        if exercise is None:
            return None
        return exercise.record_weight(weight, today)

    def add_or_update_exercise(self, day_id: str, draft: ExerciseDraft) -> Exercise:
        """Create a new exercise or replace an existing one in place.

        A draft whose ID matches an exercise of the day updates it, keeping
        its ID, its index and (unless the draft carries one) its history.
        Anything else creates a new exercise at the end of the day.

        Raises:
            ScheduleValidationError: If the name is empty, the day is unknown
                or a field is out of range
        """
        name = (draft.name or "").strip()
        if not name:
            raise ScheduleValidationError("Exercise name is required")

        day = self.find_day(day_id)
        if day is None:
            raise ScheduleValidationError(f"Unknown day: {day_id}")

        sets = _require_count(draft.sets, "sets")
        reps = _require_count(draft.reps, "reps")
        muscle_type = MuscleType.parse(draft.muscle_type)
        position = Position.parse(draft.position)
        weight = None if draft.weight is None else _require_weight(draft.weight)
        history = None if draft.history is None else list(draft.history)

        index = day.exercise_index(draft.id) if draft.id else -1
        if index >= 0:
            current = day.exercises[index]
            exercise = Exercise(
                id=current.id,
                name=name,
                sets=sets,
                reps=reps,
                muscle_type=muscle_type,
                position=position,
                weight=current.weight if weight is None else weight,
                secondary_muscles=(
                    current.secondary_muscles
                    if draft.secondary_muscles is None
                    else draft.secondary_muscles
                ),
                image=current.image if draft.image is None else (draft.image or None),
                history=current.history if history is None else history,
            )
            day.exercises[index] = exercise
            return exercise

        exercise = Exercise(
            id=self._new_exercise_id(),
            name=name,
            sets=sets,
            reps=reps,
            muscle_type=muscle_type,
            position=position,
            weight=weight or 0.0,
            secondary_muscles=draft.secondary_muscles or "",
            image=draft.image or None,
            history=history or [],
        )
        day.exercises.append(exercise)
        return exercise

    def delete_exercise(self, day_id: str, exercise_id: str) -> bool:
        """Delete an exercise and its history. Returns False if not found."""
        day = self.find_day(day_id)
        if day is None:
            return False
        index = day.exercise_index(exercise_id)
        if index < 0:
            return False
        del day.exercises[index]
        return True

    def rename_day(self, day_id: str, name: str) -> bool:
        """Set a day's display name."""
        day = self.find_day(day_id)
        if day is None:
            return False
        day.name = name
        return True

    def toggle_rest_day(self, day_id: str) -> bool:
        """Flip a day's rest flag, keeping its exercises."""
        day = self.find_day(day_id)
        if day is None:
            return False
        day.is_rest = not day.is_rest
        return True

    def _exercise_ids(self) -> set[str]:
        return {e.id for day in self.days for e in day.exercises}

    def _new_exercise_id(self) -> str:
        existing = self._exercise_ids()
        exercise_id = new_exercise_id()
        while exercise_id in existing:
            exercise_id = new_exercise_id()
        return exercise_id

    def to_list(self) -> list[dict]:
        """Serialize the week as a list of day dictionaries."""
        return [day.to_dict() for day in self.days]

    @classmethod
    def from_list(cls, data: list) -> "WeekSchedule":
        """Build a week from serialized days.

        Raises:
            ScheduleImportError: If the data is not a list of valid days,
                repeats a day, or reuses an exercise ID
        """
        if not isinstance(data, list):
            raise ScheduleImportError("Schedule data must be a list of days")

        days = []
        for i, raw_day in enumerate(data):
            try:
                days.append(DaySchedule.from_dict(raw_day))
            except ScheduleValidationError as e:
                raise ScheduleImportError(f"Day {i + 1}: {e}") from e

        day_ids = [day.id for day in days]
        if len(set(day_ids)) != len(day_ids):
            raise ScheduleImportError("Schedule lists the same day more than once")

        exercise_ids = [e.id for day in days for e in day.exercises]
        if len(set(exercise_ids)) != len(exercise_ids):
            raise ScheduleImportError("Schedule reuses an exercise id")

        return cls(days=days)
