"""Persistence-backed schedule store."""

from datetime import date, datetime

from loguru import logger

from ..db.repositories import ScheduleRepository
from ..errors import ScheduleImportError
from ..models.schedule import (
    DaySchedule,
    Exercise,
    ExerciseDraft,
    WeekSchedule,
    WeightLog,
)


class ScheduleStore:
    """Holds the week in memory and writes it back after every change.

    Edits that are rejected or that target an unknown day/exercise leave
    both the in-memory week and the stored copy untouched.
    """

    def __init__(self, repository: ScheduleRepository):
        self.repository = repository
        self.schedule = WeekSchedule()

    @property
    def days(self) -> list[DaySchedule]:
        return self.schedule.days

    async def load(self) -> WeekSchedule:
        """Load the stored week, falling back to the seed week."""
        stored = await self.repository.load()
        if stored is None:
            logger.info("No stored schedule found, starting from the default week")
            self.schedule = WeekSchedule()
        else:
            self.schedule = stored
        return self.schedule

    async def _persist(self) -> None:
        await self.repository.save(self.schedule)

    def find_day(self, day_id: str) -> DaySchedule | None:
        return self.schedule.find_day(day_id)

    def find_exercise(self, day_id: str, exercise_id: str) -> Exercise | None:
        return self.schedule.find_exercise(day_id, exercise_id)

    def work_days(self) -> list[DaySchedule]:
        return self.schedule.work_days()

    async def record_weight(
        self,
        day_id: str,
        exercise_id: str,
        weight: float,
        today: date | datetime | str,
    ) -> WeightLog | None:
        """Record today's weight for an exercise."""
        entry = self.schedule.record_weight(day_id, exercise_id, weight, today)
        if entry is None:
            logger.debug(f"record_weight ignored: {day_id}/{exercise_id} not found")
            return None
        await self._persist()
        logger.info(f"Recorded {entry.weight} for {exercise_id} on {entry.date}")
        return entry

    async def add_or_update_exercise(self, day_id: str, draft: ExerciseDraft) -> Exercise:
        """Create or update an exercise, then persist.

        Raises:
            ScheduleValidationError: If the draft is rejected
        """
        exercise = self.schedule.add_or_update_exercise(day_id, draft)
        await self._persist()
        logger.info(f"Saved exercise '{exercise.name}' ({exercise.id}) on {day_id}")
        return exercise

    async def delete_exercise(self, day_id: str, exercise_id: str) -> bool:
        """Delete an exercise and its history."""
        if not self.schedule.delete_exercise(day_id, exercise_id):
            logger.debug(f"delete_exercise ignored: {day_id}/{exercise_id} not found")
            return False
        await self._persist()
        logger.info(f"Deleted exercise {exercise_id} from {day_id}")
        return True

    async def rename_day(self, day_id: str, name: str) -> bool:
        """Rename a day."""
        if not self.schedule.rename_day(day_id, name):
            logger.debug(f"rename_day ignored: {day_id} not found")
            return False
        await self._persist()
        return True

    async def toggle_rest_day(self, day_id: str) -> bool:
        """Flip a day between training and rest."""
        if not self.schedule.toggle_rest_day(day_id):
            logger.debug(f"toggle_rest_day ignored: {day_id} not found")
            return False
        await self._persist()
        return True

    async def import_schedule(self, raw_data) -> WeekSchedule:
        """Replace the whole week with imported data.

        Raises:
            ScheduleImportError: If the data is malformed; the current week
                is kept as it was
        """
        if not isinstance(raw_data, list):
            raise ScheduleImportError("Imported data must be a list of days")
        self.schedule = WeekSchedule.from_list(raw_data)
        await self._persist()
        logger.info(f"Imported schedule with {len(self.schedule.days)} days")
        return self.schedule

    def export_schedule(self) -> list[dict]:
        """Serialize the current week."""
        return self.schedule.to_list()

    async def clear_all(self) -> WeekSchedule:
        """Delete stored schedule data and reset to the default week."""
        await self.repository.clear()
        self.schedule = WeekSchedule()
        return self.schedule
