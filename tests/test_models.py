"""Tests for schedule data models."""

from datetime import date, datetime, timedelta, timezone

import pytest

from gym_tracker.errors import ScheduleImportError, ScheduleValidationError
from gym_tracker.models.schedule import (
    WEEKDAY_IDS,
    DaySchedule,
    Exercise,
    ExerciseDraft,
    MuscleType,
    Position,
    WeekSchedule,
    WeightLog,
    initial_days,
    to_calendar_date,
)


class TestInitialDays:
    """Tests for the seed week."""

    def test_seven_days_in_weekday_order(self):
        """Test the seed week has one entry per weekday."""
        days = initial_days()
        assert [d.id for d in days] == list(WEEKDAY_IDS)

    def test_last_day_is_rest(self):
        """Test only the last day is a rest day."""
        days = initial_days()
        assert days[-1].is_rest is True
        assert all(not d.is_rest for d in days[:-1])
        assert all(d.exercises == [] for d in days)

    def test_work_days_exclude_rest(self):
        """Test work days skip rest days."""
        schedule = WeekSchedule()
        assert [d.id for d in schedule.work_days()] == list(WEEKDAY_IDS[:-1])


class TestCalendarDate:
    """Tests for date normalization."""

    def test_date_passthrough(self):
        """Test a date is returned unchanged."""
        assert to_calendar_date(date(2024, 3, 1)) == date(2024, 3, 1)

    def test_naive_datetime_drops_time(self):
        """Test naive datetimes keep their calendar day."""
        assert to_calendar_date(datetime(2024, 3, 1, 23, 59)) == date(2024, 3, 1)

    def test_aware_datetime_uses_local_day(self):
        """Test aware datetimes are converted to local time first."""
        value = datetime(2024, 3, 1, 23, 30, tzinfo=timezone.utc)
        assert to_calendar_date(value) == value.astimezone().date()

    def test_iso_strings(self):
        """Test ISO date and date-time strings."""
        assert to_calendar_date("2024-03-01") == date(2024, 3, 1)
        assert to_calendar_date("2024-03-01T08:15:00") == date(2024, 3, 1)

    def test_invalid_string(self):
        """Test garbage is rejected."""
        with pytest.raises(ScheduleValidationError):
            to_calendar_date("yesterday")


class TestEnums:
    """Tests for muscle type and position parsing."""

    def test_parse_values(self):
        """Test parsing plain values and names."""
        assert MuscleType.parse("legs") == MuscleType.LEGS
        assert MuscleType.parse("LEGS") == MuscleType.LEGS
        assert Position.parse("front") == Position.FRONT

    def test_parse_arabic_labels(self):
        """Test labels written by the Arabic app."""
        assert MuscleType.parse("صدر") == MuscleType.CHEST
        assert MuscleType.parse("بطن") == MuscleType.ABS
        assert Position.parse("وسط") == Position.MIDDLE
        assert Position.parse("خلفي") == Position.BACK

    def test_parse_unknown(self):
        """Test unknown values are rejected."""
        with pytest.raises(ScheduleValidationError):
            MuscleType.parse("neck")
        with pytest.raises(ScheduleValidationError):
            Position.parse(3)


class TestRecordWeight:
    """Tests for recording weights."""

    def test_example_scenario(self, week):
        """Test same-day overwrite followed by a next-day append."""
        week.record_weight("mon", "bench", 50, "2024-03-01")
        bench = week.find_exercise("mon", "bench")
        assert [log.to_dict() for log in bench.history] == [
            {"date": "2024-03-01", "weight": 50.0}
        ]
        assert bench.weight == 50

        week.record_weight("mon", "bench", 52, "2024-03-01")
        assert [log.to_dict() for log in bench.history] == [
            {"date": "2024-03-01", "weight": 52.0}
        ]
        assert bench.weight == 52

        week.record_weight("mon", "bench", 55, "2024-03-02")
        assert [log.to_dict() for log in bench.history] == [
            {"date": "2024-03-01", "weight": 52.0},
            {"date": "2024-03-02", "weight": 55.0},
        ]
        assert bench.weight == 55

    def test_same_day_adds_one_entry(self, week):
        """Test two logs on one day add exactly one entry."""
        bench = week.find_exercise("mon", "bench")
        bench.history.append(WeightLog(date(2023, 12, 31), 40))
        before = len(bench.history)

        week.record_weight("mon", "bench", 45, "2024-01-01")
        week.record_weight("mon", "bench", 47.5, "2024-01-01")

        assert len(bench.history) == before + 1
        assert bench.history[-1].weight == 47.5

    def test_same_day_ignores_time_of_day(self, week):
        """Test morning and evening logs on one day coalesce."""
        week.record_weight("mon", "bench", 50, datetime(2024, 3, 1, 0, 5))
        week.record_weight("mon", "bench", 51, datetime(2024, 3, 1, 23, 55))
        bench = week.find_exercise("mon", "bench")
        assert len(bench.history) == 1
        assert bench.history[0].weight == 51

    def test_new_day_does_not_touch_prior_entries(self, week):
        """Test appending leaves earlier entries alone."""
        bench = week.find_exercise("mon", "bench")
        for i, weight in enumerate([40, 42.5, 45]):
            week.record_weight("mon", "bench", weight, date(2024, 3, 1) + timedelta(days=i))
        snapshot = [log.to_dict() for log in bench.history]

        week.record_weight("mon", "bench", 50, "2024-03-10")

        assert [log.to_dict() for log in bench.history[:-1]] == snapshot
        assert bench.history[-1].date == date(2024, 3, 10)

    def test_history_monotonic_and_unique(self, week):
        """Test history never shrinks and never repeats a date."""
        bench = week.find_exercise("mon", "bench")
        days = ["2024-01-01", "2024-01-01", "2024-01-02", "2024-01-02", "2024-01-05"]
        lengths = []
        for i, day in enumerate(days):
            week.record_weight("mon", "bench", 40 + i, day)
            lengths.append(len(bench.history))
            assert bench.weight == bench.history[-1].weight

        assert lengths == sorted(lengths)
        dates = [log.date for log in bench.history]
        assert len(dates) == len(set(dates))

    def test_unknown_ids_are_ignored(self, week):
        """Test unknown day or exercise is a silent no-op."""
        before = week.to_list()
        assert week.record_weight("xyz", "bench", 50, "2024-03-01") is None
        assert week.record_weight("mon", "nope", 50, "2024-03-01") is None
        assert week.to_list() == before

    def test_backdated_existing_date_overwrites(self, week):
        """Test logging an earlier date already in history amends that entry."""
        week.record_weight("mon", "bench", 50, "2024-03-01")
        week.record_weight("mon", "bench", 55, "2024-03-02")

        week.record_weight("mon", "bench", 52, "2024-03-01")

        bench = week.find_exercise("mon", "bench")
        assert [(log.date.isoformat(), log.weight) for log in bench.history] == [
            ("2024-03-01", 52),
            ("2024-03-02", 55),
        ]
        assert bench.weight == bench.history[-1].weight == 55
        reloaded = WeekSchedule.from_list(week.to_list())
        assert reloaded.find_exercise("mon", "bench").history == bench.history

    def test_backdated_new_date_rejected(self, week):
        """Test a new date earlier than the last entry is rejected unchanged."""
        week.record_weight("mon", "bench", 50, "2024-03-01")
        week.record_weight("mon", "bench", 55, "2024-03-05")
        before = week.to_list()

        with pytest.raises(ScheduleValidationError):
            week.record_weight("mon", "bench", 52, "2024-03-03")

        assert week.to_list() == before

    def test_negative_weight_rejected(self, week):
        """Test negative weights are rejected without changes."""
        with pytest.raises(ScheduleValidationError):
            week.record_weight("mon", "bench", -5, "2024-03-01")
        assert week.find_exercise("mon", "bench").history == []


class TestAddOrUpdateExercise:
    """Tests for creating and updating exercises."""

    def test_create_appends_with_defaults(self, week):
        """Test creation assigns an id and applies defaults."""
        created = week.add_or_update_exercise("mon", ExerciseDraft(name="Dips"))

        day = week.find_day("mon")
        assert day.exercises[-1] is created
        assert created.id
        assert created.weight == 0
        assert created.secondary_muscles == ""
        assert created.history == []

    def test_unmatched_id_creates_new(self, week):
        """Test a draft with an unknown id creates a fresh exercise."""
        created = week.add_or_update_exercise("mon", ExerciseDraft(id="ghost", name="Dips"))
        assert created.id != "ghost"
        assert len(week.find_day("mon").exercises) == 2

    def test_creation_ids_are_unique(self, week):
        """Test successive creations never share an id."""
        ids = {
            week.add_or_update_exercise("wed", ExerciseDraft(name=f"Curl {i}")).id
            for i in range(50)
        }
        assert len(ids) == 50

    def test_update_keeps_identity_position_and_history(self, week):
        """Test updating replaces in place."""
        week.add_or_update_exercise("mon", ExerciseDraft(name="Dips"))
        week.record_weight("mon", "bench", 60, "2024-03-01")
        history = list(week.find_exercise("mon", "bench").history)

        draft = ExerciseDraft.from_exercise(week.find_exercise("mon", "bench"))
        draft.name = "Paused Bench"
        draft.sets = 5
        updated = week.add_or_update_exercise("mon", draft)

        day = week.find_day("mon")
        assert day.exercise_index("bench") == 0
        assert updated.id == "bench"
        assert updated.name == "Paused Bench"
        assert updated.sets == 5
        assert updated.history == history

    def test_update_with_explicit_history(self, week):
        """Test a draft carrying history replaces it."""
        draft = ExerciseDraft.from_exercise(week.find_exercise("tue", "squat"))
        draft.history = [WeightLog(date(2024, 1, 1), 70)]
        updated = week.add_or_update_exercise("tue", draft)
        assert [log.weight for log in updated.history] == [70]

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, week, name):
        """Test an empty name is rejected without changes."""
        before = week.to_list()
        with pytest.raises(ScheduleValidationError):
            week.add_or_update_exercise("mon", ExerciseDraft(name=name))
        assert week.to_list() == before

    def test_unknown_day_rejected(self, week):
        """Test an unknown day is rejected."""
        with pytest.raises(ScheduleValidationError):
            week.add_or_update_exercise("holiday", ExerciseDraft(name="Dips"))

    def test_invalid_sets_rejected(self, week):
        """Test sets below 1 are rejected."""
        with pytest.raises(ScheduleValidationError):
            week.add_or_update_exercise("mon", ExerciseDraft(name="Dips", sets=0))
        assert len(week.find_day("mon").exercises) == 1


class TestDayOperations:
    """Tests for delete, rename and rest toggling."""

    def test_delete_exercise(self, week):
        """Test deleting removes the exercise and its history."""
        week.record_weight("mon", "bench", 60, "2024-03-01")
        assert week.delete_exercise("mon", "bench") is True
        assert week.find_exercise("mon", "bench") is None

    def test_delete_missing(self, week):
        """Test deleting a missing exercise is a no-op."""
        assert week.delete_exercise("mon", "squat") is False
        assert week.delete_exercise("nope", "bench") is False
        assert len(week.find_day("tue").exercises) == 1

    def test_rename_allows_empty(self, week):
        """Test any name is accepted, including an empty one."""
        assert week.rename_day("mon", "") is True
        assert week.find_day("mon").name == ""
        assert week.rename_day("tue", "Push") is True
        assert week.rename_day("wed", "Push") is True

    def test_rest_toggle_keeps_exercises(self, week):
        """Test toggling rest keeps the day's exercises intact."""
        before = week.find_day("tue").to_dict()["exercises"]

        assert week.toggle_rest_day("tue") is True
        assert week.find_day("tue").is_rest is True
        assert week.find_day("tue").to_dict()["exercises"] == before

        week.toggle_rest_day("tue")
        assert week.find_day("tue").is_rest is False
        assert week.find_day("tue").to_dict()["exercises"] == before

    def test_rest_toggle_unknown_day(self, week):
        """Test toggling an unknown day is a no-op."""
        assert week.toggle_rest_day("funday") is False


class TestSerialization:
    """Tests for converting to and from stored data."""

    def test_exercise_to_dict_keys(self, week):
        """Test exercises serialize with camelCase keys."""
        data = week.find_exercise("tue", "squat").to_dict()
        assert data["muscleType"] == "legs"
        assert data["position"] == "lower"
        assert data["secondaryMuscles"] == ""
        assert "image" not in data

    def test_from_list(self, exported_week):
        """Test building a week from serialized days."""
        schedule = WeekSchedule.from_list(exported_week)
        assert [d.id for d in schedule.days] == ["mon", "sun"]
        press = schedule.find_exercise("mon", "abc123")
        assert press.position == Position.UPPER
        assert press.history[-1].date == date(2024, 3, 8)

    def test_from_list_rejects_non_list(self):
        """Test a non-list top level is rejected."""
        with pytest.raises(ScheduleImportError):
            WeekSchedule.from_list({"not": "an array"})

    def test_from_list_rejects_missing_fields(self, exported_week):
        """Test exercises missing required fields are rejected."""
        del exported_week[0]["exercises"][0]["muscleType"]
        with pytest.raises(ScheduleImportError):
            WeekSchedule.from_list(exported_week)

    def test_from_list_rejects_duplicate_days(self, exported_week):
        """Test a repeated day id is rejected."""
        exported_week.append({"id": "mon", "name": "Again", "isRest": False, "exercises": []})
        with pytest.raises(ScheduleImportError):
            WeekSchedule.from_list(exported_week)

    def test_from_list_rejects_duplicate_history_dates(self, exported_week):
        """Test two history entries on one date are rejected."""
        exported_week[0]["exercises"][0]["history"].append({"date": "2024-03-08", "weight": 41})
        with pytest.raises(ScheduleImportError):
            WeekSchedule.from_list(exported_week)

    def test_from_list_rejects_unknown_day(self, exported_week):
        """Test day ids outside the week are rejected."""
        exported_week[0]["id"] = "someday"
        with pytest.raises(ScheduleImportError):
            WeekSchedule.from_list(exported_week)

    @pytest.mark.parametrize(
        "key, value",
        [("secondaryMuscles", 0), ("secondaryMuscles", False), ("image", 0), ("image", False)],
    )
    def test_from_list_rejects_falsy_wrong_types(self, exported_week, key, value):
        """Test falsy values of the wrong type are not coerced."""
        exported_week[0]["exercises"][0][key] = value
        with pytest.raises(ScheduleImportError):
            WeekSchedule.from_list(exported_week)

    def test_day_from_dict_arabic_backup(self):
        """Test a day written by the Arabic app."""
        day = DaySchedule.from_dict(
            {
                "id": "sun",
                "name": "الأحد (راحة)",
                "isRest": True,
                "exercises": [
                    {
                        "id": "k3j2h1",
                        "name": "ضغط",
                        "sets": 3,
                        "reps": 12,
                        "weight": 20,
                        "muscleType": "صدر",
                        "position": "علوي",
                        "history": [{"date": "2024-02-01T10:00:00.000Z", "weight": 20}],
                    }
                ],
            }
        )
        exercise = day.exercises[0]
        assert exercise.muscle_type == MuscleType.CHEST
        assert exercise.position == Position.UPPER
        assert isinstance(exercise.history[0].date, date)

    def test_exercise_round_trip_keeps_image(self):
        """Test the image reference survives serialization."""
        exercise = Exercise(
            name="Row",
            muscle_type=MuscleType.BACK,
            position=Position.MIDDLE,
            image="data:image/png;base64,AAAA",
        )
        assert Exercise.from_dict(exercise.to_dict()).image == exercise.image
