"""Interactive exercise form via questionary prompts."""

import questionary
from questionary import Style

from ..models.schedule import Exercise, ExerciseDraft, MuscleType, Position

# Custom style for prompts
custom_style = Style(
    [
        ("qmark", "fg:#4f46e5 bold"),
        ("question", "bold"),
        ("answer", "fg:#4f46e5 bold"),
        ("pointer", "fg:#4f46e5 bold"),
        ("highlighted", "fg:#4f46e5 bold"),
        ("selected", "fg:#6366f1"),
        ("instruction", ""),
        ("text", ""),
    ]
)

MUSCLE_TYPE_CHOICES = [
    questionary.Choice("Chest", MuscleType.CHEST),
    questionary.Choice("Back", MuscleType.BACK),
    questionary.Choice("Legs", MuscleType.LEGS),
    questionary.Choice("Shoulders", MuscleType.SHOULDERS),
    questionary.Choice("Arms", MuscleType.ARMS),
    questionary.Choice("Abs", MuscleType.ABS),
]

POSITION_CHOICES = [
    questionary.Choice("Upper", Position.UPPER),
    questionary.Choice("Middle", Position.MIDDLE),
    questionary.Choice("Lower", Position.LOWER),
    questionary.Choice("Front", Position.FRONT),
    questionary.Choice("Back", Position.BACK),
]


def _parse_int(value: str | None, default: int) -> int:
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def _parse_float(value: str | None, default: float) -> float:
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


class ExerciseFormClient:
    """Collects an exercise draft through an interactive form.

    The form only builds an ExerciseDraft; validation and saving happen in
    the schedule store.
    """

    async def collect_draft(self, existing: Exercise | None = None) -> ExerciseDraft:
        """Prompt for exercise fields, prefilled from ``existing`` when editing."""
        draft = ExerciseDraft.from_exercise(existing) if existing else ExerciseDraft(weight=0.0)

        name = await questionary.text(
            "Exercise name:",
            default=draft.name,
            style=custom_style,
        ).ask_async()

        sets = await questionary.text(
            "Sets:",
            default=str(draft.sets),
            style=custom_style,
        ).ask_async()

        reps = await questionary.text(
            "Reps:",
            default=str(draft.reps),
            style=custom_style,
        ).ask_async()

        weight = await questionary.text(
            "Weight (kg):",
            default=f"{draft.weight or 0:g}",
            style=custom_style,
        ).ask_async()

        muscle_type = await questionary.select(
            "Primary muscle group:",
            choices=MUSCLE_TYPE_CHOICES,
            default=next(c for c in MUSCLE_TYPE_CHOICES if c.value == draft.muscle_type),
            style=custom_style,
        ).ask_async()

        secondary = await questionary.text(
            "Secondary muscles (optional):",
            default=draft.secondary_muscles or "",
            style=custom_style,
        ).ask_async()

        position = await questionary.select(
            "Position:",
            choices=POSITION_CHOICES,
            default=next(c for c in POSITION_CHOICES if c.value == draft.position),
            style=custom_style,
        ).ask_async()

        draft.name = name or ""
        draft.sets = _parse_int(sets, draft.sets)
        draft.reps = _parse_int(reps, draft.reps)
        draft.weight = _parse_float(weight, draft.weight or 0.0)
        draft.muscle_type = muscle_type or draft.muscle_type
        draft.secondary_muscles = secondary or ""
        draft.position = position or draft.position
        return draft
