"""Interactive input clients."""

from .exercise_form import ExerciseFormClient

__all__ = ["ExerciseFormClient"]
