"""gym-tracker: weekly workout schedule and weight progression log."""

__version__ = "0.1.0"
