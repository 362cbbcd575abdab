"""Exceptions raised by gym-tracker."""


class GymTrackerError(Exception):
    """Base class for gym-tracker errors."""


class ScheduleValidationError(GymTrackerError, ValueError):
    """An edit was rejected before any change was made."""


class ScheduleImportError(ScheduleValidationError):
    """An imported schedule document is malformed."""
