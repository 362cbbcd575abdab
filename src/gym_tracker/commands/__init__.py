"""CLI commands for gym-tracker."""

from .days import days
from .exercise import exercise
from .init import init
from .log import log_weight
from .progress import progress
from .settings import reset, settings
from .transfer import export, import_data

__all__ = [
    "days",
    "exercise",
    "export",
    "import_data",
    "init",
    "log_weight",
    "progress",
    "reset",
    "settings",
]
