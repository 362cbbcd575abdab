"""Logger configuration for gym-tracker."""

import sys

from loguru import logger


def setup_logger(level: str = "WARNING") -> None:
    """Configure loguru with a single colorized stderr handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=level,
        colorize=True,
    )

    logger.debug(f"Logger initialized with level={level}")
