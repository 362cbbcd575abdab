"""Settings store, persisted independently of schedule data."""

from loguru import logger

from ..db.repositories import SettingsRepository
from ..models.settings import AppSettings


class SettingsStore:
    """Holds user settings and saves them on change."""

    def __init__(self, repository: SettingsRepository):
        self.repository = repository
        self.settings = AppSettings()

    async def load(self) -> AppSettings:
        """Load stored settings, keeping defaults on first run."""
        stored = await self.repository.load()
        if stored is not None:
            self.settings = stored
        return self.settings

    @property
    def dark_mode(self) -> bool:
        return self.settings.dark_mode

    async def set_dark_mode(self, value: bool) -> AppSettings:
        """Set the dark mode preference and save settings."""
        self.settings.dark_mode = bool(value)
        await self.repository.save(self.settings)
        logger.info(f"Dark mode {'enabled' if self.settings.dark_mode else 'disabled'}")
        return self.settings
