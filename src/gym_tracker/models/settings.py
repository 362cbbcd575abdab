"""User settings model."""

from dataclasses import dataclass


@dataclass
class AppSettings:
    """Display preferences, stored apart from schedule data."""

    dark_mode: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {"darkMode": self.dark_mode}

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary."""
        return cls(dark_mode=bool(data.get("darkMode", False)))
