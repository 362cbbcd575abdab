"""Schedule backup files (JSON export and import)."""

import json
from datetime import date, datetime
from pathlib import Path

from ..errors import ScheduleImportError
from ..models.schedule import to_calendar_date


def export_filename(today: date | datetime | str) -> str:
    """Suggested backup filename for a given day."""
    return f"gym_backup_{to_calendar_date(today).isoformat()}.json"


def dump_schedule(data: list[dict]) -> str:
    """Serialize schedule data as JSON text."""
    return json.dumps(data, ensure_ascii=False, indent=2)


def parse_import(text: str):
    """Parse a backup document.

    Only the JSON syntax is checked here; the shape of the result is
    validated when it is imported into the store.

    Raises:
        ScheduleImportError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ScheduleImportError(f"Backup file is not valid JSON: {e}") from e


def write_export(path: Path | str, data: list[dict]) -> Path:
    """Write schedule data to a UTF-8 JSON file."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_schedule(data))
    return path


def read_import(path: Path | str):
    """Read and parse a UTF-8 JSON backup file."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ScheduleImportError(f"Backup file is not UTF-8 text: {e}") from e
    return parse_import(text)
