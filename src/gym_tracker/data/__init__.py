"""Backup file utilities."""

from .transfer import dump_schedule, export_filename, parse_import, read_import, write_export

__all__ = ["dump_schedule", "export_filename", "parse_import", "read_import", "write_export"]
