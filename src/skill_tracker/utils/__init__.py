"""Utility functions package."""

from skill_tracker.utils.file_storage import file_exists, load_json, save_json
from skill_tracker.utils.time_format import format_duration, format_timestamp

__all__ = ["file_exists", "format_duration", "format_timestamp", "load_json", "save_json"]
