"""File storage utilities for the JSON skills snapshot."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def _resolve_path(filepath: str) -> str:
    """
    Resolve a file path to an absolute path.

    Relative paths are resolved under ``settings.data_root`` so the snapshot
    lands in the configured data directory (outside the repo).  Absolute paths
    are returned unchanged.

    Args:
        filepath: An absolute or relative path string.

    Returns:
        Absolute path string.
    """
    if os.path.isabs(filepath):
        return filepath

    # Import here to avoid circular imports at module load time
    from skill_tracker.config import settings

    return os.path.join(settings.data_root, filepath)


def file_exists(filepath: str) -> bool:
    """
    Check if a file exists.

    Args:
        filepath: The path to check (absolute or relative to data_root).

    Returns:
        True if the file exists, False otherwise.
    """
    return os.path.exists(_resolve_path(filepath))


def load_json(filepath: str) -> Any:
    """
    Load and decode a JSON document.

    Args:
        filepath: The path to the file to load (absolute or relative to data_root).

    Returns:
        The decoded JSON value.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the file is not valid JSON.

    Examples:
        >>> skills = load_json("skills.json")
    """
    resolved = _resolve_path(filepath)
    with open(resolved, "r", encoding="utf-8") as f:
        return json.load(f)


def save_json(data: Any, filepath: str) -> str:
    """
    Write a JSON document atomically, creating directories if needed.

    The content is written to a temporary file in the target directory and
    then renamed over the destination, so readers never see a partial file.

    Args:
        data: JSON-serializable value.
        filepath: The destination path (absolute or relative to data_root).

    Returns:
        The absolute path where the file was saved.

    Raises:
        OSError: If the file cannot be written.

    Examples:
        >>> save_json([{"id": 1, "name": "Guitar", "hours": 0, "history": []}], "skills.json")
    """
    resolved = _resolve_path(filepath)
    parent = Path(resolved).parent
    parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(dir=parent, prefix=".skills-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, resolved)
    except BaseException:
        os.unlink(tmp_path)
        raise
    return resolved
