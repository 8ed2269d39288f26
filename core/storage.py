"""Centralized file I/O operations.

Match-file loading for the CLI and line appends for the event log,
with consistent error handling.
"""

import json
import os
import sys
from typing import Any


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class FileNotFoundError(StorageError):
    """File does not exist."""
    pass


class FileCorruptedError(StorageError):
    """File exists but contains invalid data."""
    pass


def ensure_parent_dir(filepath: str) -> None:
    """Create the directory holding filepath if it doesn't exist.

    On Unix systems, directories are created with mode 0700 (owner only).
    """
    directory = os.path.dirname(filepath)
    if not directory:
        return
    if sys.platform != "win32":
        os.makedirs(directory, mode=0o700, exist_ok=True)
    else:
        os.makedirs(directory, exist_ok=True)


def load_json(filepath: str) -> Any:
    """Load JSON data from file.

    Args:
        filepath: Path to JSON file

    Returns:
        Parsed JSON value

    Raises:
        FileNotFoundError: If the file doesn't exist
        FileCorruptedError: If file exists but contains invalid JSON
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"No such file: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise FileCorruptedError(f"Invalid JSON in {filepath}: {e}")
    except IOError as e:
        raise StorageError(f"Failed to read {filepath}: {e}")


def append_line(filepath: str, line: str) -> None:
    """Append a line to a text file.

    Args:
        filepath: Path to text file
        line: Line to append (newline added automatically)
    """
    ensure_parent_dir(filepath)
    try:
        with open(filepath, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except IOError as e:
        raise StorageError(f"Failed to append to {filepath}: {e}")


def file_exists(filepath: str) -> bool:
    """Check if file exists."""
    return os.path.exists(filepath)
