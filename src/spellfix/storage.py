"""File access for spellfix.

Plain-text reads and atomic writes. The correction pipeline only ever sees
strings; everything that touches the filesystem lives here.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from spellfix.errors import ResourceError, StorageError


def path_exists(path: Path | str) -> bool:
    """Check whether a file or directory exists."""
    return Path(path).exists()


def read_text(path: Path | str, encoding: str = "utf-8") -> str:
    """Read a whole text file into memory.

    Args:
        path: File to read
        encoding: File encoding (default utf-8)

    Returns:
        File contents

    Raises:
        ResourceError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise ResourceError(f"File not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceError(f"Failed to read {path}: {e}") from e


def write_text(path: Path | str, data: str, encoding: str = "utf-8") -> None:
    """Write text to a file atomically, creating parent directories.

    Writes to a temporary file in the same directory, then renames it over
    the target so readers never see a half-written file.

    Args:
        path: Target file path
        data: String data to write
        encoding: File encoding (default utf-8)

    Raises:
        StorageError: If the directory cannot be created or the write fails
    """
    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Failed to create directory {path.parent}: {e}") from e

    fd = None
    temp_path = None
    try:
        fd, temp_path = tempfile.mkstemp(
            suffix=".tmp",
            prefix=path.stem + "_",
            dir=path.parent,
        )
        os.write(fd, data.encode(encoding))
        os.fsync(fd)
        os.close(fd)
        fd = None

        os.replace(temp_path, path)
        temp_path = None

    except OSError as e:
        raise StorageError(f"Failed to write {path}: {e}") from e
    finally:
        if fd is not None:
            try:
                os.close(fd)
            except OSError:
                pass
        if temp_path is not None:
            try:
                os.unlink(temp_path)
            except OSError:
                pass


def write_json(path: Path | str, data: dict[str, Any] | list[Any], indent: int = 2) -> None:
    """Write JSON data to a file atomically."""
    write_text(path, json.dumps(data, indent=indent, ensure_ascii=False) + "\n")
