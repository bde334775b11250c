"""Filesystem helpers for reading, writing and listing.

All text is read and written as UTF-8 with newline translation disabled,
so content reaches disk byte-for-byte as the engine produced it.
"""

import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from config import ATOMIC_WRITES


def read_text(file_path: Path) -> str:
    """Read a file's full content without newline translation.

    Args:
        file_path: Absolute path to the file.

    Returns:
        File content.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with file_path.open("r", encoding="utf-8", newline="") as f:
        return f.read()


def write_text(file_path: Path, content: str, atomic: bool | None = None) -> None:
    """Write content to a file verbatim.

    With atomic writes the content goes to a temporary sibling file that is
    flushed, fsynced and then renamed over the target. The target's
    permission bits are carried over when it already exists.

    Args:
        file_path: Absolute path to the file.
        content: Full content to write.
        atomic: Override the atomicWrites setting. If None, uses the setting.

    Raises:
        OSError: If the write fails. The temp file is removed on failure.
    """
    if atomic is None:
        atomic = ATOMIC_WRITES

    if not atomic:
        with file_path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
        return

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{file_path.name}.", suffix=".tmp", dir=str(file_path.parent)
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        if file_path.exists():
            os.chmod(tmp_path, file_path.stat().st_mode & 0o7777)
        os.replace(tmp_path, file_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def list_directory(dir_path: Path) -> List[Dict[str, Any]]:
    """Describe the entries of a directory.

    Entries are sorted with directories first, then case-insensitively by
    name. Entries that vanish or cannot be stat'ed mid-listing are skipped.

    Args:
        dir_path: Absolute path to the directory.

    Returns:
        List of dicts with 'name', 'type', 'size' and 'modified' (ISO-8601, UTC).
    """
    entries = sorted(dir_path.iterdir(), key=lambda p: (not p.is_dir(), p.name.lower()))
    details: List[Dict[str, Any]] = []

    for entry in entries:
        try:
            stat = entry.stat()
        except OSError:
            continue
        details.append(
            {
                "name": entry.name,
                "type": "directory" if entry.is_dir() else "file",
                "size": stat.st_size,
                "modified": datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)
                .isoformat()
                .replace("+00:00", "Z"),
            }
        )

    return details


def format_directory_listing(display_name: str, details: List[Dict[str, Any]]) -> str:
    """Render a directory listing as returned by the view tool.

    Args:
        display_name: Path as the client supplied it.
        details: Output of list_directory.

    Returns:
        "Directory: <name>" header followed by the entries as indented JSON.
    """
    return f"Directory: {display_name}\n{json.dumps(details, indent=2)}"
