"""Single-level backup storage for undo support.

Holds at most one snapshot per file: the content the file had right before
the most recent mutation made through this server. Snapshots live in memory
only and disappear when the process exits.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from errors import NotFoundError
from file_io import read_text, write_text

logger = logging.getLogger(__name__)


@dataclass
class BackupStore:
    """Maps resolved file paths to their last-known-good content.

    The dispatcher owns one instance for the life of the server and hands it
    to every mutating tool. Tests create their own for isolation.

    Attributes:
        entries: Maps absolute file paths to the content they had before the
            last mutation.
    """

    entries: Dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def snapshot(self, file_path: Path) -> bool:
        """Store the current content of a file, replacing any older snapshot.

        A missing file is not an error; there is simply nothing to back up.
        A file that cannot be read is logged and skipped so the edit itself
        can still go ahead. Any older snapshot for it is dropped.

        Args:
            file_path: Resolved absolute path to the file.

        Returns:
            True if a snapshot was stored, False otherwise.
        """
        if not file_path.is_file():
            return False

        try:
            content = read_text(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to backup file %s: %s", file_path, e)
            self.entries.pop(str(file_path), None)
            return False

        self.entries[str(file_path)] = content
        logger.debug("Snapshot taken for %s (%d chars)", file_path, len(content))
        return True

    def restore(self, file_path: Path) -> str:
        """Write the stored snapshot back to the file and forget it.

        The snapshot is only removed once the write has succeeded, so a
        failed restore can be retried.

        Args:
            file_path: Resolved absolute path to the file.

        Returns:
            The restored content.

        Raises:
            NotFoundError: If no snapshot exists for the path.
            OSError: If writing the file fails.
        """
        key = str(file_path)
        if key not in self.entries:
            raise NotFoundError(f"No backup available for {file_path}")

        content = self.entries[key]
        file_path.parent.mkdir(parents=True, exist_ok=True)
        write_text(file_path, content)
        del self.entries[key]
        logger.debug("Restored %s from backup", file_path)
        return content

    def has(self, file_path: Path) -> bool:
        """Check whether a snapshot exists for a file."""
        return str(file_path) in self.entries

    def discard(self, file_path: Path) -> None:
        """Drop the snapshot for a file, if any."""
        self.entries.pop(str(file_path), None)

    def clear(self) -> None:
        """Drop every snapshot."""
        self.entries.clear()
