"""Path utilities for the text editor MCP server.

Provides secure path resolution and validation using pathlib.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from config import DEFAULT_BASE_DIR_SETTING

logger = logging.getLogger(__name__)


@dataclass
class PathResult:
    """Result of a path resolution operation.

    Attributes:
        success: Whether the resolution succeeded.
        path: The resolved absolute path (only valid if success=True).
        error: Error message (only set if success=False).
    """

    success: bool
    path: Path
    error: str = ""

    @classmethod
    def ok(cls, path: Path) -> "PathResult":
        """Create a successful result."""
        return cls(success=True, path=path)

    @classmethod
    def err(cls, message: str) -> "PathResult":
        """Create an error result."""
        return cls(success=False, path=Path(), error=message)


# Global base directory - set at startup
_base_dir: Path = Path(DEFAULT_BASE_DIR_SETTING).resolve()


def get_base_dir() -> Path:
    """Get the current base directory.

    Returns:
        The configured base directory as a Path.
    """
    return _base_dir


def set_base_dir(path: Union[str, Path]) -> None:
    """Set the base directory for file operations.

    Args:
        path: The new base directory (will be resolved to absolute).
    """
    global _base_dir
    _base_dir = Path(path).resolve()


def init_base_dir_from_args(argv: list[str] | None = None) -> Path:
    """Initialize base directory from command line arguments.

    Uses first command line argument if provided, otherwise the configured
    default (./texteditor-data unless appsettings.json overrides it).

    Args:
        argv: Argument vector to read. If None, uses sys.argv.

    Returns:
        The configured base directory.
    """
    if argv is None:
        argv = sys.argv
    if len(argv) > 1 and argv[1]:
        set_base_dir(argv[1])
    else:
        set_base_dir(DEFAULT_BASE_DIR_SETTING)
    return _base_dir


def ensure_base_dir() -> Path:
    """Create the base directory (and parents) if it does not exist.

    Returns:
        The base directory.

    Raises:
        OSError: If the directory cannot be created. Fatal at startup.
    """
    _base_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Base directory: %s", _base_dir)
    return _base_dir


def resolve_path(relative_path: str, base_dir: Path | None = None) -> PathResult:
    """Resolve a relative path to absolute, validating security.

    Ensures the resolved path stays within the base directory to prevent
    directory traversal attacks. Absolute inputs are accepted only if they
    point inside the base directory. Symlinks are resolved before the
    check, so a link pointing outside the base is rejected too.

    Args:
        relative_path: Path relative to the base directory.
        base_dir: Directory to confine to. If None, uses the global base directory.

    Returns:
        PathResult with either the resolved path or an error message.
    """
    base = (base_dir if base_dir is not None else _base_dir).resolve()
    try:
        target = (base / relative_path).resolve()
    except (OSError, ValueError, RuntimeError) as e:
        return PathResult.err(f"Invalid path: {e}")

    # Security check: target must be the base itself or a descendant of it
    try:
        target.relative_to(base)
    except ValueError:
        return PathResult.err(
            f"Access denied: {relative_path} is outside the allowed directory"
        )

    return PathResult.ok(target)

