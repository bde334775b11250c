"""Shared pieces for the tool modules: result type and path checks."""

from dataclasses import dataclass
from pathlib import Path

from errors import AccessDeniedError, InvalidArgumentError, NotFoundError
from path_utils import resolve_path


@dataclass
class ToolResult:
    """Result of a tool operation.

    Attributes:
        success: Whether the operation succeeded.
        text: Output for the client, or an error message starting with "Error".
    """

    success: bool
    text: str

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        """Create a successful result."""
        return cls(success=True, text=text)

    @classmethod
    def err(cls, message: str) -> "ToolResult":
        """Create an error result."""
        return cls(success=False, text=message)


def resolve_or_raise(file_path: str) -> Path:
    """Resolve a client path inside the base directory.

    Raises:
        AccessDeniedError: If the path escapes the base directory or is invalid.
    """
    result = resolve_path(file_path)
    if not result.success:
        raise AccessDeniedError(result.error)
    return result.path


def require_file(file_path: str) -> Path:
    """Resolve a client path that must name an existing regular file.

    Raises:
        AccessDeniedError: If the path escapes the base directory.
        NotFoundError: If nothing exists at the path.
        InvalidArgumentError: If the path is a directory or other non-file.
    """
    full_path = resolve_or_raise(file_path)
    if not full_path.exists():
        raise NotFoundError(f"File does not exist: {file_path}")
    if not full_path.is_file():
        raise InvalidArgumentError(f"Path is not a file: {file_path}")
    return full_path
