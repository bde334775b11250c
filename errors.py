"""Error types raised by the editing engine and backup store.

Tool operations catch these and turn them into error results, so none of
them ever escapes to the MCP transport.
"""


class EditorError(Exception):
    """Base class for all user-facing editor failures."""


class AccessDeniedError(EditorError):
    """Path resolves outside the base directory."""


class NotFoundError(EditorError):
    """File is missing, or there is no backup to restore."""


class AlreadyExistsError(EditorError):
    """Create was called on an existing file without overwrite."""


class RangeError(EditorError):
    """Line number or line range outside the file's bounds."""


class InvalidArgumentError(EditorError):
    """Argument is well-typed but unusable (e.g. an empty search string)."""
