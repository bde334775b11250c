"""Undo tool - restore a file from its single backup."""

from backup_store import BackupStore
from errors import EditorError
from tools.common import ToolResult, resolve_or_raise


async def undo_edit(store: BackupStore, file_path: str) -> ToolResult:
    """Restore a file to its content before the last edit.

    The backup is consumed: undoing twice without an edit in between fails.

    Args:
        store: Backup store holding the snapshot
        file_path: Path to the file relative to the base directory

    Returns:
        Success or error result
    """
    try:
        full_path = resolve_or_raise(file_path)
    except EditorError as e:
        return ToolResult.err(f"Error: {e}")

    if not store.has(full_path):
        return ToolResult.err(f"Error: No backup available for {file_path}")

    try:
        store.restore(full_path)
    except EditorError as e:
        return ToolResult.err(f"Error: {e}")
    except OSError as e:
        return ToolResult.err(f"Error writing file: {e}")

    return ToolResult.ok(f"Successfully restored {file_path} from backup")
