"""Create tool - write a new file, optionally replacing an existing one."""

from backup_store import BackupStore
from errors import AlreadyExistsError, EditorError, InvalidArgumentError
from file_io import write_text
from tools.common import ToolResult, resolve_or_raise


async def create_file(
    store: BackupStore,
    file_path: str,
    content: str,
    overwrite: bool = False,
) -> ToolResult:
    """Create a file with the given content.

    Parent directories are created as needed. Content is written verbatim.
    When an existing file is overwritten its previous content is backed up,
    so undo_edit can bring it back.

    Args:
        store: Backup store receiving the snapshot of an overwritten file
        file_path: Path to the file relative to the base directory
        content: Content to write to the file
        overwrite: Replace the file if it already exists

    Returns:
        Success or error result
    """
    try:
        full_path = resolve_or_raise(file_path)
        if full_path.is_dir():
            raise InvalidArgumentError(f"Path is a directory: {file_path}")
        existed = full_path.exists()
        if existed and not overwrite:
            raise AlreadyExistsError(
                f"File already exists: {file_path}. Use overwrite=true to replace it."
            )
    except EditorError as e:
        return ToolResult.err(f"Error: {e}")

    try:
        # Ensure parent directory exists
        full_path.parent.mkdir(parents=True, exist_ok=True)
        if existed:
            store.snapshot(full_path)
        write_text(full_path, content)
    except OSError as e:
        return ToolResult.err(f"Error writing file: {e}")

    if existed:
        return ToolResult.ok(f"Successfully overwrote file: {file_path}")
    return ToolResult.ok(f"Successfully created file: {file_path}")
