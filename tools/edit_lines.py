"""Edit tool - replace a range of lines in a file."""

from backup_store import BackupStore
from errors import EditorError
from file_io import read_text, write_text
from line_engine import replace_lines
from tools.common import ToolResult, require_file


async def edit_lines(
    store: BackupStore,
    file_path: str,
    start_line: int,
    end_line: int,
    new_content: str,
) -> ToolResult:
    """Replace lines start_line..end_line (inclusive) with new_content.

    Args:
        store: Backup store receiving the pre-edit snapshot
        file_path: Path to the file relative to the base directory
        start_line: First line to replace (1-indexed)
        end_line: Last line to replace (1-indexed), or -1 for end of file
        new_content: Replacement text; may span any number of lines

    Returns:
        Success message showing old and new content, or error result
    """
    try:
        full_path = require_file(file_path)
    except EditorError as e:
        return ToolResult.err(f"Error: {e}")

    try:
        content = read_text(full_path)
    except (OSError, UnicodeDecodeError) as e:
        return ToolResult.err(f"Error reading file: {e}")

    # Range validation happens here, before anything is written
    try:
        result = replace_lines(content, start_line, end_line, new_content)
    except EditorError as e:
        return ToolResult.err(f"Error: {e}")

    try:
        store.snapshot(full_path)
        write_text(full_path, result.content)
    except OSError as e:
        return ToolResult.err(f"Error writing file: {e}")

    return ToolResult.ok(
        f"Successfully edited lines {result.start_line}-{result.end_line} in {file_path}"
        f"\n\nOld content:\n{result.old_text}"
        f"\n\nNew content:\n{new_content}"
    )
