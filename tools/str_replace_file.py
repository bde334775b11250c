"""String replace tool - literal substring replacement in a file."""

from typing import Optional

from backup_store import BackupStore
from errors import EditorError
from file_io import read_text, write_text
from line_engine import replace_substring
from tools.common import ToolResult, require_file


async def str_replace_file(
    store: BackupStore,
    file_path: str,
    old_str: str,
    new_str: str,
    count: Optional[int] = None,
) -> ToolResult:
    """Replace occurrences of old_str with new_str in a file.

    A replacement that matches nothing still reports success and still
    takes a snapshot, so undo_edit reverts this call. Only the write is
    skipped.

    Args:
        store: Backup store receiving the pre-edit snapshot
        file_path: Path to the file relative to the base directory
        old_str: Exact text to find (matched literally, case-sensitive)
        new_str: Text to replace old_str with
        count: Replace only the first N occurrences; None or <= 0 replaces all

    Returns:
        Success message with replacement count, or error result
    """
    try:
        full_path = require_file(file_path)
    except EditorError as e:
        return ToolResult.err(f"Error: {e}")

    try:
        content = read_text(full_path)
    except (OSError, UnicodeDecodeError) as e:
        return ToolResult.err(f"Error reading file: {e}")

    try:
        result = replace_substring(content, old_str, new_str, count)
    except EditorError as e:
        return ToolResult.err(f"Error: {e}")

    store.snapshot(full_path)

    if result.replacements == 0:
        return ToolResult.ok(f"Successfully replaced 0 occurrence(s) in {file_path}; file unchanged")

    try:
        write_text(full_path, result.content)
    except OSError as e:
        return ToolResult.err(f"Error writing file: {e}")

    return ToolResult.ok(
        f"Successfully replaced {result.replacements} occurrence(s) in {file_path}"
    )
