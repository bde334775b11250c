"""Insert tool - add a line at a given position."""

from backup_store import BackupStore
from errors import EditorError
from file_io import read_text, write_text
from line_engine import insert_line
from tools.common import ToolResult, require_file


async def insert_text(
    store: BackupStore,
    file_path: str,
    line_number: int,
    text: str,
) -> ToolResult:
    """Insert text as a new line at line_number.

    Args:
        store: Backup store receiving the pre-edit snapshot
        file_path: Path to the file relative to the base directory
        line_number: Position of the new line (1-indexed); past the end of
                     the file pads with empty lines
        text: Text to insert

    Returns:
        Success or error result
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
        new_content = insert_line(content, line_number, text)
    except EditorError as e:
        return ToolResult.err(f"Error: {e}")

    try:
        store.snapshot(full_path)
        write_text(full_path, new_content)
    except OSError as e:
        return ToolResult.err(f"Error writing file: {e}")

    return ToolResult.ok(f"Successfully inserted text at line {line_number} in {file_path}")
