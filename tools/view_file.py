"""View tool - numbered file content or directory listing."""

from typing import List, Optional

from errors import EditorError
from file_io import format_directory_listing, list_directory, read_text
from line_engine import render_view
from tools.common import ToolResult, resolve_or_raise


async def view_file(file_path: str, view_range: Optional[List[int]] = None) -> ToolResult:
    """View a file with line numbers, or list a directory.

    Args:
        file_path: Path relative to the base directory
        view_range: Optional [start_line, end_line], 1-indexed; -1 as end means
                    end of file. Invalid ranges show the whole file.

    Returns:
        Numbered lines (empty for an empty file), a directory listing, or an
        error result
    """
    try:
        full_path = resolve_or_raise(file_path)
    except EditorError as e:
        return ToolResult.err(f"Error: {e}")

    if not full_path.exists():
        return ToolResult.err(f"Error: File does not exist: {file_path}")

    if full_path.is_dir():
        try:
            details = list_directory(full_path)
        except OSError as e:
            return ToolResult.err(f"Error listing directory: {e}")
        return ToolResult.ok(format_directory_listing(file_path, details))

    try:
        content = read_text(full_path)
    except (OSError, UnicodeDecodeError) as e:
        return ToolResult.err(f"Error reading file: {e}")

    return ToolResult.ok(render_view(content, view_range))
