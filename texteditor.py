"""Text Editor MCP - Entry point and tool registration.

A Model Context Protocol server offering line-based viewing and editing of
text files inside a single base directory, with one level of undo per file.
"""

import logging
import sys
from typing import List

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from backup_store import BackupStore
from config import LOG_LEVEL
from path_utils import ensure_base_dir, init_base_dir_from_args
from tools import (
    ToolResult,
    create_file,
    edit_lines,
    insert_text,
    str_replace_file,
    undo_edit as undo_edit_file,
    view_file,
)

logger = logging.getLogger(__name__)

# Create MCP server instance
mcp = FastMCP("text-editor")

# Pre-edit snapshots for undo_edit; lives as long as the server process
backups = BackupStore()


def _unwrap(result: ToolResult) -> str:
    """Return a tool result's text, or raise so the client sees an error result.

    Raises:
        ToolError: If the operation failed. FastMCP reports it with isError set.
    """
    if not result.success:
        raise ToolError(result.text)
    return result.text


# Register tools with MCP server
@mcp.tool()
async def view(path: str, view_range: List[int] | None = None) -> str:
    """View file content or directory listing.

    Args:
        path: File or directory path relative to the base directory
        view_range: Optional range of lines to view [start, end]. Line numbers are
                    1-indexed and -1 for end means read to end of file.

    Returns:
        File lines prefixed with their line numbers ("N: text"); an empty
        file gives an empty string. For a directory, a JSON list of entries
        with name, type, size and modified time.
    """
    return _unwrap(await view_file(path, view_range))


@mcp.tool()
async def str_replace(path: str, old_str: str, new_str: str, count: int | None = None) -> str:
    """Replace text in a file.

    old_str is matched literally and case-sensitively. If it is not found the
    file is left unchanged.

    Args:
        path: File path relative to the base directory
        old_str: Text to replace
        new_str: New text
        count: Number of occurrences to replace (all if not specified)

    Returns:
        Confirmation with the number of occurrences replaced.
    """
    return _unwrap(await str_replace_file(backups, path, old_str, new_str, count))


@mcp.tool()
async def edit(path: str, start_line: int, end_line: int, new_content: str) -> str:
    """Edit specific lines in a file, replacing them with new content.

    Args:
        path: File path relative to the base directory
        start_line: Start line number to edit (1-indexed)
        end_line: End line number to edit (1-indexed), or -1 for the last line
        new_content: New content to replace the specified lines

    Returns:
        Confirmation including the old and new content of the edited lines.
    """
    return _unwrap(await edit_lines(backups, path, start_line, end_line, new_content))


@mcp.tool()
async def insert(path: str, line_number: int, text: str) -> str:
    """Insert content at a specific line number.

    Args:
        path: File path relative to the base directory
        line_number: Line number to insert at (1-based). Beyond the end of the
                     file, empty lines are added so the text lands on this line.
        text: Text to insert

    Returns:
        Confirmation string.
    """
    return _unwrap(await insert_text(backups, path, line_number, text))


@mcp.tool()
async def create(path: str, content: str, overwrite: bool = False) -> str:
    """Create a new file.

    Args:
        path: File path relative to the base directory
        content: Content to write to the file
        overwrite: Whether to overwrite if file exists

    Returns:
        Confirmation string.
    """
    return _unwrap(await create_file(backups, path, content, overwrite))


@mcp.tool()
async def undo_edit(path: str) -> str:
    """Restore a file from its backup.

    Reverts the most recent str_replace, edit, insert or overwriting create
    on the file. Only one level of undo is kept.

    Args:
        path: File path relative to the base directory

    Returns:
        Confirmation string.
    """
    return _unwrap(await undo_edit_file(backups, path))


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send log output to stderr; stdout carries the MCP stdio transport."""
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Entry point for CLI: text-editor-mcp [/path/to/base/dir]

    The base directory defaults to ./texteditor-data and is created if
    missing. Failing to create it is the only fatal startup error.
    """
    configure_logging()
    init_base_dir_from_args()

    try:
        ensure_base_dir()
    except OSError as e:
        logger.error("Failed to create base directory: %s", e)
        sys.exit(1)

    logger.info("Text editor MCP server running")
    mcp.run()


if __name__ == "__main__":
    main()
