"""Tools package for the text editor MCP server.

Each tool is implemented in its own module for maintainability.
"""

from tools.common import ToolResult
from tools.create_file import create_file
from tools.edit_lines import edit_lines
from tools.insert_text import insert_text
from tools.str_replace_file import str_replace_file
from tools.undo_edit import undo_edit
from tools.view_file import view_file

__all__ = [
    "ToolResult",
    "view_file",
    "str_replace_file",
    "edit_lines",
    "insert_text",
    "create_file",
    "undo_edit",
]
