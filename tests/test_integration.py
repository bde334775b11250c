"""Integration tests for the Text Editor MCP server.

Tests tool registration, error signalling and complete edit workflows
through the functions registered in texteditor.py.
"""

import sys
import unittest
from pathlib import Path
from unittest.mock import patch

# Add parent directory to path for module imports
_parent_dir = str(Path(__file__).parent.parent)
if _parent_dir not in sys.path:
    sys.path.insert(0, _parent_dir)

from tests.test_utils import TempWorkspace, run_async


class TestToolRegistration(unittest.TestCase):
    """Tests for the tool surface exposed to clients."""

    def test_all_tools_registered(self) -> None:
        """Verify the six editing tools are listed."""
        import texteditor

        tools = run_async(texteditor.mcp.list_tools())

        self.assertEqual(
            sorted(t.name for t in tools),
            ["create", "edit", "insert", "str_replace", "undo_edit", "view"],
        )

    def test_required_parameters(self) -> None:
        """Verify required and optional parameters per tool."""
        import texteditor

        tools = {t.name: t for t in run_async(texteditor.mcp.list_tools())}

        expected = {
            "view": ["path"],
            "str_replace": ["new_str", "old_str", "path"],
            "edit": ["end_line", "new_content", "path", "start_line"],
            "insert": ["line_number", "path", "text"],
            "create": ["content", "path"],
            "undo_edit": ["path"],
        }
        for name, required in expected.items():
            self.assertEqual(sorted(tools[name].inputSchema.get("required", [])), required)
        self.assertIn("view_range", tools["view"].inputSchema["properties"])
        self.assertIn("count", tools["str_replace"].inputSchema["properties"])
        self.assertIn("overwrite", tools["create"].inputSchema["properties"])


class TestErrorSignalling(unittest.TestCase):
    """Tests that failures reach the client as tool errors."""

    def test_failed_operation_raises_tool_error(self) -> None:
        """Verify an error result becomes a ToolError."""
        from mcp.server.fastmcp.exceptions import ToolError

        import texteditor

        with TempWorkspace():
            texteditor.backups.clear()

            with self.assertRaises(ToolError) as ctx:
                run_async(texteditor.view("missing.txt"))

            self.assertIn("does not exist", str(ctx.exception))

    def test_access_denied_raises_tool_error(self) -> None:
        """Verify traversal outside the base is reported as an error."""
        from mcp.server.fastmcp.exceptions import ToolError

        import texteditor

        with TempWorkspace():
            with self.assertRaises(ToolError) as ctx:
                run_async(texteditor.create("../escape.txt", "x"))

            self.assertIn("Access denied", str(ctx.exception))


class TestEditWorkflow(unittest.TestCase):
    """Tests for complete create/edit/undo sequences."""

    def test_create_edit_view_undo(self) -> None:
        """Verify a full session against the server's own backup store."""
        import texteditor

        with TempWorkspace() as ws:
            texteditor.backups.clear()

            run_async(texteditor.create("notes/todo.md", "# Todo\n- write\n- test\n"))
            run_async(texteditor.edit("notes/todo.md", 2, 2, "- write code"))
            run_async(texteditor.insert("notes/todo.md", 4, "- ship"))
            view = run_async(texteditor.view("notes/todo.md"))

            self.assertEqual(view, "1: # Todo\n2: - write code\n3: - test\n4: - ship")

            run_async(texteditor.undo_edit("notes/todo.md"))
            self.assertEqual(ws.read_file("notes/todo.md"), "# Todo\n- write code\n- test\n")

            texteditor.backups.clear()

    def test_str_replace_then_undo(self) -> None:
        """Verify undo reverts a replacement made through the server."""
        import texteditor

        with TempWorkspace() as ws:
            texteditor.backups.clear()
            ws.create_file("app.py", "DEBUG = True\nprint('debug')\n")

            message = run_async(texteditor.str_replace("app.py", "DEBUG = True", "DEBUG = False"))
            self.assertIn("1 occurrence", message)

            run_async(texteditor.undo_edit("app.py"))
            self.assertEqual(ws.read_file("app.py"), "DEBUG = True\nprint('debug')\n")

            texteditor.backups.clear()


class TestMain(unittest.TestCase):
    """Tests for the CLI entry point."""

    def test_main_creates_base_dir_and_runs(self) -> None:
        """Verify startup creates the base directory before serving."""
        import path_utils
        import texteditor

        with TempWorkspace() as ws:
            target = ws.path / "served"
            with patch.object(sys, "argv", ["text-editor-mcp", str(target)]), \
                    patch.object(texteditor.mcp, "run") as run:
                texteditor.main()

            self.assertTrue(target.is_dir())
            self.assertEqual(path_utils.get_base_dir(), target)
            run.assert_called_once()

    def test_main_exits_when_base_dir_cannot_be_created(self) -> None:
        """Verify a base directory failure is fatal."""
        import texteditor

        with TempWorkspace() as ws:
            blocker = ws.create_file("blocker", "file")
            with patch.object(sys, "argv", ["text-editor-mcp", str(blocker / "base")]), \
                    patch.object(texteditor.mcp, "run") as run:
                with self.assertRaises(SystemExit) as ctx:
                    texteditor.main()

            self.assertEqual(ctx.exception.code, 1)
            run.assert_not_called()


if __name__ == "__main__":
    unittest.main()
