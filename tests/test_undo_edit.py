"""Tests for tools/undo_edit.py module.

Tests single-level undo after each kind of mutation.
"""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for module imports
_parent_dir = str(Path(__file__).parent.parent)
if _parent_dir not in sys.path:
    sys.path.insert(0, _parent_dir)

from tests.test_utils import TempWorkspace, run_async


class TestUndoEdit(unittest.TestCase):
    """Tests for undoing edits."""

    def test_undo_after_edit_restores_content(self) -> None:
        """Verify undo brings back the exact pre-edit content."""
        with TempWorkspace() as ws:
            from backup_store import BackupStore
            from tools.edit_lines import edit_lines
            from tools.undo_edit import undo_edit

            original = "a\nb\nc"
            ws.create_file("test.txt", original)
            store = BackupStore()
            run_async(edit_lines(store, "test.txt", 1, 2, "z"))

            result = run_async(undo_edit(store, "test.txt"))

            self.assertTrue(result.success)
            self.assertEqual(result.text, "Successfully restored test.txt from backup")
            self.assertEqual(ws.read_file("test.txt"), original)

    def test_second_undo_fails(self) -> None:
        """Verify the backup is consumed by the first undo."""
        with TempWorkspace() as ws:
            from backup_store import BackupStore
            from tools.str_replace_file import str_replace_file
            from tools.undo_edit import undo_edit

            ws.create_file("test.txt", "hello")
            store = BackupStore()
            run_async(str_replace_file(store, "test.txt", "hello", "bye"))
            run_async(undo_edit(store, "test.txt"))

            result = run_async(undo_edit(store, "test.txt"))

            self.assertFalse(result.success)
            self.assertIn("No backup available for test.txt", result.text)
            self.assertEqual(ws.read_file("test.txt"), "hello")

    def test_undo_only_reverts_last_edit(self) -> None:
        """Verify one level of undo: two edits, one undo."""
        with TempWorkspace() as ws:
            from backup_store import BackupStore
            from tools.insert_text import insert_text
            from tools.undo_edit import undo_edit

            ws.create_file("test.txt", "a\n")
            store = BackupStore()
            run_async(insert_text(store, "test.txt", 2, "b"))
            run_async(insert_text(store, "test.txt", 3, "c"))

            run_async(undo_edit(store, "test.txt"))

            self.assertEqual(ws.read_file("test.txt"), "a\nb\n")

    def test_undo_overwriting_create(self) -> None:
        """Verify an overwritten file can be brought back."""
        with TempWorkspace() as ws:
            from backup_store import BackupStore
            from tools.create_file import create_file
            from tools.undo_edit import undo_edit

            ws.create_file("config.ini", "[main]\nkey=1\n")
            store = BackupStore()
            run_async(create_file(store, "config.ini", "", overwrite=True))

            run_async(undo_edit(store, "config.ini"))

            self.assertEqual(ws.read_file("config.ini"), "[main]\nkey=1\n")

    def test_undo_without_edit_fails(self) -> None:
        """Verify undo on a never-edited file is an error."""
        with TempWorkspace() as ws:
            from backup_store import BackupStore
            from tools.undo_edit import undo_edit

            ws.create_file("test.txt", "x")

            result = run_async(undo_edit(BackupStore(), "test.txt"))

            self.assertFalse(result.success)

    def test_undo_outside_base_fails(self) -> None:
        """Verify traversal is denied."""
        with TempWorkspace():
            from backup_store import BackupStore
            from tools.undo_edit import undo_edit

            result = run_async(undo_edit(BackupStore(), "../x.txt"))

            self.assertFalse(result.success)
            self.assertIn("Access denied", result.text)


if __name__ == "__main__":
    unittest.main()
