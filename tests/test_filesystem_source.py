"""Filesystem source tests: scan order, hidden files, columns, and info text."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytree.sources.filesystem import CLOSED_MARKER, OPEN_MARKER, FileNode, FileTree, format_size
from lazytree.tree_model import cell_text
from lazytree.tree_pane.viewport import TreeViewport
from lazytree.ui_theme import PLAIN_THEME


class FileNodeTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "b_dir").mkdir()
        (self.root / "Z_dir").mkdir()
        (self.root / "c.py").write_text("def f():\n    return 1\n", encoding="utf-8")
        (self.root / "a_file.txt").write_text("hello", encoding="utf-8")
        (self.root / ".hidden").write_text("x", encoding="utf-8")
        (self.root / "blob.bin").write_bytes(b"\x00\x01\x02")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _names(self, node: FileNode) -> list[str]:
        return [child.name for child in node.children()]

    def test_directories_first_then_case_insensitive_names(self) -> None:
        node = FileNode(self.root, theme=PLAIN_THEME)

        self.assertEqual(self._names(node), ["b_dir", "Z_dir", "a_file.txt", "blob.bin", "c.py"])

    def test_hidden_entries_follow_preference(self) -> None:
        self.assertNotIn(".hidden", self._names(FileNode(self.root)))
        self.assertIn(".hidden", self._names(FileNode(self.root, show_hidden=True)))

    def test_children_are_cached_and_linked(self) -> None:
        node = FileNode(self.root)
        children = node.children()

        self.assertIs(node.children(), children)
        self.assertIs(children[0].parent, node)
        self.assertEqual(children[0].depth, 1)
        self.assertIsNone(children[-1].children())

    def test_columns_show_name_size_and_time(self) -> None:
        node = FileNode(self.root / "a_file.txt", theme=PLAIN_THEME)
        columns = node.columns()

        self.assertEqual(cell_text(columns[0]), "a_file.txt")
        self.assertEqual(cell_text(columns[1]), "5B")
        self.assertRegex(cell_text(columns[2]), r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$")

        folder = FileNode(self.root / "b_dir", theme=PLAIN_THEME).columns()
        self.assertEqual(cell_text(folder[0]), "b_dir/")
        self.assertEqual(cell_text(folder[1]), "")

    def test_text_file_info_includes_highlighted_preview(self) -> None:
        info = FileNode(self.root / "c.py").info()

        self.assertEqual(info[0], str(self.root / "c.py"))
        self.assertIn("kind: file", info)
        self.assertIn("size: 22 bytes", info)
        self.assertTrue(any("\x1b[" in line for line in info))
        self.assertTrue(any("return" in line for line in info))

    def test_binary_and_missing_files(self) -> None:
        self.assertEqual(FileNode(self.root / "blob.bin").info()[-1], "(binary file)")

        missing = FileNode(self.root / "nope")
        self.assertIsNone(missing.stat_result)
        self.assertEqual(missing.info(), [str(self.root / "nope"), "(unreadable)"])
        self.assertIsNone(missing.children())

    def test_directory_info_has_no_preview(self) -> None:
        info = FileNode(self.root / "b_dir").info()

        self.assertIn("kind: directory", info)
        self.assertFalse(any(line.startswith("size:") for line in info))

    def test_unreadable_directory_has_no_children(self) -> None:
        node = FileNode(self.root)
        with mock.patch("lazytree.sources.filesystem.os.scandir", side_effect=PermissionError("denied")):
            self.assertEqual(node.children(), [])

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_symlink_kind(self) -> None:
        link = self.root / "link.txt"
        os.symlink(self.root / "a_file.txt", link)

        self.assertIn(f"kind: symlink -> {self.root / 'a_file.txt'}", FileNode(link).info())


class FileTreeTests(unittest.TestCase):
    def test_marker_column_tracks_open_state(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()
            (root / "file.txt").write_text("x", encoding="utf-8")
            tree = FileTree(theme=PLAIN_THEME)
            node = FileNode(root, theme=PLAIN_THEME)

            self.assertEqual(cell_text(tree.get_columns(node)[1]), CLOSED_MARKER)
            tree.open(node)
            self.assertEqual(cell_text(tree.get_columns(node)[1]), OPEN_MARKER)

            sub, leaf = node.children()
            self.assertEqual(cell_text(tree.get_columns(leaf)[1]), " ")
            self.assertEqual(cell_text(tree.get_columns(leaf)[0]), " ")
            self.assertIs(tree.next(node), sub)
            self.assertIs(tree.next(sub), leaf)

    def test_marker_is_first_without_indent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tree = FileTree(indent=False, theme=PLAIN_THEME)
            node = FileNode(tmp, theme=PLAIN_THEME)

            columns = tree.get_columns(node)
            self.assertEqual(cell_text(columns[0]), CLOSED_MARKER)
            self.assertEqual(cell_text(columns[1]), Path(tmp).name + "/")

    def test_control_characters_in_names_stay_on_one_row(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "evil\nname").write_text("x", encoding="utf-8")
            (root / "bell\x07\x1b[2Jx").write_text("y", encoding="utf-8")
            tree = FileTree(theme=PLAIN_THEME)
            node = FileNode(root, theme=PLAIN_THEME)
            tree.open(node)

            lines = TreeViewport(tree, node, width=100, height=5, theme=PLAIN_THEME).render().lines
            info = node.children()[1].info()

        self.assertEqual(len(lines), 3)
        for line in lines:
            self.assertNotIn("\n", line)
            self.assertNotIn("\x07", line)
            self.assertNotIn("\x1b", line)
        self.assertTrue(any("bell\\x07\\x1b[2Jx" in line for line in lines))
        self.assertTrue(any("evil\\x0aname" in line for line in lines))
        self.assertTrue(info[0].endswith("evil\\x0aname"))


class FormatSizeTests(unittest.TestCase):
    def test_labels(self) -> None:
        self.assertEqual(format_size(512), "512B")
        self.assertEqual(format_size(1536), "1.5K")
        self.assertEqual(format_size(20 * 1024), "20K")
        self.assertEqual(format_size(5 * 1024 * 1024), "5.0M")


if __name__ == "__main__":
    unittest.main()
