"""Tests for ready-made items, styled runs, and column helpers."""

from __future__ import annotations

import unittest

from lazytree.tree_model import (
    ItemKind,
    ItemLine,
    ItemNode,
    Run,
    cell_width,
    columns_text,
    item_kind,
    single_column,
    string_columns,
    to_lines,
    to_single_line,
)


class ItemTests(unittest.TestCase):
    def test_with_children_reparents_and_sets_depth(self) -> None:
        root = ItemNode(string_columns("root"), depth=2)
        first = ItemLine(string_columns("a"))
        second = ItemNode(string_columns("b"))

        root.with_children([first, second])

        self.assertEqual(root.children(), [first, second])
        self.assertIs(first.parent, root)
        self.assertEqual(first.depth, 3)
        self.assertEqual(second.depth, 3)

    def test_node_without_children_reports_none(self) -> None:
        self.assertIsNone(ItemNode(string_columns("x")).children())
        self.assertEqual(ItemLine().columns(), [])

    def test_add_children_appends_in_order(self) -> None:
        root = ItemNode()
        added = root.add_children(ItemLine(string_columns(str(i))) for i in range(3))
        self.assertEqual(len(added), 3)
        self.assertEqual([columns_text(child.columns()) for child in root.children()], ["0", "1", "2"])

    def test_item_kind_dispatch(self) -> None:
        self.assertIs(item_kind(ItemNode()), ItemKind.NODE)
        self.assertIs(item_kind(ItemLine()), ItemKind.LINE)
        self.assertIs(item_kind("text"), ItemKind.OPAQUE)

    def test_items_compare_by_identity(self) -> None:
        self.assertNotEqual(ItemLine(string_columns("x")), ItemLine(string_columns("x")))

    def test_repr_mentions_text_and_child_count(self) -> None:
        node = ItemNode(string_columns("top"), children=[ItemLine()])
        self.assertIn("'top'", repr(node))
        self.assertIn("children=1", repr(node))


class ColumnHelperTests(unittest.TestCase):
    def test_single_column_and_string_columns(self) -> None:
        self.assertEqual(single_column(["a", Run("b", "\033[1m")]), [[Run("a"), Run("b", "\033[1m")]])
        self.assertEqual(string_columns("a", "b"), [[Run("a")], [Run("b")]])

    def test_line_helpers(self) -> None:
        self.assertEqual(to_lines("one", "two\nthree"), ["one", "two", "three"])
        self.assertEqual(to_single_line("a\nb", "c"), ["a bc"])

    def test_run_width_and_render(self) -> None:
        styled = Run("日本", "\033[31m")
        self.assertEqual(styled.width, 4)
        self.assertEqual(styled.render(), "\033[31m日本\033[0m")
        self.assertEqual(styled.render(""), "")
        self.assertEqual(Run("plain").render(), "plain")
        self.assertTrue(Run("  ").is_blank())
        self.assertFalse(Run(" x").is_blank())

    def test_cell_width_sums_runs(self) -> None:
        self.assertEqual(cell_width([Run("ab"), Run("日")]), 4)
        self.assertEqual(columns_text([[Run("a"), Run("b")], [Run("c")]]), "ab c")


if __name__ == "__main__":
    unittest.main()
