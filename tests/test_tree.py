"""Tree traversal tests.

Covers expanded pre-order walking in both directions, collapsed nodes acting
as leaves, trees that only expose the sibling accessors, and deep chains.
"""

from __future__ import annotations

import gc
import unittest

from lazytree.tree_model import ItemLine, ItemNode, Run, TreeBase, string_columns


def _sample_tree():
    root = ItemNode(string_columns("root"))
    a = root.add_child(ItemNode(string_columns("A")))
    a1 = a.add_child(ItemLine(string_columns("A1")))
    b = root.add_child(ItemLine(string_columns("B")))
    return root, a, a1, b


class _Opaque:
    def __init__(self, name: str, parent: "_Opaque | None" = None) -> None:
        self.name = name
        self.parent = parent
        self.kids: list[_Opaque] = []
        if parent is not None:
            parent.kids.append(self)

    def __str__(self) -> str:
        return self.name


class SiblingOnlyTree(TreeBase):
    """Tree over opaque objects that never materializes child lists."""

    def get_parent(self, item):
        return item.parent if item is not None else None

    def get_children(self, item):
        return None

    def get_first_child(self, item):
        return item.kids[0] if item is not None and item.kids else None

    def get_last_child(self, item):
        return item.kids[-1] if item is not None and item.kids else None

    def _sibling(self, item, step):
        if item is None or item.parent is None:
            return None
        kids = item.parent.kids
        index = kids.index(item) + step
        return kids[index] if 0 <= index < len(kids) else None

    def get_next_sibling(self, item):
        return self._sibling(item, 1)

    def get_previous_sibling(self, item):
        return self._sibling(item, -1)


def _walk(tree, start, step):
    seen = []
    current = start
    while current is not None:
        seen.append(current)
        current = step(current)
    return seen


class TreeTraversalTests(unittest.TestCase):
    def test_fully_open_tree_walks_every_node_once_in_both_directions(self) -> None:
        root, a, a1, b = _sample_tree()
        tree = TreeBase()
        tree.open(root)
        tree.open(a)

        forward = _walk(tree, root, tree.next)
        backward = _walk(tree, b, tree.previous)

        self.assertEqual([id(item) for item in forward], [id(root), id(a), id(a1), id(b)])
        self.assertEqual([id(item) for item in backward], [id(b), id(a1), id(a), id(root)])
        self.assertIsNone(tree.next(b))
        self.assertIsNone(tree.previous(root))

    def test_collapsed_node_acts_as_leaf(self) -> None:
        root, a, a1, b = _sample_tree()
        tree = TreeBase()
        tree.open(root)

        self.assertIs(tree.next(a), b)
        self.assertIs(tree.previous(b), a)
        self.assertIs(tree.last_open_descendant(a), a)
        # Structural accessors still see children of a closed node.
        self.assertIs(tree.get_first_child(a), a1)

    def test_upper_next_and_upper_previous_skip_subtrees(self) -> None:
        root, a, a1, b = _sample_tree()
        tree = TreeBase()
        tree.open(root)
        tree.open(a)

        self.assertIs(tree.upper_next(a), b)
        self.assertIs(tree.upper_next(a1), b)
        self.assertIsNone(tree.upper_next(b))
        self.assertIs(tree.upper_previous(b), a)
        self.assertIs(tree.upper_previous(a), root)

    def test_sibling_only_tree_supports_full_walk(self) -> None:
        root = _Opaque("root")
        x = _Opaque("x", root)
        x1 = _Opaque("x1", x)
        x2 = _Opaque("x2", x)
        y = _Opaque("y", root)
        tree = SiblingOnlyTree()
        for item in (root, x, y):
            tree.open(item)

        forward = _walk(tree, root, tree.next)
        backward = _walk(tree, y, tree.previous)

        self.assertEqual([item.name for item in forward], ["root", "x", "x1", "x2", "y"])
        self.assertEqual([item.name for item in backward], ["y", "x2", "x1", "x", "root"])
        self.assertIs(tree.last_open_descendant(x), x2)

    def test_deep_chain_does_not_recurse(self) -> None:
        root = ItemNode(string_columns("0"))
        tree = TreeBase()
        current = root
        for depth in range(1, 5000):
            tree.open(current)
            current = current.add_child(ItemNode(string_columns(str(depth))))
        deepest = current

        self.assertIs(tree.last_open_descendant(root), deepest)
        self.assertIsNone(tree.upper_next(deepest))
        self.assertEqual(deepest.depth, 4999)
        self.assertEqual(len(_walk(tree, root, tree.next)), 5000)

    def test_none_is_tolerated_everywhere(self) -> None:
        tree = TreeBase()
        self.assertIsNone(tree.open(None))
        self.assertIsNone(tree.close(None))
        self.assertFalse(tree.is_open(None))
        self.assertIsNone(tree.next(None))
        self.assertIsNone(tree.previous(None))
        self.assertIsNone(tree.upper_next(None))
        self.assertIsNone(tree.upper_previous(None))
        self.assertIsNone(tree.get_info(None))
        self.assertEqual(tree.get_columns(None), [])


class TreeBaseBehaviorTests(unittest.TestCase):
    def test_open_set_uses_identity(self) -> None:
        first = ItemNode(string_columns("same"))
        second = ItemNode(string_columns("same"))
        tree = TreeBase()

        tree.open(first)

        self.assertTrue(tree.is_open(first))
        self.assertFalse(tree.is_open(second))
        tree.toggle(first)
        self.assertFalse(tree.is_open(first))

    def test_columns_get_indent_column_by_depth(self) -> None:
        root, a, a1, _ = _sample_tree()
        tree = TreeBase(indent_unit="  ")

        columns = tree.get_columns(a1)

        self.assertEqual(columns[0], [Run("    ")])
        self.assertEqual(columns[1], [Run("A1")])
        self.assertEqual(tree.with_indent(False).get_columns(a1), [[Run("A1")]])

    def test_opaque_item_renders_as_its_string(self) -> None:
        tree = TreeBase(indent=False)
        self.assertEqual(tree.get_columns(42), [[Run("42")]])
        self.assertEqual(tree.get_info(42), ["42"])
        self.assertEqual(tree.get_depth(42), 0)

    def test_column_indents_require_whitespace_only_cells(self) -> None:
        tree = TreeBase()
        flags = tree.get_column_indents(None, [[Run("  ")], [Run("x")], [], [Run(" "), Run("y")]])
        self.assertEqual(flags, [True, False, True, False])

    def test_info_falls_back_to_string_form(self) -> None:
        plain = ItemLine(string_columns("leaf"))
        detailed = ItemLine(string_columns("leaf"), info_lines=["one", "two"])
        tree = TreeBase()

        self.assertEqual(tree.get_info(plain), str(plain).split("\n"))
        self.assertEqual(tree.get_info(detailed), ["one", "two"])

    def test_parent_link_does_not_keep_parent_alive(self) -> None:
        parent = ItemNode(string_columns("parent"))
        child = parent.add_child(ItemLine(string_columns("child")))
        self.assertIs(TreeBase().get_parent(child), parent)

        del parent
        gc.collect()

        self.assertIsNone(child.parent)


if __name__ == "__main__":
    unittest.main()
