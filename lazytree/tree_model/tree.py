"""Tree navigation over expand/collapse state.

``Tree`` defines the navigation contract and derives the pre-order walk
(``next``/``previous``) once from a handful of structural accessors. The walk
only descends into open items, so collapsed nodes behave like leaves.

``TreeBase`` is the default implementation for :mod:`.items`. Subclasses can
customise tree walking in three ways:

1. return ``ItemLine`` objects from an overridden ``ItemNode.children``;
2. override :meth:`TreeBase.get_parent` and :meth:`TreeBase.get_children`
   to support item classes of their own;
3. override ``get_parent``, ``get_first_child``, ``get_last_child``,
   ``get_next_sibling`` and ``get_previous_sibling`` so no child list is
   ever materialized.
"""

from __future__ import annotations

import abc
from typing import Sequence

from .items import ItemLine, ItemNode, item_kind
from .types import Columns, ItemKind, Run


class Tree(abc.ABC):
    """Navigation authority: open-set plus parent/child/sibling relations.

    Every method tolerates ``None`` and reports a missing neighbour by
    returning ``None``; none of them raise for structural exhaustion.
    """

    @abc.abstractmethod
    def open(self, item: object | None) -> object | None:
        """Expand ``item`` (idempotent) and return it."""

    @abc.abstractmethod
    def close(self, item: object | None) -> object | None:
        """Collapse ``item`` and return it."""

    @abc.abstractmethod
    def is_open(self, item: object | None) -> bool:
        """Return whether traversal descends into ``item``."""

    @abc.abstractmethod
    def get_parent(self, item: object | None) -> object | None:
        ...

    def get_children(self, item: object | None) -> Sequence[object] | None:
        """Optional child listing; ``None`` means unsupported or no children."""
        return None

    @abc.abstractmethod
    def get_first_child(self, item: object | None) -> object | None:
        ...

    @abc.abstractmethod
    def get_last_child(self, item: object | None) -> object | None:
        ...

    @abc.abstractmethod
    def get_next_sibling(self, item: object | None) -> object | None:
        ...

    @abc.abstractmethod
    def get_previous_sibling(self, item: object | None) -> object | None:
        ...

    @abc.abstractmethod
    def get_columns(self, item: object | None) -> Columns:
        """Return the column tokens drawn for ``item``."""

    def get_column_indents(self, item: object | None, columns: Columns | None = None) -> list[bool]:
        """Flag columns made only of whitespace runs (no padding after them)."""
        if columns is None:
            columns = self.get_columns(item)
        return column_indents_by_whitespace(columns)

    def get_info(self, item: object | None) -> list[str] | None:
        """Return multi-line information about ``item``."""
        if item is None:
            return None
        return str(item).split("\n")

    def toggle(self, item: object | None) -> object | None:
        if self.is_open(item):
            return self.close(item)
        return self.open(item)

    def next(self, item: object | None) -> object | None:
        """Return the item after ``item`` in expanded pre-order."""
        if item is None:
            return None
        child = self.get_first_child(item) if self.is_open(item) else None
        if child is not None:
            return child
        return self.upper_next(item)

    def upper_next(self, item: object | None) -> object | None:
        """Return the next item outside ``item``'s subtree."""
        current = item
        while current is not None:
            sibling = self.get_next_sibling(current)
            if sibling is not None:
                return sibling
            current = self.get_parent(current)
        return None

    def previous(self, item: object | None) -> object | None:
        """Return the item before ``item`` in expanded pre-order."""
        if item is None:
            return None
        sibling = self.get_previous_sibling(item)
        if sibling is not None:
            return self.last_open_descendant(sibling)
        return self.get_parent(item)

    def upper_previous(self, item: object | None) -> object | None:
        if item is None:
            return None
        sibling = self.get_previous_sibling(item)
        if sibling is not None:
            return sibling
        return self.get_parent(item)

    def last_open_descendant(self, item: object | None) -> object | None:
        """Follow last children down through open items."""
        current = item
        while current is not None and self.is_open(current):
            child = self.get_last_child(current)
            if child is None:
                break
            current = child
        return current


def column_indents_by_whitespace(columns: Columns) -> list[bool]:
    return [all(run.is_blank() for run in cell) for cell in columns]


class TreeBase(Tree):
    """Default tree over ``ItemLine``/``ItemNode`` with an identity-keyed open-set."""

    def __init__(self, indent: bool = True, indent_unit: str = " ") -> None:
        # id(item) -> item; holding the item keeps its id from being reused.
        self.open_items: dict[int, object] = {}
        self.indent = indent
        self.indent_unit = indent_unit

    def with_indent(self, indent: bool) -> TreeBase:
        self.indent = indent
        return self

    def open(self, item: object | None) -> object | None:
        if item is not None:
            self.open_items[id(item)] = item
        return item

    def close(self, item: object | None) -> object | None:
        if item is not None:
            self.open_items.pop(id(item), None)
        return item

    def is_open(self, item: object | None) -> bool:
        if item is None:
            return False
        return self.open_items.get(id(item)) is item

    def get_columns(self, item: object | None) -> Columns:
        if item is None:
            return []
        kind = item_kind(item)
        if kind is ItemKind.NODE or kind is ItemKind.LINE:
            columns = list(item.columns())
        else:
            columns = [[Run(str(item))]]
        return self.columns_with_indent(item, columns)

    def columns_with_indent(self, item: object, columns: list) -> list:
        """Prepend the indent column when indentation is enabled."""
        if not self.indent:
            return columns
        return [[self.get_indent(item)], *columns]

    def get_indent(self, item: object) -> Run:
        return Run(self.indent_unit * self.get_depth(item))

    def get_depth(self, item: object | None) -> int:
        if item is None:
            return 0
        if item_kind(item) is not ItemKind.OPAQUE:
            return item.depth
        depth = -1
        current = item
        while current is not None:
            current = self.get_parent(current)
            depth += 1
        return depth

    def get_info(self, item: object | None) -> list[str] | None:
        if item is None:
            return None
        if item_kind(item) is not ItemKind.OPAQUE:
            info = item.info()
            if info:
                return list(info)
        return str(item).split("\n")

    def get_parent(self, item: object | None) -> object | None:
        if item_kind(item) is ItemKind.OPAQUE:
            return None
        return item.parent

    def get_children(self, item: object | None) -> Sequence[object] | None:
        if item_kind(item) is ItemKind.NODE:
            return item.children()
        return None

    def get_first_child(self, item: object | None) -> object | None:
        return self.first_child_by_children(item)

    def get_last_child(self, item: object | None) -> object | None:
        return self.last_child_by_children(item)

    def get_next_sibling(self, item: object | None) -> object | None:
        return self.sibling_by_parent_children(item, 1)

    def get_previous_sibling(self, item: object | None) -> object | None:
        return self.sibling_by_parent_children(item, -1)

    def first_child_by_children(self, item: object | None) -> object | None:
        children = self.get_children(item)
        if not children:
            return None
        return children[0]

    def last_child_by_children(self, item: object | None) -> object | None:
        children = self.get_children(item)
        if not children:
            return None
        return children[-1]

    def sibling_by_parent_children(self, item: object | None, step: int) -> object | None:
        """Return the sibling ``step`` positions away, looked up by identity."""
        if item is None:
            return None
        parent = self.get_parent(item)
        children = self.get_children(parent) if parent is not None else None
        if not children:
            return None
        index = _index_by_identity(children, item)
        if index < 0:
            return None
        target = index + step
        if 0 <= target < len(children):
            return children[target]
        return None


def _index_by_identity(items: Sequence[object], item: object) -> int:
    for index, candidate in enumerate(items):
        if candidate is item:
            return index
    return -1


__all__ = [
    "Tree",
    "TreeBase",
    "column_indents_by_whitespace",
    "ItemLine",
    "ItemNode",
]
