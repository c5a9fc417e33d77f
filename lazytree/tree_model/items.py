"""Ready-made tree items plus helpers for building their column tokens.

``ItemLine`` is a leaf carrying column tokens; ``ItemNode`` adds children.
Subclasses may override :meth:`ItemLine.columns`, :meth:`ItemLine.info` and
:meth:`ItemNode.children` to build content lazily on first access.
"""

from __future__ import annotations

import weakref
from typing import Iterable, Sequence

from .types import Columns, ItemKind, Run, columns_text


class ItemLine:
    """Leaf item with depth, column tokens, info lines, and a weak parent link."""

    def __init__(
        self,
        columns: Columns | None = None,
        depth: int = 0,
        info_lines: Sequence[str] | None = None,
        parent: object | None = None,
    ) -> None:
        self.depth = depth
        self._columns = columns
        self._info_lines = info_lines
        self._parent_ref: weakref.ref | None = None
        if parent is not None:
            self.parent = parent

    @property
    def parent(self) -> object | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: object | None) -> None:
        self._parent_ref = None if value is None else weakref.ref(value)

    def with_parent(self, parent: ItemLine) -> ItemLine:
        """Attach to ``parent`` one level below it; returns ``self``."""
        self.parent = parent
        self.depth = parent.depth + 1
        return self

    def with_columns(self, columns: Columns) -> ItemLine:
        self._columns = columns
        return self

    def with_info(self, info_lines: Sequence[str]) -> ItemLine:
        self._info_lines = info_lines
        return self

    def columns(self) -> Columns:
        """Return column tokens; ``[]`` when none were supplied."""
        return self._columns if self._columns is not None else []

    def info(self) -> Sequence[str] | None:
        return self._info_lines

    def _describe(self) -> str:
        return f"depth={self.depth}, text={columns_text(self.columns())!r}"

    def __repr__(self) -> str:
        return f"Line({self._describe()})"


class ItemNode(ItemLine):
    """Composite item. ``children=None`` means no children have been supplied."""

    def __init__(
        self,
        columns: Columns | None = None,
        children: Iterable[object] | None = None,
        depth: int = 0,
        info_lines: Sequence[str] | None = None,
        parent: object | None = None,
    ) -> None:
        super().__init__(columns, depth=depth, info_lines=info_lines, parent=parent)
        self._children: list[object] | None = None
        if children is not None:
            self.with_children(children)

    def children(self) -> list[object] | None:
        return self._children

    def with_children(self, children: Iterable[object]) -> ItemNode:
        """Replace children, re-parenting each ``ItemLine`` onto this node."""
        self._children = []
        for child in children:
            self.add_child(child)
        return self

    def add_child(self, item: object) -> object:
        """Append ``item`` as the last child and return it."""
        self.set_item_as_child(item)
        if self._children is None:
            self._children = []
        self._children.append(item)
        return item

    def add_children(self, items: Iterable[object]) -> list[object]:
        added = list(items)
        for item in added:
            self.add_child(item)
        return added

    def set_item_as_child(self, item: object) -> None:
        if isinstance(item, ItemLine):
            item.with_parent(self)

    def __repr__(self) -> str:
        count = len(self._children) if self._children is not None else 0
        return f"Node({self._describe()}, children={count})"


def item_kind(item: object) -> ItemKind:
    """Classify ``item`` for explicit dispatch in tree implementations."""
    if isinstance(item, ItemNode):
        return ItemKind.NODE
    if isinstance(item, ItemLine):
        return ItemKind.LINE
    return ItemKind.OPAQUE


def single_column(runs: Iterable[Run | str]) -> list[list[Run]]:
    """``[a, b, c] -> [[a, b, c]]``"""
    return [[_as_run(run) for run in runs]]


def string_columns(*texts: Run | str) -> list[list[Run]]:
    """``[a, b, c] -> [[a], [b], [c]]``"""
    return [[_as_run(text)] for text in texts]


def to_lines(*texts: str) -> list[str]:
    """``[line1, "line2\\nline3"] -> [line1, line2, line3]``"""
    lines: list[str] = []
    for text in texts:
        lines.extend(text.split("\n"))
    return lines


def to_single_line(*texts: str) -> list[str]:
    """``[col1, col2] -> [col1col2]`` with newlines flattened to spaces."""
    return ["".join(text.replace("\n", " ") for text in texts)]


def _as_run(value: Run | str) -> Run:
    return value if isinstance(value, Run) else Run(str(value))
