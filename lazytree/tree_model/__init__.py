"""Tree items, styled runs, and the navigation contract.

``Tree`` derives expanded pre-order traversal from parent/child/sibling
accessors; ``TreeBase`` implements those accessors for ``ItemLine`` and
``ItemNode``.
"""

from __future__ import annotations

from .items import ItemLine, ItemNode, item_kind, single_column, string_columns, to_lines, to_single_line
from .tree import Tree, TreeBase, column_indents_by_whitespace
from .types import RESET, Cell, Columns, ItemKind, Run, cell_text, cell_width, columns_text

__all__ = [
    "RESET",
    "Cell",
    "Columns",
    "ItemKind",
    "ItemLine",
    "ItemNode",
    "Run",
    "Tree",
    "TreeBase",
    "cell_text",
    "cell_width",
    "column_indents_by_whitespace",
    "columns_text",
    "item_kind",
    "single_column",
    "string_columns",
    "to_lines",
    "to_single_line",
]
