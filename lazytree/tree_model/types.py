"""Styled-text and item-kind datatypes shared across tree modules."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

from ..ansi import display_width

RESET = "\033[0m"


@dataclass(frozen=True)
class Run:
    """One piece of text drawn with a single ANSI style prefix."""

    text: str
    style: str = ""

    @property
    def width(self) -> int:
        return display_width(self.text)

    def is_blank(self) -> bool:
        """Return whether the run holds only whitespace (or nothing)."""
        return all(ch.isspace() for ch in self.text)

    def render(self, text: str | None = None) -> str:
        """Return ANSI text for ``text`` (default: the whole run) in this style."""
        body = self.text if text is None else text
        if not self.style or not body:
            return body
        return f"{self.style}{body}{RESET}"


Cell = Sequence[Run]
Columns = Sequence[Cell]


def cell_width(cell: Cell) -> int:
    """Return total display width of all runs in ``cell``."""
    return sum(run.width for run in cell)


def cell_text(cell: Cell) -> str:
    """Return the unstyled text of ``cell``."""
    return "".join(run.text for run in cell)


def columns_text(columns: Columns, separator: str = " ") -> str:
    """Return the unstyled text of a column matrix, one separator between cells."""
    return separator.join(cell_text(cell) for cell in columns)


class ItemKind(enum.Enum):
    """What an item offers to a tree: children + tokens, tokens only, or nothing."""

    NODE = "node"
    LINE = "line"
    OPAQUE = "opaque"
