"""Virtualized tree window: bounded rows, cursor, scrolling, and rendering.

The viewport materializes at most ``height`` rows, starting at ``origin`` and
following :meth:`Tree.next`. Every operation adjusts the window locally
(drop/add an edge row, rebuild below an edited row) instead of rebuilding the
whole tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..tree_model.tree import Tree
from ..tree_model.types import RESET, Cell, Run, cell_width, columns_text
from ..ui_theme import DEFAULT_THEME, UITheme
from .columns import ColumnLayout, partition_columns
from .line_writer import LineWriter

logger = logging.getLogger(__name__)

CURSOR_MARKER = ">"
BLANK_MARKER = Run(" ")


@dataclass(eq=False)
class Row:
    """One materialized window row."""

    item: object
    columns: list[Cell]
    widths: list[int]
    indents: list[bool]


@dataclass
class RenderedView:
    lines: list[str] = field(default_factory=list)
    cursor_row: int = 0
    cursor_column: int = 0


def highlight_line(text: str, style: str) -> str:
    """Apply ``style`` across a line, surviving the resets of inner runs."""
    if not style or not text:
        return text
    return style + text.replace(RESET, RESET + style) + RESET


class TreeViewport:
    """Bounded, scrollable window over a :class:`Tree`."""

    def __init__(
        self,
        tree: Tree,
        origin: object | None = None,
        width: int = 80,
        height: int = 24,
        theme: UITheme = DEFAULT_THEME,
    ) -> None:
        self.tree = tree
        self.origin = origin
        self.width = max(0, width)
        self.height = max(0, height)
        self.theme = theme
        self.offset_x = 0
        self.cursor_line = 0
        self.search_query = ""
        self._rows: list[Row] = []
        self._rows_dirty = True
        self._layout: ColumnLayout | None = None

    # ----- window ----------------------------------------------------------

    @property
    def rows(self) -> list[Row]:
        self._ensure_built()
        return self._rows

    def _ensure_built(self) -> None:
        if self._rows_dirty:
            self.build()

    def _make_row(self, item: object) -> Row:
        content = list(self.tree.get_columns(item))
        indents = list(self.tree.get_column_indents(item, content))
        columns: list[Cell] = [[BLANK_MARKER], *content]
        return Row(
            item=item,
            columns=columns,
            widths=[cell_width(cell) for cell in columns],
            indents=[False, *indents],
        )

    def _fill_forward(self, rows: list[Row], item: object | None) -> None:
        while item is not None and len(rows) < self.height:
            rows.append(self._make_row(item))
            item = self.tree.next(item)

    def _set_rows(self, rows: list[Row]) -> None:
        self._rows = rows
        self._rows_dirty = False
        self._layout = None
        if rows:
            self.origin = rows[0].item
        self._clamp_cursor()

    def _clamp_cursor(self) -> None:
        limit = min(len(self._rows), self.height) - 1
        self.cursor_line = max(0, min(self.cursor_line, limit))

    def build(self) -> None:
        """Rebuild every row from ``origin``."""
        rows: list[Row] = []
        if self.origin is not None:
            self._fill_forward(rows, self.origin)
        self._set_rows(rows)

    def set_origin(self, item: object | None) -> None:
        self.origin = item
        self.build()

    def set_width(self, width: int) -> None:
        self.width = max(0, width)
        self._layout = None

    def set_height(self, height: int) -> None:
        self.height = max(0, height)
        self._rows_dirty = True

    def item_on_cursor(self) -> object | None:
        rows = self.rows
        if not rows:
            return None
        return rows[self.cursor_line].item

    def row_index(self, item: object | None) -> int:
        if item is None:
            return -1
        for index, row in enumerate(self.rows):
            if row.item is item:
                return index
        return -1

    # ----- vertical movement -------------------------------------------------

    def scroll_next(self) -> bool:
        """Shift the window one row down; False at the end of the tree."""
        rows = self.rows
        if not rows:
            return False
        item = self.tree.next(rows[-1].item)
        if item is None:
            return False
        if len(rows) >= self.height:
            rows.pop(0)
        rows.append(self._make_row(item))
        self._set_rows(rows)
        return True

    def scroll_prev(self) -> bool:
        """Shift the window one row up; False at the start of the tree."""
        rows = self.rows
        if not rows:
            return False
        item = self.tree.previous(rows[0].item)
        if item is None:
            return False
        rows.insert(0, self._make_row(item))
        if len(rows) > self.height:
            rows.pop()
        self._set_rows(rows)
        return True

    def cursor_next(self) -> bool:
        rows = self.rows
        if self.cursor_line + 1 < min(len(rows), self.height):
            self.cursor_line += 1
            return True
        return self.scroll_next()

    def cursor_prev(self) -> bool:
        self._ensure_built()
        if self.cursor_line > 0:
            self.cursor_line -= 1
            return True
        return self.scroll_prev()

    def page_down(self) -> bool:
        moved = 0
        for _ in range(max(1, self.height - 1)):
            if not self.scroll_next():
                break
            moved += 1
        if moved:
            return True
        last = len(self.rows) - 1
        if self.cursor_line < last:
            self.cursor_line = last
            return True
        return False

    def page_up(self) -> bool:
        moved = 0
        for _ in range(max(1, self.height - 1)):
            if not self.scroll_prev():
                break
            moved += 1
        if moved:
            return True
        if self.cursor_line > 0:
            self.cursor_line = 0
            return True
        return False

    # ----- horizontal movement -----------------------------------------------

    @property
    def layout(self) -> ColumnLayout:
        if self._layout is None:
            self._layout = self._compute_layout()
            self.offset_x = min(self.offset_x, self._layout.max_offset(self.width))
        return self._layout

    def _compute_layout(self) -> ColumnLayout:
        rows = self.rows
        count = max((len(row.columns) for row in rows), default=0)
        widths = [0] * count
        indents = [True] * count
        for row in rows:
            for index, cell_w in enumerate(row.widths):
                widths[index] = max(widths[index], cell_w)
                if not row.indents[index]:
                    indents[index] = False
        spans = [w if indents[i] else w + 1 for i, w in enumerate(widths)]
        return partition_columns(spans, self.width, indents=indents)

    def scroll_column_next(self) -> bool:
        if self.offset_x >= self.layout.max_offset(self.width):
            return False
        self.offset_x += 1
        return True

    def scroll_column_prev(self) -> bool:
        if self.offset_x <= 0:
            return False
        self.offset_x -= 1
        return True

    # ----- open/close ----------------------------------------------------------

    def set_open(self, item: object | None, open: bool) -> bool:
        """Change ``item``'s open-state and rebuild the window below its row.

        Rows after the edited subtree are reused as-is. Returns False when
        ``item`` is outside the window; the window is then rebuilt from the
        nearest still-visible ancestor of ``origin``.
        """
        if item is None:
            return False
        if open:
            self.tree.open(item)
        else:
            self.tree.close(item)
        rows = self.rows
        index = self.row_index(item)
        if index < 0:
            self._rebuild_from_visible_origin()
            return False
        resume = self.tree.upper_next(item)
        reuse_from = -1
        if resume is not None:
            for position in range(index + 1, len(rows)):
                if rows[position].item is resume:
                    reuse_from = position
                    break
        new_rows = rows[:index]
        new_rows.append(self._make_row(item))
        current = self.tree.next(item)
        while current is not None and len(new_rows) < self.height:
            if reuse_from >= 0 and current is resume:
                for row in rows[reuse_from:]:
                    if len(new_rows) >= self.height:
                        break
                    new_rows.append(row)
                reuse_from = -1
                current = self.tree.next(new_rows[-1].item)
                continue
            new_rows.append(self._make_row(current))
            current = self.tree.next(current)
        self._set_rows(new_rows)
        return True

    def _visible_anchor(self, item: object) -> object:
        anchor = item
        current = self.tree.get_parent(item)
        while current is not None:
            if not self.tree.is_open(current):
                anchor = current
            current = self.tree.get_parent(current)
        return anchor

    def _rebuild_from_visible_origin(self) -> None:
        if self.origin is None:
            return
        cursor_item = self.item_on_cursor()
        self.origin = self._visible_anchor(self.origin)
        self.build()
        index = self.row_index(cursor_item)
        if index >= 0:
            self.cursor_line = index

    def open_on_cursor(self, open: bool) -> bool:
        return self.set_open(self.item_on_cursor(), open)

    def toggle_on_cursor(self) -> bool:
        item = self.item_on_cursor()
        if item is None:
            return False
        return self.set_open(item, not self.tree.is_open(item))

    # ----- jumps ---------------------------------------------------------------

    def move_cursor_to(self, item: object | None) -> bool:
        """Put the cursor on ``item``, keeping its screen row when possible."""
        if item is None:
            return False
        index = self.row_index(item)
        if index >= 0:
            self.cursor_line = index
            return True
        target_line = max(0, min(self.cursor_line, self.height - 1))
        above: list[object] = []
        current = item
        while len(above) < target_line:
            current = self.tree.previous(current)
            if current is None:
                break
            above.append(current)
        above.reverse()
        rows = [self._make_row(entry) for entry in above]
        if len(rows) < self.height:
            rows.append(self._make_row(item))
            self._fill_forward(rows, self.tree.next(item))
        self.cursor_line = len(above)
        self._set_rows(rows)
        return True

    def move_to_parent(self) -> bool:
        return self.move_cursor_to(self.tree.get_parent(self.item_on_cursor()))

    def _move_into(self, child: object | None) -> bool:
        if child is None:
            return False
        item = self.item_on_cursor()
        if not self.tree.is_open(item):
            self.set_open(item, True)
        return self.move_cursor_to(child)

    def move_to_first_child(self) -> bool:
        return self._move_into(self.tree.get_first_child(self.item_on_cursor()))

    def move_to_last_child(self) -> bool:
        return self._move_into(self.tree.get_last_child(self.item_on_cursor()))

    def move_to_next_sibling(self) -> bool:
        return self.move_cursor_to(self.tree.get_next_sibling(self.item_on_cursor()))

    def move_to_previous_sibling(self) -> bool:
        return self.move_cursor_to(self.tree.get_previous_sibling(self.item_on_cursor()))

    # ----- search ----------------------------------------------------------------

    def _matches(self, item: object, needle: str) -> bool:
        return needle in columns_text(self.tree.get_columns(item)).lower()

    def _search(self, step) -> bool:
        needle = self.search_query.lower()
        item = self.item_on_cursor()
        if not needle or item is None:
            return False
        current = step(item)
        while current is not None:
            if self._matches(current, needle):
                return self.move_cursor_to(current)
            current = step(current)
        return False

    def search(self, query: str) -> bool:
        """Remember ``query`` and jump to its next match after the cursor."""
        self.search_query = query
        return self.search_forward()

    def search_forward(self) -> bool:
        return self._search(self.tree.next)

    def search_backward(self) -> bool:
        return self._search(self.tree.previous)

    # ----- output ------------------------------------------------------------------

    def render(self) -> RenderedView:
        """Return the window as styled lines of at most ``width`` cells."""
        rows = self.rows
        layout = self.layout
        writer = LineWriter(self.width)
        cursor_column = 0
        for index, row in enumerate(rows):
            on_cursor = index == self.cursor_line
            marker_x = self._render_row(writer, row, layout, on_cursor)
            if on_cursor:
                cursor_column = marker_x
                writer.open_column()
                writer.append_space(writer.column_remaining)
            writer.new_line()
        lines = writer.lines
        if rows:
            lines[self.cursor_line] = highlight_line(lines[self.cursor_line], self.theme.cursor_row)
        return RenderedView(lines=lines, cursor_row=self.cursor_line, cursor_column=cursor_column)

    def _render_row(self, writer: LineWriter, row: Row, layout: ColumnLayout, on_cursor: bool) -> int:
        """Write one row; return the physical column of its marker cell."""
        marker_x = 0
        room = layout.scroll_room(self.width)
        for index, stat in enumerate(layout.stats):
            if layout.has_scrollable and index == layout.scroll_start:
                visible = min(room, layout.scrollable_width - self.offset_x)
                writer.open_column(self.offset_x, self.offset_x + visible)
            elif layout.has_scrollable and index == layout.scroll_end:
                writer.open_column()
            cell: Cell = row.columns[index] if index < len(row.columns) else ()
            if index == 0:
                marker_x = min(writer.line_x, max(0, self.width - 1))
            if index == 0 and on_cursor:
                cell = [Run(CURSOR_MARKER, self.theme.cursor_marker)]
            used = 0
            for run in cell:
                writer.append(run)
                used += run.width
            writer.append_space(stat.width - used)
        return marker_x

    def debug_log(self) -> None:
        """Log the current rows at DEBUG level."""
        rows = self.rows
        logger.debug(
            "viewport origin=%r cursor_line=%d offset_x=%d size=%dx%d",
            self.origin,
            self.cursor_line,
            self.offset_x,
            self.width,
            self.height,
        )
        for index, row in enumerate(rows):
            mark = CURSOR_MARKER if index == self.cursor_line else " "
            logger.debug("%s%3d %s", mark, index, columns_text(row.columns[1:]))
