"""Column-clipping line builder for horizontally scrollable rows.

A ``LineWriter`` maps a stream of styled runs, laid out along an unbounded
logical axis, onto fixed-width physical lines. Each line may be split into
several column windows, each with its own logical offset, which is how a
scrollable block sits between fixed columns.
"""

from __future__ import annotations

from ..ansi import slice_columns
from ..tree_model.types import Run


class LineWriter:
    """Accumulate clipped physical lines of at most ``width`` cells.

    ``line_x`` is the physical write position. The active window maps the
    physical range ``[line_column_start, line_column_end)`` onto logical
    columns starting at ``display_column_start``. ``logical_x`` is where the
    next run begins on the logical axis of the active window.
    """

    def __init__(self, width: int = 0) -> None:
        self.reset(width)

    def reset(self, width: int) -> None:
        """Drop every emitted line and restart at the top-left corner."""
        self.width = max(0, int(width))
        self.lines: list[str] = []
        self.line_y = 0
        self.line_cursor_x = -1
        self._start_line()

    def _start_line(self) -> None:
        self._buffer: list[str] = []
        self.line_x = 0
        self.open_column()

    @property
    def column_remaining(self) -> int:
        """Physical cells left in the active window."""
        return max(0, self.line_column_end - self.line_x)

    def open_column(self, logical_offset: int = 0, logical_width: int | None = None) -> bool:
        """Start a window at ``line_x`` showing logical cells from ``logical_offset``.

        ``logical_width`` bounds the logical content, so the window never
        extends past it; ``None`` lets the window run to the line end.
        Returns False when the window is empty.
        """
        self.line_column_start = self.line_x
        self.display_column_start = max(0, logical_offset)
        self.logical_x = 0
        if logical_width is None:
            end = self.width
        else:
            end = min(self.width, self.line_x + (logical_width - self.display_column_start))
        self.line_column_end = max(self.line_x, end)
        return self.line_column_end > self.line_column_start

    def open_column_with_cursor(self, logical_cursor: int, logical_width: int | None = None) -> bool:
        """Open a window that keeps the cell at ``logical_cursor`` visible.

        The window starts at offset 0 and shifts right only as far as needed.
        The physical cursor column is stored in ``line_cursor_x``.
        """
        if logical_width is None:
            room = self.width - self.line_x
        else:
            room = min(self.width, self.line_x + logical_width) - self.line_x
        room = max(0, room)
        cursor = max(0, logical_cursor)
        if room <= 0:
            self.line_cursor_x = min(self.line_x, max(0, self.width - 1))
            return self.open_column(0, logical_width)
        if cursor < room:
            offset = 0
            self.line_cursor_x = self.line_x + cursor
        else:
            offset = cursor - room + 1
            self.line_cursor_x = self.line_x + room - 1
        return self.open_column(offset, logical_width)

    def _visible_range(self, run: Run) -> tuple[int, int, int]:
        start = self.logical_x
        end = start + run.width
        self.logical_x = end
        window_start = self.display_column_start
        window_end = window_start + (self.line_column_end - self.line_column_start)
        return start, max(start, window_start), min(end, window_end)

    def append(self, run: Run) -> int:
        """Emit the part of ``run`` inside the window; return cells written."""
        start, lo, hi = self._visible_range(run)
        if hi <= lo:
            return 0
        if lo == start and hi - lo == run.width and "\t" not in run.text:
            text = run.text
        else:
            text = slice_columns(run.text, lo - start, hi - lo)
        self._buffer.append(run.render(text))
        self.line_x += hi - lo
        return hi - lo

    def advance(self, run: Run) -> int:
        """Move positions as :meth:`append` would, without emitting text."""
        _, lo, hi = self._visible_range(run)
        if hi <= lo:
            return 0
        self.line_x += hi - lo
        return hi - lo

    def append_text(self, text: str, style: str = "") -> int:
        return self.append(Run(text, style))

    def append_space(self, count: int) -> int:
        if count <= 0:
            return 0
        return self.append(Run(" " * count))

    def new_line(self) -> None:
        """Flush the current line and start the next one."""
        self.lines.append("".join(self._buffer))
        self.line_y += 1
        self._start_line()
