"""Mode-switching application shell.

The application owns the current mode and the terminal. Each loop step paints
the current mode as a full frame, reads one key, and dispatches it. Resize
signals are delivered on a helper thread under the same lock, so the viewport
is never mutated by two threads at once.
"""

from __future__ import annotations

import logging
import os
import signal
import sys
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..ansi import clip_ansi_line
from ..input import read_key
from ..ui_theme import DEFAULT_THEME, UITheme
from .terminal import TerminalController, terminal_size

if TYPE_CHECKING:
    from ..modes.base import Mode

logger = logging.getLogger(__name__)

KEY_POLL_MS = 100
CLEAR_SCREEN = "\033[H\033[J"
RESET = "\033[0m"


class Application:
    """Run modes against a terminal until no mode is current."""

    def __init__(
        self,
        default_mode_factory: Callable[[Application], Mode] | None = None,
        *,
        theme: UITheme = DEFAULT_THEME,
        stdin_fd: int | None = None,
        stdout_fd: int | None = None,
        size: tuple[int, int] | None = None,
    ) -> None:
        self.theme = theme
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        self.size = size if size is not None else terminal_size()
        self.lock = threading.Lock()
        self.dirty = True
        self.terminal: TerminalController | None = None
        self._default_mode_factory = default_mode_factory
        self._current_mode: Mode | None = None

    @property
    def current_mode(self) -> Mode | None:
        return self._current_mode

    def set_current_mode(self, mode: Mode | None) -> None:
        """Make ``mode`` current (``None`` ends the loop) and sync its size."""
        self._current_mode = mode
        if mode is not None:
            mode.size_updated(*self.size)
        self.dirty = True

    def end(self) -> None:
        self.set_current_mode(None)

    def run(self) -> None:
        """Run the interactive loop in raw mode until the last mode ends."""
        terminal = TerminalController(self.stdin_fd, self.stdout_fd)
        previous_handler = signal.signal(signal.SIGWINCH, self._on_winch)
        try:
            with terminal.raw_mode():
                self.terminal = terminal
                if self._current_mode is None and self._default_mode_factory is not None:
                    self.set_current_mode(self._default_mode_factory(self))
                while self.run_once(KEY_POLL_MS):
                    pass
        finally:
            self.terminal = None
            signal.signal(signal.SIGWINCH, previous_handler)

    def run_once(self, timeout_ms: int | None = None) -> bool:
        """Paint if needed, read one key, dispatch it; False once no mode is left."""
        with self.lock:
            mode = self._current_mode
            if mode is None:
                return False
            if self.dirty:
                self._paint_mode(mode)

        key = read_key(self.stdin_fd, timeout_ms)
        if not key:
            return self._current_mode is not None

        with self.lock:
            mode = self._current_mode
            if mode is None:
                return False
            logger.debug("key %r -> %s", key, mode.name)
            mode.handle_key(key)
            self.dirty = True
            return self._current_mode is not None

    def _on_winch(self, signum, frame) -> None:
        columns, rows = terminal_size()
        threading.Thread(target=self.handle_resize, args=(columns, rows), daemon=True).start()

    def handle_resize(self, columns: int, rows: int) -> None:
        """Apply a new terminal size and repaint the current mode."""
        with self.lock:
            self.size = (columns, rows)
            mode = self._current_mode
            if mode is None:
                return
            mode.size_updated(columns, rows)
            self._paint_mode(mode)

    def _paint_mode(self, mode: Mode) -> None:
        row, column = mode.cursor_position()
        self.paint(mode.lines(), row, column, mode.cursor_visible)

    def paint(self, lines: list[str], cursor_row: int, cursor_column: int, cursor_visible: bool) -> None:
        """Write one full frame; lines are clipped to the terminal size."""
        columns, rows = self.size
        out: list[str] = [CLEAR_SCREEN]
        frame: list[str] = []
        for line in lines[: max(0, rows)]:
            clipped = clip_ansi_line(line, columns)
            if "\033[" in clipped:
                clipped += RESET
            frame.append(clipped)
        out.append("\r\n".join(frame))
        if cursor_visible:
            row = max(0, min(cursor_row, rows - 1))
            col = max(0, min(cursor_column, columns - 1))
            out.append(f"\033[{row + 1};{col + 1}H")
        if self.terminal is not None:
            self.terminal.set_cursor_visible(cursor_visible)
        os.write(self.stdout_fd, "".join(out).encode("utf-8", errors="replace"))
        self.dirty = False
