"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor visibility.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty


def terminal_size() -> tuple[int, int]:
    """Return ``(columns, rows)`` of the controlling terminal."""
    size = shutil.get_terminal_size((80, 24))
    return size.columns, size.lines


class TerminalController:
    """Manage terminal mode transitions for one stdin/stdout pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._cursor_visible = True

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with a hidden cursor."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Alternate screen, hide cursor, application keypad.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l\x1b=")
        self._cursor_visible = False

    def disable_tui_mode(self) -> None:
        """Restore normal keypad, cursor, screen buffer, and tty state."""
        os.write(self.stdout_fd, b"\x1b>\x1b[?25h\x1b[?1049l")
        self._cursor_visible = True
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def set_cursor_visible(self, visible: bool) -> None:
        desired = bool(visible)
        if desired == self._cursor_visible:
            return
        os.write(self.stdout_fd, b"\x1b[?25h" if desired else b"\x1b[?25l")
        self._cursor_visible = desired

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
