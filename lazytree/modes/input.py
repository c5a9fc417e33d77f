"""Single-line prompt on the bottom row of the back mode."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from ..ansi import display_width
from ..input import KeyComboBinding
from ..tree_pane.line_writer import LineWriter
from .base import Mode, OverlayMode

if TYPE_CHECKING:
    from ..runtime.application import Application


class InputMode(OverlayMode):
    """Edit a line; ``callback`` gets the text on Enter or ``None`` on cancel."""

    name = "input"

    def __init__(
        self,
        app: Application,
        prompt: str,
        callback: Callable[[str | None], None],
        initial: str = "",
        back: Mode | None = None,
    ) -> None:
        super().__init__(app, back=back)
        self.prompt = prompt
        self.callback = callback
        self.buffer = initial
        self.cursor = len(initial)
        self.cursor_visible = True
        self._cursor_x = 0
        self.commands.register_bindings(
            KeyComboBinding(("ENTER",), self.accept, name="accept"),
            KeyComboBinding(("ESC", "CTRL_C", "CTRL_D"), self.cancel, name="cancel"),
            KeyComboBinding(("BACKSPACE",), self.delete_backward),
            KeyComboBinding(("DELETE",), self.delete_forward),
            KeyComboBinding(("LEFT",), self.move_left),
            KeyComboBinding(("RIGHT",), self.move_right),
            KeyComboBinding(("HOME", "CTRL_A"), self.move_home),
            KeyComboBinding(("END", "CTRL_E"), self.move_end),
            KeyComboBinding(("CTRL_U",), self.clear),
        )
        self.commands.set_fallback(self.insert)

    def accept(self) -> bool:
        self.return_to_back()
        self.callback(self.buffer)
        return True

    def cancel(self) -> bool:
        self.return_to_back()
        self.callback(None)
        return True

    def insert(self, key: str) -> bool:
        if len(key) != 1 or not key.isprintable():
            return False
        self.buffer = self.buffer[: self.cursor] + key + self.buffer[self.cursor :]
        self.cursor += 1
        return True

    def delete_backward(self) -> bool:
        if self.cursor <= 0:
            return False
        self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
        self.cursor -= 1
        return True

    def delete_forward(self) -> bool:
        if self.cursor >= len(self.buffer):
            return False
        self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]
        return True

    def move_left(self) -> bool:
        if self.cursor <= 0:
            return False
        self.cursor -= 1
        return True

    def move_right(self) -> bool:
        if self.cursor >= len(self.buffer):
            return False
        self.cursor += 1
        return True

    def move_home(self) -> bool:
        self.cursor = 0
        return True

    def move_end(self) -> bool:
        self.cursor = len(self.buffer)
        return True

    def clear(self) -> bool:
        self.buffer = ""
        self.cursor = 0
        return True

    def prompt_line(self) -> str:
        """Render ``prompt + buffer``, scrolled so the cursor cell stays visible."""
        writer = LineWriter(self.columns)
        writer.append_text(self.prompt, self.app.theme.input_prompt)
        logical_cursor = display_width(self.buffer[: self.cursor])
        writer.open_column_with_cursor(logical_cursor, display_width(self.buffer) + 1)
        writer.append_text(self.buffer)
        self._cursor_x = max(0, writer.line_cursor_x)
        writer.new_line()
        return writer.lines[0]

    def lines(self) -> list[str]:
        lines = self.back_lines()
        if lines:
            lines[-1] = self.prompt_line()
        return lines

    def cursor_position(self) -> tuple[int, int]:
        self.prompt_line()
        return max(0, self.rows - 1), self._cursor_x
