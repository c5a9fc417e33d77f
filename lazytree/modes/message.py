"""Bottom-of-screen message overlay; any key dismisses it."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ..ansi import display_width, wrap_ansi_line
from .base import Mode, OverlayMode

if TYPE_CHECKING:
    from ..runtime.application import Application


class MessageMode(OverlayMode):
    name = "message"

    def __init__(self, app: Application, message: Sequence[str] | str, back: Mode | None = None) -> None:
        super().__init__(app, back=back)
        if isinstance(message, str):
            message = message.split("\n")
        self.message = list(message)
        self.commands.set_fallback(self._dismiss)

    def _dismiss(self, key: str) -> bool:
        self.return_to_back()
        return True

    def message_lines(self) -> list[str]:
        """Wrap the message to the screen width, keeping the last ``rows`` lines."""
        style = self.app.theme.message_text
        reset = self.app.theme.reset
        wrapped: list[str] = []
        for line in self.message:
            wrapped.extend(wrap_ansi_line(line, self.columns))
        if self.rows > 0:
            wrapped = wrapped[-self.rows :]
        else:
            wrapped = []
        if style:
            wrapped = [f"{style}{line}{reset}" for line in wrapped]
        return wrapped

    def lines(self) -> list[str]:
        lines = self.back_lines()
        message = self.message_lines()
        if message:
            lines[len(lines) - len(message) :] = message
        return lines

    def cursor_position(self) -> tuple[int, int]:
        message = self.message_lines()
        if not message:
            return max(0, self.rows - 1), 0
        row = max(0, self.rows - 1)
        column = min(display_width(message[-1]), max(0, self.columns - 1))
        return row, column
