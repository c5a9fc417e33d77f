"""Base class for application screens."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..input import KeyComboBinding, KeyComboRegistry
from ..tree_model.items import ItemLine, ItemNode
from ..tree_model.types import Run

if TYPE_CHECKING:
    from ..runtime.application import Application

QUIT_KEYS = ("q", "Q", "ESC")


class Mode:
    """One screen: produces lines and reacts to keys through ``commands``."""

    name = "mode"

    def __init__(self, app: Application, name: str = "") -> None:
        self.app = app
        if name:
            self.name = name
        self.cursor_visible = False
        self.columns, self.rows = app.size
        self.commands = KeyComboRegistry()

    def quit(self) -> bool:
        self.end()
        return True

    def lines(self) -> list[str]:
        return []

    def cursor_position(self) -> tuple[int, int]:
        return 0, 0

    def handle_key(self, key: str) -> bool:
        return bool(self.commands.dispatch(key))

    def size_updated(self, columns: int, rows: int) -> None:
        self.columns = columns
        self.rows = rows

    def end(self) -> None:
        """Clear the application's current mode."""
        self.app.set_current_mode(None)

    def key_help_item(self) -> ItemNode:
        """Return a help node listing every named command of this mode."""
        theme = self.app.theme
        node = ItemNode([[Run(self.name, theme.help_heading)]])
        for binding in self.commands.bindings():
            node.add_child(
                ItemLine(
                    [
                        [Run(", ".join(binding.labels()), theme.help_key)],
                        [Run(" : ")],
                        [Run(binding.name)],
                        [Run("    ")],
                        [Run(binding.description, theme.help_dim)],
                    ]
                )
            )
        return node


class OverlayMode(Mode):
    """Mode drawn on top of the mode that was current when it was created."""

    def __init__(self, app: Application, name: str = "", back: Mode | None = None) -> None:
        super().__init__(app, name)
        self.back = back if back is not None else app.current_mode

    def show(self) -> OverlayMode:
        self.app.set_current_mode(self)
        return self

    def return_to_back(self) -> None:
        self.app.set_current_mode(self.back)

    def size_updated(self, columns: int, rows: int) -> None:
        super().size_updated(columns, rows)
        if self.back is not None:
            self.back.size_updated(columns, rows)

    def back_lines(self) -> list[str]:
        """Return the back mode's lines padded or cut to exactly ``rows``."""
        lines = list(self.back.lines()) if self.back is not None else []
        rows = max(0, self.rows)
        lines = lines[:rows]
        lines.extend([""] * (rows - len(lines)))
        return lines
