"""Key-binding help screen for the mode it was opened from."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..tree_model.tree import TreeBase
from .base import Mode
from .tree import TreeMode

if TYPE_CHECKING:
    from ..runtime.application import Application


class HelpTree(TreeBase):
    """Tree whose items are all permanently open."""

    def is_open(self, item: object | None) -> bool:
        return item is not None


class HelpMode(TreeMode):
    """Browse ``back.key_help_item()``; quit or help returns to ``back``."""

    name = "help"

    def __init__(self, app: Application, back: Mode | None = None) -> None:
        super().__init__(app, HelpTree())
        self.back = back if back is not None else app.current_mode
        if self.back is not None:
            self.set_origin(self.back.key_help_item())

    def show(self) -> HelpMode:
        self.app.set_current_mode(self)
        return self

    def end(self) -> None:
        self.app.set_current_mode(self.back)

    def show_help(self) -> bool:
        self.end()
        return True
