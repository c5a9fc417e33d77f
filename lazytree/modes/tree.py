"""Interactive tree screen built on :class:`TreeViewport`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..input import KeyComboBinding
from ..tree_model.tree import Tree
from ..tree_pane.viewport import TreeViewport
from .base import QUIT_KEYS, Mode
from .input import InputMode
from .message import MessageMode

if TYPE_CHECKING:
    from ..runtime.application import Application

logger = logging.getLogger(__name__)


class TreeMode(Mode):
    """Browse ``tree`` from an origin item with paging, jumps, and search."""

    name = "tree"

    def __init__(self, app: Application, tree: Tree, name: str = "") -> None:
        super().__init__(app, name)
        self.tree = tree
        self.root: object | None = None
        self.viewport = TreeViewport(tree, width=self.columns, height=self.rows, theme=app.theme)
        vp = self.viewport
        self.commands.register_bindings(
            KeyComboBinding(("ENTER", " "), vp.toggle_on_cursor, name="open/close", description="Expand or collapse the item."),
            KeyComboBinding(
                ("e", "j", "CTRL_E", "CTRL_N", "DOWN"), vp.cursor_next, name="next line", description="Move down one line."
            ),
            KeyComboBinding(
                ("y", "k", "CTRL_Y", "CTRL_K", "CTRL_P", "UP"),
                vp.cursor_prev,
                name="previous line",
                description="Move up one line.",
            ),
            KeyComboBinding(("CTRL_F", "RIGHT"), vp.scroll_column_next, name="right", description="Scroll columns right."),
            KeyComboBinding(("CTRL_B", "LEFT"), vp.scroll_column_prev, name="left", description="Scroll columns left."),
            KeyComboBinding(("u", "CTRL_U", "PAGE_UP"), vp.page_up, name="page up", description="Scroll up one page."),
            KeyComboBinding(("d", "CTRL_D", "PAGE_DOWN"), vp.page_down, name="page down", description="Scroll down one page."),
            KeyComboBinding(("p",), vp.move_to_parent, name="parent", description="Go to the parent item."),
            KeyComboBinding(("f",), vp.move_to_first_child, name="first child", description="Go to the first child."),
            KeyComboBinding(("l",), vp.move_to_last_child, name="last child", description="Go to the last child."),
            KeyComboBinding(("x",), vp.move_to_next_sibling, name="next sibling", description="Go to the next sibling."),
            KeyComboBinding(
                ("r",), vp.move_to_previous_sibling, name="previous sibling", description="Go to the previous sibling."
            ),
            KeyComboBinding(("/",), self.prompt_search_forward, name="search", description="Search forward."),
            KeyComboBinding(("?",), self.prompt_search_backward, name="search back", description="Search backward."),
            KeyComboBinding(("n",), self.next_match, name="next match", description="Repeat the search forward."),
            KeyComboBinding(("N",), self.previous_match, name="previous match", description="Repeat the search backward."),
            KeyComboBinding(("\\",), self.debug_log, name="debug", description="Log the visible rows."),
            KeyComboBinding(("h", "H"), self.show_help, name="help", description="Show key bindings."),
            KeyComboBinding(("i", "I"), self.show_info, name="info", description="Show item details."),
            KeyComboBinding(QUIT_KEYS, self.quit, name="quit", description="Leave this screen."),
        )

    def set_origin(self, item: object | None) -> None:
        self.root = item
        self.viewport.set_origin(item)

    def start(self, origin: object) -> None:
        """Open ``origin``, make this mode current, and run the application loop."""
        self.tree.open(origin)
        self.set_origin(origin)
        self.app.set_current_mode(self)
        self.app.run()

    def lines(self) -> list[str]:
        return self.viewport.render().lines

    def cursor_position(self) -> tuple[int, int]:
        view = self.viewport.render()
        return view.cursor_row, view.cursor_column

    def size_updated(self, columns: int, rows: int) -> None:
        super().size_updated(columns, rows)
        self.viewport.set_width(columns)
        self.viewport.set_height(rows)

    def show_message(self, message) -> None:
        MessageMode(self.app, message, back=self).show()

    def show_info(self) -> bool:
        info = self.tree.get_info(self.viewport.item_on_cursor())
        self.show_message(info if info else ["No info."])
        return True

    def show_help(self) -> bool:
        from .help import HelpMode

        HelpMode(self.app, back=self).show()
        return True

    def _prompt(self, prompt: str, on_query) -> bool:
        InputMode(self.app, prompt, on_query, back=self).show()
        return True

    def prompt_search_forward(self) -> bool:
        return self._prompt("/", self._search_forward_for)

    def prompt_search_backward(self) -> bool:
        return self._prompt("?", self._search_backward_for)

    def _search_forward_for(self, query: str | None) -> None:
        if query is None:
            return
        self.viewport.search_query = query
        self.next_match()

    def _search_backward_for(self, query: str | None) -> None:
        if query is None:
            return
        self.viewport.search_query = query
        self.previous_match()

    def _report_search(self, found: bool) -> bool:
        query = self.viewport.search_query
        if not found and query:
            self.show_message(f"Not found: {query}")
        return found

    def next_match(self) -> bool:
        return self._report_search(self.viewport.search_forward())

    def previous_match(self) -> bool:
        return self._report_search(self.viewport.search_backward())

    def debug_log(self) -> bool:
        logger.debug("mode %s", self.name)
        self.viewport.debug_log()
        return True
