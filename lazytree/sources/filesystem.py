"""Directory tree source: lazily scanned filesystem nodes."""

from __future__ import annotations

import logging
import os
import stat
import time
from pathlib import Path

from ..ansi import sanitize_single_line
from ..tree_model.items import ItemNode
from ..tree_model.tree import TreeBase
from ..tree_model.types import Columns, Run
from ..ui_theme import DEFAULT_THEME, UITheme
from .highlight import highlighted_head

logger = logging.getLogger(__name__)

OPEN_MARKER = "▾"
CLOSED_MARKER = "▸"
PREVIEW_LINES = 20
TIME_FORMAT = "%Y-%m-%d %H:%M"


def format_size(size: int) -> str:
    """Return a compact size label (``512B``, ``1.5K``, ``12M``)."""
    value = float(size)
    for unit in ("B", "K", "M", "G", "T"):
        if value < 1024 or unit == "T":
            if unit == "B":
                return f"{int(value)}B"
            if value < 10:
                return f"{value:.1f}{unit}"
            return f"{int(value)}{unit}"
        value /= 1024
    return f"{size}B"


def format_mtime(mtime: float) -> str:
    return time.strftime(TIME_FORMAT, time.localtime(mtime))


class FileNode(ItemNode):
    """One filesystem entry; directory children are scanned on first access."""

    def __init__(
        self,
        path: Path | str,
        show_hidden: bool = False,
        theme: UITheme = DEFAULT_THEME,
        depth: int = 0,
        parent: object | None = None,
    ) -> None:
        super().__init__(depth=depth, parent=parent)
        self.path = Path(path)
        self.show_hidden = show_hidden
        self.theme = theme
        try:
            self.stat_result: os.stat_result | None = self.path.stat()
        except OSError as exc:
            logger.debug("stat failed for %s: %s", self.path, exc)
            self.stat_result = None

    @property
    def is_dir(self) -> bool:
        return self.stat_result is not None and stat.S_ISDIR(self.stat_result.st_mode)

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)

    def children(self) -> list[object] | None:
        if not self.is_dir:
            return None
        if self._children is None:
            self.with_children(self._scan())
        return self._children

    def _scan(self) -> list[FileNode]:
        entries: list[tuple[bool, str, Path]] = []
        try:
            with os.scandir(self.path) as iterator:
                for entry in iterator:
                    if not self.show_hidden and entry.name.startswith("."):
                        continue
                    try:
                        is_dir = entry.is_dir()
                    except OSError:
                        is_dir = False
                    entries.append((is_dir, entry.name, Path(entry.path)))
        except OSError as exc:
            logger.debug("scandir failed for %s: %s", self.path, exc)
            return []
        entries.sort(key=lambda item: (not item[0], item[1].lower()))
        return [FileNode(path, show_hidden=self.show_hidden, theme=self.theme) for _, _, path in entries]

    def size_label(self) -> str:
        if self.stat_result is None or self.is_dir:
            return ""
        return format_size(self.stat_result.st_size)

    def columns(self) -> Columns:
        label = sanitize_single_line(self.name)
        if self.is_dir:
            name = Run(label + "/", self.theme.tree_dir)
        else:
            name = Run(label, self.theme.tree_file)
        mtime = format_mtime(self.stat_result.st_mtime) if self.stat_result is not None else ""
        return [
            [name],
            [Run(self.size_label(), self.theme.tree_size)],
            [Run(mtime, self.theme.tree_time)],
        ]

    def info(self) -> list[str]:
        lines = [sanitize_single_line(str(self.path))]
        if self.stat_result is None:
            lines.append("(unreadable)")
            return lines
        kind = "directory" if self.is_dir else "file"
        if self.path.is_symlink():
            try:
                kind = f"symlink -> {sanitize_single_line(os.readlink(self.path))}"
            except OSError:
                kind = "symlink"
        lines.append(f"kind: {kind}")
        if not self.is_dir:
            lines.append(f"size: {self.stat_result.st_size} bytes")
        lines.append(f"modified: {format_mtime(self.stat_result.st_mtime)}")
        if not self.is_dir:
            lines.extend(self._preview())
        return lines

    def _preview(self) -> list[str]:
        try:
            head = highlighted_head(self.path, PREVIEW_LINES)
        except OSError as exc:
            logger.debug("preview failed for %s: %s", self.path, exc)
            return ["", f"(cannot read: {exc.strerror or exc})"]
        if head is None:
            return ["", "(binary file)"]
        return ["", *head]

    def __str__(self) -> str:
        return str(self.path)


class FileTree(TreeBase):
    """TreeBase that prefixes directories with an open/closed marker column."""

    def __init__(self, indent: bool = True, indent_unit: str = " ", theme: UITheme = DEFAULT_THEME) -> None:
        super().__init__(indent=indent, indent_unit=indent_unit)
        self.theme = theme

    def get_columns(self, item: object | None) -> Columns:
        columns = list(super().get_columns(item))
        if not isinstance(item, FileNode):
            return columns
        if item.is_dir:
            marker = Run(OPEN_MARKER if self.is_open(item) else CLOSED_MARKER, self.theme.tree_marker)
        else:
            marker = Run(" ")
        columns.insert(1 if self.indent else 0, [marker])
        return columns
