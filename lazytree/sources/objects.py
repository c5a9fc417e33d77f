"""Object-graph source: dicts, lists, and scalars such as parsed JSON."""

from __future__ import annotations

import json
from pathlib import Path

from ..ansi import sanitize_single_line
from ..tree_model.items import ItemNode
from ..tree_model.types import Columns, Run
from ..ui_theme import DEFAULT_THEME, UITheme

MAX_VALUE_WIDTH = 60
MAX_INFO_LINES = 200


def _scalar_text(value: object) -> str:
    if value is None or isinstance(value, (bool, int, float, str)):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


def summarize(value: object) -> str:
    """One-line summary: container sizes or a truncated scalar."""
    if isinstance(value, dict):
        count = len(value)
        return "{}" if not count else f"{{{count} key{'s' if count != 1 else ''}}}"
    if isinstance(value, (list, tuple)):
        count = len(value)
        return "[]" if not count else f"[{count} item{'s' if count != 1 else ''}]"
    text = sanitize_single_line(_scalar_text(value).replace("\n", " "))
    if len(text) > MAX_VALUE_WIDTH:
        text = text[: MAX_VALUE_WIDTH - 3] + "..."
    return text


def type_name(value: object) -> str:
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return type(value).__name__


class ObjectNode(ItemNode):
    """Wrap ``value``; container children are created on first access."""

    def __init__(
        self,
        value: object,
        key: str = "$",
        theme: UITheme = DEFAULT_THEME,
        depth: int = 0,
        parent: object | None = None,
    ) -> None:
        super().__init__(depth=depth, parent=parent)
        self.value = value
        self.key = key
        self.theme = theme

    def is_container(self) -> bool:
        return isinstance(self.value, (dict, list, tuple))

    def children(self) -> list[object] | None:
        if not self.is_container():
            return None
        if self._children is None:
            if isinstance(self.value, dict):
                pairs = [(str(key), child) for key, child in self.value.items()]
            else:
                pairs = [(f"[{index}]", child) for index, child in enumerate(self.value)]
            self.with_children(ObjectNode(child, key, theme=self.theme) for key, child in pairs)
        return self._children

    def columns(self) -> Columns:
        style = self.theme.object_type if self.is_container() else self.theme.object_value
        return [
            [Run(sanitize_single_line(self.key), self.theme.object_key)],
            [Run(summarize(self.value), style)],
        ]

    def path(self) -> str:
        """Return a ``$.key[0].child``-style path from the root node."""
        parts: list[str] = []
        node: object | None = self
        while isinstance(node, ObjectNode):
            parent = node.parent
            if not isinstance(parent, ObjectNode):
                parts.append(node.key)
            elif node.key.startswith("["):
                parts.append(node.key)
            else:
                parts.append("." + node.key)
            node = parent
        return "".join(reversed(parts))

    def info(self) -> list[str]:
        lines = [f"path: {sanitize_single_line(self.path())}", f"type: {type_name(self.value)}", ""]
        try:
            text = json.dumps(self.value, indent=2, ensure_ascii=False, default=repr)
        except (TypeError, ValueError):
            text = repr(self.value)
        body = [sanitize_single_line(line) for line in text.split("\n")]
        if len(body) > MAX_INFO_LINES:
            body = body[:MAX_INFO_LINES] + ["..."]
        lines.extend(body)
        return lines

    def __str__(self) -> str:
        return f"{sanitize_single_line(self.key)}: {summarize(self.value)}"


def load_json_tree(path: Path | str, theme: UITheme = DEFAULT_THEME) -> ObjectNode:
    """Parse a JSON file into a root node keyed by the file name.

    Raises ``OSError`` when the file cannot be read and ``ValueError`` when it
    is not valid JSON.
    """
    source = Path(path)
    data = json.loads(source.read_text(encoding="utf-8"))
    return ObjectNode(data, key=source.name, theme=theme)
