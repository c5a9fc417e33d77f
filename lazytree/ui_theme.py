"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the tree, overlays, and prompt. Syntax
highlighting in file previews uses a separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    cursor_marker: str
    cursor_row: str
    tree_marker: str
    tree_dir: str
    tree_file: str
    tree_size: str
    tree_time: str
    object_key: str
    object_value: str
    object_type: str
    help_heading: str
    help_key: str
    help_dim: str
    message_text: str
    input_prompt: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    cursor_marker="\033[1;38;5;81m",
    cursor_row="\033[7m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    tree_size="\033[38;5;109m",
    tree_time="\033[2;38;5;250m",
    object_key="\033[38;5;110m",
    object_value="\033[38;5;252m",
    object_type="\033[2;38;5;250m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
    message_text="\033[38;5;229m",
    input_prompt="\033[1;38;5;81m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    cursor_marker="\033[1;38;5;45m",
    cursor_row="\033[7m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tree_size="\033[38;5;73m",
    tree_time="\033[2;38;5;110m",
    object_key="\033[38;5;117m",
    object_value="\033[38;5;252m",
    object_type="\033[2;38;5;110m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
    message_text="\033[38;5;153m",
    input_prompt="\033[1;38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    cursor_marker="",
    cursor_row="",
    tree_marker="",
    tree_dir="",
    tree_file="",
    tree_size="",
    tree_time="",
    object_key="",
    object_value="",
    object_type="",
    help_heading="",
    help_key="",
    help_dim="",
    message_text="",
    input_prompt="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if not candidate:
        return DEFAULT_THEME.name
    if candidate == PLAIN_THEME.name:
        return DEFAULT_THEME.name
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    normalized = normalize_theme_name(name)
    return _THEMES.get(normalized, DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
