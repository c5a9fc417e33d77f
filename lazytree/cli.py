"""Command-line front door for lazytree.

Parses CLI options, builds the tree for a directory or JSON file, and either
prints one rendered frame or launches the interactive browser.
"""

from __future__ import annotations

import argparse
import os
import shutil
import sys
from pathlib import Path

from .runtime.config import load_indent_unit, load_log_spec, load_show_hidden, load_theme_name
from .runtime.logs import LOG_ENV_VAR, close_logging, configure_logging
from .sources import FileNode, FileTree, load_json_tree
from .tree_model.tree import Tree, TreeBase
from .tree_pane.viewport import TreeViewport
from .ui_theme import UITheme, available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse a directory or JSON document as an expandable tree.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to browse. Defaults to current directory.")
    parser.add_argument("--json", metavar="FILE", default=None, help="Browse a JSON file instead of a directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--show-hidden", action="store_true", help="Include dotfiles in directory listings.")
    parser.add_argument("--no-indent", action="store_true", help="Do not indent items by depth.")
    parser.add_argument("--render", action="store_true", help="Print the first frame and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    parser.add_argument(
        "--max-rows",
        type=_positive_int,
        default=None,
        help="Row count for --render output (default: terminal height).",
    )
    return parser


def build_tree(args: argparse.Namespace, theme: UITheme, default_path: Path) -> tuple[Tree, object]:
    """Return ``(tree, root)`` for the parsed arguments, exiting on user errors."""
    indent = not args.no_indent
    indent_unit = load_indent_unit()
    if args.json is not None:
        if args.path is not None:
            raise SystemExit("Cannot combine positional path with --json.")
        json_path = Path(args.json)
        if not json_path.exists():
            raise SystemExit(f"Path not found: {json_path}")
        try:
            root = load_json_tree(json_path, theme=theme)
        except ValueError as exc:
            raise SystemExit(f"Invalid JSON in {json_path}: {exc}") from exc
        except OSError as exc:
            raise SystemExit(f"Cannot read {json_path}: {exc}") from exc
        return TreeBase(indent=indent, indent_unit=indent_unit), root

    path = Path(args.path) if args.path is not None else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    show_hidden = args.show_hidden or load_show_hidden()
    root = FileNode(path.resolve(), show_hidden=show_hidden, theme=theme)
    return FileTree(indent=indent, indent_unit=indent_unit, theme=theme), root


def render_tree_view(tree: Tree, root: object, max_cols: int, max_rows: int, theme: UITheme) -> str:
    """Render the first frame (root expanded) as newline-separated text."""
    tree.open(root)
    viewport = TreeViewport(tree, root, width=max_cols, height=max_rows, theme=theme)
    out: list[str] = []
    for line in viewport.render().lines:
        out.append(line.rstrip(" ") if "\033" not in line else line)
        if "\033" in line:
            out.append("\033[0m")
        out.append("\n")
    return "".join(out)


def run_browser(tree: Tree, root: object, theme: UITheme) -> None:
    """Launch the interactive tree browser on ``root``."""
    from .modes import TreeMode
    from .runtime.application import Application

    app = Application(theme=theme)
    TreeMode(app, tree).start(root)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and browse a directory or JSON file.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    if default_path is None:
        default_path = Path.cwd()
    tree, root = build_tree(args, theme, default_path)

    if args.render:
        size = shutil.get_terminal_size((80, 24))
        max_cols = args.max_cols if args.max_cols is not None else max(1, size.columns)
        max_rows = args.max_rows if args.max_rows is not None else max(1, size.lines)
        sys.stdout.write(render_tree_view(tree, root, max_cols, max_rows, theme))
        return

    configure_logging(os.environ.get(LOG_ENV_VAR) or load_log_spec())
    try:
        run_browser(tree, root, theme)
    finally:
        close_logging()


if __name__ == "__main__":
    main()
