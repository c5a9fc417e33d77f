"""Text loading, sanitization, and Pygments highlighting for file previews."""

from __future__ import annotations

import re
from pathlib import Path

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.util import ClassNotFound

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_FORMATTER = TerminalFormatter()

PREVIEW_BYTES = 64 * 1024


def read_head(path: Path, limit: int = PREVIEW_BYTES) -> str | None:
    """Return the first ``limit`` bytes of ``path`` as text, ``None`` for binary data."""
    with path.open("rb") as handle:
        data = handle.read(limit)
    if b"\0" in data:
        return None
    return data.decode("utf-8", errors="replace")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def colorize_source(source: str, path: Path) -> str:
    """Highlight ``source`` with the lexer Pygments picks for ``path``."""
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()
    return pygments_highlight(source, lexer, _FORMATTER)


def highlighted_head(path: Path, max_lines: int) -> list[str] | None:
    """Return up to ``max_lines`` highlighted lines from the start of ``path``."""
    text = read_head(path)
    if text is None:
        return None
    lines = sanitize_terminal_text(text).replace("\r\n", "\n").split("\n")[:max_lines]
    rendered = colorize_source("\n".join(lines), path)
    return rendered.rstrip("\n").split("\n")
