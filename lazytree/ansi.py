"""ANSI-aware text measurement and line shaping utilities.

Provides cell-width measurement, column slicing, clipping, and wrapping
that preserve escape sequences. The line writer and the overlay modes rely on
these helpers to keep columns aligned when wide chars are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
LINE_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def sanitize_single_line(text: str) -> str:
    """Escape control characters, newlines and tabs included, as ``\\xNN`` so ``text`` fits one row."""
    if LINE_CONTROL_RE.search(text) is None:
        return text
    return LINE_CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", text)


def strip_ansi(text: str) -> str:
    """Remove escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return terminal column width for ANSI-styled text."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def slice_columns(text: str, start: int, length: int) -> str:
    """Return the cells ``[start, start + length)`` of unstyled ``text``.

    A wide character cut by either boundary is replaced by spaces for the
    cells that fall inside the slice, so the result is always exactly
    ``length`` cells when ``text`` is long enough.
    """
    if length <= 0:
        return ""
    end = start + length
    out: list[str] = []
    col = 0
    for ch in text:
        if col >= end:
            break
        w = char_display_width(ch, col)
        ch_end = col + w
        if ch_end <= start:
            col = ch_end
            continue
        if w == 0:
            if out:
                out.append(ch)
            continue
        if col < start or ch_end > end or ch == "\t":
            out.append(" " * (min(ch_end, end) - max(col, start)))
        else:
            out.append(ch)
        col = ch_end
    return "".join(out)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            if col + w > max_cols:
                break
            out.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def wrap_ansi_line(text: str, width: int) -> list[str]:
    """Wrap a styled line into chunks that fit ``width`` display columns.

    Escape sequences remain attached to their surrounding chunk, and tab
    expansion respects terminal tab-stop alignment for each wrapped segment.
    """
    if width <= 0:
        return [""]
    if not text:
        return [""]

    wrapped: list[str] = []
    chunk: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                chunk.append(match.group(0))
                i = match.end()
                continue

        if col >= width:
            wrapped.append("".join(chunk))
            chunk = []
            col = 0

        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            if col + w > width and chunk:
                wrapped.append("".join(chunk))
                chunk = []
                col = 0
                w = TAB_STOP
            chunk.append(" " * min(w, width))
            col += w
            i += 1
            continue
        if col + w > width and chunk:
            wrapped.append("".join(chunk))
            chunk = []
            col = 0
        chunk.append(ch)
        col += char_display_width(ch, col)
        i += 1

    wrapped.append("".join(chunk))
    return wrapped
