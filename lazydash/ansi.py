"""ANSI-aware text measurement for the cell grid.

Keeps rendered rows aligned with hit-test rectangles when rows carry color
escapes, tabs, or wide characters.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\x1b[0m"
REVERSE = "\x1b[7m"
DIM = "\x1b[2m"
BOLD = "\x1b[1m"


def char_display_width(ch: str, col: int, tab_width: int = TAB_STOP) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next tab stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return tab_width - (col % tab_width)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Display width of ``text`` after stripping escapes and newlines."""
    col = 0
    for ch in strip_ansi(text).rstrip("\r\n"):
        col += char_display_width(ch, col)
    return col


def expand_tabs(text: str, tab_width: int = TAB_STOP) -> str:
    """Replace tabs with spaces up to the next stop, leaving escapes untouched."""
    if "\t" not in text:
        return text
    out: list[str] = []
    col = 0
    i = 0
    while i < len(text):
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        width = char_display_width(ch, col, tab_width)
        out.append(" " * width if ch == "\t" else ch)
        col += width
        i += 1
    return "".join(out)


def visual_substring(text: str, start_col: int, end_col: int = -1) -> str:
    """Plain text between display columns ``[start_col, end_col)``.

    ``end_col=-1`` means to end of line. A wide character is included when
    its first column falls inside the range.
    """
    plain = strip_ansi(text).rstrip("\r\n")
    out: list[str] = []
    col = 0
    for ch in plain:
        width = char_display_width(ch, col)
        if end_col >= 0 and col >= end_col:
            break
        if col >= start_col:
            out.append(ch)
        col += width
    return "".join(out)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences are preserved verbatim and do not count toward width.
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
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1
    return "".join(out)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip then right-pad ``text`` to exactly ``width`` display columns."""
    clipped = clip_ansi_line(text, width)
    padding = max(0, width - display_width(clipped))
    return clipped + " " * padding
