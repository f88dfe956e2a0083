"""Text-selection state driven by drag gestures.

A press only remembers the anchor; the selection becomes real on the first
drag motion, so a plain click never leaves a one-character selection
behind. Columns are visual (post tab expansion) and the end column is
inclusive: the character under the pointer is selected.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..ansi import TAB_STOP, expand_tabs, visual_substring
from .geometry import Rect


@dataclass(frozen=True)
class SelectionPoint:
    line: int = -1
    col: int = -1

    @property
    def valid(self) -> bool:
        return self.line >= 0 and self.col >= 0

    def before(self, other: SelectionPoint) -> bool:
        """Return whether this point precedes ``other`` in document order."""
        return (self.line, self.col) < (other.line, other.col)


UNSET = SelectionPoint()


@dataclass
class SelectionState:
    active: bool = False
    start: SelectionPoint = UNSET
    end: SelectionPoint = UNSET
    anchor: SelectionPoint = UNSET
    view_rect: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))

    def clear(self) -> None:
        self.active = False
        self.start = UNSET
        self.end = UNSET
        self.anchor = UNSET
        self.view_rect = Rect(0, 0, 0, 0)

    @property
    def has_selection(self) -> bool:
        return self.start.valid and self.end.valid

    def prepare_drag(self, line: int, col: int, view_rect: Rect) -> None:
        """Record the press position without selecting anything yet."""
        self.active = False
        self.start = UNSET
        self.end = UNSET
        self.anchor = SelectionPoint(line, col)
        self.view_rect = view_rect

    def handle_drag(self, line: int, col: int) -> None:
        """Extend the selection to ``(line, col)``, ordered around the anchor."""
        if not self.anchor.valid:
            return
        current = SelectionPoint(line, col)
        self.active = True
        if current.before(self.anchor):
            self.start, self.end = current, self.anchor
        else:
            self.start, self.end = self.anchor, current

    def finish_drag(self) -> None:
        """End the gesture; a press with no motion clears the state."""
        if not self.start.valid:
            self.clear()
            return
        self.active = False

    def is_line_selected(self, line: int) -> bool:
        if not self.has_selection:
            return False
        return self.start.line <= line <= self.end.line

    def line_selection_cols(self, line: int) -> tuple[int, int]:
        """Inclusive visual column range selected on ``line``.

        ``(-1, -1)`` means the line is not selected; an end of ``-1`` means
        the selection runs to end of line.
        """
        if not self.is_line_selected(line):
            return -1, -1
        if self.start.line == self.end.line:
            return self.start.col, self.end.col
        if line == self.start.line:
            return self.start.col, -1
        if line == self.end.line:
            return 0, self.end.col
        return 0, -1

    def selected_text(self, lines: list[str], first_line: int = 0, tab_width: int = TAB_STOP) -> list[str]:
        """Extract the selected text from ``lines``.

        ``lines[0]`` corresponds to document line ``first_line``; lines outside
        the selection are ignored.
        """
        if not self.has_selection or not lines:
            return []
        out: list[str] = []
        for offset, raw in enumerate(lines):
            line = first_line + offset
            start_col, end_col = self.line_selection_cols(line)
            if start_col < 0:
                continue
            expanded = expand_tabs(raw, tab_width)
            out.append(visual_substring(expanded, start_col, end_col + 1 if end_col >= 0 else -1))
        return out


__all__ = ["SelectionPoint", "SelectionState", "UNSET"]
