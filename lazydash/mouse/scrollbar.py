"""Vertical scrollbar geometry.

The thumb is sized proportionally to the visible fraction (at least one
row) and positioned proportionally to the scroll offset. Clicking or
dragging on the track maps back to the offset that centers the thumb on
that row.
"""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import clamp

TRACK_CHAR = "│"
THUMB_CHAR = "┃"


@dataclass(frozen=True)
class ScrollbarParams:
    total_items: int
    scroll_offset: int
    visible_items: int
    track_height: int

    @property
    def scrollable(self) -> bool:
        return self.track_height > 0 and self.total_items > self.visible_items

    @property
    def max_offset(self) -> int:
        return max(0, self.total_items - self.visible_items)


def thumb_span(params: ScrollbarParams) -> tuple[int, int]:
    """Return ``(thumb_pos, thumb_size)`` in track rows; ``(0, 0)`` when nothing scrolls."""
    if not params.scrollable:
        return 0, 0
    track = params.track_height
    size = clamp((params.visible_items * track) // params.total_items, 1, track)
    max_offset = max(1, params.max_offset)
    pos = (params.scroll_offset * (track - size)) // max_offset
    return clamp(pos, 0, track - size), size


def render_scrollbar(params: ScrollbarParams) -> list[str]:
    """One character per track row; a blank column keeps layout stable when nothing scrolls."""
    if params.track_height < 1:
        return []
    if not params.scrollable:
        return [" "] * params.track_height
    pos, size = thumb_span(params)
    return [THUMB_CHAR if pos <= row < pos + size else TRACK_CHAR for row in range(params.track_height)]


def offset_for_track_row(params: ScrollbarParams, row: int) -> int:
    """Scroll offset that centers the thumb on track ``row``."""
    if not params.scrollable:
        return 0
    _pos, size = thumb_span(params)
    travel = params.track_height - size
    if travel <= 0:
        return 0
    thumb_top = clamp(row - size // 2, 0, travel)
    # Nearest rather than floor.
    return clamp((thumb_top * params.max_offset + travel // 2) // travel, 0, params.max_offset)


__all__ = [
    "ScrollbarParams",
    "THUMB_CHAR",
    "TRACK_CHAR",
    "offset_for_track_row",
    "render_scrollbar",
    "thumb_span",
]
