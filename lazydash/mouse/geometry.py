"""Cell-grid geometry primitives shared by hit-testing and pane layout.

All coordinates are terminal cells with a top-left origin and ``y`` growing
downward. Rectangles are axis-aligned and half-open: ``x`` is inside when
``rect.x <= x < rect.x + rect.width``.
"""

from __future__ import annotations

from dataclasses import dataclass


def clamp(value: int, lo: int, hi: int) -> int:
    """Clamp ``value`` into ``[lo, hi]``; ``lo`` wins when bounds cross."""
    return max(lo, min(value, hi))


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def of(cls, x: int, y: int, width: int, height: int) -> Rect:
        """Build a rect with negative dimensions clamped to zero."""
        return cls(x, y, max(0, width), max(0, height))

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, x: int, y: int) -> bool:
        """Return whether cell ``(x, y)`` lies inside; empty rects contain nothing."""
        if self.is_empty():
            return False
        return self.x <= x < self.right and self.y <= y < self.bottom

    def translate(self, dx: int, dy: int) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def intersects(self, other: Rect) -> bool:
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


def to_local(rect: Rect, x: int, y: int) -> tuple[int, int] | None:
    """Translate screen cell ``(x, y)`` into ``rect``-relative coordinates.

    Returns ``None`` when the point falls outside ``rect``.
    """
    if not rect.contains(x, y):
        return None
    return x - rect.x, y - rect.y


def centered_rect(outer_width: int, outer_height: int, width: int, height: int) -> Rect:
    """Center a ``width`` x ``height`` box inside the outer grid, shrinking to fit."""
    width = clamp(width, 0, max(0, outer_width))
    height = clamp(height, 0, max(0, outer_height))
    return Rect((outer_width - width) // 2, (outer_height - height) // 2, width, height)


__all__ = ["Rect", "centered_rect", "clamp", "to_local"]
