"""Per-frame spatial index of clickable regions.

Renderers clear the map at the start of every frame and append regions in
stacking order: background panes first, overlays last. Lookups scan newest
to oldest, so a modal button registered after the dimmed pane beneath it
wins the shared cell without either side knowing about the other.
"""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Rect


@dataclass(frozen=True)
class Region:
    """A named hit target for one frame.

    ``id`` is shared by every instance of a target kind (all list rows use the
    same id); ``data`` tells instances apart, e.g. the row index.
    """

    id: str
    rect: Rect
    data: object = None


class HitMap:
    """Ordered, append-only collection of ``Region`` values."""

    def __init__(self) -> None:
        self._regions: list[Region] = []

    def clear(self) -> None:
        """Drop every region; call before registering a new frame."""
        self._regions.clear()

    def add(self, region_id: str, rect: Rect, data: object = None) -> Region:
        region = Region(region_id, Rect.of(rect.x, rect.y, rect.width, rect.height), data)
        self._regions.append(region)
        return region

    def add_rect(
        self,
        region_id: str,
        x: int,
        y: int,
        width: int,
        height: int,
        data: object = None,
    ) -> Region:
        """Append a region from raw coordinates. Overlaps and duplicates are legal."""
        return self.add(region_id, Rect(x, y, width, height), data)

    def test(self, x: int, y: int) -> Region | None:
        """Return the most recently added region containing ``(x, y)``."""
        for region in reversed(self._regions):
            if region.rect.contains(x, y):
                return region
        return None

    def regions(self) -> tuple[Region, ...]:
        """Snapshot of the current frame's regions in registration order."""
        return tuple(self._regions)

    def __len__(self) -> int:
        return len(self._regions)


__all__ = ["HitMap", "Region"]
