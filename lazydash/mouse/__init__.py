"""Mouse hit-testing and gesture interpretation.

Renderers register regions on ``MouseHandler.hit_map`` every frame; input
dispatch passes each decoded ``MouseEvent`` to ``MouseHandler.handle_mouse``
and switches on the returned ``MouseAction``.
"""

from .actions import NO_ACTION, ActionType, EventKind, MouseAction, MouseButton, MouseEvent
from .geometry import Rect, centered_rect, clamp, to_local
from .handler import ClickRecord, DragState, MouseHandler, MouseSettings
from .hitmap import HitMap, Region
from .scrollbar import ScrollbarParams, offset_for_track_row, render_scrollbar, thumb_span
from .selection import SelectionPoint, SelectionState

__all__ = [
    "ActionType",
    "ClickRecord",
    "DragState",
    "EventKind",
    "HitMap",
    "MouseAction",
    "MouseButton",
    "MouseEvent",
    "MouseHandler",
    "MouseSettings",
    "NO_ACTION",
    "Rect",
    "Region",
    "ScrollbarParams",
    "SelectionPoint",
    "SelectionState",
    "centered_rect",
    "clamp",
    "offset_for_track_row",
    "render_scrollbar",
    "thumb_span",
    "to_local",
]
