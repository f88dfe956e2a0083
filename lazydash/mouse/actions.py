"""Decoded mouse input events and classified mouse actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .hitmap import Region


class EventKind(Enum):
    PRESS = "press"
    RELEASE = "release"
    MOTION = "motion"


class MouseButton(Enum):
    NONE = "none"
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"
    WHEEL_LEFT = "wheel_left"
    WHEEL_RIGHT = "wheel_right"

    @property
    def is_wheel(self) -> bool:
        return self in _WHEEL_BUTTONS


_WHEEL_BUTTONS = frozenset(
    {
        MouseButton.WHEEL_UP,
        MouseButton.WHEEL_DOWN,
        MouseButton.WHEEL_LEFT,
        MouseButton.WHEEL_RIGHT,
    }
)


@dataclass(frozen=True)
class MouseEvent:
    """One raw terminal mouse report in 0-based cell coordinates."""

    kind: EventKind
    button: MouseButton
    x: int
    y: int
    shift: bool = False
    alt: bool = False
    ctrl: bool = False


class ActionType(Enum):
    NONE = "none"
    CLICK = "click"
    DOUBLE_CLICK = "double_click"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    SCROLL_LEFT = "scroll_left"
    SCROLL_RIGHT = "scroll_right"
    DRAG = "drag"
    DRAG_END = "drag_end"
    HOVER = "hover"

    @property
    def is_scroll(self) -> bool:
        return self in _SCROLL_TYPES

    @property
    def is_vertical_scroll(self) -> bool:
        return self is ActionType.SCROLL_UP or self is ActionType.SCROLL_DOWN


_SCROLL_TYPES = frozenset(
    {
        ActionType.SCROLL_UP,
        ActionType.SCROLL_DOWN,
        ActionType.SCROLL_LEFT,
        ActionType.SCROLL_RIGHT,
    }
)


@dataclass(frozen=True)
class MouseAction:
    """Result of classifying one ``MouseEvent``.

    ``delta`` is the signed scroll amount for scroll actions. ``drag_dx`` and
    ``drag_dy`` are offsets from the drag anchor for drag actions.
    """

    type: ActionType
    region: Region | None = None
    x: int = 0
    y: int = 0
    delta: int = 0
    drag_dx: int = 0
    drag_dy: int = 0

    @property
    def region_id(self) -> str | None:
        return self.region.id if self.region is not None else None


NO_ACTION = MouseAction(ActionType.NONE)


__all__ = [
    "ActionType",
    "EventKind",
    "MouseAction",
    "MouseButton",
    "MouseEvent",
    "NO_ACTION",
]
