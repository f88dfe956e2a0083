"""Pane components that register hit regions and consume mouse actions."""

from .list_pane import ListPane
from .modal import ConfirmModal, ModalButton, is_background_region
from .split import DIVIDER_WIDTH, SplitLayout, clamp_left_width, compute_left_width

__all__ = [
    "ConfirmModal",
    "DIVIDER_WIDTH",
    "ListPane",
    "ModalButton",
    "SplitLayout",
    "clamp_left_width",
    "compute_left_width",
    "is_background_region",
]
