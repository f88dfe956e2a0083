"""Gesture classification tests for ``MouseHandler``.

Uses an injected clock so double-click windows are deterministic, and
drives drags through the explicit ``start_drag`` API the way pane click
handlers do.
"""

from __future__ import annotations

import unittest

from lazydash.mouse import (
    ActionType,
    EventKind,
    MouseButton,
    MouseEvent,
    MouseHandler,
    MouseSettings,
)


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _press(x: int, y: int, button: MouseButton = MouseButton.LEFT, **mods: bool) -> MouseEvent:
    return MouseEvent(EventKind.PRESS, button, x, y, **mods)


def _release(x: int, y: int) -> MouseEvent:
    return MouseEvent(EventKind.RELEASE, MouseButton.LEFT, x, y)


def _motion(x: int, y: int) -> MouseEvent:
    return MouseEvent(EventKind.MOTION, MouseButton.NONE, x, y)


class HandlerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = _Clock()
        self.handler = MouseHandler(MouseSettings(), monotonic=self.clock)
        self.hit_map = self.handler.hit_map


class ClickClassificationTests(HandlerTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.hit_map.add_rect("row", 0, 0, 20, 1, 0)
        self.hit_map.add_rect("row", 0, 1, 20, 1, 1)
        self.hit_map.add_rect("button", 30, 0, 6, 1, "ok")

    def test_press_on_region_is_click(self) -> None:
        action = self.handler.handle_mouse(_press(3, 1))

        self.assertIs(action.type, ActionType.CLICK)
        self.assertEqual(action.region_id, "row")
        self.assertEqual(action.region.data, 1)
        self.assertEqual((action.x, action.y), (3, 1))

    def test_second_press_within_window_is_double_click_and_third_is_click(self) -> None:
        first = self.handler.handle_mouse(_press(3, 0))
        self.clock.now += 0.2
        second = self.handler.handle_mouse(_press(3, 0))
        self.clock.now += 0.1
        third = self.handler.handle_mouse(_press(3, 0))

        self.assertEqual(
            [first.type, second.type, third.type],
            [ActionType.CLICK, ActionType.DOUBLE_CLICK, ActionType.CLICK],
        )
        self.assertEqual(second.region.data, 0)

    def test_same_id_different_data_never_double_clicks(self) -> None:
        self.handler.handle_mouse(_press(3, 0))
        action = self.handler.handle_mouse(_press(3, 1))

        self.assertIs(action.type, ActionType.CLICK)
        self.assertEqual(action.region.data, 1)

    def test_different_region_same_instant_never_double_clicks(self) -> None:
        self.handler.handle_mouse(_press(3, 0))
        action = self.handler.handle_mouse(_press(31, 0))

        self.assertIs(action.type, ActionType.CLICK)
        self.assertEqual(action.region_id, "button")

    def test_press_after_window_is_fresh_click(self) -> None:
        self.handler.handle_mouse(_press(3, 0))
        self.clock.now += 0.41

        action = self.handler.handle_mouse(_press(3, 0))

        self.assertIs(action.type, ActionType.CLICK)

    def test_window_boundary_is_inclusive(self) -> None:
        self.handler.handle_mouse(_press(3, 0))
        self.clock.now += 0.4

        self.assertIs(self.handler.handle_mouse(_press(3, 0)).type, ActionType.DOUBLE_CLICK)

    def test_default_tolerance_requires_same_cell(self) -> None:
        self.handler.handle_mouse(_press(3, 0))
        moved = self.handler.handle_mouse(_press(4, 0))
        same = self.handler.handle_mouse(_press(4, 0))

        self.assertIs(moved.type, ActionType.CLICK)
        self.assertIs(same.type, ActionType.DOUBLE_CLICK)

    def test_press_beyond_distance_tolerance_is_click(self) -> None:
        handler = MouseHandler(MouseSettings(double_click_distance=1), monotonic=self.clock)
        handler.hit_map.add_rect("row", 0, 0, 20, 1, 0)
        handler.handle_mouse(_press(3, 0))
        near = handler.handle_mouse(_press(4, 0))
        handler.handle_mouse(_press(3, 0))
        far = handler.handle_mouse(_press(6, 0))

        self.assertIs(near.type, ActionType.DOUBLE_CLICK)
        self.assertIs(far.type, ActionType.CLICK)

    def test_custom_settings_change_window(self) -> None:
        handler = MouseHandler(MouseSettings(double_click_seconds=0.1, double_click_distance=0), monotonic=self.clock)
        handler.hit_map.add_rect("row", 0, 0, 20, 1, 0)
        handler.handle_mouse(_press(3, 0))
        self.clock.now += 0.2

        self.assertIs(handler.handle_mouse(_press(3, 0)).type, ActionType.CLICK)

    def test_press_on_empty_space_is_click_without_region(self) -> None:
        self.handler.handle_mouse(_press(3, 0))
        action = self.handler.handle_mouse(_press(60, 10))

        self.assertIs(action.type, ActionType.CLICK)
        self.assertIsNone(action.region)
        self.assertIsNone(self.handler.last_click)

    def test_empty_map_press_is_click_without_region(self) -> None:
        self.hit_map.clear()

        self.assertIsNone(self.hit_map.test(0, 0))
        action = self.handler.handle_mouse(_press(0, 0))
        self.assertIs(action.type, ActionType.CLICK)
        self.assertIsNone(action.region)

    def test_right_press_reports_region_without_click(self) -> None:
        action = self.handler.handle_mouse(_press(3, 1, MouseButton.RIGHT))

        self.assertIs(action.type, ActionType.NONE)
        self.assertEqual(action.region.data, 1)
        self.assertIsNone(self.handler.last_click)

    def test_release_without_drag_is_noop(self) -> None:
        action = self.handler.handle_mouse(_release(3, 0))

        self.assertIs(action.type, ActionType.NONE)
        self.assertIsNone(action.region)

    def test_reset_click_history_breaks_pending_double_click(self) -> None:
        self.handler.handle_mouse(_press(3, 0))
        self.handler.reset_click_history()

        self.assertIs(self.handler.handle_mouse(_press(3, 0)).type, ActionType.CLICK)


class DragTrackingTests(HandlerTestCase):
    def test_drag_dx_is_relative_to_anchor_without_drift(self) -> None:
        self.handler.start_drag(20, 5, "divider", 40)

        for x in (21, 23, 19, 30, 24):
            self.handler.handle_mouse(_motion(x, 5))
        action = self.handler.handle_mouse(_motion(25, 5))

        self.assertIs(action.type, ActionType.DRAG)
        self.assertEqual(action.drag_dx, 5)
        self.assertEqual(self.handler.drag_start_value() + action.drag_dx, 45)

    def test_divider_scenario_ends_in_hover(self) -> None:
        self.handler.start_drag(10, 5, "pane-divider", 30)

        right = self.handler.handle_mouse(_motion(14, 5))
        left = self.handler.handle_mouse(_motion(8, 5))
        end = self.handler.handle_mouse(_release(8, 5))
        after = self.handler.handle_mouse(_motion(8, 5))

        self.assertEqual((right.type, right.drag_dx), (ActionType.DRAG, 4))
        self.assertEqual((left.type, left.drag_dx), (ActionType.DRAG, -2))
        self.assertIs(end.type, ActionType.DRAG_END)
        self.assertEqual(end.drag_dx, -2)
        self.assertIs(after.type, ActionType.HOVER)
        self.assertFalse(self.handler.is_dragging)

    def test_drag_reports_vertical_offset(self) -> None:
        self.handler.start_drag(4, 4, "selection", 0)

        action = self.handler.handle_mouse(_motion(4, 9))

        self.assertEqual((action.drag_dx, action.drag_dy), (0, 5))

    def test_drag_accessors_expose_armed_region_and_value(self) -> None:
        self.handler.start_drag(3, 3, "pane-divider", 27)

        self.assertTrue(self.handler.is_dragging)
        self.assertEqual(self.handler.drag_region(), "pane-divider")
        self.assertEqual(self.handler.drag_start_value(), 27)
        self.assertEqual(self.handler.drag_delta(5, 1), (2, -2))

    def test_drag_region_stays_readable_after_drag_end(self) -> None:
        self.handler.start_drag(3, 3, "pane-divider", 27)
        self.handler.handle_mouse(_release(6, 3))

        self.assertFalse(self.handler.is_dragging)
        self.assertEqual(self.handler.drag_region(), "pane-divider")

    def test_start_drag_overwrites_active_drag(self) -> None:
        self.handler.start_drag(0, 0, "first", 1)
        self.handler.start_drag(10, 10, "second", 2)

        action = self.handler.handle_mouse(_motion(12, 10))

        self.assertEqual(self.handler.drag_region(), "second")
        self.assertEqual(self.handler.drag_start_value(), 2)
        self.assertEqual(action.drag_dx, 2)

    def test_drag_survives_hit_map_rebuild(self) -> None:
        self.hit_map.add_rect("pane-divider", 10, 0, 1, 20)
        self.handler.start_drag(10, 5, "pane-divider", 30)
        self.handler.clear()

        action = self.handler.handle_mouse(_motion(16, 5))

        self.assertIs(action.type, ActionType.DRAG)
        self.assertIsNone(action.region)
        self.assertEqual(self.handler.drag_start_value() + action.drag_dx, 36)

    def test_left_press_during_drag_is_drag(self) -> None:
        self.hit_map.add_rect("row", 0, 0, 20, 1, 0)
        self.handler.start_drag(2, 0, "selection", 0)

        action = self.handler.handle_mouse(_press(5, 0))

        self.assertIs(action.type, ActionType.DRAG)
        self.assertEqual(action.drag_dx, 3)


class HoverAndScrollTests(HandlerTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.hit_map.add_rect("list", 0, 0, 20, 10)
        self.hit_map.add_rect("row", 0, 2, 20, 1, 2)

    def test_motion_updates_hover_region(self) -> None:
        action = self.handler.handle_mouse(_motion(4, 2))

        self.assertIs(action.type, ActionType.HOVER)
        self.assertEqual(action.region.data, 2)
        self.assertEqual(self.handler.hover_region_id, "row")

        self.handler.handle_mouse(_motion(40, 40))
        self.assertIsNone(self.handler.hover_region)

    def test_clear_keeps_hover_for_next_frame(self) -> None:
        self.handler.handle_mouse(_motion(4, 2))
        self.handler.clear()

        self.assertEqual(self.handler.hover_region_id, "row")
        self.assertEqual(len(self.hit_map), 0)

    def test_wheel_produces_signed_vertical_delta(self) -> None:
        up = self.handler.handle_mouse(_press(4, 4, MouseButton.WHEEL_UP))
        down = self.handler.handle_mouse(_press(4, 4, MouseButton.WHEEL_DOWN))

        self.assertEqual((up.type, up.delta), (ActionType.SCROLL_UP, -3))
        self.assertEqual((down.type, down.delta), (ActionType.SCROLL_DOWN, 3))
        self.assertEqual(up.region_id, "list")

    def test_wheel_scrolls_without_matching_region(self) -> None:
        action = self.handler.handle_mouse(_press(50, 50, MouseButton.WHEEL_DOWN))

        self.assertIs(action.type, ActionType.SCROLL_DOWN)
        self.assertIsNone(action.region)
        self.assertEqual((action.x, action.y), (50, 50))

    def test_shift_wheel_scrolls_horizontally(self) -> None:
        left = self.handler.handle_mouse(_press(4, 4, MouseButton.WHEEL_UP, shift=True))
        right = self.handler.handle_mouse(_press(4, 4, MouseButton.WHEEL_DOWN, shift=True))

        self.assertEqual((left.type, left.delta), (ActionType.SCROLL_LEFT, -10))
        self.assertEqual((right.type, right.delta), (ActionType.SCROLL_RIGHT, 10))

    def test_native_horizontal_wheel_follows_natural_direction(self) -> None:
        wheel_left = self.handler.handle_mouse(_press(4, 4, MouseButton.WHEEL_LEFT))
        wheel_right = self.handler.handle_mouse(_press(4, 4, MouseButton.WHEEL_RIGHT))

        self.assertIs(wheel_left.type, ActionType.SCROLL_RIGHT)
        self.assertIs(wheel_right.type, ActionType.SCROLL_LEFT)

    def test_scroll_delta_setting_is_used(self) -> None:
        handler = MouseHandler(MouseSettings(scroll_delta=5), monotonic=self.clock)

        action = handler.handle_mouse(_press(0, 0, MouseButton.WHEEL_DOWN))

        self.assertEqual(action.delta, 5)

    def test_wheel_does_not_disturb_pending_double_click(self) -> None:
        self.handler.handle_mouse(_press(4, 2))
        self.handler.handle_mouse(_press(4, 2, MouseButton.WHEEL_DOWN))

        self.assertIs(self.handler.handle_mouse(_press(4, 2)).type, ActionType.DOUBLE_CLICK)


class IndependentHandlerTests(unittest.TestCase):
    def test_handlers_do_not_share_gesture_state(self) -> None:
        clock = _Clock()
        first = MouseHandler(monotonic=clock)
        second = MouseHandler(monotonic=clock)
        for handler in (first, second):
            handler.hit_map.add_rect("row", 0, 0, 10, 1, 0)

        first.handle_mouse(_press(1, 0))
        first.start_drag(1, 0, "divider", 5)

        self.assertIs(second.handle_mouse(_press(1, 0)).type, ActionType.CLICK)
        self.assertFalse(second.is_dragging)
        self.assertIs(second.handle_mouse(_motion(2, 0)).type, ActionType.HOVER)


if __name__ == "__main__":
    unittest.main()
