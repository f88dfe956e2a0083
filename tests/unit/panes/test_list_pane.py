from __future__ import annotations

import unittest

from lazydash.ansi import REVERSE, strip_ansi
from lazydash.mouse import ActionType, EventKind, MouseButton, MouseEvent, MouseHandler
from lazydash.panes import ListPane


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class ListPaneTests(unittest.TestCase):
    def setUp(self) -> None:
        self.activated: list[int] = []
        self.pane = ListPane(
            [f"item {idx}" for idx in range(20)],
            on_activate=self.activated.append,
        )
        self.handler = MouseHandler(monotonic=_Clock())
        self.pane.register(self.handler.hit_map, 0, 1, 12, 5)

    def _press(self, x: int, y: int, button: MouseButton = MouseButton.LEFT):
        return self.handler.handle_mouse(MouseEvent(EventKind.PRESS, button, x, y))

    def test_rows_carry_absolute_index_over_pane_background(self) -> None:
        self.pane.offset = 4
        self.handler.clear()
        self.pane.register(self.handler.hit_map, 0, 1, 12, 5)

        self.assertEqual(self.handler.hit_map.test(3, 1).data, 4)
        self.assertEqual(self.handler.hit_map.test(3, 5).data, 8)
        self.assertEqual(self.handler.hit_map.regions()[0].id, "list-pane")

    def test_click_selects_and_double_click_activates(self) -> None:
        click = self._press(2, 3)
        self.assertTrue(self.pane.handle_action(click))
        self.assertEqual(self.pane.cursor, 2)

        double = self._press(2, 3)
        self.assertIs(double.type, ActionType.DOUBLE_CLICK)
        self.assertTrue(self.pane.handle_action(double))
        self.assertEqual(self.activated, [2])

    def test_click_on_pane_background_is_ignored(self) -> None:
        pane = ListPane(["only"])
        handler = MouseHandler()
        pane.register(handler.hit_map, 0, 0, 10, 4)

        action = handler.handle_mouse(MouseEvent(EventKind.PRESS, MouseButton.LEFT, 1, 3))

        self.assertEqual(action.region_id, "list-pane")
        self.assertFalse(pane.handle_action(action))

    def test_wheel_scrolls_and_clamps(self) -> None:
        self.assertTrue(self.pane.handle_action(self._press(1, 1, MouseButton.WHEEL_DOWN)))
        self.assertEqual(self.pane.offset, 3)

        for _ in range(10):
            self.pane.handle_action(self._press(1, 1, MouseButton.WHEEL_DOWN))
        self.assertEqual(self.pane.offset, 15)

        self.pane.handle_action(self._press(1, 1, MouseButton.WHEEL_UP))
        self.assertEqual(self.pane.offset, 12)

    def test_hover_tracks_row_and_clears_off_rows(self) -> None:
        hover = self.handler.handle_mouse(MouseEvent(EventKind.MOTION, MouseButton.NONE, 1, 2))
        self.assertTrue(self.pane.handle_action(hover))
        self.assertEqual(self.pane.hover_index, 1)

        away = self.handler.handle_mouse(MouseEvent(EventKind.MOTION, MouseButton.NONE, 40, 2))
        self.assertTrue(self.pane.handle_action(away))
        self.assertEqual(self.pane.hover_index, -1)

    def test_keyboard_cursor_keeps_viewport_in_sync(self) -> None:
        self.pane.move_cursor(7)

        self.assertEqual(self.pane.cursor, 7)
        self.assertEqual(self.pane.offset, 3)
        self.assertTrue(self.pane.move_cursor(-100))
        self.assertFalse(self.pane.move_cursor(-1))
        self.assertEqual(self.pane.cursor, 0)
        self.assertEqual(self.pane.offset, 0)

    def test_render_rows_highlight_cursor_and_pad(self) -> None:
        pane = ListPane(["a", "b"])
        handler = MouseHandler()
        pane.register(handler.hit_map, 0, 0, 4, 3)

        rows = pane.render_rows(4)

        self.assertEqual(len(rows), 3)
        self.assertTrue(rows[0].startswith(REVERSE))
        self.assertEqual([strip_ansi(row) for row in rows], [" a  ", " b  ", "    "])


if __name__ == "__main__":
    unittest.main()
