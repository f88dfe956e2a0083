from __future__ import annotations

import unittest

from lazydash.mouse import Rect, centered_rect, clamp, to_local


class RectTests(unittest.TestCase):
    def test_contains_is_half_open(self) -> None:
        rect = Rect(2, 3, 4, 2)

        self.assertTrue(rect.contains(2, 3))
        self.assertTrue(rect.contains(5, 4))
        self.assertFalse(rect.contains(6, 3))
        self.assertFalse(rect.contains(2, 5))

    def test_of_clamps_negative_dimensions(self) -> None:
        rect = Rect.of(1, 1, -4, 3)

        self.assertEqual(rect, Rect(1, 1, 0, 3))
        self.assertTrue(rect.is_empty())
        self.assertFalse(rect.contains(1, 1))

    def test_intersects_ignores_touching_edges(self) -> None:
        left = Rect(0, 0, 5, 5)

        self.assertTrue(left.intersects(Rect(4, 4, 2, 2)))
        self.assertFalse(left.intersects(Rect(5, 0, 2, 2)))
        self.assertFalse(left.intersects(Rect(1, 1, 0, 0)))

    def test_translate_and_to_local(self) -> None:
        rect = Rect(0, 0, 3, 3).translate(10, 2)

        self.assertEqual(rect, Rect(10, 2, 3, 3))
        self.assertEqual(to_local(rect, 11, 4), (1, 2))
        self.assertIsNone(to_local(rect, 13, 2))


class HelperTests(unittest.TestCase):
    def test_clamp_prefers_lower_bound_when_bounds_cross(self) -> None:
        self.assertEqual(clamp(5, 0, 3), 3)
        self.assertEqual(clamp(-2, 0, 3), 0)
        self.assertEqual(clamp(1, 4, 2), 4)

    def test_centered_rect_shrinks_to_outer_grid(self) -> None:
        self.assertEqual(centered_rect(80, 24, 20, 6), Rect(30, 9, 20, 6))
        self.assertEqual(centered_rect(10, 4, 20, 6), Rect(0, 0, 10, 4))


if __name__ == "__main__":
    unittest.main()
