"""Tests for ANSI-aware width, clipping and visual-column slicing."""

from __future__ import annotations

import unittest

from lazydash.ansi import clip_ansi_line, display_width, expand_tabs, fit_ansi_line, strip_ansi, visual_substring


class AnsiWidthTests(unittest.TestCase):
    def test_display_width_ignores_escapes_and_counts_wide_chars(self) -> None:
        self.assertEqual(display_width("\x1b[31mred\x1b[0m"), 3)
        self.assertEqual(display_width("界a"), 3)
        self.assertEqual(display_width("\tx"), 9)

    def test_expand_tabs_respects_tab_stops(self) -> None:
        self.assertEqual(expand_tabs("ab\tc"), "ab      c")
        self.assertEqual(expand_tabs("ab\tc", tab_width=4), "ab  c")

    def test_clip_keeps_escapes_and_stops_before_split_wide_char(self) -> None:
        self.assertEqual(clip_ansi_line("\x1b[1mabcdef", 3), "\x1b[1mabc")
        self.assertEqual(clip_ansi_line("a界", 2), "a")

    def test_fit_pads_to_exact_width(self) -> None:
        self.assertEqual(fit_ansi_line("ab", 4), "ab  ")
        self.assertEqual(strip_ansi(fit_ansi_line("\x1b[7mabcdef\x1b[0m", 4)), "abcd")
        self.assertEqual(fit_ansi_line("abc", 0), "")

    def test_visual_substring_uses_display_columns(self) -> None:
        self.assertEqual(visual_substring("hello world", 6), "world")
        self.assertEqual(visual_substring("hello world", 0, 5), "hello")
        self.assertEqual(visual_substring("界界ab", 2, 5), "界a")


if __name__ == "__main__":
    unittest.main()
