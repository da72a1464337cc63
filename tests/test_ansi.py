"""Regression tests for ANSI-aware clipping and padding helpers."""

import unittest

from gameshelf.render import ansi as ansi_mod


class ClipAndPadTests(unittest.TestCase):
    def test_clip_keeps_escape_codes_but_counts_only_visible_text(self) -> None:
        line = "\033[31mabcdef\033[0m"
        self.assertEqual(ansi_mod.display_width(line), 6)
        clipped = ansi_mod.clip_ansi_line(line, 3)
        self.assertEqual(ansi_mod.ANSI_ESCAPE_RE.sub("", clipped), "abc")
        self.assertTrue(clipped.startswith("\033[31m"))

    def test_wide_characters_count_double(self) -> None:
        self.assertEqual(ansi_mod.display_width("象棋"), 4)
        self.assertEqual(ansi_mod.ANSI_ESCAPE_RE.sub("", ansi_mod.clip_ansi_line("象棋", 3)), "象")

    def test_pad_extends_to_visible_width(self) -> None:
        padded = ansi_mod.pad_ansi_line("\033[1mGo\033[0m", 5)
        self.assertEqual(ansi_mod.display_width(padded), 5)
        self.assertEqual(ansi_mod.pad_ansi_line("toolong", 3), "too")


if __name__ == "__main__":
    unittest.main()
