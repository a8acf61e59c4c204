"""Tests for typist.core.window – the display window around the cursor."""

from __future__ import annotations

import pytest

from typist.core.window import Window, window

STORY = "abcdefghijklmnopqrstuvwxyz" * 4


class TestWindow:
    def test_len(self):
        assert len(Window("ab", "c", "de")) == 5

    def test_middle_of_text_fills_width(self):
        win = window(STORY, 50, 30)
        assert len(win.prefix) == 10
        assert win.current == STORY[50]
        assert len(win.suffix) == 19
        assert len(win) == 30

    def test_parts_are_contiguous(self):
        win = window(STORY, 40, 21)
        assert win.prefix + win.current + win.suffix == STORY[40 - 7:40 - 7 + 21]

    def test_start_of_text(self):
        win = window(STORY, 0, 30)
        assert win.prefix == ""
        assert win.current == "a"
        assert len(win.suffix) == 29

    def test_near_start_suffix_borrows(self):
        win = window(STORY, 4, 30)
        assert win.prefix == "abcd"
        assert len(win.suffix) == 25
        assert len(win) == 30

    def test_end_of_text(self):
        win = window("hello", 5, 30)
        assert win.prefix == "hello"
        assert win.current == ""
        assert win.suffix == ""

    def test_near_end_shorter(self):
        win = window("hello world", 8, 30)
        assert win.prefix == "hello wo"
        assert win.current == "r"
        assert win.suffix == "ld"

    def test_zero_width(self):
        assert len(window(STORY, 10, 0)) == 0

    def test_negative_width(self):
        assert len(window(STORY, 10, -5)) == 0

    def test_width_one(self):
        win = window(STORY, 10, 1)
        assert (win.prefix, win.current, win.suffix) == ("", "k", "")

    def test_cursor_clamped(self):
        win = window("abc", 10, 9)
        assert win.prefix == "abc"
        assert win.current == ""

    @pytest.mark.parametrize("width", [0, 1, 2, 3, 7, 10, 31, 80])
    def test_bounds_for_all_cursors(self, width: int):
        for k in range(len(STORY) + 1):
            win = window(STORY, k, width)
            assert len(win) <= width
            assert len(win.prefix) <= width // 3
            if k < width // 3:
                assert len(win.prefix) == k
            if width // 3 <= k and k + width <= len(STORY):
                assert len(win) == width
