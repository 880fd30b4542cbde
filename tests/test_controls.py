"""Tests for mataha.core.controls – key bindings."""

from __future__ import annotations

import pytest

from mataha.core.controls import KeyState, direction_for_key
from mataha.core.maze import DOWN, LEFT, RIGHT, UP


class TestDirectionForKey:
    @pytest.mark.parametrize(
        "key, direction",
        [
            ("ArrowUp", UP),
            ("w", UP),
            ("ArrowDown", DOWN),
            ("s", DOWN),
            ("ArrowLeft", LEFT),
            ("a", LEFT),
            ("ArrowRight", RIGHT),
            ("d", RIGHT),
        ],
    )
    def test_bindings(self, key, direction):
        assert direction_for_key(key) == direction

    def test_letters_ignore_case(self):
        assert direction_for_key("W") == UP
        assert direction_for_key("D") == RIGHT

    @pytest.mark.parametrize("key", ["x", "", "Enter", "arrowup"])
    def test_unbound(self, key):
        assert direction_for_key(key) is None


class TestKeyState:
    def test_press_returns_direction(self):
        keys = KeyState()
        assert keys.press("a") == LEFT
        assert keys.is_down(LEFT)

    def test_unbound_press_ignored(self):
        keys = KeyState()
        assert keys.press("q") is None
        assert keys.release("q") == (None, False)

    def test_release_single_key(self):
        keys = KeyState()
        keys.press("ArrowUp")
        assert keys.release("ArrowUp") == (UP, True)
        assert not keys.is_down(UP)

    def test_two_keys_same_direction(self):
        keys = KeyState()
        keys.press("w")
        keys.press("ArrowUp")
        assert keys.release("w") == (UP, False)
        assert keys.is_down(UP)
        assert keys.release("ArrowUp") == (UP, True)

    def test_shifted_letter_releases_lowercase(self):
        keys = KeyState()
        keys.press("s")
        assert keys.release("S") == (DOWN, True)

    def test_clear(self):
        keys = KeyState()
        keys.press("d")
        keys.clear()
        assert not keys.is_down(RIGHT)
