"""Tests for mataha.ui.colors – palette and color blending."""

from __future__ import annotations

import pytest

from mataha.ui.colors import GameColors, blend_hex


# ===========================================================================
# GameColors – constants
# ===========================================================================

class TestGameColors:
    @pytest.mark.parametrize("name", ["PLAYER", "EXIT", "WALL", "STAR", "BOARD_BG"])
    def test_board_colors_are_hex(self, name):
        value = getattr(GameColors, name)
        assert value.startswith("#")
        assert len(value) == 7

    def test_confetti_palette(self):
        assert len(GameColors.CONFETTI) == 16
        assert all(c.startswith("#") and len(c) == 7 for c in GameColors.CONFETTI)


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        assert result == "#7F7F7F"

    def test_clamped(self):
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"

    def test_board_tint_is_light(self):
        tint = blend_hex(GameColors.BOARD_BG, GameColors.WALL, 0.04)
        assert int(tint[1:3], 16) > 240

    @pytest.mark.parametrize("a, b", [("FF0000", "#0000FF"), ("#FFF", "#000000"), ("#GGHHII", "#000000")])
    def test_invalid_returns_a(self, a, b):
        assert blend_hex(a, b, 0.5) == a
