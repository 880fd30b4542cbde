"""Tests for mataha.ui.models – HudState header texts."""

from __future__ import annotations

import random
from dataclasses import replace

import pytest

from mataha.core.session import GameState, LevelSession, Snapshot
from mataha.ui.models import MESSAGE_ALL_STARS, MESSAGE_FIND_EXIT, MESSAGE_WON, HudState


@pytest.fixture()
def snapshot() -> Snapshot:
    session = LevelSession(rng=random.Random(4))
    session.start_level(3)
    return session.snapshot()


class TestHudState:
    def test_level_text(self, snapshot: Snapshot):
        assert HudState.from_snapshot(snapshot).level_text == "المستوى: 3"

    def test_star_counter(self, snapshot: Snapshot):
        hud = HudState.from_snapshot(replace(snapshot, collected=2))
        assert hud.star_text == "⭐ 2/3"

    def test_playing_message(self, snapshot: Snapshot):
        assert HudState.from_snapshot(snapshot).message == MESSAGE_FIND_EXIT

    def test_all_stars_message(self, snapshot: Snapshot):
        hud = HudState.from_snapshot(replace(snapshot, collected=3))
        assert hud.message == MESSAGE_ALL_STARS

    def test_won_message(self, snapshot: Snapshot):
        hud = HudState.from_snapshot(replace(snapshot, state=GameState.CELEBRATING, collected=3))
        assert hud.message == MESSAGE_WON

    def test_no_star_levels_never_show_well_done(self, snapshot: Snapshot):
        hud = HudState.from_snapshot(replace(snapshot, total_stars=0))
        assert hud.message == MESSAGE_FIND_EXIT

    def test_equality(self, snapshot: Snapshot):
        assert HudState.from_snapshot(snapshot) == HudState.from_snapshot(snapshot)

    def test_frozen(self, snapshot: Snapshot):
        hud = HudState.from_snapshot(snapshot)
        with pytest.raises(AttributeError):
            hud.message = "x"  # type: ignore[misc]
