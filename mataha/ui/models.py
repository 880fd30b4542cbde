"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass

from mataha.core.session import GameState, Snapshot

LEVEL_LABEL = "المستوى: {level}"
MESSAGE_FIND_EXIT = "اعثر على المخرج!"
MESSAGE_ALL_STARS = "أحسنت!"
MESSAGE_WON = "لقد فزت! 🎉"
STAR_COUNTER = "⭐ {collected}/{total}"


@dataclass(frozen=True)
class HudState:
    """Header texts for one frame: level, status message and star counter."""

    level_text: str
    message: str
    star_text: str

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "HudState":
        if snapshot.state is GameState.CELEBRATING:
            message = MESSAGE_WON
        elif snapshot.total_stars > 0 and snapshot.collected >= snapshot.total_stars:
            message = MESSAGE_ALL_STARS
        else:
            message = MESSAGE_FIND_EXIT
        return cls(
            level_text=LEVEL_LABEL.format(level=snapshot.level),
            message=message,
            star_text=STAR_COUNTER.format(collected=snapshot.collected, total=snapshot.total_stars),
        )
