"""Keyboard bindings and held-key bookkeeping."""

from __future__ import annotations

from typing import Dict, Optional, Set

from mataha.core.maze import DOWN, LEFT, RIGHT, UP, Direction

KEY_BINDINGS: Dict[str, Direction] = {
    "ArrowUp": UP,
    "w": UP,
    "ArrowDown": DOWN,
    "s": DOWN,
    "ArrowLeft": LEFT,
    "a": LEFT,
    "ArrowRight": RIGHT,
    "d": RIGHT,
}


def direction_for_key(key: str) -> Optional[Direction]:
    """Direction bound to ``key``; single letters match in either case."""
    if len(key) == 1:
        key = key.lower()
    return KEY_BINDINGS.get(key)


class KeyState:
    """Tracks which bound keys are down.

    Two keys can map to the same direction (``w`` and ``ArrowUp``); the
    direction counts as released only when every key for it is up.
    """

    def __init__(self) -> None:
        self._down: Set[str] = set()

    def press(self, key: str) -> Optional[Direction]:
        direction = direction_for_key(key)
        if direction is not None:
            self._down.add(self._normalize(key))
        return direction

    def release(self, key: str) -> tuple[Optional[Direction], bool]:
        """Return the key's direction and whether that direction is now fully released."""
        direction = direction_for_key(key)
        if direction is None:
            return None, False
        self._down.discard(self._normalize(key))
        still_held = any(direction_for_key(k) == direction for k in self._down)
        return direction, not still_held

    def is_down(self, direction: Direction) -> bool:
        return any(direction_for_key(k) == direction for k in self._down)

    def clear(self) -> None:
        self._down.clear()

    @staticmethod
    def _normalize(key: str) -> str:
        return key.lower() if len(key) == 1 else key
