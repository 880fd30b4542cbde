"""Interfaces for the collaborators that sit around the game core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mataha.core.session import Snapshot


class AudioFeedback(Protocol):
    def on_move(self) -> None: ...

    def on_star(self) -> None: ...

    def on_win(self) -> None: ...


class Renderer(Protocol):
    def draw(self, snapshot: "Snapshot") -> None: ...


class SilentFeedback:
    """AudioFeedback that plays nothing."""

    def on_move(self) -> None:
        pass

    def on_star(self) -> None:
        pass

    def on_win(self) -> None:
        pass
