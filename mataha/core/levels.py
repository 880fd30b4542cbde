from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

import yaml


@dataclass(frozen=True)
class LevelTier:
    """Levels up to ``max_level`` (inclusive) use ``maze_size``; None means every later level."""

    max_level: Optional[int]
    maze_size: int


DEFAULT_TIERS: tuple[LevelTier, ...] = (
    LevelTier(max_level=2, maze_size=10),
    LevelTier(max_level=5, maze_size=15),
    LevelTier(max_level=8, maze_size=20),
    LevelTier(max_level=None, maze_size=25),
)

DEFAULT_LEVELS_FILE = Path(__file__).resolve().parent.parent / "data" / "levels.yaml"


def _size_from_tiers(tiers: Sequence[LevelTier], level: int) -> int:
    if level < 1:
        raise ValueError(f"levels start at 1, got {level}")
    for tier in tiers:
        if tier.max_level is None or level <= tier.max_level:
            return tier.maze_size
    return tiers[-1].maze_size


def maze_size_for_level(level: int) -> int:
    """Maze side length for ``level`` using the built-in tier table."""
    return _size_from_tiers(DEFAULT_TIERS, level)


class TierTable:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or DEFAULT_LEVELS_FILE
        self._tiers = self._load_tiers()

    @classmethod
    def default(cls) -> "TierTable":
        """Table backed by DEFAULT_TIERS, without reading any file."""
        table = cls.__new__(cls)
        table._path = None
        table._tiers = list(DEFAULT_TIERS)
        return table

    def all(self) -> List[LevelTier]:
        return list(self._tiers)

    def maze_size_for(self, level: int) -> int:
        return _size_from_tiers(self._tiers, level)

    def _load_tiers(self) -> List[LevelTier]:
        if not self._path.exists():
            raise FileNotFoundError(f"Level tier file not found: {self._path}")

        name = self._path.name
        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{name}: expected YAML with a 'tiers' list")
        entries = raw.get("tiers")
        if not entries or not isinstance(entries, list):
            raise ValueError(f"{name}: missing or empty 'tiers'")

        tiers: List[LevelTier] = []
        previous_max = 0
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ValueError(f"{name}: tier {index} is not a mapping")
            size = entry.get("maze_size")
            if not isinstance(size, int) or size < 2:
                raise ValueError(f"{name}: tier {index} needs an integer 'maze_size' of at least 2")
            max_level = entry.get("max_level")
            is_last = index == len(entries) - 1
            if max_level is None:
                if not is_last:
                    raise ValueError(f"{name}: only the last tier may omit 'max_level'")
            elif not isinstance(max_level, int) or max_level <= previous_max:
                raise ValueError(f"{name}: tier {index} 'max_level' must increase")
            else:
                previous_max = max_level
            tiers.append(LevelTier(max_level=max_level, maze_size=size))

        if tiers[-1].max_level is not None:
            raise ValueError(f"{name}: the last tier must omit 'max_level' to cover every later level")
        return tiers
