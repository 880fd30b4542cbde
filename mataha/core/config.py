"""Gameplay settings loaded from YAML with MATAHA_* environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from mataha.core.motion import MotionPolicy

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


@dataclass(frozen=True)
class GameSettings:
    animation_speed: float = 0.25
    snap_epsilon: float = 0.01
    total_stars: int = 3
    advance_delay: float = 2.0
    motion_policy: MotionPolicy = MotionPolicy.HELD
    viewport_width_ratio: float = 0.95
    viewport_height_ratio: float = 0.70
    regenerate_on_resize: bool = False
    seed: Optional[int] = None

    def validate(self) -> "GameSettings":
        """Return self, or raise ValueError naming the first bad setting."""
        if not 0.0 < self.animation_speed <= 1.0:
            raise ValueError(f"animation_speed must be in (0, 1], got {self.animation_speed}")
        if not 0.0 < self.snap_epsilon < 1.0:
            raise ValueError(f"snap_epsilon must be in (0, 1), got {self.snap_epsilon}")
        if self.total_stars < 0:
            raise ValueError(f"total_stars must not be negative, got {self.total_stars}")
        if self.advance_delay < 0:
            raise ValueError(f"advance_delay must not be negative, got {self.advance_delay}")
        for key in ("viewport_width_ratio", "viewport_height_ratio"):
            value = getattr(self, key)
            if not 0.0 < value <= 1.0:
                raise ValueError(f"{key} must be in (0, 1], got {value}")
        return self


def _coerce(key: str, value: Any) -> Any:
    try:
        if key == "motion_policy":
            return MotionPolicy.parse(str(value))
        if key in ("total_stars", "seed"):
            if isinstance(value, bool):
                raise TypeError("boolean given")
            return None if value is None else int(value)
        if key == "regenerate_on_resize":
            if not isinstance(value, bool):
                raise TypeError("expected true or false")
            return value
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid value for {key!r}: {value!r} ({e})") from e


def _read_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a mapping of settings")
    return raw


def load_settings(path: Optional[Path] = None) -> GameSettings:
    """Load settings from ``path``, $MATAHA_SETTINGS or the bundled file."""
    if path is None:
        env_path = os.environ.get("MATAHA_SETTINGS")
        path = Path(env_path) if env_path else DEFAULT_SETTINGS_FILE

    known = {f.name for f in fields(GameSettings)}
    values: Dict[str, Any] = {}
    for key, value in _read_file(path).items():
        if key not in known:
            logger.warning("Ignoring unknown setting %r in %s", key, path)
            continue
        values[key] = _coerce(key, value)

    policy = os.environ.get("MATAHA_MOTION_POLICY")
    if policy:
        values["motion_policy"] = _coerce("motion_policy", policy)
    seed = os.environ.get("MATAHA_SEED")
    if seed:
        values["seed"] = _coerce("seed", seed)

    settings = replace(GameSettings(), **values).validate()
    logger.info("Loaded settings from %s (policy=%s)", path, settings.motion_policy.value)
    return settings
