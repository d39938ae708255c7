"""JSON config file loading utilities."""

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from spookyeyes.constants import (
    ALERT_COLOR, ALERT_WINDOW, CALM_COLOR, CONFIG_DIR, EYE_CONFIG_NAME, EYE_NAMES,
    EYE_RADIUS, EYE_SPEED, LEFT_EYE_OFFSET, PUPIL_RADIUS, RIGHT_EYE_OFFSET,
)
from spookyeyes.core.geometry import EyeOffset

logger = logging.getLogger(__name__)


def load_json(path: Path) -> Any:
    """Load and return parsed JSON from a file."""
    with open(path) as f:
        return json.load(f)


def load_config(name: str) -> Any:
    """Load a config file from assets/config/."""
    return load_json(CONFIG_DIR / name)


@dataclass
class EyeConfig:
    """Static eye layout and appearance, fixed for the life of an engine."""
    offsets: dict[str, EyeOffset] = field(default_factory=lambda: {
        "left": EyeOffset(*LEFT_EYE_OFFSET),
        "right": EyeOffset(*RIGHT_EYE_OFFSET),
    })
    pupil_radius: float = PUPIL_RADIUS
    eye_radius: float = EYE_RADIUS
    calm_color: str = CALM_COLOR
    alert_color: str = ALERT_COLOR
    alert_window: float = ALERT_WINDOW
    speed: float = EYE_SPEED

    @classmethod
    def from_dict(cls, data: dict) -> "EyeConfig":
        """Build a config from a parsed ``eyes.json`` dict.

        Unknown keys are ignored; missing keys keep their defaults.
        Offsets are given as ``{"left": [x, y], "right": [x, y]}`` and
        must name exactly those two eyes.

        Raises
        ------
        ValueError
            If ``offsets`` names any other set of eyes.
        """
        cfg = cls()
        scalar_names = {f.name for f in fields(cls)} - {"offsets"}
        for key, value in data.items():
            if key == "offsets":
                if set(value) != set(EYE_NAMES):
                    raise ValueError(
                        f"offsets must name exactly {sorted(EYE_NAMES)}, got {sorted(value)}")
                cfg.offsets = {
                    name: EyeOffset(float(xy[0]), float(xy[1]))
                    for name, xy in value.items()
                }
            elif key in scalar_names:
                current = getattr(cfg, key)
                setattr(cfg, key, type(current)(value))
            else:
                logger.warning("Ignoring unknown eye config key: %s", key)
        return cfg


def load_eye_config(path: Optional[Path] = None) -> EyeConfig:
    """Load the eye config, falling back to defaults if the file is missing."""
    try:
        data = load_json(path) if path is not None else load_config(EYE_CONFIG_NAME)
    except FileNotFoundError:
        logger.info("Eye config not found, using defaults")
        return EyeConfig()
    return EyeConfig.from_dict(data)
