"""User configuration for the colorkit command line."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

from .gradient import GradientInterpolation

logger = logging.getLogger(__name__)

CONFIG_FILE = Path.home() / ".config/colorkit/config.json"
CONFIG_ENV_VAR = "COLORKIT_CONFIG"


@dataclass
class ColorKitConfig:
    default_steps: int = 8
    interpolation: str = GradientInterpolation.PERCEPTUAL.value
    include_alpha: bool = False
    uppercase: bool = True

    @property
    def interpolation_mode(self) -> GradientInterpolation:
        return GradientInterpolation(self.interpolation)


def _config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env)
    return CONFIG_FILE


def load_config(path: str | Path | None = None) -> ColorKitConfig:
    """
    Load CLI defaults from a JSON file.

    Lookup order: path, $COLORKIT_CONFIG, ~/.config/colorkit/config.json.
    A missing file gives the defaults; a broken one gives the defaults
    and a warning. Unknown keys are ignored.
    """
    config_path = _config_path(path)
    if not config_path.exists():
        return ColorKitConfig()

    try:
        with open(config_path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("ignoring unreadable config %s: %s", config_path, e)
        return ColorKitConfig()

    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", config_path)
        return ColorKitConfig()

    known = {f.name for f in fields(ColorKitConfig)}
    config = ColorKitConfig(**{k: v for k, v in data.items() if k in known})

    valid_modes = {m.value for m in GradientInterpolation}
    if config.interpolation not in valid_modes:
        logger.warning("unknown interpolation %r in %s, using default", config.interpolation, config_path)
        config.interpolation = ColorKitConfig.interpolation

    if not isinstance(config.default_steps, int) or config.default_steps < 1:
        logger.warning("invalid default_steps %r in %s, using default", config.default_steps, config_path)
        config.default_steps = ColorKitConfig.default_steps

    return config
