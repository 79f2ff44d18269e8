"""Runtime configuration for the renderer and the demo viewer.

Defaults live on the RenderConfig dataclass; ``load_config`` merges an optional
JSON file and then keyword overrides (e.g. parsed CLI args) on top.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Optional

from pixel_buffer import hex_to_rgba

_LOG = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    canvas_width: int = 1000
    canvas_height: int = 700
    background: str = "#DCDCDC"
    circle_steps: int = 64
    ellipse_steps: int = 90
    log_level: str = "INFO"


def _field_names() -> set[str]:
    return {f.name for f in fields(RenderConfig)}


_INT_FIELDS = ("canvas_width", "canvas_height", "circle_steps", "ellipse_steps")
_STR_FIELDS = ("background", "log_level")


def _check_types(cfg: RenderConfig) -> None:
    for name in _INT_FIELDS:
        value = getattr(cfg, name)
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")
    for name in _STR_FIELDS:
        value = getattr(cfg, name)
        if not isinstance(value, str):
            raise ValueError(f"{name} must be a string, got {value!r}")


def load_config(path: Optional[str] = None, **overrides: Any) -> RenderConfig:
    """Build a RenderConfig from defaults, an optional JSON file and overrides.

    Rules:
    - The JSON file must contain an object whose keys are RenderConfig fields.
    - Overrides whose value is None are ignored, so argparse defaults can be
      passed straight through.
    """
    cfg = RenderConfig()
    known = _field_names()

    if path is not None:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"config file {path} must contain a JSON object")
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown config keys in {path}: {sorted(unknown)}")
        cfg = replace(cfg, **data)
        _LOG.debug("loaded config from %s", path)

    applied = {k: v for k, v in overrides.items() if v is not None}
    unknown = set(applied) - known
    if unknown:
        raise ValueError(f"unknown config overrides: {sorted(unknown)}")
    cfg = replace(cfg, **applied)

    _check_types(cfg)
    if cfg.canvas_width <= 0 or cfg.canvas_height <= 0:
        raise ValueError("canvas size must be positive")
    if cfg.circle_steps < 1 or cfg.ellipse_steps < 1:
        raise ValueError("arc steps must be >= 1")
    try:
        hex_to_rgba(cfg.background)
    except ValueError as exc:
        raise ValueError(f"invalid background color: {cfg.background!r}") from exc
    if not isinstance(logging.getLevelName(cfg.log_level.upper()), int):
        raise ValueError(f"unknown log level: {cfg.log_level!r}")
    return cfg
