"""Configuration loading and logging bootstrap."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Built-in settings; YAML files under <root>/config only override them.
DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {"level": "WARNING", "format": DEFAULT_LOG_FORMAT},
    "relations": {"strict": False},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(root: Path) -> dict[str, Any]:
    """Layer ``config/default.yaml`` then ``config/local.yaml`` over the built-in defaults."""
    config_dir = root / "config"
    default_cfg = load_yaml(config_dir / "default.yaml")
    local_cfg = load_yaml(config_dir / "local.yaml")
    return merge_dicts(merge_dicts(DEFAULT_CONFIG, default_cfg), local_cfg)


def configure_logging(config: dict[str, Any]) -> None:
    """Apply ``logging.level`` and ``logging.format`` to the root logger."""
    log_cfg = config.get("logging", {})
    level_name = str(log_cfg.get("level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {level_name}")
    logging.basicConfig(
        level=level,
        format=str(log_cfg.get("format", DEFAULT_LOG_FORMAT)),
        force=True,
    )
