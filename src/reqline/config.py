"""Configuration management for reqline. Stores config at ~/.reqline/config.json."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from reqline.keys import KeyId

CONFIG_DIR_NAME = ".reqline"
CONFIG_FILE_NAME = "config.json"
LOG_FILE_NAME = "reqline.log"

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass
class Config:
    """Application configuration."""

    keybindings: dict[str, KeyId | list[KeyId]] = field(default_factory=dict)
    log_level: str = "info"
    log_file: str | None = None
    poll_interval: float = 0.1
    kitty_keyboard: bool = True


def get_config_dir() -> Path:
    return Path(os.environ.get("REQLINE_CONFIG_DIR", Path.home() / CONFIG_DIR_NAME))


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def default_log_path() -> Path:
    return get_config_dir() / LOG_FILE_NAME


def config_from_dict(data: dict[str, Any]) -> Config:
    config = Config()
    keybindings = data.get("keybindings")
    if isinstance(keybindings, dict):
        config.keybindings = dict(keybindings)
    level = data.get("logLevel")
    if isinstance(level, str) and level.lower() in LOG_LEVELS:
        config.log_level = level.lower()
    log_file = data.get("logFile")
    if isinstance(log_file, str) and log_file:
        config.log_file = log_file
    poll = data.get("pollInterval")
    if isinstance(poll, (int, float)) and not isinstance(poll, bool) and poll > 0:
        config.poll_interval = float(poll)
    kitty = data.get("kittyKeyboard")
    if isinstance(kitty, bool):
        config.kitty_keyboard = kitty
    return config


def config_to_dict(config: Config) -> dict[str, Any]:
    data: dict[str, Any] = {
        "keybindings": config.keybindings,
        "logLevel": config.log_level,
        "pollInterval": config.poll_interval,
        "kittyKeyboard": config.kitty_keyboard,
    }
    if config.log_file:
        data["logFile"] = config.log_file
    return data


def load_config(path: str | Path | None = None) -> Config:
    """Read the config file, falling back to defaults when it is missing or bad."""
    config_path = Path(path) if path else get_config_path()
    if not config_path.exists():
        return Config()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("top-level value must be an object")
        return config_from_dict(data)
    except (OSError, ValueError) as e:
        print(f"Error reading config {config_path}: {e}", file=sys.stderr)
        return Config()
