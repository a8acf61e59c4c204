from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from typist.core.layouts import LayoutKind, get_layout

CONFIG_DIR = Path.home() / ".typist"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.yaml"
DEFAULT_LOG_FILE = CONFIG_DIR / "typist.log"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """The settings file exists but is not a valid configuration."""


@dataclass(frozen=True)
class Settings:
    layout: LayoutKind = LayoutKind.QWERTY
    show_keyboard: bool = True
    log_level: str = "INFO"
    log_file: Path = DEFAULT_LOG_FILE

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from YAML. A missing file yields the defaults.

    Example::

        layout: dvorak
        show_keyboard: false
        log_level: DEBUG
        log_file: ~/typist.log
    """
    path = path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return Settings()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"{path.name}: invalid YAML ({e})") from e
    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ConfigError(f"{path.name}: expected a mapping of settings")

    defaults = Settings()

    layout = defaults.layout
    if "layout" in raw:
        try:
            layout = get_layout(str(raw["layout"]))
        except KeyError:
            raise ConfigError(f"{path.name}: unknown layout {raw['layout']!r}") from None

    show_keyboard = raw.get("show_keyboard", defaults.show_keyboard)
    if not isinstance(show_keyboard, bool):
        raise ConfigError(f"{path.name}: 'show_keyboard' must be true or false")

    log_level = str(raw.get("log_level", defaults.log_level)).upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"{path.name}: unknown log_level {raw['log_level']!r}")

    log_file = defaults.log_file
    if raw.get("log_file"):
        log_file = Path(str(raw["log_file"])).expanduser()

    return Settings(
        layout=layout,
        show_keyboard=show_keyboard,
        log_level=log_level,
        log_file=log_file,
    )
