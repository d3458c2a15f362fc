"""Named configuration items, boolean switches and their default values."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, MutableMapping, Tuple

from glframe.base import Region
from glframe.lang import Language, language_from_code

WINDOW_WIDTH = "window_width"
WINDOW_HEIGHT = "window_height"
WINDOW_X = "window_x"
WINDOW_Y = "window_y"
VERTICAL_SYNC = "vertical_sync"
WINDOW_TITLE = "window_title"

DEBUG = "debug"
SHOW_FPS = "show_fps"
VOLUME = "volume"
LANG = "lang"
INWINDOW = "inwindow"

UI_REGION_EXIT = "ui_region_exit"
UI_REGION_EXIT_EDIT = "ui_region_exit_edit"

_TRUE_WORDS = {"1", "true", "yes", "on"}


class BoolConfig(Enum):
    """Boolean switches kept in sync with the configuration."""

    UNKNOWN = -1
    INWINDOW = 0
    DEBUG = 1
    SHOW_FPS = 2
    VERTICAL_SYNC = 3


_BY_NAME = {
    INWINDOW: BoolConfig.INWINDOW,
    DEBUG: BoolConfig.DEBUG,
    SHOW_FPS: BoolConfig.SHOW_FPS,
    VERTICAL_SYNC: BoolConfig.VERTICAL_SYNC,
}

# Switches that are loaded from and stored back to the configuration.
_SYNCED = (
    (BoolConfig.INWINDOW, INWINDOW),
    (BoolConfig.DEBUG, DEBUG),
    (BoolConfig.SHOW_FPS, SHOW_FPS),
)


def bool_config_from_name(name: str) -> BoolConfig:
    """Map a configuration item name to its switch, UNKNOWN if it has none."""
    return _BY_NAME.get(name, BoolConfig.UNKNOWN)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_WORDS
    if value is None:
        return False
    return bool(value)


def load_bools(config: MutableMapping[str, Any]) -> Dict[BoolConfig, bool]:
    """Read the synced switches from the configuration; missing ones are off."""
    return {switch: _as_bool(config.get(name)) for switch, name in _SYNCED}


def store_bools(bools: Dict[BoolConfig, bool], config: MutableMapping[str, Any]) -> None:
    """Write the synced switches back into the configuration; missing ones are off."""
    for switch, name in _SYNCED:
        config[name] = bool(bools.get(switch, False))


def apply_default_settings(
    config: MutableMapping[str, Any],
    screen_width: int,
    screen_height: int,
    default_language: str,
    title: str,
) -> Tuple[Language, Dict[BoolConfig, bool]]:
    """Fill in every item that is not yet configured.

    Returns the interface language chosen by the configuration and the
    switches loaded from it.
    """
    config.setdefault(LANG, default_language)
    language = language_from_code(str(config[LANG]))

    defaults = (
        (INWINDOW, 1),
        (WINDOW_WIDTH, screen_width // 2),
        (WINDOW_HEIGHT, screen_height // 2),
        (WINDOW_X, 100),
        (WINDOW_Y, 100),
        (VERTICAL_SYNC, 1),
        (WINDOW_TITLE, title),
        (DEBUG, 0),
        (SHOW_FPS, 0),
        (VOLUME, 100),
    )
    for name, value in defaults:
        config.setdefault(name, value)

    if UI_REGION_EXIT not in config:
        config[UI_REGION_EXIT] = Region(0.9, 0.03, 0.95, -1)
    if UI_REGION_EXIT_EDIT not in config:
        config[UI_REGION_EXIT_EDIT] = Region(0.85, 0.4, 0.95, 0.43)

    return language, load_bools(config)