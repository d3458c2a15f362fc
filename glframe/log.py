"""Log levels and the textual forms of values written to the log."""

from __future__ import annotations

from enum import Enum
from typing import Any

from glframe.base import Point, Region, ScreenInfo


class Level(Enum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    NONE = 5


_LEVEL_NAMES = {
    Level.TRACE: "TRACE",
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARN: "WARN",
    Level.ERROR: "ERROR",
    Level.NONE: "NONE",
}


def level_to_string(level: Level) -> str:
    return _LEVEL_NAMES.get(level, "UNKNOWN")


def _number(value: float) -> str:
    return f"{value:f}"


def format_value(value: Any) -> str:
    """Format a string, byte string or number as it appears in the log."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _number(value)
    raise TypeError(f"cannot log value of type {type(value).__name__}")


def format_point(point: Point, window: ScreenInfo) -> str:
    return f"[{_number(point.x_on(window))},{_number(point.y_on(window))}]"


def format_region(region: Region, window: ScreenInfo) -> str:
    return (
        f"[{_number(region.left(window))},{_number(region.top(window))}|"
        f"{_number(region.right(window))},{_number(region.bottom(window))}]"
    )


def format_screen_info(info: ScreenInfo) -> str:
    return (
        f"[WindowWidth:{info.width},WindowHeight:{info.height},"
        f"AspectRatio:{_number(info.aspect_ratio)},DPI:{_number(info.dpi)},"
        f"PixelRatio:{_number(info.pixel_ratio)}]"
    )