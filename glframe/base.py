"""Screen geometry primitives: screen info, colours, regions and points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple


@dataclass
class ScreenInfo:
    """Size and density information about a window or a monitor."""

    width: int = 0
    height: int = 0
    aspect_ratio: float = 0.0
    dpi: float = 0.0
    pixel_ratio: float = 1.0
    window: Any = None


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            channel = getattr(self, name)
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"channel {name} must be an integer in 0..255, got {channel!r}")

    @classmethod
    def from_int(cls, value: int) -> "Color":
        """Build a colour from a packed 0xRRGGBBAA integer."""
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    @classmethod
    def from_vec(cls, components: Sequence[float]) -> "Color":
        """Build a colour from three or four components in the range 0..1."""
        values = list(components)
        if len(values) not in (3, 4):
            raise ValueError(f"expected 3 or 4 components, got {len(values)}")
        channels = [int(component * 255) for component in values]
        return cls(*channels)

    def to_vec4(self) -> Tuple[float, float, float, float]:
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

    def to_vec3(self) -> Tuple[float, float, float]:
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)

    def __int__(self) -> int:
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a


@dataclass
class Region:
    """A rectangle, either in screen fractions or in absolute pixels.

    A region created with a non-positive bottom edge is square: its height
    follows its width and the stored bottom edge is zero.
    """

    x: float = 0.0
    y: float = 0.0
    xend: float = 0.0
    yend: Optional[float] = None
    screen_ratio: bool = True
    square: bool = False

    def __post_init__(self) -> None:
        if self.yend is None:
            self.yend = 0.0
        elif self.yend <= 0:
            self.square = True
            self.yend = 0.0

    def _scale(self, value: float, extent: float) -> float:
        return value * extent if self.screen_ratio else value

    def left(self, window: ScreenInfo) -> float:
        return self._scale(self.x, window.width)

    def top(self, window: ScreenInfo) -> float:
        return self._scale(self.y, window.height)

    def right(self, window: ScreenInfo) -> float:
        return self._scale(self.xend, window.width)

    def bottom(self, window: ScreenInfo) -> float:
        """Bottom edge on screen; a square region extends down by its width."""
        if self.square:
            return self.top(window) + self.width(window)
        return self._scale(self.yend, window.height)

    def width(self, window: ScreenInfo) -> float:
        return self.right(window) - self.left(window)

    def origin_bottom(self) -> float:
        """Bottom edge in the region's own coordinates."""
        if self.square:
            return self.y + (self.xend - self.x)
        return self.yend

    def origin_width(self) -> float:
        return self.xend - self.x

    def origin_height(self) -> float:
        if self.square:
            return self.xend - self.x
        return self.yend - self.y

    def set_bottom(self, value: float) -> None:
        """Set the bottom edge; a positive value leaves square mode."""
        self.yend = value
        if value > 0:
            self.square = False

    def set_square(self, enable: bool) -> None:
        self.square = enable
        if enable:
            self.yend = 0.0


@dataclass
class Point:
    """A point, either in screen fractions or in absolute pixels."""

    x: float = 0.0
    y: float = 0.0
    screen_ratio: bool = True

    def x_on(self, window: ScreenInfo) -> float:
        return self.x * window.width if self.screen_ratio else self.x

    def y_on(self, window: ScreenInfo) -> float:
        return self.y * window.height if self.screen_ratio else self.y

    def to_ratio(self, window: ScreenInfo) -> Tuple[float, float]:
        """Return the stored coordinates, divided by the window size in ratio mode."""
        if not self.screen_ratio:
            return (self.x, self.y)
        return (self.x / window.width, self.y / window.height)