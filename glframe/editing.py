"""Edit modes and handles used when moving and resizing widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from glframe.base import Region


class EditMode(Enum):
    """What a drag in edit mode changes."""

    NONE = auto()
    MOVE = auto()
    RESIZE_TOP_LEFT = auto()
    RESIZE_TOP_RIGHT = auto()
    RESIZE_BOTTOM_LEFT = auto()
    RESIZE_BOTTOM_RIGHT = auto()
    RESIZE_LEFT = auto()
    RESIZE_RIGHT = auto()
    RESIZE_TOP = auto()
    RESIZE_BOTTOM = auto()


@dataclass
class EditHandle:
    """A grab area on a widget and the edit mode it starts."""

    region: Region = field(default_factory=Region)
    mode: EditMode = EditMode.NONE
    visible: bool = True

    @classmethod
    def hidden(cls) -> "EditHandle":
        """A handle that covers nothing and is not shown."""
        return cls(Region(), EditMode.NONE, False)