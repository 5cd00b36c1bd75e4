"""Tray icons and the animation step between them."""

from __future__ import annotations

import enum
from pathlib import Path

_FILE_NAMES = {
    "IDLE": "trsync_idle.png",
    "ASK": "trsync_ask.png",
    "ERROR": "trsync_error.png",
    "WORKING1": "trsync_idle.png",
    "WORKING2": "trsync_working1_v2.png",
    "WORKING3": "trsync_working2_v2.png",
    "WORKING4": "trsync_working3_v2.png",
    "WORKING5": "trsync_working4_v2.png",
    "WORKING6": "trsync_working3_v2.png",
    "WORKING7": "trsync_working2_v2.png",
    "WORKING8": "trsync_working1_v2.png",
}


class Icon(enum.Enum):
    IDLE = enum.auto()
    WORKING1 = enum.auto()
    WORKING2 = enum.auto()
    WORKING3 = enum.auto()
    WORKING4 = enum.auto()
    WORKING5 = enum.auto()
    WORKING6 = enum.auto()
    WORKING7 = enum.auto()
    WORKING8 = enum.auto()
    ASK = enum.auto()
    ERROR = enum.auto()

    @property
    def file_name(self) -> str:
        return _FILE_NAMES[self.name]

    def resource_name(self) -> str:
        """Name of the icon as an embedded resource."""
        return self.file_name.replace(".png", "")

    def path(self, icons_path: str | Path) -> Path:
        """Path of the icon image inside an icons folder."""
        return Path(icons_path) / self.file_name


_WORKING_CYCLE = [
    Icon.WORKING1,
    Icon.WORKING2,
    Icon.WORKING3,
    Icon.WORKING4,
    Icon.WORKING5,
    Icon.WORKING6,
    Icon.WORKING7,
    Icon.WORKING8,
]


def next_icon(current: Icon, has_error: bool, is_waiting: bool, is_working: bool) -> Icon:
    """Icon to show on the next tick, given what the synchronization is doing.

    Errors blink before pending changes, which blink before the working animation.
    """
    if has_error:
        return Icon.ERROR if current is Icon.IDLE else Icon.IDLE
    if is_waiting:
        return Icon.ASK if current is Icon.IDLE else Icon.IDLE
    if is_working:
        if current in _WORKING_CYCLE:
            position = _WORKING_CYCLE.index(current)
            return _WORKING_CYCLE[(position + 1) % len(_WORKING_CYCLE)]
        return Icon.WORKING1
    return Icon.IDLE