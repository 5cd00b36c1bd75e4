"""Local disk events, remote content events and their display."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


def _as_path(value: str | Path) -> Path:
    return value if isinstance(value, Path) else Path(value)


@dataclass(frozen=True)
class Deleted:
    """A file or folder disappeared from disk."""

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", _as_path(self.path))


@dataclass(frozen=True)
class Created:
    """A file or folder appeared on disk."""

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", _as_path(self.path))


@dataclass(frozen=True)
class Modified:
    """A file's bytes changed on disk."""

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", _as_path(self.path))


@dataclass(frozen=True)
class Renamed:
    """A file or folder moved from one path to another on disk."""

    before: Path
    after: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "before", _as_path(self.before))
        object.__setattr__(self, "after", _as_path(self.after))


DiskEvent = Union[Deleted, Created, Modified, Renamed]


@dataclass(frozen=True)
class DiskEventWrap:
    """A disk event together with the path the index knows the content by."""

    path: Path
    event: DiskEvent

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", _as_path(self.path))

    @classmethod
    def from_event(cls, event: DiskEvent) -> DiskEventWrap:
        """Wrap an event, storing the path it starts from."""
        if isinstance(event, Renamed):
            return cls(event.before, event)
        return cls(event.path, event)


class RemoteEventKind(enum.Enum):
    DELETED = "deleted"
    CREATED = "created"
    UPDATED = "updated"
    RENAMED = "renamed"


@dataclass(frozen=True)
class RemoteEvent:
    """A change on a remote content."""

    kind: RemoteEventKind
    content_id: int


Event = Union[RemoteEvent, DiskEventWrap]


@dataclass(frozen=True)
class ContentPath:
    """Path of a content made from the file names of it and its ancestors."""

    parts: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(self.parts))

    def to_path(self) -> Path:
        return Path(*self.parts)

    def __fspath__(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return str(self.to_path()) if self.parts else ""


_REMOTE_PREFIXES = {
    RemoteEventKind.DELETED: "☁❌",
    RemoteEventKind.CREATED: "☁🆕",
    RemoteEventKind.UPDATED: "☁⬇",
    RemoteEventKind.RENAMED: "☁⬇",
}


def describe_remote_event(event: RemoteEvent, path: str | Path | None) -> str:
    """Short line for a remote event; an unknown path shows as ``?``."""
    shown = "?" if path is None else str(path)
    return f"{_REMOTE_PREFIXES[event.kind]} {shown}"


def describe_local_event(wrap: DiskEventWrap) -> str:
    """Short line for a local disk event."""
    event = wrap.event
    if isinstance(event, Renamed):
        return f"🖴 {event.before} ➡ {event.after}"
    if isinstance(event, Created):
        return f"🖴🆕 {event.path}"
    # Deletions and modifications share the same marker.
    return f"🖴❌ {event.path}"