"""Content ids excluded from synchronization, kept in ``.trsyncignore``."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

IGNORE_FILE_NAME = ".trsyncignore"

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_NUMBER = re.compile(r"[+-]?[0-9]+")


def parse_ignore(text: str) -> list[int]:
    """Content ids listed as ``#<id>`` lines; other lines are skipped."""
    content_ids = []
    for line in text.splitlines():
        if not line.startswith("#"):
            continue
        raw = line[1:]
        if _NUMBER.fullmatch(raw):
            value = int(raw)
            if _I32_MIN <= value <= _I32_MAX:
                content_ids.append(value)
    return content_ids


@dataclass
class Ignore:
    """Set of ignored content ids, in insertion order."""

    content_ids: list[int] = field(default_factory=list)

    @classmethod
    def from_folder(cls, folder_path: str | Path) -> Ignore:
        """Read the ignore file of a workspace folder; missing means empty."""
        path = Path(folder_path) / IGNORE_FILE_NAME
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            text = ""
        return cls(parse_ignore(text))

    def push(self, content_id: int) -> None:
        self.content_ids.append(content_id)

    def is_ignored(self, content_id: int) -> bool:
        return content_id in self.content_ids

    def to_text(self) -> str:
        return "\n".join(f"#{content_id}" for content_id in self.content_ids)

    def write(self, folder_path: str | Path) -> None:
        """Write the ids over the start of the ignore file, creating it if needed."""
        path = Path(folder_path) / IGNORE_FILE_NAME
        fd = os.open(path, os.O_WRONLY | os.O_CREAT, 0o666)
        with os.fdopen(fd, "wb") as file:
            file.write(self.to_text().encode("utf-8"))