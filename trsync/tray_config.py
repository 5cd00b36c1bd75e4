"""Settings of the tray application, read from the user's trsync config file."""

from __future__ import annotations

import configparser
import sys
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "trsync.conf"


class TrayError(Exception):
    """Base class of tray application errors."""


class HomeNotFoundError(TrayError):
    """The user's home folder could not be determined."""

    def __init__(self) -> None:
        super().__init__("Unable to determine use home path")


class ReadConfigError(TrayError):
    """The configuration file could not be read or lacks a required value."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Read config error : '{detail}'")
        self.detail = detail


@dataclass(frozen=True)
class TrayConfig:
    """Tray settings; the icons folder is only needed outside Windows."""

    icons_path: str | None = None


def _is_windows() -> bool:
    return sys.platform == "win32"


def config_file_path(home: str | Path, windows: bool | None = None) -> Path:
    """Location of the config file inside a home folder."""
    if windows is None:
        windows = _is_windows()
    home = Path(home)
    if windows:
        return home / "AppData" / "Local" / CONFIG_FILE_NAME
    return home / f".{CONFIG_FILE_NAME}"


def config_from_ini(
    parser: configparser.ConfigParser, windows: bool | None = None
) -> TrayConfig:
    """Build the tray settings from a parsed config file."""
    if windows is None:
        windows = _is_windows()
    if windows:
        return TrayConfig()
    icons_path = parser.get("server", "icons_path", fallback=None)
    if icons_path is None:
        raise ReadConfigError("Unable to find server icons_path config")
    return TrayConfig(icons_path=str(Path(icons_path)))


def load_config(
    home: str | Path | None = None, windows: bool | None = None
) -> TrayConfig:
    """Read the tray settings from the config file in the user's home folder."""
    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as error:
            raise HomeNotFoundError() from error
    path = config_file_path(home, windows)
    parser = configparser.ConfigParser(interpolation=None)
    try:
        with open(path, encoding="utf-8") as file:
            parser.read_file(file)
    except (OSError, UnicodeDecodeError, configparser.Error) as error:
        raise ReadConfigError(
            f"Unable to read or load '{str(path)!r}' config file : '{error}'"
        ) from error
    return config_from_ini(parser, windows)