"""Ignore lists, disk event reduction and tray icon state for workspace file synchronisation."""

__version__ = "0.1.0"