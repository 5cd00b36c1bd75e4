[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trsync"
version = "0.1.0"
description = "Local side of a workspace file synchronisation tool: ignore lists, disk events and their reduction, and tray icon state."
requires-python = ">=3.10"
dependencies = []
keywords = ["synchronisation", "mirroring", "workspace", "file-events", "tray"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Mirroring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trsync"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
