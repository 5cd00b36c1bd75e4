# trsync

Building blocks for keeping a local folder in sync with a remote workspace.
The package has no command of its own. You use it as a library.

## What is inside

- `trsync.ignore`: reads and writes `.trsyncignore` in a workspace folder.
  The file lists content ids that are never synchronised, one `#<id>` per
  line. `parse_ignore` turns such text into a list of ids. It skips other
  lines and ids that do not fit in a signed 32-bit integer. `Ignore` holds the
  ids and has `from_folder`, `push`, `is_ignored`, `to_text` and `write`. A
  missing file reads as an empty list.
- `trsync.events`: the disk events `Created`, `Deleted`, `Modified` and
  `Renamed`. `DiskEventWrap` pairs an event with the path the content is
  indexed under, and `DiskEventWrap.from_event` stores the path the event
  starts from. The module also has the remote events (`RemoteEvent` with a
  `RemoteEventKind`), `ContentPath`, which builds a path from file names, and
  one-line descriptions from `describe_local_event` and
  `describe_remote_event`. A remote event with no known path shows as `?`.
- `trsync.reducer`: `LocalReceiverReducer` reads disk events from a queue and
  merges the ones that touch the same path. A file that is created and then
  deleted produces no event. A chain of renames ends up as its last rename.
  The producer closes the queue by putting `None` on it. After that, once the
  buffer is empty, `recv` raises `ChannelClosed`. If a `timeout` is given and
  nothing arrives in time, `recv` raises `TimeoutError`.
- `trsync.tray_config`: reads the tray settings from the user's config file.
  The file is `~/.trsync.conf`, or `~/AppData/Local/trsync.conf` on Windows.
  Use `load_config`, `config_file_path` and `config_from_ini`. Outside Windows
  the `[server]` section must set `icons_path`. Failures raise
  `ReadConfigError` or `HomeNotFoundError`, and both derive from `TrayError`.
- `trsync.icon`: the tray icons (`Icon`) with their resource names and image
  paths. `next_icon` gives the icon for the next animation tick. An error
  blinks first, then pending changes, then the working animation.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
import queue
from pathlib import Path

from trsync.events import Created, Renamed
from trsync.reducer import LocalReceiverReducer

events = queue.Queue()
events.put(Created(Path("a.txt")))
events.put(Renamed(Path("a.txt"), Path("b.txt")))

reducer = LocalReceiverReducer(events)
wrap = reducer.recv(timeout=1)
print(wrap.path, wrap.event)   # a.txt Created(path=PosixPath('b.txt')) on POSIX
print(reducer.is_empty())      # True
```

```python
from trsync.ignore import Ignore

ignore = Ignore.from_folder("/path/to/workspace")
ignore.push(42)
ignore.write("/path/to/workspace")
print(ignore.is_ignored(42))   # True
```

```python
from trsync.icon import Icon, next_icon

icon = next_icon(Icon.IDLE, has_error=False, is_waiting=False, is_working=True)
print(icon)                    # Icon.WORKING1
```

## What it does not do

This package has no synchronisation engine. It does not store a local index
of synchronised files and does not talk to a remote server. It does not watch
the file system itself: disk events must be put on the reducer's queue by
your own code. It does not draw a tray icon either, and only decides which
icon to show.