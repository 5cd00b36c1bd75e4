"""Merge bursts of disk events into the smallest equivalent sequence."""

from __future__ import annotations

import queue
from typing import Optional, Union

from trsync.events import Created, Deleted, DiskEvent, DiskEventWrap, Modified, Renamed

EventQueue = Union["queue.Queue[Optional[DiskEvent]]", "queue.SimpleQueue[Optional[DiskEvent]]"]


class ChannelClosed(Exception):
    """The event source was closed and no buffered event is left."""


class LocalReceiverReducer:
    """Read disk events from a queue and merge those touching the same path.

    The producer closes the channel by putting ``None`` on the queue.
    """

    def __init__(self, local_receiver: EventQueue) -> None:
        self._receiver = local_receiver
        self._events: list[DiskEvent] = []
        self._closed = False

    def _drain(self) -> None:
        while not self._closed:
            try:
                item = self._receiver.get_nowait()
            except queue.Empty:
                return
            if item is None:
                self._closed = True
            else:
                self._events.append(item)

    def recv(self, timeout: float | None = None) -> DiskEventWrap:
        """Next reduced event, waiting for new ones when none is buffered.

        Raises ``ChannelClosed`` once the channel is closed and drained, and
        ``TimeoutError`` when nothing arrives within ``timeout`` seconds.
        """
        while True:
            self._drain()
            event = self.next_event()
            if event is not None:
                return event
            if self._closed:
                raise ChannelClosed()
            try:
                item = self._receiver.get(timeout=timeout)
            except queue.Empty:
                raise TimeoutError("No disk event received in time") from None
            if item is None:
                self._closed = True
                raise ChannelClosed()
            self._events.append(item)

    def is_empty(self) -> bool:
        return not self._events

    def _pop_wrapped(self) -> DiskEventWrap | None:
        if not self._events:
            return None
        return DiskEventWrap.from_event(self._events.pop(0))

    def next_event(self) -> DiskEventWrap | None:
        """Reduce the buffered events and return the first resulting one."""
        disk_event = self._pop_wrapped()
        kept: list[DiskEvent] = []

        while disk_event is not None and self._events:
            while self._events:
                test = self._events.pop(0)
                current = disk_event.event
                stored = disk_event.path

                if isinstance(current, Created):
                    path_a = current.path
                    if isinstance(test, Deleted):
                        if test.path == path_a:
                            # A created then deleted file is dropped entirely.
                            disk_event = self._pop_wrapped()
                            break
                        kept.append(test)
                    elif isinstance(test, Created):
                        kept.append(test)
                    elif isinstance(test, Modified):
                        if test.path != path_a:
                            kept.append(test)
                    else:
                        if test.before == path_a:
                            disk_event = DiskEventWrap(stored, Created(test.after))
                        else:
                            kept.append(test)
                elif isinstance(current, Deleted):
                    kept.append(test)
                elif isinstance(current, Modified):
                    path_a = current.path
                    if isinstance(test, Deleted):
                        if test.path == path_a:
                            disk_event = DiskEventWrap(stored, Deleted(test.path))
                            break
                        kept.append(test)
                    elif isinstance(test, Created):
                        kept.append(test)
                    elif isinstance(test, Modified):
                        if test.path != path_a:
                            kept.append(test)
                    else:
                        if test.before == path_a:
                            disk_event = DiskEventWrap(stored, Modified(test.after))
                        else:
                            kept.append(test)
                else:
                    after_a = current.after
                    if isinstance(test, Deleted):
                        if test.path == after_a:
                            disk_event = DiskEventWrap(stored, Deleted(after_a))
                            break
                        kept.append(test)
                    elif isinstance(test, Created):
                        kept.append(test)
                    elif isinstance(test, Modified):
                        if test.path != after_a:
                            kept.append(test)
                    else:
                        if test.before == after_a:
                            disk_event = DiskEventWrap(
                                stored, Renamed(test.before, test.after)
                            )
                        else:
                            kept.append(test)

        self._events = kept
        return disk_event