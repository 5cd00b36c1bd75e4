import queue
from pathlib import Path

import pytest

from trsync.events import Created, Deleted, DiskEventWrap, Modified, Renamed
from trsync.reducer import ChannelClosed, LocalReceiverReducer


def W(path, event):
    return DiskEventWrap(Path(path), event)


CASES = [
    ([], []),
    ([Created("a.txt"), Deleted("a.txt")], []),
    (
        [Created("a.txt"), Renamed("a.txt", "b.txt")],
        [W("a.txt", Created("b.txt"))],
    ),
    (
        [Created("a.txt"), Renamed("a.txt", "b.txt"), Deleted("a.txt")],
        [],
    ),
    (
        [Created("a.txt"), Modified("a.txt")],
        [W("a.txt", Created("a.txt"))],
    ),
    (
        [Created("a.txt"), Renamed("a.txt", "b.txt"), Renamed("b.txt", "c.txt")],
        [W("a.txt", Created("c.txt"))],
    ),
    (
        [Modified("a.txt"), Deleted("a.txt")],
        [W("a.txt", Deleted("a.txt"))],
    ),
    (
        [Modified("a.txt"), Renamed("a.txt", "b.txt")],
        [W("a.txt", Modified("b.txt"))],
    ),
    (
        [Modified("a.txt"), Renamed("a.txt", "b.txt"), Renamed("b.txt", "c.txt")],
        [W("a.txt", Modified("c.txt"))],
    ),
    (
        [Modified("a.txt"), Renamed("a.txt", "b.txt"), Deleted("b.txt")],
        [W("a.txt", Deleted("b.txt"))],
    ),
    (
        [Renamed("a.txt", "b.txt"), Renamed("b.txt", "c.txt")],
        [W("a.txt", Renamed("b.txt", "c.txt"))],
    ),
    (
        [
            Renamed("a.txt", "b.txt"),
            Renamed("b.txt", "c.txt"),
            Renamed("c.txt", "d.txt"),
        ],
        [W("a.txt", Renamed("c.txt", "d.txt"))],
    ),
    (
        [Renamed("a.txt", "b.txt"), Modified("c.txt"), Renamed("c.txt", "d.txt")],
        [
            W("a.txt", Renamed("a.txt", "b.txt")),
            W("c.txt", Modified("d.txt")),
        ],
    ),
    (
        [Renamed("a.txt", "b.txt"), Deleted("b.txt")],
        [W("a.txt", Deleted("b.txt"))],
    ),
    (
        [Created("a.txt"), Created("b.txt"), Created("c.txt")],
        [
            W("a.txt", Created("a.txt")),
            W("b.txt", Created("b.txt")),
            W("c.txt", Created("c.txt")),
        ],
    ),
    (
        [Modified("a.txt"), Modified("b.txt"), Modified("c.txt")],
        [
            W("a.txt", Modified("a.txt")),
            W("b.txt", Modified("b.txt")),
            W("c.txt", Modified("c.txt")),
        ],
    ),
    (
        [Deleted("a.txt"), Deleted("b.txt"), Deleted("c.txt")],
        [
            W("a.txt", Deleted("a.txt")),
            W("b.txt", Deleted("b.txt")),
            W("c.txt", Deleted("c.txt")),
        ],
    ),
    (
        [Deleted("a.txt"), Created("a.txt"), Deleted("a.txt"), Created("a.txt")],
        [
            W("a.txt", Deleted("a.txt")),
            W("a.txt", Created("a.txt")),
        ],
    ),
]


@pytest.mark.parametrize("given, expected", CASES)
def test_local_receiver_reducer(given, expected):
    events = queue.Queue()
    reducer = LocalReceiverReducer(events)
    for event in given:
        events.put(event)

    result = [reducer.recv(timeout=1) for _ in expected]

    assert result == expected
    assert reducer.is_empty()


def test_closed_channel_raises_after_buffered_events():
    events = queue.Queue()
    events.put(Created("a.txt"))
    events.put(None)
    reducer = LocalReceiverReducer(events)

    assert reducer.recv(timeout=1) == W("a.txt", Created("a.txt"))
    with pytest.raises(ChannelClosed):
        reducer.recv(timeout=1)


def test_closed_channel_with_cancelled_events_raises():
    events = queue.Queue()
    events.put(Created("a.txt"))
    events.put(Deleted("a.txt"))
    events.put(None)
    reducer = LocalReceiverReducer(events)

    with pytest.raises(ChannelClosed):
        reducer.recv(timeout=1)
    assert reducer.is_empty()


def test_recv_times_out_without_events():
    reducer = LocalReceiverReducer(queue.Queue())
    with pytest.raises(TimeoutError):
        reducer.recv(timeout=0.01)


def test_next_event_on_empty_buffer_is_none():
    reducer = LocalReceiverReducer(queue.Queue())
    assert reducer.next_event() is None
    assert reducer.is_empty()


def test_recv_waits_for_later_event():
    events = queue.SimpleQueue()
    reducer = LocalReceiverReducer(events)
    events.put(Modified("x.txt"))
    assert reducer.recv(timeout=1) == W("x.txt", Modified("x.txt"))
    assert reducer.is_empty()