import gc
from unittest.mock import MagicMock

from streams.snapshot_stream import SnapshotStream


def test_subscribe_replays_latest_snapshot():
    stream = SnapshotStream([1, 2])
    handler = MagicMock()

    stream.subscribe(handler)

    handler.assert_called_once_with([1, 2])


def test_subscribe_before_first_publish_gets_nothing():
    stream = SnapshotStream()
    handler = MagicMock()

    stream.subscribe(handler)

    handler.assert_not_called()
    assert stream.value == []


def test_publish_reaches_every_subscriber():
    stream = SnapshotStream()
    first, second = MagicMock(), MagicMock()
    stream.subscribe(first)
    stream.subscribe(second)

    stream.publish(["a"])

    first.assert_called_once_with(["a"])
    second.assert_called_once_with(["a"])
    assert stream.value == ["a"]


def test_unsubscribe_is_idempotent():
    stream = SnapshotStream()
    handler = MagicMock()
    unsubscribe = stream.subscribe(handler)

    unsubscribe()
    unsubscribe()
    stream.publish(["a"])

    handler.assert_not_called()


def test_snapshots_are_copied():
    source = [1]
    stream = SnapshotStream()
    received = []
    stream.subscribe(received.append)

    stream.publish(source)
    source.append(2)
    received[0].append(3)

    assert stream.value == [1]


def test_handler_may_unsubscribe_while_handling():
    stream = SnapshotStream()
    calls = []

    def handler(snapshot):
        calls.append(snapshot)
        unsubscribe()

    unsubscribe = stream.subscribe(handler)
    stream.publish([1])
    stream.publish([2])

    assert calls == [[1]]


class Recorder:
    def __init__(self):
        self.calls = []

    def on_snapshot(self, snapshot):
        self.calls.append(snapshot)


def test_bound_method_subscriber_is_dropped_once_collected():
    stream = SnapshotStream()
    recorder = Recorder()
    stream.subscribe(recorder.on_snapshot)
    stream.publish([1])
    assert recorder.calls == [[1]]
    assert stream.subscriber_count == 1

    del recorder
    gc.collect()
    stream.publish([2])

    assert stream.subscriber_count == 0


def test_live_bound_method_subscriber_keeps_receiving():
    stream = SnapshotStream()
    recorder = Recorder()
    stream.subscribe(recorder.on_snapshot)
    gc.collect()

    stream.publish([1])

    assert recorder.calls == [[1]]


def test_bound_method_subscriber_can_unsubscribe():
    stream = SnapshotStream()
    recorder = Recorder()
    unsubscribe = stream.subscribe(recorder.on_snapshot)

    unsubscribe()
    stream.publish([1])

    assert recorder.calls == []
    assert stream.subscriber_count == 0
