import logging
import threading
from unittest.mock import MagicMock, patch

import pytest

from scheduling.dispatcher import Dispatcher, InlineContext, ThreadPoolContext


def test_inline_context_runs_immediately():
    calls = []
    InlineContext().run(lambda: calls.append(1))
    assert calls == [1]


def test_thread_pool_context_rejects_zero_workers():
    with pytest.raises(ValueError):
        ThreadPoolContext(max_workers=0)


def test_thread_pool_flush_waits_for_pending_tasks():
    context = ThreadPoolContext(max_workers=2, name="test")
    release = threading.Event()
    done = []

    def task():
        release.wait(timeout=5)
        done.append(True)

    context.run(task)
    assert context.flush(timeout=0.05) is False

    release.set()
    assert context.flush(timeout=5) is True
    assert done == [True]
    context.shutdown()


def test_thread_pool_logs_failed_tasks(caplog):
    context = ThreadPoolContext(max_workers=1, name="failing")

    def boom():
        raise RuntimeError("lookup exploded")

    with caplog.at_level(logging.ERROR):
        context.run(boom)
        assert context.flush(timeout=5) is True
        context.shutdown()

    assert "Task failed on failing context" in caplog.text
    assert "lookup exploded" in caplog.text


def test_threaded_dispatcher_uses_single_ui_thread():
    dispatcher = Dispatcher.threaded(lookup_workers=3)
    names = set()
    lock = threading.Lock()

    def record():
        with lock:
            names.add(threading.current_thread().name)

    for _ in range(20):
        dispatcher.run_on_ui_context(record)
    assert dispatcher.flush(timeout=5) is True
    dispatcher.shutdown()

    assert len(names) == 1
    assert names.pop().startswith("ui")


def test_dispatcher_flush_covers_ui_tasks_queued_by_workers():
    dispatcher = Dispatcher.threaded(lookup_workers=2)
    applied = []

    def lookup():
        dispatcher.run_on_ui_context(lambda: applied.append("applied"))

    dispatcher.run_in_worker(lookup)
    assert dispatcher.flush(timeout=5) is True
    dispatcher.shutdown()

    assert applied == ["applied"]


def test_inline_dispatcher_flush_is_noop():
    dispatcher = Dispatcher.inline()
    assert dispatcher.flush() is True
    dispatcher.shutdown()


def test_dispatcher_flush_shares_timeout_between_contexts():
    worker, ui = MagicMock(), MagicMock()
    worker.flush.return_value = True
    ui.flush.return_value = True
    dispatcher = Dispatcher(worker=worker, ui=ui)

    with patch("scheduling.dispatcher.time.monotonic", side_effect=[100.0, 103.0]):
        assert dispatcher.flush(timeout=5.0) is True

    worker.flush.assert_called_once_with(5.0)
    ui.flush.assert_called_once_with(2.0)


def test_dispatcher_flush_gives_ui_no_time_once_budget_is_spent():
    worker, ui = MagicMock(), MagicMock()
    worker.flush.return_value = False
    ui.flush.return_value = True
    dispatcher = Dispatcher(worker=worker, ui=ui)

    with patch("scheduling.dispatcher.time.monotonic", side_effect=[100.0, 107.0]):
        assert dispatcher.flush(timeout=5.0) is False

    ui.flush.assert_called_once_with(0.0)


def test_dispatcher_flush_without_timeout_waits_on_both():
    worker, ui = MagicMock(), MagicMock()
    dispatcher = Dispatcher(worker=worker, ui=ui)

    dispatcher.flush()

    worker.flush.assert_called_once_with(None)
    ui.flush.assert_called_once_with(None)
