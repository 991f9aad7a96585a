import logging
import threading
import time
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, Optional, Set

logger = logging.getLogger(__name__)

Task = Callable[[], None]


class ExecutionContext(ABC):
    """Somewhere tasks can be run."""

    @abstractmethod
    def run(self, fn: Task) -> None:
        pass

    def flush(self, timeout: Optional[float] = None) -> bool:
        return True

    def shutdown(self) -> None:
        pass


class InlineContext(ExecutionContext):
    """Runs every task immediately on the calling thread."""

    def run(self, fn: Task) -> None:
        fn()


class ThreadPoolContext(ExecutionContext):
    def __init__(self, max_workers: int = 1, name: str = "context"):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.name = name
        self.executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=name
        )
        self._lock = threading.Lock()
        self._pending: Set[Future] = set()

    def _on_done(self, future: Future):
        with self._lock:
            self._pending.discard(future)
        error = future.exception()
        if error is not None:
            logger.error(
                f"Task failed on {self.name} context",
                exc_info=(type(error), error, error.__traceback__),
            )

    def run(self, fn: Task) -> None:
        future = self.executor.submit(fn)
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(self._on_done)

    def flush(self, timeout: Optional[float] = None) -> bool:
        with self._lock:
            pending = set(self._pending)
        if not pending:
            return True
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def shutdown(self) -> None:
        self.executor.shutdown(wait=True)


class Dispatcher:
    """
    Pairs a worker context for lookups with the single UI context that owns
    every map mutation.
    """

    def __init__(self, worker: ExecutionContext, ui: ExecutionContext):
        self.worker = worker
        self.ui = ui

    @classmethod
    def inline(cls) -> "Dispatcher":
        return cls(worker=InlineContext(), ui=InlineContext())

    @classmethod
    def threaded(cls, lookup_workers: int = 4) -> "Dispatcher":
        return cls(
            worker=ThreadPoolContext(max_workers=lookup_workers, name="lookup"),
            ui=ThreadPoolContext(max_workers=1, name="ui"),
        )

    def run_in_worker(self, fn: Task) -> None:
        self.worker.run(fn)

    def run_on_ui_context(self, fn: Task) -> None:
        self.ui.run(fn)

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Drain both contexts, sharing one `timeout` budget between them."""
        deadline = None if timeout is None else time.monotonic() + timeout
        # Worker tasks enqueue UI tasks, so the worker drains first.
        worker_done = self.worker.flush(timeout)
        remaining = None
        if deadline is not None:
            remaining = max(0.0, deadline - time.monotonic())
        ui_done = self.ui.flush(remaining)
        return worker_done and ui_done

    def shutdown(self) -> None:
        self.worker.shutdown()
        self.ui.shutdown()
