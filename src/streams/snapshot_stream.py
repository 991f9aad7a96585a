import inspect
import logging
import threading
import weakref
from typing import Callable, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
Handler = Callable[[List[T]], None]
HandlerRef = Callable[[], Optional[Handler]]
Unsubscribe = Callable[[], None]


def _ref(handler: Handler) -> HandlerRef:
    if inspect.ismethod(handler):
        return weakref.WeakMethod(handler)
    return lambda: handler


class SnapshotStream(Generic[T]):
    """
    Observable sequence of list snapshots.

    Subscribers receive the latest snapshot as soon as they subscribe and
    every snapshot published afterwards. Handlers run on the publishing
    thread, outside the stream's lock.

    Bound methods are held weakly: once their owner is garbage collected
    they stop receiving snapshots and are dropped from the stream. Plain
    functions stay subscribed until unsubscribed.
    """

    def __init__(self, initial: Optional[List[T]] = None):
        self._lock = threading.Lock()
        self._value: Optional[List[T]] = list(initial) if initial is not None else None
        self._refs: List[HandlerRef] = []

    @property
    def value(self) -> List[T]:
        with self._lock:
            return list(self._value or [])

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._live_handlers())

    def subscribe(self, handler: Handler) -> Unsubscribe:
        ref = _ref(handler)
        with self._lock:
            self._refs.append(ref)
            current = list(self._value) if self._value is not None else None

        if current is not None:
            handler(current)

        def unsubscribe():
            with self._lock:
                if ref in self._refs:
                    self._refs.remove(ref)

        return unsubscribe

    def publish(self, snapshot: List[T]):
        with self._lock:
            self._value = list(snapshot)
            handlers = self._live_handlers()
        logger.debug(f"Publishing snapshot of {len(snapshot)} items")
        for handler in handlers:
            handler(list(snapshot))

    def _live_handlers(self) -> List[Handler]:
        # Caller holds the lock.
        handlers = []
        live_refs = []
        for ref in self._refs:
            handler = ref()
            if handler is not None:
                handlers.append(handler)
                live_refs.append(ref)
        dropped = len(self._refs) - len(live_refs)
        if dropped:
            logger.debug(f"Dropping {dropped} collected subscribers")
        self._refs = live_refs
        return handlers
