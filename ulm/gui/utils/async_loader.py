"""Asynchronous request execution for the GUI to prevent freezing.

Network calls run on worker threads; their results are delivered back to the
UI thread through queued signals before any controller state is touched.
Controllers only see the :class:`TaskRunner` protocol, so tests can swap in a
runner that resolves tasks by hand and in any order.
"""

from __future__ import annotations
from typing import Callable, Any, Optional, Protocol, List, Tuple
from PySide6.QtCore import QObject, QThread, Signal
import logging

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[str], None]


class TaskRunner(Protocol):
    """Runs a blocking function off the UI thread and reports back on it."""

    def submit(self, func: Callable[[], Any], on_success: SuccessCallback, on_error: ErrorCallback) -> None:
        ...


class AsyncDataLoader(QThread):
    """Worker thread for running one blocking call asynchronously.

    Signals:
        succeeded: Emitted when the call returns (data: Any)
        failed: Emitted when the call raises (error_msg: str)

    Example:
        loader = AsyncDataLoader(lambda: client.list_users(1, 10))
        loader.succeeded.connect(receiver.on_loaded)
        loader.failed.connect(receiver.on_error)
        loader.start()
    """

    succeeded = Signal(object)  # data
    failed = Signal(str)  # error_msg

    def __init__(self, load_func: Callable[[], Any], parent: Optional[QObject] = None):
        """Initialize async loader.

        Args:
            load_func: Function to call in background thread (should return data)
            parent: Parent QObject
        """
        super().__init__(parent)
        self.load_func = load_func

    def run(self):
        """Execute loading function in background thread."""
        name = getattr(self.load_func, "__name__", repr(self.load_func))
        try:
            logger.debug(f"AsyncDataLoader starting: {name}")
            result = self.load_func()
            logger.debug(f"AsyncDataLoader finished: {name}")
            self.succeeded.emit(result)
        except Exception as e:
            logger.error(f"AsyncDataLoader error in {name}: {e}", exc_info=True)
            self.failed.emit(str(e) or type(e).__name__)


class _TaskRelay(QObject):
    """Lives on the UI thread so loader signals are queued onto it."""

    def __init__(
        self,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
        on_done: Callable[[], None],
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._on_success = on_success
        self._on_error = on_error
        self._on_done = on_done

    def deliver(self, result: Any):
        self._on_success(result)

    def fail(self, message: str):
        self._on_error(message)

    def done(self):
        self._on_done()


class QtTaskRunner(QObject):
    """TaskRunner backed by one AsyncDataLoader thread per task.

    Tasks are never aborted. Their results are always delivered; deciding
    whether a result is still relevant is the caller's job.
    """

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        # Keep loaders alive until their thread has finished
        self._active: List[Tuple[AsyncDataLoader, _TaskRelay]] = []

    @property
    def active_count(self) -> int:
        return len(self._active)

    def submit(self, func: Callable[[], Any], on_success: SuccessCallback, on_error: ErrorCallback) -> None:
        loader = AsyncDataLoader(func)
        relay = _TaskRelay(on_success, on_error, lambda: self._cleanup(entry), self)
        entry = (loader, relay)
        loader.succeeded.connect(relay.deliver)
        loader.failed.connect(relay.fail)
        loader.finished.connect(relay.done)
        self._active.append(entry)
        loader.start()

    def _cleanup(self, entry: Tuple[AsyncDataLoader, _TaskRelay]):
        if entry in self._active:
            self._active.remove(entry)
        loader, relay = entry
        loader.deleteLater()
        relay.deleteLater()

    def wait_all(self, timeout_ms: int = 5000):
        """Block until all running loaders finish (used on shutdown)."""
        for loader, _ in list(self._active):
            loader.wait(timeout_ms)


__all__ = ["TaskRunner", "AsyncDataLoader", "QtTaskRunner"]
