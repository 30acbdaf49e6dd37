"""Controller for paging, searching and loading the user list.

Owns the only writable copy of the list state. Every fetch is tagged with the
epoch it was issued under; the epoch advances on each page or filter change,
and a response is applied only while its epoch is still current. Stale
responses are dropped, never merged.

Search input is debounced with a single-shot QTimer that is restarted on each
keystroke, so a burst of typing produces one request for the final text.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Optional, Protocol
from PySide6.QtCore import QObject, QTimer, Signal
import logging

from ...api.models import ListResult, UserListQuery
from ..state import UserListState

if TYPE_CHECKING:
    from ..utils.async_loader import TaskRunner

logger = logging.getLogger(__name__)


class UserListApi(Protocol):
    def list_users(self, page: int, limit: int, name: Optional[str] = None) -> ListResult:
        ...


class UserListController(QObject):
    """Manages page/filter state and reconciles fetch results.

    Responsibilities:
    - Translate page and filter changes into list requests
    - Debounce search input
    - Discard responses for abandoned page/filter combinations
    - Degrade to an empty list when a fetch fails

    Signals:
        stateChanged: Emitted with the new UserListState after every change
    """

    stateChanged = Signal(object)  # UserListState

    def __init__(
        self,
        api: UserListApi,
        runner: TaskRunner,
        page_size: int = 10,
        debounce_ms: int = 500,
        parent: Optional[QObject] = None,
    ):
        """Initialize controller.

        Args:
            api: User API (only list_users is used)
            runner: Executes requests off the UI thread
            page_size: Users per page
            debounce_ms: Quiet period before a search is sent
            parent: Parent QObject
        """
        super().__init__(parent)
        self._api = api
        self._runner = runner
        self._page_size = page_size
        self._state = UserListState()
        self._epoch = 0
        # Outstanding fetch count per epoch
        self._in_flight: Dict[int, int] = {}

        self._debounce_timer = QTimer(self)
        self._debounce_timer.setSingleShot(True)
        self._debounce_timer.setInterval(debounce_ms)
        self._debounce_timer.timeout.connect(self._on_debounce_timeout)

    @property
    def state(self) -> UserListState:
        return self._state

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def debounce_ms(self) -> int:
        return self._debounce_timer.interval()

    @property
    def search_pending(self) -> bool:
        """True while a debounced search is waiting for the quiet period."""
        return self._debounce_timer.isActive()

    def start(self):
        """Load the first page."""
        logger.info("Loading user list")
        self._fetch_current()

    def set_page(self, page: int) -> bool:
        """Move to a page (clamped to >= 0) and fetch it.

        Returns:
            True if a fetch was issued
        """
        page = max(0, int(page))
        if page == self._state.page:
            return False

        # A page change supersedes any search still waiting on the timer;
        # the fetch below already uses the latest filter text.
        self._debounce_timer.stop()
        self._advance_epoch()
        logger.debug(f"Page changed: {self._state.page} -> {page}")
        self._set_state(self._state.with_page(page).with_loading(False))
        self._fetch_current()
        return True

    def next_page(self) -> bool:
        if not self._state.next_enabled:
            logger.debug("Next page requested but server reported no more users")
            return False
        return self.set_page(self._state.page + 1)

    def previous_page(self) -> bool:
        if not self._state.prev_enabled:
            logger.debug("Previous page requested on first page")
            return False
        return self.set_page(self._state.page - 1)

    def set_filter(self, text: str):
        """Change the name filter and schedule a debounced fetch of page 0.

        Args:
            text: Raw search box text (surrounding whitespace ignored)
        """
        filter_text = (text or "").strip()
        if filter_text == self._state.filter_text and not self._debounce_timer.isActive():
            return

        self._advance_epoch()
        self._set_state(self._state.with_filter(filter_text).with_loading(False))
        # Restart, not just ignore: only the last keystroke's timer may fire
        self._debounce_timer.start()

    def flush_filter(self) -> bool:
        """Send a pending debounced search immediately.

        Returns:
            True if a search was pending
        """
        if not self._debounce_timer.isActive():
            return False
        self._debounce_timer.stop()
        self._fetch_current()
        return True

    def _on_debounce_timeout(self):
        # set_filter already advanced the epoch and reset the page
        logger.debug(f"Search settled: {self._state.filter_text!r}")
        self._fetch_current()

    def refresh(self):
        """Re-fetch the current page/filter.

        Does not advance the epoch: overlapping refreshes for the same page
        all apply, so the last one to resolve wins.
        """
        logger.debug(f"Refreshing page {self._state.page} (filter={self._state.filter_text!r})")
        self._fetch_current()

    def _advance_epoch(self):
        self._epoch += 1

    def _is_loading(self) -> bool:
        return self._in_flight.get(self._epoch, 0) > 0

    def _fetch_current(self):
        epoch = self._epoch
        query = UserListQuery.for_page(self._state.page, self._state.filter_text, self._page_size)
        self._in_flight[epoch] = self._in_flight.get(epoch, 0) + 1
        self._set_state(self._state.with_loading(True))

        logger.debug(f"Fetching users: {query.to_params()} (epoch={epoch})")

        def load() -> ListResult:
            return self._api.list_users(query.backend_page, query.limit, query.name)

        self._runner.submit(
            load,
            lambda result: self._on_fetch_success(epoch, query, result),
            lambda error_msg: self._on_fetch_error(epoch, query, error_msg),
        )

    def _settle(self, epoch: int) -> bool:
        """Mark one fetch of ``epoch`` finished; return whether it is still relevant."""
        remaining = self._in_flight.get(epoch, 0) - 1
        if remaining > 0:
            self._in_flight[epoch] = remaining
        else:
            self._in_flight.pop(epoch, None)
        return epoch == self._epoch

    def _on_fetch_success(self, epoch: int, query: UserListQuery, result: ListResult):
        if not self._settle(epoch):
            logger.debug(f"Discarding stale response for {query.to_params()} (epoch {epoch} != {self._epoch})")
            return

        logger.info(f"Page {query.backend_page}: received {len(result.users)} users, more: {result.more}")
        self._set_state(self._state.with_result(result.users, result.more).with_loading(self._is_loading()))

    def _on_fetch_error(self, epoch: int, query: UserListQuery, error_msg: str):
        if not self._settle(epoch):
            logger.debug(f"Ignoring stale failure for {query.to_params()}: {error_msg}")
            return

        logger.warning(f"Page {query.backend_page}: failed to load users, showing empty list: {error_msg}")
        self._set_state(self._state.with_result((), False).with_loading(self._is_loading()))

    def _set_state(self, new_state: UserListState):
        if new_state == self._state:
            return
        self._state = new_state
        self.stateChanged.emit(self._state)


__all__ = ["UserListController", "UserListApi"]
