"""Controller for the per-row delete lifecycle.

Each row moves through::

    idle -> confirming -> pending -> idle

Declining the confirmation returns straight to idle without a request. A
successful delete asks the list controller to refresh instead of removing
the row locally, so the table always mirrors the server's paging. A failed
delete shows a notice and leaves the list untouched. Rows whose user has no
id are permanently disabled.

Deletes are independent: several may be pending at once, and each success
triggers its own refresh.
"""
from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Protocol
from PySide6.QtCore import QObject, Signal
import logging

from ...api.models import DeleteOutcome, User, UserId
from ..utils.formatters import confirm_delete_message, delete_failed_message

if TYPE_CHECKING:
    from ..dialogs import HostDialogs
    from ..utils.async_loader import TaskRunner
    from .user_list_controller import UserListController

logger = logging.getLogger(__name__)

DELETE_LABEL = "Delete"
DELETING_LABEL = "Deleting..."


class DeleteState(str, Enum):
    IDLE = "idle"
    CONFIRMING = "confirming"
    PENDING = "pending"
    DISABLED = "disabled"


class UserDeleteApi(Protocol):
    def delete_user(self, user_id: UserId) -> DeleteOutcome:
        ...


class RowDeleteController(QObject):
    """Drives confirmation, the delete request and the follow-up refresh.

    Signals:
        rowStateChanged: Emitted with (user_id, state value) on every transition
    """

    rowStateChanged = Signal(object, str)  # user_id, DeleteState value

    def __init__(
        self,
        api: UserDeleteApi,
        runner: TaskRunner,
        list_controller: UserListController,
        dialogs: HostDialogs,
        parent: Optional[QObject] = None,
    ):
        """Initialize controller.

        Args:
            api: User API (only delete_user is used)
            runner: Executes requests off the UI thread
            list_controller: Refreshed after each successful delete
            dialogs: Blocking confirm/notify capability
            parent: Parent QObject
        """
        super().__init__(parent)
        self._api = api
        self._runner = runner
        self._list_controller = list_controller
        self._dialogs = dialogs
        # Only non-idle rows are tracked
        self._states: Dict[UserId, DeleteState] = {}

    @property
    def pending_count(self) -> int:
        return sum(1 for s in self._states.values() if s is DeleteState.PENDING)

    def state_for(self, user: User) -> DeleteState:
        if not user.has_id:
            return DeleteState.DISABLED
        return self._states.get(user.id, DeleteState.IDLE)

    def button_label(self, user: User) -> str:
        return DELETING_LABEL if self.state_for(user) is DeleteState.PENDING else DELETE_LABEL

    def is_enabled(self, user: User) -> bool:
        return self.state_for(user) is DeleteState.IDLE

    def request_delete(self, user: User) -> bool:
        """Handle a click on the row's Delete button.

        Args:
            user: User shown in the row

        Returns:
            True if a delete request was sent
        """
        state = self.state_for(user)
        if state is DeleteState.DISABLED:
            logger.debug(f"Delete ignored for user without id: {user.name!r}")
            return False
        if state is not DeleteState.IDLE:
            logger.debug(f"Delete ignored for user {user.id}: already {state.value}")
            return False

        user_id = user.id
        self._set_row_state(user_id, DeleteState.CONFIRMING)
        accepted = False
        try:
            accepted = bool(self._dialogs.confirm(confirm_delete_message(user.name)))
        finally:
            if not accepted:
                self._set_row_state(user_id, DeleteState.IDLE)

        if not accepted:
            logger.info(f"Delete of user {user_id} cancelled")
            return False

        self._set_row_state(user_id, DeleteState.PENDING)
        logger.info(f"Deleting user {user_id} ({user.name!r})")

        def delete() -> DeleteOutcome:
            return self._api.delete_user(user_id)

        self._runner.submit(
            delete,
            lambda outcome: self._on_delete_finished(user, outcome),
            lambda error_msg: self._on_delete_finished(user, DeleteOutcome.failure(error_msg)),
        )
        return True

    def _on_delete_finished(self, user: User, outcome: DeleteOutcome):
        self._set_row_state(user.id, DeleteState.IDLE)

        if outcome.ok:
            logger.info(f"User {user.id} deleted, refreshing list")
            self._list_controller.refresh()
            return

        logger.warning(f"Failed to delete user {user.id}: {outcome.message}")
        self._dialogs.notify(delete_failed_message(user.name))

    def _set_row_state(self, user_id: UserId, state: DeleteState):
        if state is DeleteState.IDLE:
            self._states.pop(user_id, None)
        else:
            self._states[user_id] = state
        self.rowStateChanged.emit(user_id, state.value)


__all__ = ["RowDeleteController", "DeleteState", "DELETE_LABEL", "DELETING_LABEL"]
