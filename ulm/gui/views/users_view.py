"""Users view - search, page through and delete user records.

Layout:
    Users
    [Search by name...            ]  (Filtered by: "x")
    Page N                            Loading...
    +----+------+-------+---------+---------+
    | ID | Name | Email | Role(s) | Actions |
    +----+------+-------+---------+---------+
                                      [«] [»]

The view holds no list state of its own. It forwards user input to the
controllers and re-renders from each UserListState it receives.
"""
from __future__ import annotations
from functools import partial
from typing import TYPE_CHECKING, List, Optional
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QTableView, QStackedWidget, QHeaderView, QAbstractItemView,
)
from PySide6.QtCore import Qt
import logging

from ...api.models import User
from ..models import UsersTableModel, ACTIONS_COLUMN
from ..state import UserListState
from ..utils.formatters import EMPTY_LIST_MESSAGE, format_page_label

if TYPE_CHECKING:
    from ..controllers import UserListController, RowDeleteController

logger = logging.getLogger(__name__)

SEARCH_PLACEHOLDER = "Search by name..."
PREV_LABEL = "«"
NEXT_LABEL = "»"


class UsersView(QWidget):
    """List-management surface for privileged viewers."""

    def __init__(
        self,
        list_controller: UserListController,
        delete_controller: RowDeleteController,
        parent: Optional[QWidget] = None,
    ):
        """Initialize view and wire it to its controllers.

        Args:
            list_controller: Paging/filter controller
            delete_controller: Per-row delete controller
            parent: Parent widget
        """
        super().__init__(parent)
        self.list_controller = list_controller
        self.delete_controller = delete_controller
        self.model = UsersTableModel(self)
        self.delete_buttons: List[QPushButton] = []

        self._build_ui()

        self.search_field.textChanged.connect(self.list_controller.set_filter)
        self.search_field.returnPressed.connect(self.list_controller.flush_filter)
        self.prev_button.clicked.connect(self._on_prev_clicked)
        self.next_button.clicked.connect(self._on_next_clicked)
        self.list_controller.stateChanged.connect(self.render)
        self.delete_controller.rowStateChanged.connect(self._on_row_state_changed)

        self.render(self.list_controller.state)

    def _build_ui(self):
        layout = QVBoxLayout(self)

        title = QLabel("Users")
        title.setStyleSheet("font-size: 16pt; font-weight: bold;")
        layout.addWidget(title)

        search_row = QHBoxLayout()
        self.search_field = QLineEdit()
        self.search_field.setPlaceholderText(SEARCH_PLACEHOLDER)
        self.search_field.setClearButtonEnabled(True)
        search_row.addWidget(self.search_field, stretch=1)
        self.filter_label = QLabel()
        self.filter_label.setVisible(False)
        search_row.addWidget(self.filter_label)
        layout.addLayout(search_row)

        status_row = QHBoxLayout()
        self.page_label = QLabel()
        status_row.addWidget(self.page_label)
        status_row.addStretch()
        self.loading_label = QLabel("Loading...")
        self.loading_label.setVisible(False)
        status_row.addWidget(self.loading_label)
        layout.addLayout(status_row)

        self.table = QTableView()
        self.table.setModel(self.model)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSortingEnabled(False)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(ACTIONS_COLUMN, QHeaderView.ResizeToContents)

        self.empty_label = QLabel(EMPTY_LIST_MESSAGE)
        self.empty_label.setAlignment(Qt.AlignCenter)

        self.stack = QStackedWidget()
        self.stack.addWidget(self.table)
        self.stack.addWidget(self.empty_label)
        layout.addWidget(self.stack, stretch=1)

        pager_row = QHBoxLayout()
        pager_row.addStretch()
        self.prev_button = QPushButton(PREV_LABEL)
        self.prev_button.setFixedWidth(48)
        self.next_button = QPushButton(NEXT_LABEL)
        self.next_button.setFixedWidth(48)
        pager_row.addWidget(self.prev_button)
        pager_row.addWidget(self.next_button)
        layout.addLayout(pager_row)

    def render(self, state: UserListState):
        """Apply a list state snapshot to the widgets."""
        if list(state.users) != self.model.users:
            self.model.set_users(state.users)
            self._rebuild_delete_buttons()

        self.page_label.setText(format_page_label(state.page))

        indicator = state.filter_indicator
        self.filter_label.setText(f"({indicator})" if indicator else "")
        self.filter_label.setVisible(indicator is not None)

        self.stack.setCurrentWidget(self.empty_label if state.empty_message else self.table)
        self.loading_label.setVisible(state.loading)
        self.prev_button.setEnabled(state.prev_enabled)
        self.next_button.setEnabled(state.next_enabled)

    def _rebuild_delete_buttons(self):
        self.delete_buttons = []
        for row, user in enumerate(self.model.users):
            button = QPushButton()
            button.clicked.connect(partial(self._on_delete_clicked, user))
            self._apply_button_state(button, user)
            self.table.setIndexWidget(self.model.index(row, ACTIONS_COLUMN), button)
            self.delete_buttons.append(button)

    def _apply_button_state(self, button: QPushButton, user: User):
        button.setText(self.delete_controller.button_label(user))
        button.setEnabled(self.delete_controller.is_enabled(user))

    def _on_row_state_changed(self, user_id, state: str):
        for button, user in zip(self.delete_buttons, self.model.users):
            if user.has_id and user.id == user_id:
                self._apply_button_state(button, user)

    def _on_delete_clicked(self, user: User, checked: bool = False):
        self.delete_controller.request_delete(user)

    def _on_prev_clicked(self, checked: bool = False):
        self.list_controller.previous_page()

    def _on_next_clicked(self, checked: bool = False):
        self.list_controller.next_page()


__all__ = ["UsersView", "SEARCH_PLACEHOLDER", "PREV_LABEL", "NEXT_LABEL"]
