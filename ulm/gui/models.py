"""Qt table model for the user list.

Rows are kept in server order; the model never sorts or filters on its own.
"""
from __future__ import annotations
from typing import List, Optional, Sequence
from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex
import logging

from ..api.models import User
from .utils.formatters import format_roles, format_user_id

logger = logging.getLogger(__name__)

ACTIONS_COLUMN = 4


class UsersTableModel(QAbstractTableModel):
    """Model for the users table (ID, Name, Email, Role(s), Actions).

    The Actions column carries no text; the view places a Delete button there.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.columns = [
            ('id', 'ID'),
            ('name', 'Name'),
            ('email', 'Email'),
            ('roles', 'Role(s)'),
            ('actions', 'Actions'),
        ]
        self.users: List[User] = []

    def rowCount(self, parent=QModelIndex()):
        """Get row count."""
        if parent.isValid():
            return 0
        return len(self.users)

    def columnCount(self, parent=QModelIndex()):
        """Get column count."""
        if parent.isValid():
            return 0
        return len(self.columns)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        """Get header data."""
        if role == Qt.DisplayRole and orientation == Qt.Horizontal:
            if 0 <= section < len(self.columns):
                return self.columns[section][1]
        return None

    def data(self, index, role=Qt.DisplayRole):
        """Get cell data."""
        if not index.isValid():
            return None

        row = index.row()
        col = index.column()
        if not (0 <= row < len(self.users) and 0 <= col < len(self.columns)):
            return None

        user = self.users[row]
        col_name = self.columns[col][0]

        if role == Qt.DisplayRole:
            if col_name == 'id':
                return format_user_id(user)
            if col_name == 'name':
                return user.name
            if col_name == 'email':
                return user.email
            if col_name == 'roles':
                return format_roles(user.roles)
            return ""

        if role == Qt.ToolTipRole and col_name == 'roles':
            text = format_roles(user.roles)
            return text if len(text) > 50 else None

        if role == Qt.UserRole:
            # Raw user object for delegates and views
            return user

        return None

    def set_users(self, users: Sequence[User]):
        """Replace all rows.

        Args:
            users: Users in display order
        """
        self.beginResetModel()
        self.users = list(users)
        self.endResetModel()
        logger.debug(f"Users model reset with {len(self.users)} rows")

    def get_user(self, row: int) -> Optional[User]:
        """Get the user shown in a row, or None if out of range."""
        if 0 <= row < len(self.users):
            return self.users[row]
        return None


__all__ = ["UsersTableModel", "ACTIONS_COLUMN"]
