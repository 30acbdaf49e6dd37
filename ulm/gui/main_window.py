"""Main window for the GUI application.

Shows the users view only to privileged viewers; everyone else gets a
notice instead of the list-management surface.
"""
from __future__ import annotations
from typing import Optional
from PySide6.QtWidgets import QMainWindow, QLabel, QWidget
from PySide6.QtCore import Qt
import logging

logger = logging.getLogger(__name__)

NOT_AUTHORIZED_TEXT = "You do not have permission to manage users."


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, is_admin: bool, users_view: Optional[QWidget] = None):
        """Initialize main window.

        Args:
            is_admin: Whether the viewer may manage users
            users_view: List-management widget (ignored for non-admins)
        """
        super().__init__()
        self.setWindowTitle("User List Manager")
        self.resize(1000, 700)
        self.setMinimumSize(640, 400)

        self.is_admin = bool(is_admin and users_view is not None)
        if self.is_admin:
            self.users_view = users_view
            self.setCentralWidget(users_view)
        else:
            logger.info("Viewer is not an admin, hiding user management")
            self.users_view = None
            notice = QLabel(NOT_AUTHORIZED_TEXT)
            notice.setAlignment(Qt.AlignCenter)
            self.setCentralWidget(notice)


__all__ = ["MainWindow", "NOT_AUTHORIZED_TEXT"]
