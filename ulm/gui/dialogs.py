"""Blocking confirmation and notice dialogs.

Controllers depend on the :class:`HostDialogs` protocol only, so they can be
driven in tests by a scripted stand-in instead of real modal boxes.
"""
from __future__ import annotations
from typing import Optional, Protocol
from PySide6.QtWidgets import QMessageBox, QWidget


class HostDialogs(Protocol):
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question; True means the user accepted."""
        ...

    def notify(self, message: str) -> None:
        """Show a blocking notice."""
        ...


class MessageBoxDialogs:
    """HostDialogs implemented with modal QMessageBox windows."""

    def __init__(self, parent: Optional[QWidget] = None):
        self.parent_widget = parent

    def confirm(self, message: str) -> bool:
        reply = QMessageBox.question(
            self.parent_widget,
            "Confirm Delete",
            message,
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        return reply == QMessageBox.Yes

    def notify(self, message: str) -> None:
        QMessageBox.warning(self.parent_widget, "Delete Failed", message)


__all__ = ["HostDialogs", "MessageBoxDialogs"]
