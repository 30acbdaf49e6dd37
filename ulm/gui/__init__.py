"""GUI module for User List Manager.

Provides a Qt-based interface for browsing, searching and deleting
user records held by the remote user API.
"""

__all__ = []
