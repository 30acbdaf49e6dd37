"""State objects for the GUI."""

from .user_list_state import UserListState

__all__ = ["UserListState"]
