"""Controllers for the user list surface.

The list controller owns paging/filter state; the row delete controller owns
per-row delete state and calls back into the list controller to refresh.
"""

from .user_list_controller import UserListController
from .row_delete_controller import RowDeleteController, DeleteState

__all__ = [
    "UserListController",
    "RowDeleteController",
    "DeleteState",
]
