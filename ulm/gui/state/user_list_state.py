"""UserListState - immutable snapshot of what the user list shows.

The list controller owns exactly one current snapshot and replaces it on
every transition; views render from the snapshot they receive with
``stateChanged`` and never read controller internals.

State Policy:
- ``users``/``more`` always come from the latest settled, still-relevant fetch
- ``page`` is zero-based; the wire page is ``page + 1``
- Empty ``filter_text`` means "no filter"
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ...api.models import User
from ..utils.formatters import EMPTY_LIST_MESSAGE, format_filter_indicator


@dataclass(frozen=True)
class UserListState:
    """Immutable list state.

    Attributes:
        page: Zero-based page index
        filter_text: Active name filter ("" = unfiltered)
        users: Rows of the latest settled fetch, in server order
        more: Whether the server reported a further page
        loading: A fetch for the current page/filter is outstanding
    """

    page: int = 0
    filter_text: str = ""
    users: Tuple[User, ...] = ()
    more: bool = False
    loading: bool = False

    def __post_init__(self):
        if self.page < 0:
            raise ValueError(f"page must be >= 0, got {self.page}")

    @property
    def rows(self) -> Tuple[User, ...]:
        return self.users

    @property
    def prev_enabled(self) -> bool:
        return self.page > 0

    @property
    def next_enabled(self) -> bool:
        return self.more is True

    @property
    def is_filtered(self) -> bool:
        return bool(self.filter_text.strip())

    @property
    def empty_message(self) -> Optional[str]:
        """Placeholder text when there are no rows, otherwise None."""
        return EMPTY_LIST_MESSAGE if not self.users else None

    @property
    def filter_indicator(self) -> Optional[str]:
        return format_filter_indicator(self.filter_text)

    def with_page(self, page: int) -> UserListState:
        return replace(self, page=max(0, page))

    def with_filter(self, filter_text: str) -> UserListState:
        """New filter always starts over at the first page."""
        return replace(self, filter_text=filter_text, page=0)

    def with_result(self, users: Tuple[User, ...], more: bool) -> UserListState:
        return replace(self, users=tuple(users), more=bool(more))

    def with_loading(self, loading: bool) -> UserListState:
        return replace(self, loading=loading)


__all__ = ["UserListState"]
