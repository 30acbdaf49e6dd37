"""Formatting utilities for user list display.

Shared by the GUI and the CLI so both surfaces render identical text.
"""
from typing import Iterable, Optional

from ...api.models import FRANCHISEE_ROLE, Role, User

EMPTY_LIST_MESSAGE = "No users to display."
MISSING_ID_TEXT = "N/A"


def format_role(role: Role) -> str:
    """Format a single role.

    A franchisee role scoped to an object renders as ``Franchisee on <objectId>``;
    every other role renders its raw name.

    Args:
        role: Role to format

    Returns:
        Display text
    """
    if role.role == FRANCHISEE_ROLE and role.object_id:
        return f"Franchisee on {role.object_id}"
    return role.role


def format_roles(roles: Optional[Iterable[Role]]) -> str:
    """Format a user's roles as a comma-separated string.

    Args:
        roles: Roles to format (None or empty allowed)

    Returns:
        e.g. ``"diner, Franchisee on fr-99"``; empty string when there are no roles
    """
    if not roles:
        return ""
    return ", ".join(format_role(r) for r in roles)


def format_user_id(user: User) -> str:
    """ID column text; users without an id show ``N/A``."""
    return str(user.id) if user.has_id else MISSING_ID_TEXT


def format_filter_indicator(filter_text: Optional[str]) -> Optional[str]:
    """Indicator for an active name filter, or None when no filter is active."""
    text = (filter_text or "").strip()
    if not text:
        return None
    return f'Filtered by: "{text}"'


def format_page_label(page: int) -> str:
    """One-based page label for a zero-based page index."""
    return f"Page {page + 1}"


def confirm_delete_message(name: str) -> str:
    return f'Are you sure you want to delete user "{name}"? This action cannot be undone.'


def delete_failed_message(name: str) -> str:
    return f'Failed to delete user "{name}". Please try again.'


__all__ = [
    "EMPTY_LIST_MESSAGE",
    "MISSING_ID_TEXT",
    "format_role",
    "format_roles",
    "format_user_id",
    "format_filter_indicator",
    "format_page_label",
    "confirm_delete_message",
    "delete_failed_message",
]
