"""Views for the user list GUI."""

from .users_view import UsersView

__all__ = ["UsersView"]
