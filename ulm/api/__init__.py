"""User API package: wire models and the HTTP client."""

from .models import DeleteOutcome, ListResult, Role, User, UserListQuery
from .client import UserApiClient

__all__ = ["DeleteOutcome", "ListResult", "Role", "User", "UserListQuery", "UserApiClient"]
