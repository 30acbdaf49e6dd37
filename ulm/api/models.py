"""Domain models exchanged with the user API.

These dataclasses make the wire contracts explicit:

    GET    /api/user?page=<1-based>&limit=<n>[&name=*<text>*]  -> {users, more}
    DELETE /api/user/<id>                                       -> 2xx on success
    GET    /api/user/me                                         -> User

All models are immutable. The list controller never edits a User; it replaces
the whole visible list whenever a fetch settles.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

UserId = Union[str, int]

ADMIN_ROLE = "admin"
FRANCHISEE_ROLE = "franchisee"


@dataclass(frozen=True)
class Role:
    """A role granted to a user, optionally scoped to an object (e.g. a franchise)."""
    role: str
    object_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Role:
        object_id = data.get("objectId")
        return cls(
            role=str(data.get("role", "")),
            object_id=str(object_id) if object_id is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"role": self.role}
        if self.object_id is not None:
            result["objectId"] = self.object_id
        return result


@dataclass(frozen=True)
class User:
    """A user record as returned by the API.

    ``id`` is optional: records without one can be displayed but not deleted.
    """
    name: str
    email: str
    id: Optional[UserId] = None
    roles: Tuple[Role, ...] = field(default_factory=tuple)

    @property
    def has_id(self) -> bool:
        return self.id is not None and self.id != ""

    @property
    def is_admin(self) -> bool:
        """Privilege predicate used by the host to gate the list surface."""
        return any(r.role == ADMIN_ROLE for r in self.roles)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> User:
        """Build a User from a JSON object.

        Raises:
            ValueError: If ``data`` is not a JSON object
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected user object, got {type(data).__name__}")
        roles = data.get("roles") or []
        return cls(
            id=data.get("id"),
            name=str(data.get("name") or ""),
            email=str(data.get("email") or ""),
            roles=tuple(Role.from_dict(r) for r in roles if isinstance(r, dict)),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "name": self.name,
            "email": self.email,
            "roles": [r.to_dict() for r in self.roles],
        }
        if self.id is not None:
            result["id"] = self.id
        return result


@dataclass(frozen=True)
class ListResult:
    """One page of users plus the server's "another page exists" flag."""
    users: Tuple[User, ...] = ()
    more: bool = False

    @classmethod
    def from_payload(cls, payload: Any) -> ListResult:
        """Parse a ``{users, more}`` response body.

        A missing ``users`` key is treated as an empty page.

        Raises:
            ValueError: If the payload is not a JSON object or ``users`` is not a list
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Expected object payload, got {type(payload).__name__}")
        raw_users = payload.get("users") or []
        if not isinstance(raw_users, list):
            raise ValueError("'users' must be a list")
        return cls(
            users=tuple(User.from_dict(u) for u in raw_users),
            more=bool(payload.get("more")),
        )


@dataclass(frozen=True)
class DeleteOutcome:
    """Transient result of a delete request (never stored)."""
    ok: bool
    message: Optional[str] = None

    @classmethod
    def success(cls) -> DeleteOutcome:
        return cls(ok=True)

    @classmethod
    def failure(cls, message: str) -> DeleteOutcome:
        return cls(ok=False, message=message)


@dataclass(frozen=True)
class UserListQuery:
    """Wire request derived from a (frontend page, filter text) pair.

    The frontend page index is zero-based, the API expects one-based pages.
    A non-blank filter is sent as a wildcard substring match ``*text*``.
    """
    backend_page: int
    limit: int
    name: Optional[str] = None

    @classmethod
    def for_page(cls, frontend_page: int, filter_text: Optional[str], limit: int) -> UserListQuery:
        page = max(0, int(frontend_page))
        text = (filter_text or "").strip()
        return cls(
            backend_page=page + 1,
            limit=limit,
            name=f"*{text}*" if text else None,
        )

    def to_params(self) -> Dict[str, Any]:
        """Query parameters in wire order: page, limit[, name]."""
        params: Dict[str, Any] = {"page": self.backend_page, "limit": self.limit}
        if self.name is not None:
            params["name"] = self.name
        return params


__all__ = [
    "UserId",
    "Role",
    "User",
    "ListResult",
    "DeleteOutcome",
    "UserListQuery",
    "ADMIN_ROLE",
    "FRANCHISEE_ROLE",
]
