"""User API client.

Handles all HTTP requests to the user management endpoints.
"""

from __future__ import annotations
import requests
from typing import Dict, Any, Optional
import time
import logging
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_none

from .models import DeleteOutcome, ListResult, User, UserId

logger = logging.getLogger(__name__)


class RateLimited(requests.RequestException):
    """Raised after honouring a 429 Retry-After so tenacity retries the call.

    Once retries are exhausted it reaches callers as an ordinary
    ``requests.RequestException``.
    """


def _retry_after_seconds(value: Optional[str]) -> int:
    """Parse a Retry-After header; HTTP-date or missing values fall back to 1s."""
    try:
        return max(0, int(value if value is not None else "1"))
    except ValueError:
        return 1


class UserApiClient:
    """Client for the remote user API.

    List and profile requests raise ``requests.RequestException`` (or
    ``ValueError`` for malformed bodies) so callers can decide how to degrade.
    Deletes never raise: they return a :class:`DeleteOutcome`.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: int = 3,
        session: Optional[requests.Session] = None,
    ):
        """Initialize client.

        Args:
            base_url: API root, e.g. ``http://localhost:3000``
            token: Optional bearer token
            timeout: Per-request timeout in seconds (None = no client-side timeout)
            max_retries: Attempts for rate-limited GET requests
            session: Optional requests session (shared connection pool)
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.max_retries = max(1, int(max_retries))
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        """Build request headers (adds bearer auth when a token is set)."""
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _url(self, path: str) -> str:
        return self.base_url + path

    def _get(self, path: str, params: Dict[str, Any] | None = None) -> Any:
        """Execute GET request, retrying only when the server rate-limits us.

        Args:
            path: API endpoint path (e.g., '/api/user')
            params: Optional query parameters

        Returns:
            Decoded JSON body

        Raises:
            requests.HTTPError: On non-2xx responses
            requests.RequestException: On transport errors
            ValueError: If the body is not JSON
        """
        @retry(
            retry=retry_if_exception_type(RateLimited),
            stop=stop_after_attempt(self.max_retries),
            wait=wait_none(),
            reraise=True,
        )
        def _do_get() -> Any:
            r = self.session.get(self._url(path), headers=self._headers(), params=params, timeout=self.timeout)
            if r.status_code == 429:
                ra = _retry_after_seconds(r.headers.get("Retry-After"))
                logger.warning(f"Rate limited on GET {path}, retrying in {ra}s")
                time.sleep(ra)
                raise RateLimited(f"rate limited: {path}")
            r.raise_for_status()
            return r.json()

        return _do_get()

    def list_users(self, page: int, limit: int, name: Optional[str] = None) -> ListResult:
        """Fetch one page of users.

        Args:
            page: One-based backend page number
            limit: Page size
            name: Wildcard name filter (``*text*``) or None for unfiltered

        Returns:
            ListResult with the page's users and the ``more`` flag
        """
        params: Dict[str, Any] = {"page": page, "limit": limit}
        if name is not None:
            params["name"] = name
        data = self._get("/api/user", params=params)
        result = ListResult.from_payload(data)
        logger.debug(f"Fetched {len(result.users)} users (page={page}, name={name}, more={result.more})")
        return result

    def delete_user(self, user_id: UserId) -> DeleteOutcome:
        """Delete a user. Not retried automatically.

        Args:
            user_id: Identifier of the user to delete

        Returns:
            DeleteOutcome.success() for any 2xx status, failure otherwise
        """
        path = f"/api/user/{user_id}"
        try:
            r = self.session.delete(self._url(path), headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"DELETE {path} failed: {e}")
            return DeleteOutcome.failure(str(e))

        if 200 <= r.status_code < 300:
            logger.info(f"Deleted user {user_id}")
            return DeleteOutcome.success()

        logger.warning(f"DELETE {path} returned HTTP {r.status_code}")
        return DeleteOutcome.failure(f"HTTP {r.status_code}")

    def current_user(self) -> User:
        """Get the profile of the authenticated viewer.

        Returns:
            User (use ``.is_admin`` for the privilege check)
        """
        return User.from_dict(self._get("/api/user/me"))


__all__ = ["UserApiClient", "RateLimited"]
