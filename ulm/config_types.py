"""Typed configuration dataclasses for user-list-manager.

Provides strongly-typed configuration objects that can be used throughout
the application for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any


@dataclass
class ApiConfig:
    """Remote user API connection settings."""
    base_url: str = "http://localhost:3000"
    token: str | None = None
    timeout: float | None = None  # None = wait as long as the transport allows
    max_retries: int = 3  # Applies to rate-limited list requests only

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for backward compatibility."""
        return asdict(self)


@dataclass
class UsersConfig:
    """User list paging and search behaviour."""
    page_size: int = 10
    search_debounce_ms: int = 500

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for backward compatibility."""
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    api: ApiConfig = field(default_factory=ApiConfig)
    users: UsersConfig = field(default_factory=UsersConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary matching the load_config() layout."""
        return {
            "log_level": self.log_level,
            "api": self.api.to_dict(),
            "users": self.users.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Unknown keys inside a section are ignored so that stray environment
        variables do not break startup.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            api=ApiConfig(**_known_fields(ApiConfig, data.get("api", {}))),
            users=UsersConfig(**_known_fields(UsersConfig, data.get("users", {}))),
        )


def _known_fields(section_cls, values: Dict[str, Any]) -> Dict[str, Any]:
    names = section_cls.__dataclass_fields__.keys()
    return {k: v for k, v in (values or {}).items() if k in names}


__all__ = [
    "AppConfig",
    "ApiConfig",
    "UsersConfig",
]
