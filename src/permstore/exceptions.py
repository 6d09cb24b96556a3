"""Exception hierarchy for the permission store.

All store errors inherit from PermStoreError and carry a stable error
code, so callers can branch on ``err.code`` without importing every class.

Usage:
    from permstore.exceptions import (
        PermStoreError,
        PermissionDeniedError,
        InvalidPathError,
    )
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "PermStoreError",
    "ConfigurationError",
    "PermissionDeniedError",
    "InvalidPathError",
    "InvalidPermissionError",
]


# ---- Exception Hierarchy ----------------------------------------------------


class PermStoreError(Exception):
    """Base exception for all permission store failures.

    Attributes:
        code: Stable error code string (e.g. "PERMISSION_DENIED").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(PermStoreError):
    """Invalid or missing configuration."""

    code: str = "CONFIGURATION_ERROR"


class PermissionDeniedError(PermStoreError):
    """A read or write was refused by the store's permission table.

    ``details`` carries ``path`` (the requested path) and ``access``
    (``"read"`` or ``"write"``).
    """

    code: str = "PERMISSION_DENIED"
    message: str = "Permission denied"

    @property
    def path(self) -> str | None:
        return self.details.get("path")

    @property
    def access(self) -> str | None:
        return self.details.get("access")


class InvalidPathError(PermStoreError, LookupError):
    """A path could not be resolved against the store's value tree."""

    code: str = "INVALID_PATH"
    message: str = "Invalid path"

    @property
    def path(self) -> str | None:
        return self.details.get("path")


class InvalidPermissionError(PermStoreError, ValueError):
    """A permission value outside ``{"r", "w", "rw", "none"}``."""

    code: str = "INVALID_PERMISSION"

