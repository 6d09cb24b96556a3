"""Permission constants for the store.

Provides:
- ``Permission`` - the four per-field permission values.
- ``Access`` - the two access verbs a permission can grant.
- ``validate_permission()`` - normalise and reject unknown values.
"""

from __future__ import annotations

from ..exceptions import InvalidPermissionError


class Permission:
    """Per-field permission values.

    A field tagged ``NONE`` is an explicit deny. A field with no tag at
    all is *not* the same thing: it defers to the store's default policy.

    Example::

        @restrict("secret")                 # Permission.NONE
        @restrict("name", Permission.READ)  # read-only
        class Profile(Store):
            ...
    """

    READ = "r"
    WRITE = "w"
    READ_WRITE = "rw"
    NONE = "none"

    ALL = frozenset({"r", "w", "rw", "none"})

    # Store-wide fallback when nothing else is configured
    DEFAULT_POLICY = "rw"


class Access:
    """Access verbs checked against a permission."""

    READ = "read"
    WRITE = "write"

    ALL = frozenset({"read", "write"})


def is_valid_permission(value: object) -> bool:
    return isinstance(value, str) and value in Permission.ALL


def validate_permission(value: object) -> str:
    """Return ``value`` if it is one of the four permission values.

    Raises:
        InvalidPermissionError: For anything else, including ``None``.
    """
    if not is_valid_permission(value):
        raise InvalidPermissionError(
            f"Invalid permission: {value!r}. Must be one of {sorted(Permission.ALL)}",
            value=value,
        )
    return value  # type: ignore[return-value]


__all__ = [
    "Access",
    "Permission",
    "is_valid_permission",
    "validate_permission",
]
