"""Per-store permission tables and class-level declarations.

A store's tags live in a :class:`PermissionTable` owned by the store
instance. Tags are declared on the store class (``@restrict`` or a
``field_permissions`` mapping) and copied into each instance's table at
construction time, so two instances never share a table.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Mapping, TypeVar

from .constants import Permission, validate_permission

logger = logging.getLogger(__name__)

_T = TypeVar("_T", bound=type)

DECLARATION_ATTR = "field_permissions"


class PermissionTable:
    """Mapping of field name → permission for one store instance.

    ``lookup`` returns ``None`` when a field has no tag. That is distinct
    from the explicit deny ``"none"``.
    """

    __slots__ = ("_tags",)

    def __init__(self, tags: Mapping[str, str] | None = None) -> None:
        self._tags: dict[str, str] = {}
        for field, permission in (tags or {}).items():
            self.annotate(field, permission)

    def annotate(self, field: str, permission: str = Permission.NONE) -> None:
        """Register ``permission`` for ``field``, replacing any earlier tag."""
        self._tags[field] = validate_permission(permission)

    def lookup(self, field: str) -> str | None:
        return self._tags.get(field)

    def is_tagged(self, field: str) -> bool:
        return field in self._tags

    def as_dict(self) -> dict[str, str]:
        return dict(self._tags)

    def __contains__(self, field: object) -> bool:
        return field in self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"PermissionTable({self._tags!r})"


def declared_permissions(cls: type) -> dict[str, str]:
    """Collect ``field_permissions`` declarations along the class hierarchy.

    Subclass declarations override those of their bases.
    """
    merged: dict[str, str] = {}
    for klass in reversed(cls.__mro__):
        declared = klass.__dict__.get(DECLARATION_ATTR)
        if declared:
            merged.update(declared)
    return merged


def restrict(field: str, permission: str = Permission.NONE) -> Callable[[_T], _T]:
    """Class decorator that tags ``field`` on every instance of the class.

    The permission defaults to ``"none"`` (explicit deny).

    Example::

        @restrict("secret")
        @restrict("name", "r")
        class Profile(Store):
            pass
    """
    validate_permission(permission)

    def decorator(cls: _T) -> _T:
        # Copy so the tag never leaks into a base class declaration
        declared = dict(cls.__dict__.get(DECLARATION_ATTR) or {})
        declared[field] = permission
        setattr(cls, DECLARATION_ATTR, declared)
        logger.debug("Declared %s permission %r on field %r", cls.__name__, permission, field)
        return cls

    return decorator


def lookup_permission(field: str, store: Any) -> str | None:
    """Return the tag registered for ``field`` on ``store``, or ``None``."""
    return store.permission_table.lookup(field)


__all__ = [
    "DECLARATION_ATTR",
    "PermissionTable",
    "declared_permissions",
    "lookup_permission",
    "restrict",
]
