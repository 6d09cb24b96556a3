"""The permission store.

A :class:`Store` holds arbitrary nested values as its own fields and
mediates every access through colon-delimited paths, checking per-field
permission tags on the way.

Example::

    @restrict("secret")
    class Profile(Store):
        pass

    profile = Profile()
    profile.write("name", "Ann")         # "Ann"
    profile.read("name")                 # "Ann"
    profile.write("address:city", "Oslo")
    profile.read("address")              # {"city": "Oslo"}
    profile.read("secret")               # PermissionDeniedError

Permission checks follow two rules worth knowing:

- ``read`` checks the *whole* path string as a single key. Only tags
  registered on top-level names (or on the literal multi-segment string)
  ever apply, so nested reads are governed by the top-level tag alone.
- ``write`` walks the path segments. The first untagged segment hands the
  decision to the default policy; if every segment is tagged, only the
  last tag counts.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Iterator, Mapping, Optional
from uuid import UUID, uuid4

from .config import StoreConfig
from .exceptions import ConfigurationError, InvalidPathError, PermissionDeniedError
from .logging import HIDDEN_VALUE, get_store_logger, safe_log_value
from .paths import PATH_SEPARATOR, StoreValue, assign_path, resolve_path, split_path
from .permissions.access import can_read, can_write_path
from .permissions.constants import Access, Permission, validate_permission
from .permissions.registry import PermissionTable, declared_permissions


class Store:
    """Nested key-value store with per-field access control.

    Args:
        data: Initial field values. Seeded as-is, without permission checks.
        permissions: Extra ``field → permission`` tags layered over the
            class-level declarations.
        default_policy: Permission applied to untagged fields.
        config: Optional :class:`StoreConfig`; supplies the default policy
            when neither ``default_policy`` nor the class ``policy`` is set.

    Class attributes:
        field_permissions: Declared ``field → permission`` tags. Usually
            filled in by :func:`~permstore.permissions.restrict`.
        policy: Class-wide default policy, or ``None`` to defer to config.
    """

    field_permissions: ClassVar[dict[str, str]] = {}
    policy: ClassVar[Optional[str]] = None

    def __init__(
        self,
        data: Optional[Mapping[str, StoreValue]] = None,
        *,
        permissions: Optional[Mapping[str, str]] = None,
        default_policy: Optional[str] = None,
        config: Optional[StoreConfig] = None,
    ) -> None:
        if config is not None and not isinstance(config, StoreConfig):
            raise ConfigurationError(f"Expected StoreConfig, got {type(config).__name__}")

        self._fields: dict[str, StoreValue] = {}
        for name, value in (data or {}).items():
            if PATH_SEPARATOR in name:
                raise InvalidPathError(f"Invalid field name : {name}", path=name)
            self._fields[name] = value

        tags = declared_permissions(type(self))
        tags.update(permissions or {})
        self._permissions = PermissionTable(tags)

        if default_policy is None:
            default_policy = self.policy
        if default_policy is None and config is not None:
            default_policy = config.default_policy
        if default_policy is None:
            default_policy = Permission.DEFAULT_POLICY
        self.default_policy = default_policy

        self._redact = config.redact_values if config is not None else True
        self.store_id: UUID = uuid4()
        self._logger = get_store_logger(
            __name__,
            store_id=self.store_id,
            store_class=type(self).__name__,
        )

    # ── Policy & tags ───────────────────────────────────

    @property
    def default_policy(self) -> str:
        return self._default_policy

    @default_policy.setter
    def default_policy(self, value: str) -> None:
        self._default_policy = validate_permission(value)

    @property
    def permission_table(self) -> PermissionTable:
        return self._permissions

    def annotate(self, field: str, permission: str = Permission.NONE) -> None:
        """Tag ``field`` on this instance. Defaults to an explicit deny."""
        self._permissions.annotate(field, permission)

    def permission_for(self, field: str) -> str | None:
        """Return the tag on ``field``, or ``None`` when it has none."""
        return self._permissions.lookup(field)

    # ── Permission checks ───────────────────────────────

    def allowed_to_read(self, key: str) -> bool:
        return can_read(self._permissions.lookup(key), self._default_policy)

    def allowed_to_write(self, path: str) -> bool:
        return can_write_path(split_path(path), self._permissions.lookup, self._default_policy)

    # ── Access ──────────────────────────────────────────

    def read(self, path: str) -> StoreValue:
        """Return the value at ``path``.

        Raises:
            PermissionDeniedError: If ``path`` is not readable.
            InvalidPathError: If any segment of ``path`` resolves to nothing.
        """
        if not self.allowed_to_read(path):
            self._logger.info("Read denied for path %r", path)
            raise PermissionDeniedError(
                f"Reading permission denied : {path}",
                path=path,
                access=Access.READ,
            )

        value = resolve_path(self, path)
        self._logger.debug("Read %r", path)
        return value

    def write(self, path: str, value: StoreValue) -> StoreValue:
        """Store ``value`` at ``path`` and return it.

        Intermediate objects are created as needed.

        Raises:
            PermissionDeniedError: If ``path`` is not writable.
        """
        if not self.allowed_to_write(path):
            self._logger.info("Write denied for path %r", path)
            raise PermissionDeniedError(
                f"Writing permission denied : {path}",
                path=path,
                access=Access.WRITE,
            )

        assign_path(self, path, value)
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("Wrote %r = %s", path, self._preview(path, value))
        return value

    def write_entries(self, entries: Mapping[str, StoreValue]) -> None:
        """Write every ``path → value`` pair in order.

        Not transactional: the first denied write propagates, later entries
        are skipped and earlier ones stay written.
        """
        for path, value in entries.items():
            self.write(path, value)

    def entries(self) -> dict[str, StoreValue]:
        """Return ``field → value`` for every readable own field.

        Unreadable fields are left out silently.
        """
        return {name: self.read(name) for name in self.fields() if self.allowed_to_read(name)}

    # ── Raw field access (FieldContainer) ───────────────

    def fields(self) -> list[str]:
        return list(self._fields)

    def get_field(self, name: str, default: Any = None) -> StoreValue:
        return self._fields.get(name, default)

    def has_field(self, name: str) -> bool:
        return name in self._fields

    def set_field(self, name: str, value: StoreValue) -> None:
        self._fields[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(default_policy={self._default_policy!r}, fields={self.fields()!r})"

    def _preview(self, path: str, value: StoreValue) -> str:
        top = split_path(path)[0]
        if self._redact and self._permissions.lookup(top) == Permission.NONE:
            return HIDDEN_VALUE
        return safe_log_value(value, redact=self._redact)


__all__ = ["Store"]
