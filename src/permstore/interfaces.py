from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class FieldContainer(Protocol):
    """Anything the path resolver can step into by field name."""

    def get_field(self, name: str, default: Any = None) -> Any: ...

    def has_field(self, name: str) -> bool: ...

    def set_field(self, name: str, value: Any) -> None: ...


@runtime_checkable
class StoreProtocol(Protocol):
    """Public contract of a permission store."""

    default_policy: str

    def allowed_to_read(self, key: str) -> bool: ...

    def allowed_to_write(self, path: str) -> bool: ...

    def read(self, path: str) -> Any: ...

    def write(self, path: str, value: Any) -> Any: ...

    def write_entries(self, entries: Mapping[str, Any]) -> None: ...

    def entries(self) -> dict[str, Any]: ...


__all__ = ["FieldContainer", "StoreProtocol"]
