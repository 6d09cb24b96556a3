"""Colon-delimited path addressing over the store's value tree.

A path like ``"a:b:c"`` names field ``c`` of field ``b`` of field ``a``.
There is no escaping: a field name can never contain ``:``.

Each step of a traversal looks the next segment up in the current node:

- a nested store (any :class:`~permstore.interfaces.FieldContainer`) →
  its raw field, without consulting that store's permissions
- a mapping → key lookup
- a list → integer index, when the segment is a decimal number
- a deferred value (zero-argument callable) → called, then stepped into

Anything else is a leaf that cannot be stepped into.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Union

from .exceptions import InvalidPathError
from .interfaces import FieldContainer

PATH_SEPARATOR = ":"

Primitive = Union[str, int, float, bool, None]
# Primitive | list | dict | nested store | deferred value
StoreValue = Any
Deferred = Callable[[], StoreValue]

_MISSING = object()


def split_path(path: str) -> list[str]:
    """Split a path into its segments.

    Example::

        split_path("a:b:c")  # ["a", "b", "c"]
        split_path("name")   # ["name"]
    """
    return path.split(PATH_SEPARATOR)


def join_path(*segments: str) -> str:
    return PATH_SEPARATOR.join(segments)


def is_deferred(value: Any) -> bool:
    """True for zero-argument callables stored as lazy values.

    Classes are callable too but are stored as plain values.
    """
    return callable(value) and not isinstance(value, (type, FieldContainer))


def is_container(value: Any) -> bool:
    return isinstance(value, (FieldContainer, Mapping, list))


def _is_empty_leaf(value: Any) -> bool:
    # Empty containers are still containers and are kept
    if value is None:
        return True
    return isinstance(value, (str, int, float, bool)) and not value


def _materialize(node: Any) -> Any:
    return node() if is_deferred(node) else node


def _index(segment: str) -> int | None:
    if segment.isascii() and segment.isdecimal():
        return int(segment)
    return None


def _step(node: Any, segment: str) -> Any:
    if isinstance(node, FieldContainer):
        return node.get_field(segment, _MISSING)
    if isinstance(node, Mapping):
        return node.get(segment, _MISSING)
    if isinstance(node, list):
        index = _index(segment)
        if index is not None and index < len(node):
            return node[index]
    return _MISSING


def _put(node: Any, segment: str, value: Any, path: str) -> None:
    if isinstance(node, FieldContainer):
        node.set_field(segment, value)
        return
    if isinstance(node, MutableMapping):
        node[segment] = value
        return
    if isinstance(node, list):
        index = _index(segment)
        if index is not None and index < len(node):
            node[index] = value
            return
        if index is not None and index == len(node):
            node.append(value)
            return
    raise InvalidPathError(f"Invalid path : {path}", path=path, segment=segment)


def resolve_path(root: Any, path: str) -> StoreValue:
    """Walk ``path`` from ``root`` and return the value found there.

    The final value is returned as stored: a deferred value at the leaf is
    not called.

    Raises:
        InvalidPathError: If any segment resolves to nothing.
    """
    node = root
    for segment in split_path(path):
        node = _step(_materialize(node), segment)
        if node is _MISSING:
            raise InvalidPathError(f"Invalid path : {path}", path=path, segment=segment)
    return node


def assign_path(root: Any, path: str, value: StoreValue) -> StoreValue:
    """Store ``value`` at ``path`` below ``root``, creating intermediates.

    Intermediate segments that are absent or hold an empty primitive
    (``None``, ``False``, ``0``, ``""``) are replaced with a new ``dict``.
    A deferred intermediate is called once and its result replaces it in
    the parent, so the write lands in a value later reads will see. The
    last segment receives ``value`` verbatim, overwriting whatever was
    there.

    Raises:
        InvalidPathError: If an intermediate segment holds a non-empty
            primitive, or a deferred value producing one, which has no
            fields to write into.
    """
    *parents, last = split_path(path)
    node = _materialize(root)
    for segment in parents:
        if not is_container(node):
            raise InvalidPathError(f"Invalid path : {path}", path=path, segment=segment)
        child = _step(node, segment)
        if child is _MISSING or _is_empty_leaf(child):
            child = {}
            _put(node, segment, child, path)
        elif is_deferred(child):
            child = child()
            if not is_container(child):
                raise InvalidPathError(f"Invalid path : {path}", path=path, segment=segment)
            _put(node, segment, child, path)
        node = child

    if not is_container(node):
        raise InvalidPathError(f"Invalid path : {path}", path=path, segment=last)
    _put(node, last, value, path)
    return value


__all__ = [
    "PATH_SEPARATOR",
    "Deferred",
    "Primitive",
    "StoreValue",
    "assign_path",
    "is_container",
    "is_deferred",
    "join_path",
    "resolve_path",
    "split_path",
]
