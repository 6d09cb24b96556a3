"""Access-check helpers for store fields.

``PERMISSION_GRANTS`` maps each permission to the access verbs it allows.
The checks are pure functions: they take a tag (or a tag lookup) plus
the store's default policy and answer whether a read or write is
allowed. The :class:`~permstore.store.Store` methods are thin wrappers
around them.
"""

from __future__ import annotations

from typing import Callable, Iterable

from .constants import Access, Permission


PERMISSION_GRANTS: dict[str, frozenset[str]] = {
    Permission.READ: frozenset({Access.READ}),
    Permission.WRITE: frozenset({Access.WRITE}),
    Permission.READ_WRITE: frozenset({Access.READ, Access.WRITE}),
    Permission.NONE: frozenset(),
}


def grants(permission: str | None, access: str) -> bool:
    """Check whether ``permission`` allows ``access``.

    ``None`` (no tag) and unknown values grant nothing; callers decide
    separately whether an absent tag falls back to a default policy.
    """
    if permission is None:
        return False
    return access in PERMISSION_GRANTS.get(permission, frozenset())


def can_read(tag: str | None, default_policy: str) -> bool:
    """Check if a field tag allows reading.

    Checks in order:
    1. ``"r"`` / ``"rw"`` → allowed
    2. ``"none"`` → denied, whatever the default policy says
    3. anything else → allowed iff the default policy grants read

    A write-only tag (``"w"``) says nothing about reading, so it falls
    through to the default policy just like an untagged field.

    Example::

        can_read("r", "none")     # True
        can_read("none", "rw")    # False
        can_read(None, "w")       # False
        can_read("w", "rw")       # True
    """
    if grants(tag, Access.READ):
        return True
    if tag == Permission.NONE:
        return False
    return grants(default_policy, Access.READ)


def can_write_path(
    segments: Iterable[str],
    lookup: Callable[[str], str | None],
    default_policy: str,
) -> bool:
    """Check if a path may be written.

    Segments are inspected in order. The first segment without a tag ends
    the walk and the default policy decides. If every segment is tagged,
    only the last tag decides; tags on earlier segments are ignored.

    Example::

        # tags: {"a": "none", "b": "rw"}, default policy "rw"
        can_write_path(["a", "b"], tags.get, "rw")   # True (last tag wins)
        can_write_path(["x", "a"], tags.get, "rw")   # True (x untagged)
        can_write_path(["a", "x"], tags.get, "r")    # False (x untagged)
    """
    last: str | None = None
    for segment in segments:
        tag = lookup(segment)
        if tag is None:
            return grants(default_policy, Access.WRITE)
        last = tag
    return grants(last, Access.WRITE)


__all__ = [
    "PERMISSION_GRANTS",
    "can_read",
    "can_write_path",
    "grants",
]
