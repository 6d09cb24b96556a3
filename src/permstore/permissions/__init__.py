"""Per-field permission model for the store.

Defines:
- Permission: the four permission values (r / w / rw / none)
- Access: the access verbs a permission grants (read / write)
- PermissionTable: per-store field → permission table
- restrict(): class-level permission declaration
- can_read() / can_write_path(): the read and write checks
"""

from .access import PERMISSION_GRANTS, can_read, can_write_path, grants
from .constants import Access, Permission, is_valid_permission, validate_permission
from .registry import (
    PermissionTable,
    declared_permissions,
    lookup_permission,
    restrict,
)

__all__ = [
    "PERMISSION_GRANTS",
    "Access",
    "Permission",
    "PermissionTable",
    "can_read",
    "can_write_path",
    "declared_permissions",
    "grants",
    "is_valid_permission",
    "lookup_permission",
    "restrict",
    "validate_permission",
]
