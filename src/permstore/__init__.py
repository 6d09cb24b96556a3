from .config import LogLevel, StoreConfig, load_store_config_from_env
from .exceptions import (
    ConfigurationError,
    InvalidPathError,
    InvalidPermissionError,
    PermissionDeniedError,
    PermStoreError,
)
from .logging import (
    safe_preview,
    redact_secrets,
    safe_log_value,
    StoreFormatter,
    StoreLoggerAdapter,
    setup_logging,
    get_store_logger,
)
from .paths import PATH_SEPARATOR, join_path, split_path
from .permissions import (
    Access,
    Permission,
    PermissionTable,
    lookup_permission,
    restrict,
)
from .store import Store

__all__ = [
    'Store',
    'Permission',
    'Access',
    'PermissionTable',
    'restrict',
    'lookup_permission',
    'PATH_SEPARATOR',
    'split_path',
    'join_path',
    'PermStoreError',
    'PermissionDeniedError',
    'InvalidPathError',
    'InvalidPermissionError',
    'ConfigurationError',
    'StoreConfig',
    'LogLevel',
    'load_store_config_from_env',
    'safe_preview',
    'redact_secrets',
    'safe_log_value',
    'StoreFormatter',
    'StoreLoggerAdapter',
    'setup_logging',
    'get_store_logger',
]
