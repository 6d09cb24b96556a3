"""Configuration contract for the permission store.

Pydantic-validated settings for logging and for the store-wide default
policy. Code that embeds the store should build a ``StoreConfig`` (or call
``load_store_config_from_env``) once and pass it down, rather than reading
the environment itself.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .permissions.constants import Permission


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class StoreConfig(BaseModel):
    """Settings shared by every store built from this config.

    RULE: environment variables are read in ``load_store_config_from_env``
    only; everything else takes a ``StoreConfig``.
    """

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )

    # Access policy
    default_policy: str = Field(
        default=Permission.DEFAULT_POLICY,
        description="Permission applied to untagged fields: r, w, rw or none",
    )

    # Log hygiene
    redact_values: bool = Field(
        default=True,
        description="Redact secrets in logged value previews and hide values of 'none' fields",
    )

    @field_validator("default_policy")
    @classmethod
    def validate_default_policy(cls, v: str) -> str:
        """Reject anything outside the four permission values."""
        if v not in Permission.ALL:
            raise ValueError(f"Invalid default policy: {v}. Must be one of {sorted(Permission.ALL)}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",  # Prevent accidental extra fields
    }


def load_store_config_from_env() -> StoreConfig:
    """Load store configuration from environment variables.

    Environment variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)
    - PERMSTORE_DEFAULT_POLICY: Default policy for untagged fields (default: rw)
    - PERMSTORE_REDACT_VALUES: Redact logged values (true/false, default: true)

    Returns:
        StoreConfig instance with values from environment or defaults.
    """
    import os

    return StoreConfig(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes"),
        default_policy=os.getenv("PERMSTORE_DEFAULT_POLICY", Permission.DEFAULT_POLICY).strip().lower(),
        redact_values=os.getenv("PERMSTORE_REDACT_VALUES", "true").lower() in ("true", "1", "yes"),
    )


__all__ = [
    "LogLevel",
    "StoreConfig",
    "load_store_config_from_env",
]
