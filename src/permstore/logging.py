"""Logging utilities for the permission store.

This module provides:
- Logging configuration from StoreConfig
- Safe preview utilities for stored values
- Secret redaction
- Structured logging with store identity attached to records
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional
from uuid import UUID

from .config import LogLevel, StoreConfig


# Credentials that stored values are likely to carry. Previews of mappings
# are JSON, so a key may be followed by its closing quote.
SECRET_PATTERNS = [
    re.compile(
        r'(?:password|passwd|pwd|secret|token|api[_-]?key|auth[_-]?token)["\']?\s*[:=]\s*["\']?[^"\'\s,}]+',
        re.IGNORECASE,
    ),
    re.compile(r'(?:bearer|basic)\s+[a-z0-9+/=._-]+', re.IGNORECASE),
    re.compile(r'\b(?:sk|pk)-[a-z0-9]{32,}', re.IGNORECASE),
]

HIDDEN_VALUE = "[HIDDEN]"

# LogRecord attributes that are not user-supplied extras
_RECORD_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "message", "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "exc_info", "exc_text", "stack_info",
    "taskName", "store_id", "store_class",
})


def safe_preview(value: Any, limit: int = 240) -> str:
    """Render ``value`` as one line of at most ``limit`` characters.

    Strings are used as-is, lists and dicts as JSON, and anything else
    (nested stores included) through ``str()``. Runs of whitespace
    collapse to a single space and an over-long preview ends in ``…``.
    """
    if value is None:
        return ""

    if isinstance(value, str):
        text = value
    elif isinstance(value, (dict, list)):
        try:
            text = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            text = str(value)
    else:
        text = str(value)

    text = " ".join(text.split())
    return text if len(text) <= limit else text[: limit - 1] + "…"


def redact_secrets(text: str, replacement: str = "[REDACTED]") -> str:
    """Replace anything matching :data:`SECRET_PATTERNS` in ``text``.

    Non-string input is returned unchanged.
    """
    if not isinstance(text, str):
        return text
    for pattern in SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def safe_log_value(value: Any, limit: int = 240, redact: bool = True) -> str:
    """Create a safe log value with preview and optional redaction.

    Combines safe_preview() and redact_secrets(). Use it whenever a stored
    value ends up in a log line.
    """
    preview = safe_preview(value, limit=limit)
    if redact:
        preview = redact_secrets(preview)
    return preview


class StoreFormatter(logging.Formatter):
    """Formatter that includes store identity and optional JSON output.

    This formatter:
    - Extracts store_id / store_class from log records (if available)
    - Formats logs as JSON or plain text
    - Redacts secrets automatically
    """

    def __init__(
        self,
        include_store_id: bool = True,
        json_format: bool = True,
        redact_secrets: bool = True,
        *args: Any,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self.include_store_id = include_store_id
        self.json_format = json_format
        self.redact_secrets = redact_secrets

    def format(self, record: logging.LogRecord) -> str:
        store_id = getattr(record, "store_id", None)
        store_class = getattr(record, "store_class", None)

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.include_store_id:
            if store_id:
                log_data["store_id"] = str(store_id) if isinstance(store_id, UUID) else store_id
            if store_class:
                log_data["store_class"] = store_class

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                log_data[key] = safe_log_value(value, redact=self.redact_secrets)

        if self.redact_secrets:
            log_data["message"] = redact_secrets(log_data["message"])

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            f"{log_data['level']}",
            f"{log_data['logger']}",
        ]
        if self.include_store_id and store_id:
            parts.append(f"store_id={log_data.get('store_id', '')}")
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class StoreLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds store_id and store_class to log records.

    Usage:
        logger = get_store_logger(__name__)
        logger.info("Write denied", store=my_store)
    """

    def __init__(
        self,
        logger: logging.Logger,
        store_id: Optional[UUID | str] = None,
        store_class: Optional[str] = None,
    ):
        super().__init__(logger, {})
        self.store_id = store_id
        self.store_class = store_class

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        store_id = kwargs.pop("store_id", self.store_id)
        store_class = kwargs.pop("store_class", self.store_class)

        store = kwargs.pop("store", None)
        if store is not None:
            store_id = store_id or getattr(store, "store_id", None)
            store_class = store_class or type(store).__name__

        extra = kwargs.get("extra", {})
        if store_id:
            extra["store_id"] = store_id
        if store_class:
            extra["store_class"] = store_class
        kwargs["extra"] = extra

        return msg, kwargs


def setup_logging(
    config: Optional[StoreConfig] = None,
    json_format: Optional[bool] = None,
    redact_secrets: Optional[bool] = None,
) -> None:
    """Configure root logging for an application embedding the store.

    Args:
        config: StoreConfig instance (if None, loads from environment)
        json_format: Override ``config.log_json``
        redact_secrets: Override ``config.redact_values``
    """
    if config is None:
        from .config import load_store_config_from_env
        config = load_store_config_from_env()

    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    log_level = level_map.get(config.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        StoreFormatter(
            include_store_id=True,
            json_format=config.log_json if json_format is None else json_format,
            redact_secrets=config.redact_values if redact_secrets is None else redact_secrets,
        )
    )
    root_logger.addHandler(console_handler)


def get_store_logger(
    name: str,
    store_id: Optional[UUID | str] = None,
    store_class: Optional[str] = None,
) -> StoreLoggerAdapter:
    """Get a logger adapter that tags records with store identity.

    Example:
        logger = get_store_logger(__name__, store_id=store.store_id)
        logger.debug("Wrote %s", path)
    """
    logger = logging.getLogger(name)
    return StoreLoggerAdapter(logger, store_id=store_id, store_class=store_class)


__all__ = [
    "HIDDEN_VALUE",
    "safe_preview",
    "redact_secrets",
    "safe_log_value",
    "StoreFormatter",
    "StoreLoggerAdapter",
    "setup_logging",
    "get_store_logger",
]
