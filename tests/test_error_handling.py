"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from permstore import (
    ConfigurationError,
    InvalidPathError,
    InvalidPermissionError,
    PermissionDeniedError,
    PermStoreError,
    Store,
)


class TestErrorHierarchy:
    """Tests for codes, messages and details."""

    def test_base_defaults(self) -> None:
        err = PermStoreError()
        assert err.code == "INTERNAL_ERROR"
        assert err.message == "An internal error occurred"
        assert err.details == {}

    def test_details_kept(self) -> None:
        err = PermissionDeniedError("Writing permission denied : a", path="a", access="write")
        assert str(err) == "Writing permission denied : a"
        assert err.code == "PERMISSION_DENIED"
        assert err.path == "a"
        assert err.access == "write"

    @pytest.mark.parametrize(
        ("cls", "builtin"),
        [(InvalidPathError, LookupError), (InvalidPermissionError, ValueError)],
    )
    def test_builtin_bases(self, cls: type, builtin: type) -> None:
        """Errors can be caught by their builtin counterparts too."""
        with pytest.raises(builtin):
            raise cls("boom")

    def test_all_are_store_errors(self) -> None:
        for cls in (ConfigurationError, InvalidPathError, InvalidPermissionError, PermissionDeniedError):
            assert issubclass(cls, PermStoreError)


class TestRaisedByStore:
    """Tests that store operations raise the documented errors."""

    def test_read_denied_names_path(self) -> None:
        store = Store(permissions={"secret": "none"})
        with pytest.raises(PermissionDeniedError) as exc_info:
            store.read("secret")
        assert exc_info.value.path == "secret"
        assert exc_info.value.access == "read"
        assert "secret" in str(exc_info.value)

    def test_invalid_path_names_full_path(self) -> None:
        store = Store({"a": {"b": {}}})
        with pytest.raises(InvalidPathError) as exc_info:
            store.read("a:b:c:d")
        assert str(exc_info.value) == "Invalid path : a:b:c:d"
        assert exc_info.value.code == "INVALID_PATH"

    def test_first_failure_propagates_unwrapped(self) -> None:
        """write_entries does not aggregate errors."""
        store = Store(permissions={"b": "r"})
        with pytest.raises(PermissionDeniedError) as exc_info:
            store.write_entries({"a": 1, "b": 2, "c": 3})
        assert exc_info.value.path == "b"

    def test_bad_config_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            Store(config={"default_policy": "r"})  # type: ignore[arg-type]
