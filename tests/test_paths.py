"""Tests for path parsing and traversal."""

from __future__ import annotations

import pytest

from permstore import InvalidPathError, Store
from permstore.paths import (
    PATH_SEPARATOR,
    assign_path,
    is_container,
    is_deferred,
    join_path,
    resolve_path,
    split_path,
)


class TestSplitJoin:
    """Tests for split_path / join_path."""

    def test_separator(self) -> None:
        assert PATH_SEPARATOR == ":"

    def test_split(self) -> None:
        assert split_path("a:b:c") == ["a", "b", "c"]
        assert split_path("name") == ["name"]

    def test_split_empty_segments_kept(self) -> None:
        """Empty names are ordinary (usually missing) fields."""
        assert split_path("") == [""]
        assert split_path("a::b") == ["a", "", "b"]

    def test_join(self) -> None:
        assert join_path("a", "b", "c") == "a:b:c"


class TestPredicates:
    """Tests for is_deferred / is_container."""

    def test_is_deferred(self) -> None:
        assert is_deferred(lambda: 1)
        assert not is_deferred(dict)
        assert not is_deferred(Store())
        assert not is_deferred("text")

    def test_is_container(self) -> None:
        assert is_container({})
        assert is_container([])
        assert is_container(Store())
        assert not is_container("text")
        assert not is_container(None)


class TestResolvePath:
    """Tests for resolve_path on plain data."""

    def test_mapping_lookup(self) -> None:
        assert resolve_path({"a": {"b": 1}}, "a:b") == 1

    def test_missing_key(self) -> None:
        with pytest.raises(InvalidPathError, match="Invalid path : a:x") as exc_info:
            resolve_path({"a": {"b": 1}}, "a:x")
        assert exc_info.value.details["segment"] == "x"

    def test_step_into_leaf_fails(self) -> None:
        """Primitives and None have no fields."""
        with pytest.raises(InvalidPathError):
            resolve_path({"a": 5}, "a:b")
        with pytest.raises(InvalidPathError):
            resolve_path({"a": None}, "a:b")

    def test_list_needs_decimal_index(self) -> None:
        data = {"l": ["x", "y"]}
        assert resolve_path(data, "l:0") == "x"
        with pytest.raises(InvalidPathError):
            resolve_path(data, "l:first")
        with pytest.raises(InvalidPathError):
            resolve_path(data, "l:-1")

    def test_deferred_leaf_not_called(self) -> None:
        calls: list[int] = []

        def deferred() -> dict:
            calls.append(1)
            return {"v": 1}

        assert resolve_path({"d": deferred}, "d") is deferred
        assert calls == []
        assert resolve_path({"d": deferred}, "d:v") == 1
        assert calls == [1]


class TestAssignPath:
    """Tests for assign_path on plain data."""

    def test_creates_intermediates(self) -> None:
        data: dict = {}
        assert assign_path(data, "a:b:c", 42) == 42
        assert data == {"a": {"b": {"c": 42}}}

    def test_keeps_siblings(self) -> None:
        data = {"a": {"keep": 1}}
        assign_path(data, "a:new", 2)
        assert data == {"a": {"keep": 1, "new": 2}}

    def test_list_append_and_gap(self) -> None:
        """Index == len appends; anything past the end is invalid."""
        data = {"l": [1]}
        assign_path(data, "l:1", 2)
        assert data["l"] == [1, 2]
        with pytest.raises(InvalidPathError):
            assign_path(data, "l:5", 3)

    def test_deferred_result_not_container(self) -> None:
        # Nothing is stored when the deferred result cannot hold fields
        data = {"d": lambda: 7}
        with pytest.raises(InvalidPathError):
            assign_path(data, "d:x", 1)
        assert callable(data["d"])

    def test_deferred_intermediate_replaced_by_result(self) -> None:
        calls = []

        def deferred() -> dict:
            calls.append(1)
            return {"v": 1}

        data = {"d": deferred}
        assign_path(data, "d:w", 2)
        assert data == {"d": {"v": 1, "w": 2}}
        assign_path(data, "d:v", 3)
        assert data["d"] == {"v": 3, "w": 2}
        assert calls == [1]
