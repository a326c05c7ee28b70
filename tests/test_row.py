"""Tests for the Row mapping."""

import copy
import pickle

import pytest

from rowcursor.protocols import Row


class TestRow:
    """Tests for Row."""

    def test_item_and_attribute_access(self):
        """Columns are reachable by key and by attribute."""
        row = Row({"id": 1, "name": "Bob"})
        assert row["id"] == 1
        assert row.name == "Bob"

    def test_keeps_column_order(self):
        """Iteration follows result column order."""
        row = Row([("b", 2), ("a", 1)])
        assert list(row) == ["b", "a"]
        assert list(row.keys()) == ["b", "a"]
        assert list(row.values()) == [2, 1]

    def test_equals_plain_dict(self):
        """A row compares equal to a dict with the same items."""
        assert Row({"id": 1}) == {"id": 1}
        assert Row(id=1) == Row({"id": 1})
        assert Row({"id": 1}) != {"id": 2}

    def test_missing_attribute(self):
        """A missing column raises AttributeError naming it."""
        row = Row({"id": 1})
        with pytest.raises(AttributeError, match="nonexistent"):
            _ = row.nonexistent

    def test_missing_key(self):
        """A missing column raises KeyError."""
        with pytest.raises(KeyError):
            Row({"id": 1})["other"]

    def test_read_only(self):
        """Rows cannot be modified."""
        row = Row({"id": 1})
        with pytest.raises(AttributeError):
            row.id = 2
        with pytest.raises(TypeError):
            row["id"] = 2  # type: ignore[index]

    def test_to_dict_is_a_copy(self):
        """to_dict() returns an independent dictionary."""
        row = Row({"id": 1})
        data = row.to_dict()
        data["id"] = 5
        assert row["id"] == 1

    def test_contains_and_len(self):
        """Membership and length follow the columns."""
        row = Row({"id": 1, "name": None})
        assert "name" in row
        assert "other" not in row
        assert len(row) == 2

    def test_copy(self):
        """Rows can be shallow and deep copied."""
        row = Row({"id": 1, "tags": ["a"]})
        shallow = copy.copy(row)
        deep = copy.deepcopy(row)
        assert shallow == row
        assert deep == row
        assert deep["tags"] is not row["tags"]

    def test_pickle(self):
        """Rows survive a pickle round trip with their column order."""
        row = Row([("b", 2), ("a", 1)])
        restored = pickle.loads(pickle.dumps(row))
        assert restored == row
        assert list(restored) == ["b", "a"]
