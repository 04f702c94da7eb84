"""Tests for copy-on-attach fields"""

import pytest

from fieldlog import Fields


class TestFields:
    """Test copy-on-attach field semantics."""

    def test_empty(self):
        fields = Fields()
        assert len(fields) == 0
        assert dict(fields) == {}

    def test_with_field_does_not_mutate(self):
        base = Fields({"a": 1})
        extended = base.with_field("b", 2)

        assert dict(base) == {"a": 1}
        assert dict(extended) == {"a": 1, "b": 2}

    def test_with_fields_later_keys_win(self):
        fields = Fields({"a": 1, "b": 1}).with_fields({"a": 2})
        assert fields["a"] == 2
        assert fields["b"] == 1

    def test_source_mapping_is_copied(self):
        source = {"a": 1}
        fields = Fields(source)
        source["a"] = 99
        assert fields["a"] == 1

    def test_read_only(self):
        fields = Fields({"a": 1})
        with pytest.raises(TypeError):
            fields["a"] = 2

    def test_to_dict_returns_copy(self):
        fields = Fields({"a": 1})
        data = fields.to_dict()
        data["b"] = 2
        assert "b" not in fields
