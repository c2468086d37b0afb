"""Tests for validation utilities."""

import pytest
import json
from lightmap.utils.validation import ValidationUtils
from lightmap.types import ErrorType
from lightmap import LightMap


class TestValidationUtils:
    """Tests for ValidationUtils class."""

    @pytest.mark.parametrize("value", [["a", 1], ("a", 1), [None, None]])
    def test_is_pair(self, value):
        """Test values recognized as pairs."""
        assert ValidationUtils.is_pair(value)

    @pytest.mark.parametrize("value", ["ab", ["a"], ["a", 1, 2], {"a": 1}, None])
    def test_is_not_pair(self, value):
        """Test values that are not pairs."""
        assert not ValidationUtils.is_pair(value)

    def test_is_pair_sequence(self):
        """Test pair sequence detection."""
        assert ValidationUtils.is_pair_sequence([["a", 1], ("b", 2)])
        assert ValidationUtils.is_pair_sequence([])
        assert not ValidationUtils.is_pair_sequence([["a", 1], [None]])
        assert not ValidationUtils.is_pair_sequence(("a", "b"))
        assert not ValidationUtils.is_pair_sequence("ab")
        assert not ValidationUtils.is_pair_sequence(LightMap([["a", 1]]))

    def test_pairs_keyed_by_lists_are_not_a_pair_sequence(self):
        """Test that pairs whose first item is unhashable are rejected."""
        assert not ValidationUtils.is_pair_sequence([[[0, 0], [1, 1]], [[2, 2], [3, 3]]])
        assert not ValidationUtils.is_pair_sequence([["a", 1], [{"b": 2}, 3]])

    def test_is_hashable(self):
        """Test hashability checks."""
        assert ValidationUtils.is_hashable("a")
        assert ValidationUtils.is_hashable((0, 0))
        assert not ValidationUtils.is_hashable([0, 0])
        assert not ValidationUtils.is_hashable({"a": 1})

    def test_max_depth_calculation(self):
        """Test maximum depth calculation."""
        assert ValidationUtils.calculate_max_depth([["a", [["b", 1]]]]) == 4
        assert ValidationUtils.calculate_max_depth("flat") == 0

    def test_validate_entries_valid(self):
        """Test validation of a valid pair list."""
        result = ValidationUtils.validate_entries([["a", 1], ["b", [["c", 2]]]])

        assert result.is_valid
        assert result.errors == []

    def test_validate_entries_reports_each_bad_entry(self):
        """Test that every malformed entry gets its own error."""
        result = ValidationUtils.validate_entries([["a", 1], ["b"], "c"])

        assert not result.is_valid
        assert [error.location for error in result.errors] == ["[1]", "[2]"]
        assert "length 1" in result.errors[0].message
        assert "str" in result.errors[1].message

    def test_validate_entries_unhashable_key(self):
        """Test that a root pair keyed by a list is reported."""
        result = ValidationUtils.validate_entries([[[0, 0], [1, 1]]])

        assert not result.is_valid
        assert "hashable" in result.errors[0].message

    def test_validate_entries_deep_nesting_warning(self):
        """Test warning for deep nesting."""
        value = "leaf"
        for depth in range(12):
            value = [[f"level_{depth}", value]]

        result = ValidationUtils.validate_entries(value)

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "Deep nesting detected" in result.warnings[0]

    def test_validate_empty_json(self):
        """Test validation of empty JSON string."""
        result = ValidationUtils.validate_json_string("")

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "empty" in result.errors[0].message.lower()

    def test_validate_invalid_json_syntax(self):
        """Test validation of invalid JSON syntax."""
        result = ValidationUtils.validate_json_string('[["a", 1]')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "syntax" in result.errors[0].message.lower()

    def test_validate_unsupported_root_type(self):
        """Test validation of unsupported root type."""
        result = ValidationUtils.validate_json_string(json.dumps("just a string"))

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.STRUCTURE
        assert "Root element must be a list" in result.errors[0].message
