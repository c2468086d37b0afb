"""Tests for the LightMap JSON parser."""

import json
import pytest
from lightmap import LightMap, LightMapParser, InvalidInputError, LightMapOptions
from lightmap.types import ErrorType


class TestLightMapParser:
    """Tests for LightMapParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = LightMapParser()

    def test_parse_flat_pairs(self):
        """Test parsing a flat array of pairs."""
        light_map = self.parser.parse('[["key", "value"], ["key1", "value1"]]')

        assert LightMap.is_instance_of(light_map)
        assert list(light_map.items()) == [("key", "value"), ("key1", "value1")]

    def test_parse_nested_pairs(self, nested_pairs):
        """Test that nested pair arrays become nested maps."""
        light_map = self.parser.parse(json.dumps(nested_pairs))

        assert isinstance(light_map["key"]["keyB"], LightMap)
        assert light_map.to_object() == {"key": {"keyA": "valueA", "keyB": {"key2": "value2"}}}

    def test_parse_shallow(self):
        """Test parsing with promotion disabled."""
        parser = LightMapParser(options=LightMapOptions(deep_transform_to_map=False))
        light_map = parser.parse('[["x", [["y", 1]]]]')

        assert light_map["x"] == [["y", 1]]

    def test_parse_to_string_output(self):
        """Test that to_string output parses back to an equal map."""
        light_map = LightMap([["key", LightMap([["a", "b"]])]])

        assert self.parser.parse(light_map.to_string()) == light_map

    def test_parse_pairs_with_list_first_items(self):
        """Test that segment lists nested in a value stay lists."""
        light_map = self.parser.parse('[["segments", [[[0, 0], [1, 1]]]]]')

        assert light_map["segments"] == [[[0, 0], [1, 1]]]

    def test_parse_empty_array(self):
        """Test parsing an empty array."""
        assert self.parser.parse("[]").size == 0

    def test_parse_empty_string(self):
        """Test parsing empty input."""
        with pytest.raises(ValueError, match="Invalid LightMap input"):
            self.parser.parse("   ")

    def test_parse_invalid_syntax(self):
        """Test parsing malformed JSON."""
        with pytest.raises(InvalidInputError) as exc_info:
            self.parser.parse('[["key", "value"]')

        assert exc_info.value.error_type == ErrorType.SYNTAX

    def test_parse_object_root(self):
        """Test that a JSON object root is rejected."""
        with pytest.raises(InvalidInputError, match="Root element must be a list") as exc_info:
            self.parser.parse('{"key": "value"}')

        assert exc_info.value.error_type == ErrorType.STRUCTURE

    def test_parse_bad_entry(self):
        """Test that an entry of the wrong length is rejected."""
        with pytest.raises(InvalidInputError, match="length 3"):
            self.parser.parse('[["a", 1, 2]]')

    def test_parse_unhashable_key(self):
        """Test that list keys are rejected."""
        with pytest.raises(InvalidInputError, match="hashable"):
            self.parser.parse('[[["a"], 1]]')

    def test_dumps_nested_maps(self):
        """Test encoding maps anywhere inside plain values."""
        payload = {"maps": [LightMap([["a", 1]])]}

        assert self.parser.dumps(payload) == '{"maps":[[["a",1]]]}'

    def test_dumps_indent(self):
        """Test indented output."""
        result = self.parser.dumps(LightMap([["a", 1]]), indent=2)

        assert json.loads(result) == [["a", 1]]
        assert "\n" in result

    def test_dumps_unsupported_value(self):
        """Test that non-JSON values still fail."""
        with pytest.raises(TypeError):
            self.parser.dumps({"value": object()})
