"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_pairs():
    """Flat list of [key, value] pairs."""
    return [
        ["key", "value"],
        ["key1", "value1"],
        ["key2", "value2"],
    ]


@pytest.fixture
def nested_pairs():
    """Pairs describing {key: {keyA: valueA, keyB: {key2: value2}}}."""
    return [
        ["key", [
            ["keyA", "valueA"],
            ["keyB", [["key2", "value2"]]],
        ]],
    ]


@pytest.fixture
def pairs_file(temp_dir, nested_pairs):
    """JSON file holding the nested pairs."""
    path = temp_dir / "pairs.json"
    path.write_text(json.dumps(nested_pairs), encoding="utf-8")
    return path
