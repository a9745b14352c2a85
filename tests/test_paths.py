"""
Tests for field path parsing.
"""

import pytest

from htmldecks.errors import InvalidFieldPath
from htmldecks.paths import (
    BulletField,
    MetricField,
    TableCellField,
    TextField,
    parse_field_path,
)


def test_parse_each_path_kind():
    """Test that every key format parses to its path type."""
    assert parse_field_path("title") == TextField(name="title")
    assert parse_field_path("metrics.2.label") == MetricField(index=2, part="label")
    assert parse_field_path("table.1.3") == TableCellField(row=1, col=3)
    assert parse_field_path("left_column.0") == BulletField(column="left_column", index=0)


def test_key_round_trip():
    """Test that keys parse back to the same path."""
    paths = [
        TextField(name="attribution"),
        MetricField(index=0, part="number"),
        TableCellField(row=0, col=0),
        BulletField(column="content", index=4),
    ]
    for path in paths:
        assert parse_field_path(path.key) == path


@pytest.mark.parametrize(
    "key",
    ["", "colour", "metrics.x.label", "metrics.1.value", "table.1", "content.-1", "title.0"],
)
def test_invalid_keys(key):
    """Test that malformed keys are rejected."""
    with pytest.raises(InvalidFieldPath):
        parse_field_path(key)


def test_invalid_field_path_is_value_error():
    """Test that InvalidFieldPath can be caught as ValueError."""
    with pytest.raises(ValueError):
        parse_field_path("nope")


def test_paths_are_hashable():
    """Test that paths can key a dict."""
    seen = {BulletField(column="content", index=1): "x"}
    assert seen[parse_field_path("content.1")] == "x"
