import pytest
from hookcuts.utils import system
from hookcuts.utils.system import parse_timestamp, format_timestamp_simple

def test_parse_timestamp():
    assert parse_timestamp("00:00:00,000") == 0.0
    assert parse_timestamp("00:00:01,000") == 1.0
    assert abs(parse_timestamp("01:01:01,123") - 3661.123) < 1e-6

def test_parse_timestamp_webvtt_separator():
    assert abs(parse_timestamp("00:01:02.500") - 62.5) < 1e-6
    assert abs(parse_timestamp("01:02.5") - 62.5) < 1e-6

def test_parse_timestamp_rejects_garbage():
    with pytest.raises(ValueError):
        parse_timestamp("not a time")

def test_format_timestamp_simple():
    assert format_timestamp_simple(0) == "0:00"
    assert format_timestamp_simple(65) == "1:05"
    assert format_timestamp_simple(3725) == "1:02:05"

def test_only_used_helpers_are_exported():
    assert not hasattr(system, "format_timestamp")

if __name__ == "__main__":
    test_parse_timestamp()
    test_format_timestamp_simple()
    print("Basic tests passed!")
