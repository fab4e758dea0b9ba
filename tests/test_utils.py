import pytest

from vttdoc.utils import format_timestamp, parse_timestamp


def test_format_timestamp_without_hours():
    assert format_timestamp(0) == "00:00.000"
    assert format_timestamp(90.5) == "01:30.500"


def test_format_timestamp_with_hours():
    assert format_timestamp(3661.5) == "1:01:01.500"
    assert format_timestamp(36000) == "10:00:00.000"


def test_format_timestamp_rounds_to_milliseconds():
    assert format_timestamp(59.9996) == "01:00.000"
    assert format_timestamp(1.0004) == "00:01.000"


def test_format_timestamp_rejects_negative_time():
    with pytest.raises(ValueError):
        format_timestamp(-1)


def test_parse_timestamp():
    assert parse_timestamp("01:30.500") == 90.5
    assert parse_timestamp("1:01:01.500") == 3661.5
    assert parse_timestamp("00:00:02.000") == 2.0


def test_parse_timestamp_rejects_bad_text():
    for text in ["1:30.500", "01:30", "01:30.5", "aa:bb.ccc", ""]:
        with pytest.raises(ValueError):
            parse_timestamp(text)


def test_timestamp_round_trip_to_the_millisecond():
    for milliseconds in [0, 1, 999, 61001, 3599999, 3600000, 36000123, 360000001]:
        seconds = milliseconds / 1000
        assert abs(parse_timestamp(format_timestamp(seconds)) - seconds) < 0.0005
