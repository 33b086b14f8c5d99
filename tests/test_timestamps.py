import pytest

from transcript_analyzer.transcripts.timestamps import from_seconds, is_valid_timestamp, to_seconds


@pytest.mark.parametrize("value", ["00:00:00", "12:34:56", "23:59:59", "1:23:45", "01:02:03"])
def test_valid_timestamps(value):
    assert is_valid_timestamp(value)


@pytest.mark.parametrize(
    "value",
    ["24:00:00", "12:60:30", "12:30:60", "1:2:3", "12:34", "12:34:56:78", "abc:def:ghi", "", "12-34-56"],
)
def test_invalid_timestamps(value):
    assert not is_valid_timestamp(value)


def test_surrounding_whitespace_is_ignored():
    assert is_valid_timestamp(" 12:34:56 ")
    assert is_valid_timestamp("\t12:34:56\t")


def test_non_string_is_invalid():
    assert not is_valid_timestamp(None)
    assert not is_valid_timestamp(123)


def test_to_seconds():
    assert to_seconds("00:00:00") == 0
    assert to_seconds("00:16:15") == 975
    assert to_seconds("1:00:01") == 3601
    assert to_seconds("23:59:59") == 86399


def test_from_seconds_pads_every_field():
    assert from_seconds(975) == "00:16:15"
    assert from_seconds(0) == "00:00:00"
    assert from_seconds(3600 * 5 + 7) == "05:00:07"


@pytest.mark.parametrize(
    "value, canonical",
    [("1:02:03", "01:02:03"), ("00:00:00", "00:00:00"), ("23:59:59", "23:59:59"), ("9:05:07", "09:05:07")],
)
def test_round_trip_yields_padded_form(value, canonical):
    assert from_seconds(to_seconds(value)) == canonical
