import pytest

from calforge.value_types import ValueType, parse_value_type, value_type_by_name


@pytest.mark.parametrize("member", list(ValueType))
def test_parse_round_trip(member):
    assert parse_value_type(member.value) is member


def test_parse_known_wire_names():
    assert parse_value_type("CAL-ADDRESS") is ValueType.CAL_ADDRESS
    assert parse_value_type("DATE-TIME") is ValueType.DATE_TIME
    assert parse_value_type("UTC-OFFSET") is ValueType.UTC_OFFSET


@pytest.mark.parametrize("text", ["", "text", "URL", "DATETIME"])
def test_parse_unknown_raises(text):
    with pytest.raises(ValueError):
        parse_value_type(text)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("SUMMARY", ValueType.TEXT),
        ("DESCRIPTION", ValueType.TEXT),
        ("URL", ValueType.URI),
        ("GEO", ValueType.FLOAT),
        ("PRIORITY", ValueType.INTEGER),
        ("DTSTART", ValueType.DATE_TIME),
        ("DURATION", ValueType.DURATION),
        ("FREEBUSY", ValueType.PERIOD),
        ("ATTENDEE", ValueType.CAL_ADDRESS),
        ("RRULE", ValueType.RECUR),
        ("TZOFFSETTO", ValueType.UTC_OFFSET),
        ("REQUEST-STATUS", ValueType.TEXT),
    ],
)
def test_by_name(name, expected):
    assert value_type_by_name(name) is expected


@pytest.mark.parametrize("name", ["summary", "Summary", "X-FOO", "FOO_AS_TEXT", ""])
def test_by_name_unknown_or_lowercase(name):
    assert value_type_by_name(name) is None