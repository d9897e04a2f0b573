from datetime import timedelta

import pytest

from calforge.properties import (
    Class,
    EventStatus,
    Parameter,
    Property,
    TodoStatus,
    duration_property,
    escape_text,
    fold_line,
    value_type_parameter,
)
from calforge.value_types import ValueType


def test_fold_line_short():
    line = "This is a short line"
    assert fold_line(line) == line


def test_fold_line_folds_on_char_boundary():
    line = (
        "Content lines shouldn't be folded in the middle "
        "of a UTF-8 character. 老虎."
    )
    expected = (
        "Content lines shouldn't be folded in the middle "
        "of a UTF-8 character. 老\r\n 虎."
    )
    assert fold_line(line) == expected


@pytest.mark.parametrize(
    "line",
    [
        "01234567890123456789012345678901234567890123456789012345HERE_COMES_A_SPACE( )",
        "01234567890123456789012345678901234567890123456789012345HERE_COMES_A_SPACE( )"
        "<-----78901234567890123456789012345678901234567890123HERE_COMES_A_SPACE( )<---",
    ],
)
def test_fold_preserves_spaces(line):
    folded = fold_line(line)
    assert "\r\n " in folded
    assert folded.replace("\r\n ", "") == line


def test_folded_lines_fit_limit():
    line = "DESCRIPTION:" + "lorem ipsum dolor sit amet " * 20
    folded = fold_line(line)
    for physical in folded.split("\r\n"):
        assert len(physical.encode("utf-8")) <= 75
    assert folded.replace("\r\n ", "") == line


def test_escape_special_characters_in_text():
    assert escape_text("\n\\;,:") == r"\n\\\;\,:"


def test_escape_special_characters_in_serialized_property():
    prop = Property("DESCRIPTION", "\n\\;,:").append_parameter(("VALUE", "TEXT"))
    assert prop.serialize() == "DESCRIPTION;VALUE=TEXT:" + r"\n\\\;\,:" + "\r\n"


def test_serialize_property():
    prop = Property("SUMMARY", "This is a summary")
    assert prop.serialize() == "SUMMARY:This is a summary\r\n"
    assert str(prop) == "SUMMARY:This is a summary\r\n"


def test_non_text_value_not_escaped():
    prop = Property("URL", "https://example.com/a;b,c")
    assert prop.serialize() == "URL:https://example.com/a;b,c\r\n"


def test_add_parameter_replaces_same_key():
    prop = Property("X-A", "v").add_parameter("K", "1").add_parameter("K", "2")
    assert prop.params == {"K": Parameter("K", "2")}


def test_value_type_from_parameter_and_name():
    assert Property("SUMMARY", "x").value_type() is ValueType.TEXT
    assert Property("X-FOO", "x").value_type() is None
    prop = Property("X-FOO", "x").append_parameter(ValueType.URI)
    assert prop.params["VALUE"] == Parameter("VALUE", "URI")
    assert prop.value_type() is ValueType.URI


def test_invalid_value_param_falls_back_to_name():
    prop = Property("SUMMARY", "x").add_parameter("VALUE", "NOPE")
    assert prop.value_type() is ValueType.TEXT


def test_get_value_as():
    assert Property("PRIORITY", "10").get_value_as(int) == 10


def test_get_param_as():
    prop = Property("X-A", "v").add_parameter("COUNT", "4")
    assert prop.get_param_as("COUNT", int) == 4
    assert prop.get_param_as("MISSING", int) is None


def test_parameter_value_type():
    assert Parameter("VALUE", "DATE").value_type() is ValueType.DATE
    with pytest.raises(ValueError):
        Parameter("OTHER", "DATE").value_type()
    with pytest.raises(ValueError):
        Parameter("VALUE", "BOGUS").value_type()


@pytest.mark.parametrize("member", list(ValueType))
def test_value_type_parameter_round_trip(member):
    param = value_type_parameter(member)
    assert param.key == "VALUE"
    assert param.value_type() is member


def test_enum_properties():
    assert Class.CONFIDENTIAL.to_property().serialize() == "CLASS:CONFIDENTIAL\r\n"
    assert EventStatus.TENTATIVE.to_property().serialize() == "STATUS:TENTATIVE\r\n"
    assert TodoStatus.NEEDS_ACTION.to_property().serialize() == "STATUS:NEEDS-ACTION\r\n"


def test_from_array():
    props = Property.from_array(
        [("SUMMARY", "s"), Class.PUBLIC, Property("UID", "u"), TodoStatus.IN_PROCESS]
    )
    assert props == [
        Property("SUMMARY", "s"),
        Property("CLASS", "PUBLIC"),
        Property("UID", "u"),
        Property("STATUS", "IN-PROCESS"),
    ]


def test_from_array_rejects_unknown():
    with pytest.raises(TypeError):
        Property.from_array([42])


def test_duration_property():
    prop = duration_property(timedelta(hours=1))
    assert prop == Property("DURATION", "PT3600S")
    assert prop.serialize() == "DURATION:PT3600S\r\n"


def test_duration_zero_and_negative():
    assert duration_property(timedelta(0)).value == "P0D"
    assert duration_property(-timedelta(hours=1)).value == "-PT3600S"
    assert duration_property(timedelta(seconds=1, microseconds=500000)).value == "PT1.5S"