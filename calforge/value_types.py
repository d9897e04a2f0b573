"""Value data types of iCalendar property values."""

from __future__ import annotations

from enum import Enum

__all__ = ["ValueType", "value_type_by_name", "parse_value_type"]


class ValueType(Enum):
    """The value data types registered for iCalendar properties."""

    BINARY = "BINARY"
    BOOLEAN = "BOOLEAN"
    CAL_ADDRESS = "CAL-ADDRESS"
    DATE = "DATE"
    DATE_TIME = "DATE-TIME"
    DURATION = "DURATION"
    FLOAT = "FLOAT"
    INTEGER = "INTEGER"
    PERIOD = "PERIOD"
    RECUR = "RECUR"
    TEXT = "TEXT"
    TIME = "TIME"
    URI = "URI"
    UTC_OFFSET = "UTC-OFFSET"


_DEFAULT_TYPES: dict[str, ValueType] = {
    # calendar properties
    "CALSCALE": ValueType.TEXT,
    "METHOD": ValueType.TEXT,
    "PRODID": ValueType.TEXT,
    "VERSION": ValueType.TEXT,
    # component properties
    "ATTACH": ValueType.URI,
    "CATEGORIES": ValueType.TEXT,
    "CLASS": ValueType.TEXT,
    "COMMENT": ValueType.TEXT,
    "DESCRIPTION": ValueType.TEXT,
    "GEO": ValueType.FLOAT,
    "LOCATION": ValueType.TEXT,
    "PERCENT-COMPLETE": ValueType.INTEGER,
    "PRIORITY": ValueType.INTEGER,
    "RESOURCES": ValueType.TEXT,
    "STATUS": ValueType.TEXT,
    "SUMMARY": ValueType.TEXT,
    "COMPLETED": ValueType.DATE_TIME,
    "DTEND": ValueType.DATE_TIME,
    "DUE": ValueType.DATE_TIME,
    "DTSTART": ValueType.DATE_TIME,
    "DURATION": ValueType.DURATION,
    "FREEBUSY": ValueType.PERIOD,
    "TRANSP": ValueType.TEXT,
    "TZID": ValueType.TEXT,
    "TZNAME": ValueType.TEXT,
    "TZOFFSETFROM": ValueType.UTC_OFFSET,
    "TZOFFSETTO": ValueType.UTC_OFFSET,
    "TZURL": ValueType.URI,
    "ATTENDEE": ValueType.CAL_ADDRESS,
    "CONTACT": ValueType.TEXT,
    "ORGANIZER": ValueType.CAL_ADDRESS,
    "RECURRENCE-ID": ValueType.DATE_TIME,
    "RELATED-TO": ValueType.TEXT,
    "URL": ValueType.URI,
    "UID": ValueType.TEXT,
    "EXDATE": ValueType.DATE_TIME,
    "RDATE": ValueType.DATE_TIME,
    "RRULE": ValueType.RECUR,
    "ACTION": ValueType.TEXT,
    "REPEAT": ValueType.INTEGER,
    "TRIGGER": ValueType.DURATION,
    "CREATED": ValueType.DATE_TIME,
    "DTSTAMP": ValueType.DATE_TIME,
    "LAST-MODIFIED": ValueType.DATE_TIME,
    "SEQUENCE": ValueType.INTEGER,
    "REQUEST-STATUS": ValueType.TEXT,
}


def value_type_by_name(name: str) -> ValueType | None:
    """Return the default value type of a property name, or None.

    Property names containing lower-case letters are never recognised.
    """
    if any(ch.islower() for ch in name):
        return None
    return _DEFAULT_TYPES.get(name)


def parse_value_type(text: str) -> ValueType:
    """Parse the wire name of a value type; raise ValueError if unknown."""
    try:
        return ValueType(text)
    except ValueError:
        raise ValueError(f"unknown value type: {text!r}") from None