"""Parsing and serialization of single content lines (properties)."""

from __future__ import annotations

from dataclasses import dataclass, field

from calforge import properties
from calforge.parser.lexing import (
    read_key,
    read_property_key,
    unescape_by_value_type,
)
from calforge.parser.parameters import Parameter, read_parameters
from calforge.properties import fold_line
from calforge.value_types import ValueType, parse_value_type, value_type_by_name

__all__ = [
    "Property",
    "read_property",
    "parse_property",
    "property_from_str",
]

# Properties that may occur more than once in a VEVENT, VTODO, VJOURNAL or VFREEBUSY.
_MULTI_PROPERTIES = frozenset(
    {
        "ATTACH",
        "ATTENDEE",
        "CATEGORIES",
        "COMMENT",
        "CONTACT",
        "EXDATE",
        "FREEBUSY",
        "IANA-PROP",
        "RDATE",
        "RELATED",
        "RESOURCES",
        "RSTATUS",
        "X-PROP",
    }
)

_MULTISPACE = frozenset(" \t\r\n")


@dataclass
class Property:
    """A parsed property: a name, a value and its parameters in input order."""

    name: str
    value: str = ""
    params: list[Parameter] = field(default_factory=list)

    def serialize(self) -> str:
        """Render as a folded, CRLF-terminated content line, values written as stored."""
        pieces = [self.name]
        for param in self.params:
            if param.value is None:
                pieces.append(f";{param.key}")
            else:
                pieces.append(f";{param.key}={param.value}")
        pieces.append(f":{self.value}")
        return fold_line("".join(pieces)) + "\r\n"

    def is_multi_property(self) -> bool:
        """Whether this property may occur several times in one component."""
        return self.name in _MULTI_PROPERTIES

    def to_property(self) -> properties.Property:
        """Convert to a builder property; later parameters replace earlier ones of the same key."""
        return properties.Property(
            self.name,
            self.value,
            {param.key: param.to_property_parameter() for param in self.params},
        )

    def __str__(self) -> str:
        return self.serialize()


def _skip_multispace(text: str, pos: int) -> int:
    length = len(text)
    while pos < length and text[pos] in _MULTISPACE:
        pos += 1
    return pos


def _value_end(text: str, pos: int) -> int:
    end = text.find("\r\n", pos)
    if end == -1:
        end = text.find("\n", pos)
    if end == -1:
        end = len(text)
    return end


def _skip_one_line_ending(text: str, pos: int) -> int:
    if text.startswith("\n", pos):
        return pos + 1
    if text.startswith("\r\n", pos):
        return pos + 2
    return pos


def _determine_value_type(name: str, params: list[Parameter]) -> ValueType | None:
    declared = next((param for param in params if param.key == "VALUE"), None)
    if declared is not None and declared.value is not None:
        try:
            return parse_value_type(declared.value)
        except ValueError:
            pass
    return value_type_by_name(name)


def read_property(text: str, pos: int) -> tuple[Property, int]:
    """Read one property at ``pos``; return it and the offset after it.

    Raises ParseError when the key starts with ``END`` or ``BEGIN``.  A line
    without a ``:`` separator is read as a property with an empty value.
    """
    start = pos
    key_pos = _skip_multispace(text, pos)
    name, cursor = read_property_key(text, key_pos)
    params, cursor = read_parameters(text, cursor)
    if text.startswith(":", cursor):
        cursor += 1
        end = _value_end(text, cursor)
        value = text[cursor:end]
        cursor = end
    else:
        name, cursor = read_key(text, start)
        params = []
        value = ""
    cursor = _skip_one_line_ending(text, cursor)

    value_type = _determine_value_type(name, params)
    if value_type is not None:
        value = unescape_by_value_type(value, value_type)
    return Property(name, value, params), cursor


def parse_property(text: str) -> Property:
    """Parse the property at the start of ``text``."""
    prop, _ = read_property(text, 0)
    return prop


def property_from_str(text: str) -> properties.Property:
    """Parse ``text`` into a builder property."""
    return parse_property(text).to_property()