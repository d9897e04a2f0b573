"""Parsing of property parameters (``;KEY=VALUE`` lists)."""

from __future__ import annotations

from dataclasses import dataclass

from calforge import properties
from calforge.parser.lexing import ParseError, read_key

__all__ = [
    "Parameter",
    "read_parameter",
    "read_parameters",
    "parse_parameter",
    "parse_parameters",
]


@dataclass(frozen=True)
class Parameter:
    """A parsed parameter; ``value`` is None when absent or empty."""

    key: str
    value: str | None = None

    def to_property_parameter(self) -> properties.Parameter:
        """Convert to a builder parameter, using an empty string for a missing value."""
        return properties.Parameter(self.key, self.value or "")


def _read_value(text: str, pos: int) -> tuple[str | None, int]:
    length = len(text)
    if pos >= length:
        return None, pos
    if text[pos] == '"':
        closing = text.find('"', pos + 1)
        if closing > pos + 1:
            return text[pos + 1:closing], closing + 1
    end = pos
    while end < length and text[end] not in ";:":
        end += 1
    if end == pos:
        return None, pos
    return text[pos:end], end


def read_parameter(text: str, pos: int) -> tuple[Parameter, int]:
    """Read one parameter at ``pos``; return it and the offset after it."""
    if not text.startswith(";", pos):
        raise ParseError("expected parameter", pos)
    pos += 1
    while pos < len(text) and text[pos] in " \t":
        pos += 1
    key, pos = read_key(text, pos)
    value: str | None = None
    if text.startswith("=", pos):
        value, pos = _read_value(text, pos + 1)
        if value == "":
            value = None
    return Parameter(key, value), pos


def read_parameters(text: str, pos: int) -> tuple[list[Parameter], int]:
    """Read as many parameters as follow ``pos``; return them and the end offset."""
    found: list[Parameter] = []
    while text.startswith(";", pos):
        parameter, pos = read_parameter(text, pos)
        found.append(parameter)
    return found, pos


def parse_parameter(text: str) -> Parameter:
    """Parse the parameter at the start of ``text``."""
    parameter, _ = read_parameter(text, 0)
    return parameter


def parse_parameters(text: str) -> list[Parameter]:
    """Parse the parameter list at the start of ``text``."""
    found, _ = read_parameters(text, 0)
    return found