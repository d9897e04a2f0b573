"""Parsing and serialization of (nested) iCalendar components."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from calforge.parser.content_lines import Property, read_property
from calforge.parser.lexing import ParseError, read_key, skip_line_endings

__all__ = [
    "Component",
    "read_component_at",
    "read_component",
    "parse_components",
]

_BEGIN = "BEGIN:"
_END = "END:"


class _NoMatch(ParseError):
    """A recoverable failure: the input simply is not what was tried."""


@dataclass
class Component:
    """A parsed component: a name, its properties and its child components."""

    name: str
    properties: list[Property] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)

    def find_prop(self, name: str) -> Property | None:
        """Return the first property with the given name, or None."""
        return next((prop for prop in self.properties if prop.name == name), None)

    def serialize(self) -> str:
        """Render this component and its children as CRLF-terminated content lines."""
        lines = [f"BEGIN:{self.name}\r\n"]
        if self.name.lower() == "calendar":
            names = {prop.name for prop in self.properties}
            if "DTSTAMP" not in names:
                now = datetime.now(timezone.utc)
                lines.append(f"DTSTAMP:{now.strftime('%Y%m%dT%H%M%SZ')}\r\n")
            if "UID" not in names:
                lines.append(f"UID:{uuid.uuid4()}\r\n")
        lines.extend(prop.serialize() for prop in self.properties)
        lines.extend(child.serialize() for child in self.components)
        lines.append(f"END:{self.name}\r\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.serialize()


def _has_prefix(text: str, pos: int, prefix: str) -> bool:
    return text[pos:pos + len(prefix)].lower() == prefix.lower()


def _try_read_end(text: str, pos: int, name: str) -> int | None:
    """Return the offset after a matching END line, or None if no END line is here."""
    cursor = skip_line_endings(text, pos)
    if not _has_prefix(text, cursor, _END):
        return None
    cursor += len(_END)
    if not text.startswith(name, cursor):
        raise ParseError("mismatching end", cursor)
    return skip_line_endings(text, cursor + len(name))


def _read_child(
    text: str, pos: int, properties: list[Property], components: list[Component]
) -> int:
    try:
        child, cursor = read_component_at(text, pos)
    except _NoMatch:
        line_start = skip_line_endings(text, pos)
        prop, cursor = read_property(text, line_start)
        cursor = skip_line_endings(text, cursor)
        properties.append(prop)
    else:
        components.append(child)
    return cursor


def read_component_at(text: str, pos: int) -> tuple[Component, int]:
    """Read one component starting at ``pos``; return it and the offset after it.

    Raises ParseError when the input holds no complete component there.
    """
    cursor = skip_line_endings(text, pos)
    if not _has_prefix(text, cursor, _BEGIN):
        raise _NoMatch("expected BEGIN", cursor)
    name, cursor = read_key(text, cursor + len(_BEGIN))
    cursor = skip_line_endings(text, cursor)

    properties: list[Property] = []
    components: list[Component] = []
    while True:
        end = _try_read_end(text, cursor, name)
        if end is not None:
            cursor = end
            break
        start = cursor
        cursor = _read_child(text, start, properties, components)
        if cursor == start:
            raise _NoMatch(f"unexpected end of component {name!r}", start)

    return Component(name, properties, components), cursor


def read_component(text: str) -> Component:
    """Parse the component at the start of ``text``."""
    component, _ = read_component_at(text, 0)
    return component


def parse_components(text: str) -> list[Component]:
    """Parse root components, each of which must consume the rest of the input.

    Parsing stops at the first root that does not; a malformed component
    raises ParseError.
    """
    found: list[Component] = []
    pos = 0
    while True:
        try:
            component, end = read_component_at(text[pos:], 0)
        except _NoMatch:
            return found
        if pos + end != len(text):
            return found
        found.append(component)
        pos += end