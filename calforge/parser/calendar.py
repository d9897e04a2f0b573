"""Reading whole iCalendar documents and writing them back out."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from calforge.parser.components import Component, parse_components
from calforge.parser.content_lines import Property

__all__ = [
    "Calendar",
    "read_calendar",
    "read_calendar_simple",
    "read_components",
]

_CALENDAR_NAME = "VCALENDAR"


@dataclass
class Calendar:
    """A parsed calendar: the root properties and the top-level components."""

    properties: list[Property] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)

    def serialize(self) -> str:
        """Render as a ``VCALENDAR`` block of CRLF-terminated content lines."""
        return Component(_CALENDAR_NAME, self.properties, self.components).serialize()

    def print(self) -> None:
        """Write the serialized calendar to standard output, followed by CRLF."""
        sys.stdout.write(self.serialize() + "\r\n")

    def __str__(self) -> str:
        return self.serialize()


def read_components(text: str) -> list[Component]:
    """Parse ``text`` into its root components.

    Raises ParseError when a component is malformed.
    """
    return parse_components(text)


def read_calendar_simple(text: str) -> list[Component]:
    """Parse ``text`` into its root components."""
    return parse_components(text)


def read_calendar(text: str) -> Calendar:
    """Parse ``text`` into a calendar.

    If the first root component is a ``VCALENDAR`` its properties and
    children make up the calendar; otherwise the root components become
    the calendar's components.  Raises ParseError on malformed input.
    """
    components = parse_components(text)
    if components and components[0].name == _CALENDAR_NAME:
        root = components[0]
        return Calendar(properties=root.properties, components=root.components)
    return Calendar(properties=[], components=components)