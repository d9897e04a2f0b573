"""Properties and parameters of calendar components, and their serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any, Callable, Iterable, TypeVar

from calforge.value_types import ValueType, parse_value_type, value_type_by_name

__all__ = [
    "Parameter",
    "Property",
    "Class",
    "EventStatus",
    "TodoStatus",
    "value_type_parameter",
    "duration_property",
    "escape_text",
    "fold_line",
]

T = TypeVar("T")

_FOLD_LIMIT = 75


@dataclass(frozen=True)
class Parameter:
    """A key-value pair attached to a property."""

    key: str
    value: str

    def value_type(self) -> ValueType:
        """Interpret a ``VALUE`` parameter as a value type.

        Raises ValueError if this is not a ``VALUE`` parameter or the type is unknown.
        """
        if self.key != "VALUE":
            raise ValueError(f"parameter {self.key!r} is not a VALUE parameter")
        return parse_value_type(self.value)


def value_type_parameter(value_type: ValueType) -> Parameter:
    """Build the ``VALUE`` parameter naming the given value type."""
    return Parameter("VALUE", value_type.value)


def _to_parameter(item: Any) -> Parameter:
    if isinstance(item, Parameter):
        return item
    if isinstance(item, ValueType):
        return value_type_parameter(item)
    if isinstance(item, tuple) and len(item) == 2:
        return Parameter(*item)
    raise TypeError(f"cannot make a parameter from {item!r}")


def escape_text(text: str) -> str:
    """Escape a TEXT value for serialization."""
    return (
        text.replace("\\", "\\\\")
        .replace(",", "\\,")
        .replace(";", "\\;")
        .replace("\n", "\\n")
    )


def _quote_if_needed(value: str) -> str:
    if ":" in value or ";" in value:
        return f'"{value}"'
    return value


def fold_line(line: str) -> str:
    """Fold a content line so that no physical line exceeds 75 octets.

    Lines are never split inside a UTF-8 character, and a break is moved
    back by one when it would land on whitespace.
    """
    data = line.encode("utf-8")
    length = len(data)
    chars = line

    def is_whitespace(index: int) -> bool:
        return index < len(chars) and chars[index].isspace()

    def is_boundary(index: int) -> bool:
        if index == 0 or index == length:
            return True
        if index > length:
            return False
        return (data[index] & 0xC0) != 0x80

    parts: list[bytes] = []
    remaining = length
    pos = 0
    next_pos = _FOLD_LIMIT
    while remaining > _FOLD_LIMIT:
        if is_whitespace(next_pos):
            next_pos -= 1
        while not is_boundary(next_pos):
            next_pos -= 1
            if is_whitespace(next_pos):
                next_pos -= 1
        parts.append(data[pos:next_pos])
        parts.append(b"\r\n ")
        remaining -= next_pos - pos
        pos = next_pos
        next_pos += _FOLD_LIMIT - 1
    parts.append(data[length - remaining:])
    return b"".join(parts).decode("utf-8")


@dataclass
class Property:
    """A key-value pair inside a component, with optional parameters."""

    key: str
    value: str
    params: dict[str, Parameter] = field(default_factory=dict)

    @classmethod
    def from_array(cls, items: Iterable[Any]) -> list[Property]:
        """Build a list of properties from properties, (key, value) pairs or enums."""
        return [_to_property(item) for item in items]

    def value_type(self) -> ValueType | None:
        """The type given by the ``VALUE`` parameter, else the default for the key."""
        param = self.params.get("VALUE")
        if param is not None:
            try:
                return parse_value_type(param.value)
            except ValueError:
                pass
        return value_type_by_name(self.key)

    def get_value_as(self, converter: Callable[[str], T]) -> T:
        """Return the value passed through ``converter``."""
        return converter(self.value)

    def get_param_as(self, key: str, converter: Callable[[str], T]) -> T | None:
        """Return a parameter's value passed through ``converter``, or None if absent."""
        param = self.params.get(key)
        if param is None:
            return None
        return converter(param.value)

    def append_parameter(self, parameter: Any) -> Property:
        """Add a parameter, replacing any with the same key; returns self."""
        param = _to_parameter(parameter)
        self.params[param.key] = param
        return self

    def add_parameter(self, key: str, val: str) -> Property:
        """Create and add a parameter; returns self."""
        return self.append_parameter(Parameter(key, val))

    def serialize(self) -> str:
        """Render this property as a folded, CRLF-terminated content line."""
        pieces = [self.key]
        pieces.extend(
            f";{param.key}={_quote_if_needed(param.value)}"
            for param in self.params.values()
        )
        if self.value_type() is ValueType.TEXT:
            pieces.append(f":{escape_text(self.value)}")
        else:
            pieces.append(f":{self.value}")
        return fold_line("".join(pieces)) + "\r\n"

    def __str__(self) -> str:
        return self.serialize()


def _to_property(item: Any) -> Property:
    if isinstance(item, Property):
        return item
    if isinstance(item, tuple) and len(item) == 2:
        return Property(*item)
    if isinstance(item, timedelta):
        return duration_property(item)
    to_property = getattr(item, "to_property", None)
    if callable(to_property):
        return to_property()
    raise TypeError(f"cannot make a property from {item!r}")


class Class(Enum):
    """Access classification of a calendar component."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    CONFIDENTIAL = "CONFIDENTIAL"

    def to_property(self) -> Property:
        """The ``CLASS`` property for this classification."""
        return Property("CLASS", self.value)


class EventStatus(Enum):
    """Status of an event."""

    TENTATIVE = "TENTATIVE"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"

    def to_property(self) -> Property:
        """The ``STATUS`` property for this status."""
        return Property("STATUS", self.value)


class TodoStatus(Enum):
    """Status of a to-do."""

    NEEDS_ACTION = "NEEDS-ACTION"
    COMPLETED = "COMPLETED"
    IN_PROCESS = "IN-PROCESS"
    CANCELLED = "CANCELLED"

    def to_property(self) -> Property:
        """The ``STATUS`` property for this status."""
        return Property("STATUS", self.value)


def _format_duration(duration: timedelta) -> str:
    total_us = (
        duration.days * 86_400_000_000
        + duration.seconds * 1_000_000
        + duration.microseconds
    )
    sign = "-" if total_us < 0 else ""
    total_us = abs(total_us)
    if total_us == 0:
        return "P0D"
    secs, micros = divmod(total_us, 1_000_000)
    text = f"{sign}PT{secs}"
    if micros:
        text += "." + f"{micros:06d}".rstrip("0")
    return text + "S"


def duration_property(duration: timedelta) -> Property:
    """The ``DURATION`` property for a time span, written in seconds."""
    return Property("DURATION", _format_duration(duration))