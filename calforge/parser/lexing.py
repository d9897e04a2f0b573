"""Low-level scanning helpers shared by the iCalendar parsers."""

from __future__ import annotations

from calforge.value_types import ValueType

__all__ = [
    "ParseError",
    "unfold",
    "unescape_text",
    "unescape_by_value_type",
    "read_key",
    "read_property_key",
    "skip_line_endings",
]

_FOLD_SEPARATORS = ("\r\n ", "\n ", "\r\n\t", "\n\t")
_KEY_PUNCTUATION = frozenset(".,/_-")
_TEXT_ESCAPES = (
    ("\\\\", "\\"),
    ("\\,", ","),
    ("\\;", ";"),
    ("\\:", ":"),
    ("\\N", "\n"),
    ("\\n", "\n"),
)


class ParseError(ValueError):
    """Raised when iCalendar input cannot be parsed."""

    def __init__(self, message: str, position: int | None = None) -> None:
        self.message = message
        self.position = position
        if position is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} (at offset {position})")


def unfold(text: str) -> str:
    """Undo content-line folding.

    A line break followed by a single space or tab is removed; the
    separators are split off one after another, each within the pieces
    left by the previous one.
    """
    pieces = [text]
    for separator in _FOLD_SEPARATORS:
        pieces = [part for piece in pieces for part in piece.split(separator)]
    return "".join(pieces)


def unescape_text(text: str) -> str:
    """Resolve the backslash escapes of a TEXT value."""
    for escaped, plain in _TEXT_ESCAPES:
        text = text.replace(escaped, plain)
    return text


def unescape_by_value_type(text: str, value_type: ValueType) -> str:
    """Unescape ``text`` if ``value_type`` is TEXT, else return it unchanged."""
    if value_type is ValueType.TEXT:
        return unescape_text(text)
    return text


def _is_key_char(ch: str) -> bool:
    return ch in _KEY_PUNCTUATION or ch.isalnum()


def read_key(text: str, pos: int) -> tuple[str, int]:
    """Read a (possibly empty) key starting at ``pos``; return it and the end offset."""
    end = pos
    length = len(text)
    while end < length and _is_key_char(text[end]):
        end += 1
    return text[pos:end], end


def read_property_key(text: str, pos: int) -> tuple[str, int]:
    """Read a property key, refusing keys that start with ``END`` or ``BEGIN``."""
    if text.startswith("END", pos) or text.startswith("BEGIN", pos):
        raise ParseError("property cannot be END or BEGIN", pos)
    return read_key(text, pos)


def skip_line_endings(text: str, pos: int) -> int:
    """Skip any number of ``\\n`` or ``\\r\\n`` line endings; return the new offset."""
    while True:
        if text.startswith("\n", pos):
            pos += 1
        elif text.startswith("\r\n", pos):
            pos += 2
        else:
            return pos