"""Serialize and parse iCalendar (RFC 5545) content lines and documents."""

__version__ = "0.16.15"