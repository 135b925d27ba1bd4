"""Stream kind enumerations shared with the native library."""

from __future__ import annotations

from enum import IntEnum


class StreamKind(IntEnum):
    """Media stream categories, in the library's enumeration order."""

    GENERAL = 0
    VIDEO = 1
    AUDIO = 2
    TEXT = 3
    OTHER = 4
    IMAGE = 5
    MENU = 6

    @property
    def label(self) -> str:
        """Return the section name used by the library (e.g. "General")."""
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> StreamKind | None:
        """Look up a kind by its section name, or None if unknown."""
        try:
            return cls[label.strip().upper()]
        except KeyError:
            return None


class InfoKind(IntEnum):
    """Which facet of a field to request from the library."""

    NAME = 0
    TEXT = 1
