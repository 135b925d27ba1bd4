"""Base backend class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from mediashim.models import InfoKind, StreamKind


class Backend(ABC):
    """Abstract interface to a media-probing library handle.

    A backend owns exactly one library handle holding at most one open
    input. Stream numbers are zero-based, as the library counts them.

    Attributes:
        name: Human-readable name of the backend
    """

    name: ClassVar[str] = "base"

    @abstractmethod
    def open(self, path: str) -> bool:
        """Open a media file.

        Returns:
            True if the library accepted the file
        """
        pass

    @abstractmethod
    def close_input(self) -> None:
        """Close the currently open file, if any."""
        pass

    @abstractmethod
    def option(self, name: str, value: str = "") -> str:
        """Set or query a library option and return its answer."""
        pass

    @abstractmethod
    def count(self, kind: StreamKind, stream: int | None = None) -> int:
        """Count streams of a kind, or fields of one stream when given."""
        pass

    @abstractmethod
    def get(
        self,
        kind: StreamKind,
        stream: int,
        parameter: str,
        info_kind: InfoKind = InfoKind.TEXT,
    ) -> str:
        """Return a field of a stream by name ("" when absent)."""
        pass

    @abstractmethod
    def get_by_index(
        self,
        kind: StreamKind,
        stream: int,
        index: int,
        info_kind: InfoKind = InfoKind.TEXT,
    ) -> str:
        """Return a field of a stream by position ("" when absent)."""
        pass

    @abstractmethod
    def inform(self) -> str:
        """Return the library's formatted report for the open file."""
        pass

    @abstractmethod
    def destroy(self) -> None:
        """Release the handle. Must be safe to call more than once."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
