"""Result tree model."""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from .stream import StreamKind

FieldValue = Union[int, float, str]
StreamRecord = dict[str, FieldValue]


class ResultTree(BaseModel):
    """Normalized metadata for one media file.

    One ordered list of stream records per stream kind, plus an optional
    chapter table (label -> timecode) taken from the last menu stream.
    Serialized field names match the library's section names
    ("General", "Video", ...).
    """

    model_config = ConfigDict(populate_by_name=True)

    general: list[StreamRecord] = Field(default_factory=list, alias="General")
    video: list[StreamRecord] = Field(default_factory=list, alias="Video")
    audio: list[StreamRecord] = Field(default_factory=list, alias="Audio")
    text: list[StreamRecord] = Field(default_factory=list, alias="Text")
    other: list[StreamRecord] = Field(default_factory=list, alias="Other")
    image: list[StreamRecord] = Field(default_factory=list, alias="Image")
    menu: list[StreamRecord] = Field(default_factory=list, alias="Menu")
    chapters: dict[str, str] | None = Field(default=None, alias="Chapters")

    def streams(self, kind: StreamKind) -> list[StreamRecord]:
        """Return the (mutable) record list for a stream kind."""
        records: list[StreamRecord] = getattr(self, kind.name.lower())
        return records

    def count(self, kind: StreamKind) -> int:
        """Return the number of streams of a kind."""
        return len(self.streams(kind))

    def first(self, kind: StreamKind) -> StreamRecord | None:
        """Return the first record of a kind, if any."""
        records = self.streams(kind)
        return records[0] if records else None

    @property
    def is_empty(self) -> bool:
        """True when no stream of any kind was recorded."""
        return not any(self.streams(kind) for kind in StreamKind)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict keyed by section name."""
        return self.model_dump(by_alias=True, exclude_none=True)
