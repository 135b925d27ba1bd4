"""Field extraction engine.

Walks every stream of every kind, asks the library for each field listed
in the schema and assembles the normalized result tree.
"""

from __future__ import annotations

import logging
import re

from mediashim import policy
from mediashim.backends.base import Backend
from mediashim.models import (
    ExtractionOptions,
    FieldSchema,
    InfoKind,
    ResultTree,
    StreamKind,
    StreamRecord,
)
from mediashim.utils.formatting import normalize_number

logger = logging.getLogger(__name__)

# Fields that only repeat what the shape of the result tree already says
BOOKKEEPING_FIELDS = frozenset(
    {
        "Count",
        "Status",
        "StreamCount",
        "StreamKind",
        "StreamKindID",
        "StreamKindPos",
        "StreamOrder",
        "Inform",
    }
)

TEXT_VARIANT_SUFFIX = "/String"

CHAPTER_RE = re.compile(r"Chapter \d+")


def extract(
    backend: Backend, schema: FieldSchema, options: ExtractionOptions
) -> ResultTree:
    """Build a fresh ResultTree for the currently open input."""
    tree = ResultTree()
    for kind in StreamKind:
        count = backend.count(kind)
        for stream in range(count):
            if kind is StreamKind.MENU:
                # Each menu stream replaces the previous chapter table
                tree.chapters = scan_chapters(backend, stream) or None
            tree.streams(kind).append(
                extract_stream(backend, schema, options, kind, stream)
            )
        if count:
            logger.debug("Extracted %d %s stream(s)", count, kind.label)
    return tree


def extract_stream(
    backend: Backend,
    schema: FieldSchema,
    options: ExtractionOptions,
    kind: StreamKind,
    stream: int,
) -> StreamRecord:
    """Extract one stream record, in schema order."""
    record: StreamRecord = {}
    for name in schema.fields(kind):
        value = resolve_value(backend, kind, stream, name, options)

        if (
            kind is StreamKind.VIDEO
            and options.drop_frame
            and not options.all_fields
            and name == "Duration"
        ):
            timecode = backend.get(kind, stream, policy.DROP_FRAME_PARAMETER)
            if timecode or not options.skip_filter:
                record[policy.DROP_FRAME_FIELD] = normalize_number(timecode)

        if options.skip_filter and _skip(name, value):
            continue
        record[name] = normalize_number(value)
    return record


def resolve_value(
    backend: Backend,
    kind: StreamKind,
    stream: int,
    name: str,
    options: ExtractionOptions,
) -> str:
    """Fetch a field, preferring its policy variant unless in raw mode."""
    if not options.raw:
        selector = policy.resolve(name)
        if selector is not None:
            value = backend.get(kind, stream, policy.variant_parameter(name, selector))
            if value:
                return value
    return backend.get(kind, stream, name)


def scan_chapters(backend: Backend, stream: int) -> dict[str, str]:
    """Collect "Chapter N" entries of a menu stream as label -> timecode."""
    chapters: dict[str, str] = {}
    kind = StreamKind.MENU
    for index in range(backend.count(kind, stream)):
        label = backend.get_by_index(kind, stream, index, InfoKind.TEXT)
        if not CHAPTER_RE.search(label):
            continue
        timecode = backend.get_by_index(kind, stream, index, InfoKind.NAME)
        chapters[label.strip()] = timecode.strip()
    return chapters


def _skip(name: str, value: str) -> bool:
    return (
        name.endswith(TEXT_VARIANT_SUFFIX)
        or not value
        or name in BOOKKEEPING_FIELDS
    )
