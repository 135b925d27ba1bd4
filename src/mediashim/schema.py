"""Field schema loading from the library's parameter catalog."""

from __future__ import annotations

import logging

from mediashim.backends.base import Backend
from mediashim.models import FieldSchema, StreamKind

logger = logging.getLogger(__name__)

CATALOG_OPTION = "Info_Parameters_CSV"
DEPRECATED_MARKER = "deprecated"


def parse_catalog(text: str) -> FieldSchema:
    """Parse the flattened catalog into a FieldSchema.

    A line holding a single token opens the section of that stream kind;
    lines with two or more tokens are (field name, description) pairs of
    the current section. Entries whose description mentions "deprecated"
    are dropped, as are blank lines and pairs that appear before any
    known section.
    """
    sections: dict[StreamKind, dict[str, str]] = {}
    current: dict[str, str] | None = None
    current_kind: StreamKind | None = None

    for line in text.splitlines():
        tokens = [token.strip() for token in line.split(";")]
        if not tokens[0] and len(tokens) == 1:
            continue

        if len(tokens) == 1:
            if current_kind is not None and current is not None:
                sections[current_kind] = current
            current_kind = StreamKind.from_label(tokens[0])
            current = {} if current_kind is not None else None
            if current_kind is None:
                logger.debug("Ignoring unknown catalog section %r", tokens[0])
            continue

        name, description = tokens[0], tokens[1]
        if current is None or not name:
            continue
        if DEPRECATED_MARKER in description.lower():
            continue
        current[name] = description

    if current_kind is not None and current is not None:
        sections[current_kind] = current

    return FieldSchema(sections=sections)


def load_schema(backend: Backend) -> FieldSchema:
    """Query the library's field catalog once and build the schema."""
    schema = parse_catalog(backend.option(CATALOG_OPTION))
    logger.debug(
        "Loaded field schema: %d fields across %d stream kinds",
        len(schema),
        len(schema.sections),
    )
    return schema
