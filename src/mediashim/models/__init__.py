"""Pydantic models for mediashim."""

from .options import ExtractionOptions
from .result import FieldValue, ResultTree, StreamRecord
from .schema import FieldSchema
from .stream import InfoKind, StreamKind

__all__ = [
    # Stream kinds
    "StreamKind",
    "InfoKind",
    # Schema
    "FieldSchema",
    # Results
    "ResultTree",
    "StreamRecord",
    "FieldValue",
    # Options
    "ExtractionOptions",
]
