"""mediashim - normalized metadata from the MediaInfo library.

Usage:
    from mediashim import MediaSession, StreamKind

    with MediaSession("movie.mkv") as session:
        tree = session.result_tree
        print(tree.first(StreamKind.VIDEO)["Width"])
        print(session.report_text())

    # Export as JSON
    print(tree.model_dump_json(by_alias=True))
"""

from mediashim._version import __version__
from mediashim.analyze import probe_file, probe_files
from mediashim.backends import Backend, NativeBackend, library_version
from mediashim.exceptions import (
    InvalidInputError,
    LibraryUnavailableError,
    LoadFailureError,
    MediashimError,
    SessionClosedError,
)
from mediashim.formatters import (
    format_default,
    format_json,
    format_json_list,
    format_quiet,
    to_dict,
)
from mediashim.language import get_default_language, set_default_language
from mediashim.models import (
    ExtractionOptions,
    FieldSchema,
    InfoKind,
    ResultTree,
    StreamKind,
)
from mediashim.schema import load_schema, parse_catalog
from mediashim.session import MediaSession
from mediashim.utils import (
    divide,
    drop_trailing_zeros,
    format_duration,
    human_size,
    percent,
)

__all__ = [
    # Version
    "__version__",
    # Session
    "MediaSession",
    "probe_file",
    "probe_files",
    # Models
    "StreamKind",
    "InfoKind",
    "FieldSchema",
    "ResultTree",
    "ExtractionOptions",
    # Schema
    "load_schema",
    "parse_catalog",
    # Backends
    "Backend",
    "NativeBackend",
    "library_version",
    # Errors
    "MediashimError",
    "LibraryUnavailableError",
    "InvalidInputError",
    "LoadFailureError",
    "SessionClosedError",
    # Formatters
    "format_default",
    "format_json",
    "format_json_list",
    "format_quiet",
    "to_dict",
    # Language
    "set_default_language",
    "get_default_language",
    # Formatting helpers
    "divide",
    "percent",
    "drop_trailing_zeros",
    "human_size",
    "format_duration",
]
