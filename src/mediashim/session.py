"""Media session: one library handle, one open file, one result tree."""

from __future__ import annotations

import logging
import os
from types import TracebackType

from mediashim.backends.base import Backend
from mediashim.backends.native import NativeBackend
from mediashim.config import get_config
from mediashim.exceptions import InvalidInputError, LoadFailureError, SessionClosedError
from mediashim.extract import extract
from mediashim.language import get_default_language, normalize_newlines, set_default_language
from mediashim.models import ExtractionOptions, FieldSchema, ResultTree
from mediashim.schema import load_schema

logger = logging.getLogger(__name__)

# Option names accepted by set_option() that differ from the library's own
OPTION_ALIASES = {
    "ReportTemplate": "Inform",
}


class MediaSession:
    """Wrap a library handle and expose normalized metadata.

    The handle is acquired on construction and released by close(),
    exactly once. Use the session as a context manager so the handle is
    released on every exit path:

        with MediaSession("movie.mkv", drop_frame=True) as session:
            tree = session.result_tree
            print(tree.first(StreamKind.VIDEO))

    Args:
        path: Media file to open right away (optional)
        raw: Disable variant substitution and keep every field
        drop_frame: Add DurationDropFrame to video streams
        all_fields: Keep every field, including empty ones
        language_data: Translation table for the report text. Defaults to
            the process default language.
        backend: Backend to use instead of the native library. The session
            takes ownership and destroys it on close.
        library_path: Explicit path of the native library
    """

    def __init__(
        self,
        path: str | os.PathLike[str] = "",
        raw: bool = False,
        drop_frame: bool = False,
        all_fields: bool = False,
        language_data: str = "",
        backend: Backend | None = None,
        library_path: str | None = None,
    ):
        self.options = ExtractionOptions(raw=raw, drop_frame=drop_frame, all_fields=all_fields)
        self.path: str | None = None
        self._tree = ResultTree()
        self._closed = False
        self._settings: dict[str, str] = {}

        if backend is None:
            backend = NativeBackend(library_path or get_config().library.path)
        self._backend = backend

        try:
            self._apply_option("ParseUnknownExtensions", "1")
            if raw:
                self._apply_option("Complete", "1")
            language = normalize_newlines(language_data) or get_default_language()
            if language:
                self._apply_option("Language", language)
            self.schema: FieldSchema = load_schema(self._backend)
            if path:
                self.open(path)
        except BaseException:
            self.close()
            raise

    def __enter__(self) -> MediaSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else (self.path or "no input")
        return f"{self.__class__.__name__}({state!r}, options={self.options!r})"

    @property
    def closed(self) -> bool:
        """True once the handle has been released."""
        return self._closed

    @property
    def result_tree(self) -> ResultTree:
        """Normalized metadata of the current file (empty before open)."""
        self._check_open()
        return self._tree

    def close(self) -> None:
        """Release the library handle. Further calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        self._tree = ResultTree()
        self._backend.destroy()

    def open(self, path: str | os.PathLike[str]) -> ResultTree:
        """Load a media file and rebuild the result tree.

        Raises:
            InvalidInputError: If the path is empty or does not exist
            LoadFailureError: If the library rejects the file
        """
        self._check_open()
        path = os.fspath(path)
        if not path:
            raise InvalidInputError("No media path given")
        if not os.path.exists(path):
            raise InvalidInputError(f"File not found: {path}")

        self._tree = ResultTree()
        self.path = None
        self._backend.close_input()
        if not self._backend.open(path):
            raise LoadFailureError(path)

        self.path = path
        logger.debug("Opened %s", path)
        self._tree = extract(self._backend, self.schema, self.options)
        return self._tree

    def rescan(self) -> ResultTree:
        """Re-run extraction on the current file."""
        self._check_open()
        if self.path is None:
            raise InvalidInputError("No media file is open")
        self._tree = extract(self._backend, self.schema, self.options)
        return self._tree

    def set_language(self, data: str, apply_globally: bool = False) -> None:
        """Forward a translation table to the library.

        Only the report text is affected; the result tree is not changed.
        With apply_globally, sessions created later use it by default.
        """
        self._check_open()
        self._apply_option("Language", normalize_newlines(data))
        if apply_globally:
            set_default_language(data)

    def report_text(self) -> str:
        """Return the library's formatted report for the current file."""
        self._check_open()
        return self._backend.inform()

    def version(self) -> str:
        """Return the library's version string."""
        return self.get_option("Info_Version")

    def set_option(self, name: str, value: str = "") -> str:
        """Set a library option, e.g. set_option("ReportTemplate", text)."""
        self._check_open()
        return self._apply_option(name, value)

    def get_option(self, name: str) -> str:
        """Query a library option.

        Options previously set through this session return the value set;
        anything else is asked of the library.
        """
        self._check_open()
        if name in self._settings:
            return self._settings[name]
        return self._backend.option(OPTION_ALIASES.get(name, name))

    def _apply_option(self, name: str, value: str) -> str:
        # Remembered so get_option() never re-sends the name with an empty value
        self._settings[name] = value
        return self._backend.option(OPTION_ALIASES.get(name, name), value)

    def _check_open(self) -> None:
        if self._closed:
            raise SessionClosedError("Session is closed")
