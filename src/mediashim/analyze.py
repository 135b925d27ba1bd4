"""One-shot probing functions."""

from __future__ import annotations

import os
import warnings
from typing import Any

from mediashim.exceptions import InvalidInputError, LoadFailureError
from mediashim.models import ResultTree
from mediashim.session import MediaSession


def probe_file(path: str | os.PathLike[str], **session_kwargs: Any) -> ResultTree:
    """Probe a media file and return its result tree.

    Opens a session, loads the file and releases the handle before
    returning.

    Args:
        path: Path to the media file
        **session_kwargs: Passed to MediaSession (raw, drop_frame, ...)

    Returns:
        ResultTree with the normalized metadata

    Raises:
        InvalidInputError: If the file does not exist
        LoadFailureError: If the library cannot parse the file
        LibraryUnavailableError: If the native library is missing
    """
    with MediaSession(path, **session_kwargs) as session:
        return session.result_tree


def probe_files(
    paths: list[str], **session_kwargs: Any
) -> dict[str, ResultTree]:
    """Probe several media files with one session.

    Files that fail to load are skipped with a warning.

    Args:
        paths: List of file paths
        **session_kwargs: Passed to MediaSession

    Returns:
        Mapping of path to ResultTree, in input order
    """
    results: dict[str, ResultTree] = {}
    with MediaSession(**session_kwargs) as session:
        for path in paths:
            try:
                results[path] = session.open(path)
            except (InvalidInputError, LoadFailureError) as e:
                warnings.warn(f"Failed to read {path}: {e}", stacklevel=2)
    return results
