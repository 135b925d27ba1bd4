"""Translation tables and the process-wide default language.

Tables are plain text, one "key;value" pair per line, with either bare
newline or carriage-return+newline line endings.

The default language is process-scoped: the last call to
set_default_language() wins for every session constructed afterwards.
Sessions that are already open keep whatever they were given.
"""

from __future__ import annotations

import os
from pathlib import Path

_default_language: str = ""


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def read_table_text(path: str | os.PathLike[str]) -> str:
    """Read a semicolon-separated table file with normalized line endings."""
    return normalize_newlines(Path(path).read_text(encoding="utf-8-sig"))


def parse_table(text: str) -> dict[str, str]:
    """Return the key -> value pairs of a table.

    Lines with fewer than two columns are skipped; extra columns are
    ignored.
    """
    table: dict[str, str] = {}
    for line in normalize_newlines(text).split("\n"):
        columns = line.split(";")
        if len(columns) < 2 or not columns[0].strip():
            continue
        table[columns[0].strip()] = columns[1].strip()
    return table


def set_default_language(data: str) -> None:
    """Set the language table applied to sessions created from now on."""
    global _default_language
    _default_language = normalize_newlines(data)


def get_default_language() -> str:
    """Return the process default language table ("" if none)."""
    return _default_language


def reset_default_language() -> None:
    """Clear the process default language (for testing)."""
    global _default_language
    _default_language = ""
