"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import ClassVar

import pytest

from mediashim.backends.base import Backend
from mediashim.config import reset_config
from mediashim.exceptions import LibraryUnavailableError
from mediashim.language import reset_default_language
from mediashim.models import InfoKind, StreamKind

CATALOG = """General
Count;Count of objects available in this stream
StreamKind;Stream type name
Format;Format used
FileSize;File size in bytes
Duration;Play time of the stream in ms
Duration/String;Play time in format : XXx YYy only, YYy omited if zero
OverallBitRate;Bit rate of all streams in bps
Title;Title of file
Encoded_Library;Deprecated, do not use in new projects

Video
Count;Count of objects available in this stream
ID;The ID for this stream in this file
Format;Format used
Width;Width (aperture size if present) in pixel
Height;Height in pixel
FrameRate;Frames per second
Duration;Play time of the stream in ms
BitDepth;Number of bits in each sample

Audio
ID;The ID for this stream in this file
Format;Format used
Language;Language (2-letter ISO 639-1 if exists, else 3-letter ISO 639-2)
BitRate;Bit rate in bps
SamplingRate;Sampling rate

Text
Format;Format used
Language;Language

Other

Image
Width;Width in pixel

Menu
Format;Format used
"""

MOVIE = {
    StreamKind.GENERAL: [
        {
            "Count": "331",
            "StreamKind": "General",
            "Format": "Matroska",
            "FileSize": "5982664375",
            "Duration": "5025678.000",
            "Duration/String3": "01:23:45.678",
            "Duration/String": "1 h 23 min",
            "OverallBitRate": "9523412",
            "OverallBitRate/String": "9 523 kb/s",
            "Title": "",
        }
    ],
    StreamKind.VIDEO: [
        {
            "Count": "300",
            "ID": "1",
            "ID/String": "1",
            "Format": "AVC",
            "Width": "1920",
            "Height": "1080",
            "FrameRate": "23.976",
            "Duration": "5025678",
            "Duration/String3": "01:23:45.678",
            "Duration/String4": "01:23:45;16",
            "BitDepth": "8",
            "BitDepth/String": "8 bits",
        }
    ],
    StreamKind.AUDIO: [
        {
            "ID": "2",
            "ID/String": "2",
            "Format": "AAC",
            "Language": "en",
            "Language/String": "English",
            "BitRate": "128000",
            "BitRate/String": "128 kb/s",
            "SamplingRate": "48000.0",
        },
        {
            "ID": "3",
            "Format": "AC-3",
            "Language": "de",
            "Language/String": "",
            "BitRate": "448000",
            "SamplingRate": "48000",
        },
    ],
    StreamKind.TEXT: [
        {"Format": "UTF-8", "Language": "en", "Language/String": "English"},
    ],
    StreamKind.MENU: [
        {
            "Format": "Matroska",
            "00:00:00.000": "en:Chapter 1",
            "00:05:00.000": "en:Chapter 2",
            "00:10:00.000": "Credits",
        }
    ],
}

CLIP = {
    StreamKind.GENERAL: [
        {"Format": "MPEG-4", "FileSize": "1024", "Duration": "1500"},
    ],
    StreamKind.AUDIO: [
        {"ID": "1", "Format": "AAC", "BitRate": "96000"},
    ],
}


class FakeBackend(Backend):
    """Scripted stand-in for the native library.

    Files are keyed by path; each maps stream kinds to a list of streams,
    each stream mapping parameter names to values.
    """

    name: ClassVar[str] = "fake"

    def __init__(self, files=None, catalog=CATALOG, version="MediaInfoLib - v24.06"):
        self.files = files or {}
        self.catalog = catalog
        self.version = version
        self.options: dict[str, str] = {}
        self.current = None
        self.opened: list[str] = []
        self.closed_inputs = 0
        self.destroyed = 0
        self.catalog_queries = 0

    def open(self, path):
        self.opened.append(path)
        self.current = self.files.get(path)
        return self.current is not None

    def close_input(self):
        if self.current is not None:
            self.closed_inputs += 1
        self.current = None

    def option(self, name, value=""):
        if name == "Info_Parameters_CSV":
            self.catalog_queries += 1
            return self.catalog
        if name == "Info_Version":
            return self.version
        self.options[name] = value
        return ""

    def _streams(self, kind):
        return (self.current or {}).get(kind, [])

    def count(self, kind, stream=None):
        streams = self._streams(kind)
        if stream is None:
            return len(streams)
        return len(streams[stream])

    def get(self, kind, stream, parameter, info_kind=InfoKind.TEXT):
        return self._streams(kind)[stream].get(parameter, "")

    def get_by_index(self, kind, stream, index, info_kind=InfoKind.TEXT):
        name, value = list(self._streams(kind)[stream].items())[index]
        return name if info_kind is InfoKind.NAME else value

    def inform(self):
        template = self.options.get("Inform")
        if template:
            return f"template:{template}"
        if self.current is None:
            return ""
        return "General\nFormat : " + self.current[StreamKind.GENERAL][0]["Format"]

    def destroy(self):
        self.destroyed += 1


@pytest.fixture(autouse=True)
def _reset_globals(monkeypatch):
    """Keep process-wide state from leaking between tests."""
    for key in ("LIBRARY_PATH", "RAW", "DROP_FRAME", "ALL_FIELDS", "LANGUAGE_FILE", "TEMPLATE_FILE"):
        monkeypatch.delenv(f"MEDIASHIM_{key}", raising=False)
    reset_config()
    reset_default_language()
    yield
    reset_config()
    reset_default_language()


@pytest.fixture
def media_paths(tmp_path):
    """Create placeholder media files on disk."""
    movie = tmp_path / "movie.mkv"
    clip = tmp_path / "clip.mp4"
    broken = tmp_path / "broken.bin"
    for path in (movie, clip, broken):
        path.write_bytes(b"\x00" * 16)
    return {"movie": str(movie), "clip": str(clip), "broken": str(broken)}


@pytest.fixture
def backend(media_paths) -> FakeBackend:
    """Fake backend knowing the movie and the clip, but not the broken file."""
    return FakeBackend(files={media_paths["movie"]: MOVIE, media_paths["clip"]: CLIP})


@pytest.fixture
def has_mediainfo() -> bool:
    """Check if the native MediaInfo library is available."""
    from mediashim.backends.native import load_library

    try:
        load_library()
    except LibraryUnavailableError:
        return False
    return True
