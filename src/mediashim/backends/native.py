"""ctypes binding to the native MediaInfo library."""

from __future__ import annotations

import ctypes
import ctypes.util
import logging
import os
import sys
from typing import ClassVar

from mediashim.backends.base import Backend
from mediashim.exceptions import LibraryUnavailableError, SessionClosedError
from mediashim.models import InfoKind, StreamKind

logger = logging.getLogger(__name__)

if sys.platform == "win32":
    _LIB_NAMES = ["MediaInfo.dll"]
elif sys.platform == "darwin":
    _LIB_NAMES = ["libmediainfo.0.dylib", "libmediainfo.dylib"]
else:
    _LIB_NAMES = ["libmediainfo.so.0", "libmediainfo.so"]

# Count_Get's "all streams" stream number, (size_t)-1
_ALL_STREAMS = ctypes.c_size_t(-1).value

_loaded: dict[str, ctypes.CDLL] = {}


def _candidates(path: str | None) -> list[str]:
    if path:
        return [path]
    names = list(_LIB_NAMES)
    found = ctypes.util.find_library("mediainfo")
    if found and found not in names:
        names.append(found)
    return names


def _declare(lib: ctypes.CDLL) -> None:
    """Declare argument and return types of the functions we call."""
    # ── handle lifetime ──
    lib.MediaInfo_New.argtypes = []
    lib.MediaInfo_New.restype = ctypes.c_void_p
    lib.MediaInfo_Delete.argtypes = [ctypes.c_void_p]
    lib.MediaInfo_Delete.restype = None

    # ── input ──
    lib.MediaInfo_Open.argtypes = [ctypes.c_void_p, ctypes.c_wchar_p]
    lib.MediaInfo_Open.restype = ctypes.c_size_t
    lib.MediaInfo_Close.argtypes = [ctypes.c_void_p]
    lib.MediaInfo_Close.restype = None

    # ── options and report ──
    lib.MediaInfo_Option.argtypes = [ctypes.c_void_p, ctypes.c_wchar_p, ctypes.c_wchar_p]
    lib.MediaInfo_Option.restype = ctypes.c_wchar_p
    lib.MediaInfo_Inform.argtypes = [ctypes.c_void_p, ctypes.c_size_t]
    lib.MediaInfo_Inform.restype = ctypes.c_wchar_p

    # ── fields ──
    lib.MediaInfo_Count_Get.argtypes = [ctypes.c_void_p, ctypes.c_int, ctypes.c_size_t]
    lib.MediaInfo_Count_Get.restype = ctypes.c_size_t
    lib.MediaInfo_Get.argtypes = [
        ctypes.c_void_p,
        ctypes.c_int,
        ctypes.c_size_t,
        ctypes.c_wchar_p,
        ctypes.c_int,
        ctypes.c_int,
    ]
    lib.MediaInfo_Get.restype = ctypes.c_wchar_p
    lib.MediaInfo_GetI.argtypes = [
        ctypes.c_void_p,
        ctypes.c_int,
        ctypes.c_size_t,
        ctypes.c_size_t,
        ctypes.c_int,
    ]
    lib.MediaInfo_GetI.restype = ctypes.c_wchar_p


def load_library(path: str | None = None) -> ctypes.CDLL:
    """Load the MediaInfo shared library.

    Behavior:
    - An explicit path is the only candidate when given.
    - Otherwise try the platform default names, then whatever
      `ctypes.util.find_library` reports.
    - Loaded libraries are cached per candidate name.

    Raises:
        LibraryUnavailableError: If no candidate can be loaded
    """
    errors = []
    for candidate in _candidates(path):
        if candidate in _loaded:
            return _loaded[candidate]
        try:
            lib = ctypes.CDLL(candidate)
        except OSError as exc:
            errors.append(f"{candidate}: {exc}")
            continue
        try:
            _declare(lib)
        except AttributeError as exc:
            errors.append(f"{candidate}: not a MediaInfo library ({exc})")
            continue
        logger.debug("Loaded MediaInfo library from %s", candidate)
        _loaded[candidate] = lib
        return lib

    message = "MediaInfo library not found. Install libmediainfo or set MEDIASHIM_LIBRARY_PATH."
    if errors:
        message += "\nTried:\n  " + "\n  ".join(errors)
    raise LibraryUnavailableError(message)


def library_version(path: str | None = None) -> str:
    """Return the library's version string without opening a session."""
    lib = load_library(path)
    return lib.MediaInfo_Option(None, "Info_Version", "") or ""


class NativeBackend(Backend):
    """Backend holding one MediaInfo handle.

    The handle is acquired on construction and released by destroy(),
    exactly once.
    """

    name: ClassVar[str] = "mediainfo"

    def __init__(self, library: str | None = None):
        self._lib = load_library(library)
        self._handle = self._lib.MediaInfo_New()
        if not self._handle:
            raise LibraryUnavailableError("MediaInfo_New returned no handle")
        self._has_input = False
        logger.debug("Acquired MediaInfo handle %#x", self._handle)

    @property
    def handle(self) -> int:
        if not self._handle:
            raise SessionClosedError("MediaInfo handle already released")
        handle: int = self._handle
        return handle

    def open(self, path: str) -> bool:
        opened = bool(self._lib.MediaInfo_Open(self.handle, os.fspath(path)))
        self._has_input = opened
        return opened

    def close_input(self) -> None:
        if self._has_input:
            self._lib.MediaInfo_Close(self.handle)
            self._has_input = False

    def option(self, name: str, value: str = "") -> str:
        return self._lib.MediaInfo_Option(self.handle, name, value) or ""

    def count(self, kind: StreamKind, stream: int | None = None) -> int:
        number = _ALL_STREAMS if stream is None else stream
        return int(self._lib.MediaInfo_Count_Get(self.handle, int(kind), number))

    def get(
        self,
        kind: StreamKind,
        stream: int,
        parameter: str,
        info_kind: InfoKind = InfoKind.TEXT,
    ) -> str:
        value = self._lib.MediaInfo_Get(
            self.handle, int(kind), stream, parameter, int(info_kind), int(InfoKind.NAME)
        )
        return value or ""

    def get_by_index(
        self,
        kind: StreamKind,
        stream: int,
        index: int,
        info_kind: InfoKind = InfoKind.TEXT,
    ) -> str:
        value = self._lib.MediaInfo_GetI(self.handle, int(kind), stream, index, int(info_kind))
        return value or ""

    def inform(self) -> str:
        return self._lib.MediaInfo_Inform(self.handle, 0) or ""

    def destroy(self) -> None:
        if not self._handle:
            return
        handle, self._handle = self._handle, None
        if self._has_input:
            self._lib.MediaInfo_Close(handle)
            self._has_input = False
        self._lib.MediaInfo_Delete(handle)
        logger.debug("Released MediaInfo handle %#x", handle)
