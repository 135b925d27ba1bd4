"""Library backends for mediashim."""

from mediashim.backends.base import Backend
from mediashim.backends.native import NativeBackend, library_version, load_library

__all__ = [
    "Backend",
    "NativeBackend",
    "library_version",
    "load_library",
]
