"""Exceptions raised by mediashim."""


class MediashimError(Exception):
    """Base class for mediashim errors."""

    pass


class LibraryUnavailableError(MediashimError, OSError):
    """The native MediaInfo library could not be located or loaded."""

    pass


class InvalidInputError(MediashimError, ValueError):
    """The media path is empty or does not exist."""

    pass


class LoadFailureError(MediashimError):
    """The library rejected the media file."""

    def __init__(self, path: str):
        super().__init__(f"File could not be loaded: {path}")
        self.path = path


class SessionClosedError(MediashimError):
    """Operation attempted on a session whose handle was released."""

    pass
