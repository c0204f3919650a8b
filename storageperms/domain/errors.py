# storageperms/domain/errors.py
from __future__ import annotations


class MediaIndexError(Exception):
    """Base class for failures while reading the media index."""


class IndexUnavailable(MediaIndexError):
    """The media index could not be opened (no content URI)."""

    def __init__(self, message: str = "External storage not available") -> None:
        super().__init__(message)


class QueryRejected(MediaIndexError):
    """The index accepted the connection but the query returned no result channel."""

    def __init__(self, message: str = "Query could not be executed") -> None:
        super().__init__(message)


class PreferencesUnavailable(Exception):
    """The durable preferences store could not be read or written."""

    def __init__(self, message: str = "Preferences store not available") -> None:
        super().__init__(message)
