# ==================================================
# osu_collection/errors.py
# ==================================================
from typing import Optional


class CollectionError(Exception):
    """Base class for every error raised by osu_collection."""


class InvalidArgument(CollectionError, ValueError):
    """A model operation got a value it cannot store (version, name, hash)."""


class NotFound(CollectionError, LookupError):
    """A collection name or beatmap hash is not present."""


class InvalidState(CollectionError, ValueError):
    """The database cannot be written in its current shape."""


class MalformedInput(CollectionError, ValueError):
    """The byte stream is not a valid collection database."""

    def __init__(self, reason: str, offset: Optional[int] = None):
        self.reason = reason
        self.offset = offset
        if offset is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason} (at byte {offset})")
