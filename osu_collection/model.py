# ==================================================
# osu_collection/model.py
# ==================================================
from __future__ import annotations

from typing import Dict, Iterator, List

from .const import HASH_RE, MAX_VERSION, NAME_MAX, OSU_VERSION
from .errors import InvalidArgument, NotFound


def _check_name(name) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidArgument(f"provide a name between 1 and {NAME_MAX} characters")
    if len(name.encode("utf-8")) > NAME_MAX:
        raise InvalidArgument(f"provide a name between 1 and {NAME_MAX} characters")
    return name


class Collection:
    """Named, ordered list of beatmap md5 hashes. Duplicates are allowed."""

    def __init__(self, name: str):
        self.name = _check_name(name)
        self.hashes: List[str] = []
        self._size = 0

    @property
    def hash_count(self) -> int:
        return self._size

    # ------------------------------------------------------------------
    def append_beatmap(self, md5_hash: str) -> "Collection":
        if not isinstance(md5_hash, str) or not HASH_RE.fullmatch(md5_hash):
            raise InvalidArgument("provide a valid beatmap md5 hash")
        self.hashes.append(md5_hash)
        self._size += 1
        return self

    def remove_beatmap(self, md5_hash: str) -> "Collection":
        """Drop the first occurrence of `md5_hash`."""
        try:
            self.hashes.remove(md5_hash)
        except ValueError:
            raise NotFound("beatmap hash not found in this collection") from None
        self._size -= 1
        return self

    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return iter(self.hashes)

    def __contains__(self, md5_hash) -> bool:
        return md5_hash in self.hashes

    def __eq__(self, other) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return self.name == other.name and self.hashes == other.hashes

    def __repr__(self) -> str:
        return f"Collection(name={self.name!r}, hash_count={self._size})"


class Database:
    """In‑memory collection.db: a version stamp and collections in file order."""

    def __init__(self, version=OSU_VERSION):
        if isinstance(version, bool) or (isinstance(version, float) and not version.is_integer()):
            raise InvalidArgument(f"version must be a whole number, got {version!r}")
        try:
            version = int(version)
        except (TypeError, ValueError):
            raise InvalidArgument("provide version as a number") from None
        if not 0 <= version <= MAX_VERSION:
            raise InvalidArgument(f"version must fit in an unsigned 32‑bit integer, got {version}")

        self.version = version
        self.collections: Dict[str, Collection] = {}
        self._size = 0

    @property
    def collection_count(self) -> int:
        return self._size

    # ------------------------------------------------------------------
    def append_collection(self, name: str) -> Collection:
        """Create collection `name`; an existing one with that name is replaced."""
        collection = Collection(name)
        if name not in self.collections:
            self._size += 1
        self.collections[name] = collection
        return collection

    def remove_collection(self, name: str) -> "Database":
        if name not in self.collections:
            raise NotFound("collection name not found in this database")
        del self.collections[name]
        self._size -= 1
        return self

    def collection(self, name: str) -> Collection:
        try:
            return self.collections[name]
        except KeyError:
            raise NotFound("collection name not found in this database") from None

    # ------------------------------------------------------------------
    def to_bytes(self) -> bytes:
        from .encoder import encode
        return encode(self)

    @classmethod
    def from_bytes(cls, data: bytes, strict: bool = False) -> "Database":
        from .decoder import decode
        return decode(data, strict=strict)

    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Collection]:
        return iter(self.collections.values())

    def __contains__(self, name) -> bool:
        return name in self.collections

    def __eq__(self, other) -> bool:
        if not isinstance(other, Database):
            return NotImplemented
        return (self.version == other.version
                and list(self.collections) == list(other.collections)
                and all(a == b for a, b in zip(self, other)))

    def __repr__(self) -> str:
        return f"Database(version={self.version}, collection_count={self._size})"


def new_database(version=OSU_VERSION) -> Database:
    return Database(version)
