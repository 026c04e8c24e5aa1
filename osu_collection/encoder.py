# ==================================================
# osu_collection/encoder.py
# ==================================================
import logging
import struct

import numpy as np

from .const import COUNT_FMT, HASH_PREFIX, HASH_SIZE, HEADER_FMT, STRING_MARKER
from .errors import InvalidState
from .model import Collection, Database

logger = logging.getLogger(__name__)

# one hash entry: 0x0B 0x20 followed by 32 ascii hex chars, no padding
ENTRY_DTYPE = np.dtype([("marker", f"S{len(HASH_PREFIX)}"), ("hash", f"S{HASH_SIZE}")])


def _check(database: Database):
    if database.collection_count == 0:
        raise InvalidState("no collections in this database")
    for collection in database:
        if collection.hash_count == 0:
            raise InvalidState(f"empty collection in database: {collection.name!r}")
        if len(collection.hashes) != collection.hash_count:
            raise InvalidState(
                f"collection {collection.name!r} holds {len(collection.hashes)} hashes "
                f"but counts {collection.hash_count}; use append_beatmap/remove_beatmap")


def _encode_hashes(hashes) -> bytes:
    entries = np.empty(len(hashes), dtype=ENTRY_DTYPE)
    entries["marker"] = HASH_PREFIX
    entries["hash"] = [h.encode("ascii") for h in hashes]
    return entries.tobytes()


def _encode_collection(collection: Collection) -> bytes:
    name = collection.name.encode("utf-8")
    return b"".join((
        bytes((STRING_MARKER, len(name))),
        name,
        struct.pack(COUNT_FMT, collection.hash_count),
        _encode_hashes(collection.hashes),
    ))


def encode(database: Database) -> bytes:
    """Serialise `database` to the on‑disk collection.db layout."""
    _check(database)

    buffers = [struct.pack(HEADER_FMT, database.version, database.collection_count)]
    for collection in database:
        buffers.append(_encode_collection(collection))
        logger.debug("encoded collection %r (%d hashes)", collection.name, collection.hash_count)

    return b"".join(buffers)
