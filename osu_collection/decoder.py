# ==================================================
# osu_collection/decoder.py
# ==================================================
"""
Single pass decoder for collection.db.

The buffer is walked with an index cursor; every field read either advances
the cursor or moves the machine to FAILED, which raises MalformedInput.

    READ_HEADER -> READ_COLLECTION_HEADER <-> READ_HASHES -> DONE
"""
import enum
import logging
import struct
from typing import Optional

import numpy as np

from .const import (COUNT_FMT, COUNT_SIZE, ENTRY_SIZE, HASH_RE_BYTES,
                    HEADER_FMT, HEADER_SIZE, NAME_MAX, NAME_PREFIX_SIZE)
from .encoder import ENTRY_DTYPE
from .errors import MalformedInput
from .model import Collection, Database

logger = logging.getLogger(__name__)


class State(enum.Enum):
    READ_HEADER = "read_header"
    READ_COLLECTION_HEADER = "read_collection_header"
    READ_HASHES = "read_hashes"
    DONE = "done"
    FAILED = "failed"


class Decoder:
    def __init__(self, data: bytes, strict: bool = False):
        self.data = bytes(data)
        self.strict = strict
        self.pos = 0
        self.state = State.READ_HEADER

        self.database: Optional[Database] = None
        self.header_count = 0
        self.records = 0
        self._current: Optional[Collection] = None
        self._pending = 0

    # -- cursor helpers ----------------------------------------------------
    @property
    def remaining(self) -> int:
        return len(self.data) - self.pos

    def _fail(self, reason: str, offset: Optional[int] = None):
        self.state = State.FAILED
        raise MalformedInput(reason, self.pos if offset is None else offset)

    def _take(self, n: int, what: str) -> bytes:
        if n > self.remaining:
            self._fail(f"truncated {what}: need {n} bytes, {self.remaining} left")
        chunk = self.data[self.pos:self.pos + n]
        self.pos += n
        return chunk

    # -- states ------------------------------------------------------------
    def _read_header(self):
        if not self.data:
            self.database = Database()
            self.state = State.DONE
            return
        version, self.header_count = struct.unpack(HEADER_FMT, self._take(HEADER_SIZE, "header"))
        self.database = Database(version)
        self.state = State.READ_COLLECTION_HEADER if self.remaining else State.DONE

    def _read_collection_header(self):
        start = self.pos
        _, name_len = self._take(NAME_PREFIX_SIZE, "collection name prefix")
        raw_name = self._take(name_len, "collection name")
        (hash_count,) = struct.unpack(COUNT_FMT, self._take(COUNT_SIZE, "hash count"))

        if not 1 <= name_len <= NAME_MAX or hash_count == 0:
            self._fail("database is malformed", start)
        try:
            name = raw_name.decode("utf-8")
        except UnicodeDecodeError:
            self._fail("collection name is not valid utf-8", start + NAME_PREFIX_SIZE)

        if self.strict and name in self.database:
            self._fail(f"duplicate collection name {name!r}", start)

        self.records += 1
        self._current = self.database.append_collection(name)
        self._pending = hash_count
        self.state = State.READ_HASHES

    def _read_hashes(self):
        start = self.pos
        raw = self._take(self._pending * ENTRY_SIZE, f"hash entries of {self._current.name!r}")
        entries = np.frombuffer(raw, dtype=ENTRY_DTYPE, count=self._pending)

        for i, md5_hash in enumerate(entries["hash"]):
            # S32 strips trailing NULs, so short values fail the match too
            if not HASH_RE_BYTES.fullmatch(md5_hash):
                self._fail("database is malformed", start + i * ENTRY_SIZE)
            self._current.append_beatmap(md5_hash.decode("ascii"))

        logger.debug("decoded collection %r (%d hashes)", self._current.name, self._pending)
        self._current, self._pending = None, 0
        self.state = State.READ_COLLECTION_HEADER if self.remaining else State.DONE

    def _finish(self):
        if self.header_count == self.records:
            return
        reason = f"header announces {self.header_count} collections, found {self.records}"
        if self.strict:
            self._fail(reason)
        logger.warning(reason)

    # ----------------------------------------------------------------------
    def run(self) -> Database:
        steps = {
            State.READ_HEADER: self._read_header,
            State.READ_COLLECTION_HEADER: self._read_collection_header,
            State.READ_HASHES: self._read_hashes,
        }
        while self.state is not State.DONE:
            steps[self.state]()
        if self.data:
            self._finish()
        return self.database


def decode(data: bytes, strict: bool = False) -> Database:
    """
    Parse a collection.db buffer.

    The header's collection count is informational: records are read until
    the buffer ends. With `strict=True` the count must match the records
    found and collection names must be unique.
    """
    return Decoder(data, strict=strict).run()
