# ==================================================
# osu_collection/storage.py
# ==================================================
from __future__ import annotations

import logging
import os
from pathlib import Path

from .compression import compress, decompress
from .decoder import decode
from .encoder import encode
from .model import Database

logger = logging.getLogger(__name__)


def _sibling(path: Path, suffix: str) -> Path:
    return path.with_name(path.name + suffix)

def backup_path(path: str | os.PathLike) -> Path:
    return _sibling(Path(path), ".bak.zst")

def _atomic_write(path: Path, data: bytes):
    tmp = _sibling(path, ".tmp")
    try:
        with open(tmp, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise

# ------------------------------------------------------------------
def load(path: str | os.PathLike, strict: bool = False) -> Database:
    """Read and decode a collection.db file."""
    path = Path(path)
    database = decode(path.read_bytes(), strict=strict)
    logger.debug("loaded %s: %d collections", path, database.collection_count)
    return database

def save(database: Database, path: str | os.PathLike, backup: bool = True) -> Path:
    """
    Encode `database` and atomically replace `path` with it.

    With `backup`, the file being replaced is kept next to it as a
    zstd‑compressed `<name>.bak.zst`. Nothing is written if encoding fails.
    """
    path = Path(path)
    data = encode(database)

    if backup and path.exists():
        bak = backup_path(path)
        _atomic_write(bak, compress(path.read_bytes()))
        logger.info("backed up %s to %s", path, bak)

    _atomic_write(path, data)
    logger.info("wrote %s (%d collections, %d bytes)", path, database.collection_count, len(data))
    return path

def restore_backup(path: str | os.PathLike) -> Database:
    """Put `<name>.bak.zst` back in place of `path` and return its contents."""
    path = Path(path)
    bak = backup_path(path)
    data = decompress(bak.read_bytes())
    database = decode(data)

    _atomic_write(path, data)
    logger.info("restored %s from %s", path, bak)
    return database
