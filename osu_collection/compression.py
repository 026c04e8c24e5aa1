# ==================================================
# osu_collection/compression.py
# ==================================================
import zstandard as zstd

from .errors import MalformedInput

# -------- zstd wrappers for .bak.zst backups -----------------------------

BACKUP_LEVEL = 3

cctx = zstd.ZstdCompressor(level=BACKUP_LEVEL, write_content_size=True)
dctx = zstd.ZstdDecompressor()

def compress(data: bytes) -> bytes:
    return cctx.compress(data)

def decompress(data: bytes) -> bytes:
    try:
        return dctx.decompress(data)
    except zstd.ZstdError as e:
        raise MalformedInput(f"backup is not a valid zstd frame: {e}") from e
