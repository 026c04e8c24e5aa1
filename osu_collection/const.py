# ==================================================
# osu_collection/const.py
# ==================================================
import os
import re

from .errors import InvalidArgument

MAX_VERSION = 0xFFFFFFFF
DEFAULT_VERSION = 20191211

def _env_version(name: str = "OSU_COLLECTION_VERSION") -> int:
    raw = os.getenv(name)
    if raw is None:
        return DEFAULT_VERSION
    try:
        version = int(raw)
    except ValueError:
        raise InvalidArgument(f"{name} must be an integer, got {raw!r}") from None
    if not 0 <= version <= MAX_VERSION:
        raise InvalidArgument(f"{name} must be between 0 and {MAX_VERSION}, got {version}")
    return version

OSU_VERSION = _env_version()

HEADER_FMT = "<LL"        # version (L), collection_count (L)
HEADER_SIZE = 8
COUNT_FMT = "<L"          # hash_count following each collection name
COUNT_SIZE = 4

STRING_MARKER = 0x0B      # tags every length‑prefixed string
NAME_PREFIX_SIZE = 2      # marker + 1 length byte
NAME_MAX = 25             # bytes, after utf‑8 encoding

HASH_PREFIX = b"\x0b "    # marker + fixed length byte (0x20 == 32)
HASH_SIZE = 32
ENTRY_SIZE = len(HASH_PREFIX) + HASH_SIZE   # 34

HASH_RE = re.compile(r"[0-9a-f]{32}")
HASH_RE_BYTES = re.compile(rb"[0-9a-f]{32}")
