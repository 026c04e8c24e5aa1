import sys
from pathlib import Path

import pytest

# Ensure the package is importable when tests are run from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from osu_collection import Database  # noqa: E402

HASH_A = "0123456789abcdef0123456789abcdef"
HASH_B = "fedcba9876543210fedcba9876543210"
HASH_C = "d41d8cd98f00b204e9800998ecf8427e"


@pytest.fixture
def top_plays() -> Database:
    db = Database(20191211)
    db.append_collection("Top Plays").append_beatmap(HASH_A).append_beatmap(HASH_B)
    return db


@pytest.fixture
def two_collections() -> Database:
    db = Database()
    db.append_collection("Favorites").append_beatmap(HASH_C)
    farm = db.append_collection("Farm")
    for h in (HASH_A, HASH_B, HASH_A):
        farm.append_beatmap(h)
    return db
