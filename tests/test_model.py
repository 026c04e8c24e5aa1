import importlib

import pytest

from osu_collection import (OSU_VERSION, Collection, Database, InvalidArgument,
                            NotFound, new_database)

from conftest import HASH_A, HASH_B


def test_new_database_defaults():
    db = new_database()
    assert db.version == OSU_VERSION
    assert db.collection_count == 0
    assert db.collections == {}


def test_version_accepts_numeric_string():
    assert Database("20200101").version == 20200101


@pytest.mark.parametrize("version", ["abc", "1.5", None, -1, 2 ** 32, 1.5, 20191211.7, True, False])
def test_bad_version_rejected(version):
    with pytest.raises(InvalidArgument):
        Database(version)


def test_name_length_boundaries():
    db = Database()
    db.append_collection("x" * 25)
    assert db.collection_count == 1

    with pytest.raises(InvalidArgument):
        db.append_collection("x" * 26)
    with pytest.raises(InvalidArgument):
        db.append_collection("")
    assert db.collection_count == 1


def test_name_length_counts_utf8_bytes():
    # 9 characters, 27 bytes
    with pytest.raises(InvalidArgument):
        Collection("あいうえおかきくけ")
    assert Collection("あいうえおかきく").name == "あいうえおかきく"


def test_duplicate_collection_name_last_write_wins():
    db = Database()
    first = db.append_collection("Favorites").append_beatmap(HASH_A)
    second = db.append_collection("Favorites")
    assert db.collection_count == 1
    assert db.collection("Favorites") is second
    assert first is not second
    assert second.hash_count == 0


def test_collections_keep_insertion_order():
    db = Database()
    for name in ("b", "a", "c"):
        db.append_collection(name)
    assert list(db.collections) == ["b", "a", "c"]
    assert [c.name for c in db] == ["b", "a", "c"]


def test_remove_collection():
    db = Database()
    db.append_collection("a")
    db.append_collection("b")
    db.remove_collection("a")
    assert db.collection_count == 1
    assert "a" not in db

    with pytest.raises(NotFound):
        db.remove_collection("a")
    with pytest.raises(NotFound):
        db.collection("a")


@pytest.mark.parametrize("bad", [
    "",
    "A" * 32,
    "0123456789ABCDEF0123456789ABCDEF",
    "g" * 32,
    "a" * 31,
    "a" * 33,
    None,
])
def test_invalid_hash_rejected(bad):
    c = Collection("Favorites")
    with pytest.raises(InvalidArgument):
        c.append_beatmap(bad)
    assert c.hash_count == 0


def test_append_and_remove_beatmaps():
    c = Collection("Favorites")
    c.append_beatmap("a" * 32)
    c.append_beatmap(HASH_A).append_beatmap(HASH_B).append_beatmap(HASH_A)
    assert c.hash_count == 4
    assert len(c) == 4

    c.remove_beatmap(HASH_A)
    # only the first occurrence goes
    assert c.hashes == ["a" * 32, HASH_B, HASH_A]
    assert c.hash_count == 3

    with pytest.raises(NotFound):
        c.remove_beatmap("b" * 32)
    assert c.hash_count == 3


def test_equality(top_plays):
    other = Database(20191211)
    other.append_collection("Top Plays").append_beatmap(HASH_A).append_beatmap(HASH_B)
    assert top_plays == other

    other.collection("Top Plays").remove_beatmap(HASH_A).append_beatmap(HASH_A)
    assert top_plays != other


def test_whole_float_version_accepted():
    assert Database(20191211.0).version == 20191211


@pytest.fixture
def reload_const(monkeypatch):
    from osu_collection import const

    yield lambda: importlib.reload(const)
    monkeypatch.undo()
    importlib.reload(const)


def test_env_version_override(monkeypatch, reload_const):
    monkeypatch.setenv("OSU_COLLECTION_VERSION", "20200101")
    assert reload_const().OSU_VERSION == 20200101


@pytest.mark.parametrize("raw", ["abc", "-1", str(2 ** 32)])
def test_env_version_invalid(monkeypatch, reload_const, raw):
    monkeypatch.setenv("OSU_COLLECTION_VERSION", raw)
    with pytest.raises(InvalidArgument, match="OSU_COLLECTION_VERSION"):
        reload_const()
