# ==================================================
# examples/build_collection.py
# ==================================================
import argparse, logging, os, sys
from pathlib import Path

from osu_collection import Database, CollectionError, NotFound, load, save

def main(argv=None):
    p = argparse.ArgumentParser(description="add beatmap hashes to an osu! collection.db")
    p.add_argument("db", help="path to collection.db")
    p.add_argument("collection", nargs="?", help="collection name")
    p.add_argument("hashes", nargs="*", help="beatmap md5 hashes")
    p.add_argument("--remove", action="store_true", help="remove the hashes instead of adding them")
    p.add_argument("--list", action="store_true", help="print collections and exit")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    level = "DEBUG" if args.verbose else os.getenv("OSU_COLLECTION_LOG_LEVEL", "WARNING")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    path = Path(args.db)
    try:
        db = load(path) if path.exists() else Database()
        if args.list:
            for collection in db:
                print(f"{collection.name}\t{collection.hash_count}")
            return 0
        if not args.collection:
            p.error("collection name is required unless --list is given")

        try:
            collection = db.collection(args.collection)
        except NotFound:
            if args.remove:
                raise
            collection = db.append_collection(args.collection)

        for h in args.hashes:
            if args.remove:
                collection.remove_beatmap(h)
            else:
                collection.append_beatmap(h)
        if args.remove and collection.hash_count == 0:
            db.remove_collection(collection.name)
        save(db, path)
    except CollectionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
