from .const import OSU_VERSION
from .errors import CollectionError, InvalidArgument, InvalidState, MalformedInput, NotFound
from .model import Collection, Database, new_database
from .encoder import encode
from .decoder import decode
from .storage import load, restore_backup, save

__all__ = [
    "OSU_VERSION",
    "Database", "Collection", "new_database",
    "encode", "decode",
    "load", "save", "restore_backup",
    "CollectionError", "InvalidArgument", "NotFound", "InvalidState", "MalformedInput",
]
