"""
Key-value backing stores for the record repository and the cart.

Each store maps a string key to a string value. The repository keeps one JSON
array per collection name; the cart keeps one JSON array per owner.
"""
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable, Optional, Protocol
from urllib.parse import quote, unquote

from pymongo.collection import Collection

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...

    def keys(self) -> Iterable[str]:
        ...


class MemoryStore:
    """Dict-backed store. Contents are lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> Iterable[str]:
        return list(self._data.keys())


class FileStore:
    """
    One ``<key>.json`` file per key inside ``directory``, with the key percent-encoded.

    Writes go to a temporary file that is renamed over the target, so a reader
    sees either the old value or the new one. Two processes writing the same
    key are last-writer-wins.
    """

    def __init__(self, directory: str):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{quote(key, safe='')}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(value)
            os.replace(tmp_path, self._path(key))
        except OSError as e:
            logger.error(f"Failed to write key {key!r} to {self.directory}: {e}")
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()

    def keys(self) -> Iterable[str]:
        return [unquote(p.stem) for p in self.directory.glob("*.json")]


class MongoStore:
    """Stores each key as a ``{"_id": key, "value": str}`` document."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def get_item(self, key: str) -> Optional[str]:
        document = self.collection.find_one({"_id": key})
        if not document:
            return None
        return document.get("value")

    def set_item(self, key: str, value: str) -> None:
        self.collection.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)

    def remove_item(self, key: str) -> None:
        self.collection.delete_one({"_id": key})

    def keys(self) -> Iterable[str]:
        return [document["_id"] for document in self.collection.find({}, {"_id": 1})]
