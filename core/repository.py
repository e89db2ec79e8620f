"""
Generic record repository.

Every collection is stored as a JSON array under its own key in a
KeyValueStore. Records are dicts that always carry a generated string ``id``.
The repository owns the serialized data: callers get deep copies back, so a
change only lands through ``update``/``transaction``.

Writes are synchronous and unlocked. Within one process they are strictly
ordered; two processes sharing a file or Mongo store are last-writer-wins.
"""
import copy
import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional

from bson import ObjectId

from core.storage import KeyValueStore

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def generate_id() -> str:
    return str(ObjectId())


class RecordRepository:
    def __init__(self, store: KeyValueStore, seed_data: Optional[Mapping[str, List[Record]]] = None):
        self.store = store
        self.seed_data = seed_data or {}
        self._initialized = False

    def initialize(self) -> List[str]:
        """
        Write seed collections that are absent from the store.

        Existing keys are never overwritten, so calling this repeatedly is safe.
        Returns the collection names that were seeded.
        """
        seeded = []
        for collection, records in self.seed_data.items():
            if self.store.get_item(collection) is None:
                self.store.set_item(collection, json.dumps(records))
                seeded.append(collection)
        if seeded:
            logger.info(f"Seeded collections: {', '.join(seeded)}")
        self._initialized = True
        return seeded

    def _load(self, collection: str) -> List[Record]:
        if not self._initialized:
            self.initialize()

        raw = self.store.get_item(collection)
        if raw is None:
            return []

        try:
            records = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Collection {collection!r} holds malformed JSON; treating it as empty")
            return []

        if not isinstance(records, list):
            logger.warning(f"Collection {collection!r} is not a JSON array; treating it as empty")
            return []

        return [record for record in records if isinstance(record, dict)]

    def _save(self, collection: str, records: List[Record]) -> None:
        self.store.set_item(collection, json.dumps(records, default=str))

    def get_all(self, collection: str) -> List[Record]:
        return self._load(collection)

    def get_by_id(self, collection: str, record_id: str) -> Optional[Record]:
        for record in self._load(collection):
            if record.get("id") == record_id:
                return record
        return None

    def find(self, collection: str, **criteria: Any) -> List[Record]:
        return [
            record for record in self._load(collection)
            if all(record.get(field) == value for field, value in criteria.items())
        ]

    def create(self, collection: str, data: Mapping[str, Any]) -> Record:
        records = self._load(collection)
        existing_ids = {record.get("id") for record in records}

        record_id = generate_id()
        while record_id in existing_ids:
            record_id = generate_id()

        new_record = {**copy.deepcopy(dict(data)), "id": record_id}
        records.append(new_record)
        self._save(collection, records)
        return copy.deepcopy(new_record)

    def update(self, collection: str, record_id: str, data: Mapping[str, Any]) -> Optional[Record]:
        records = self._load(collection)

        for index, record in enumerate(records):
            if record.get("id") == record_id:
                changes = {k: v for k, v in copy.deepcopy(dict(data)).items() if k != "id"}
                records[index] = {**record, **changes}
                self._save(collection, records)
                return copy.deepcopy(records[index])

        return None

    def remove(self, collection: str, record_id: str) -> bool:
        records = self._load(collection)
        remaining = [record for record in records if record.get("id") != record_id]

        if len(remaining) == len(records):
            return False

        self._save(collection, remaining)
        return True

    def drop(self, collection: str) -> None:
        self.store.remove_item(collection)

    @contextmanager
    def transaction(self, collection: str) -> Iterator[List[Record]]:
        """
        Yield the collection's records for in-place changes.

        The list is written back in a single store write when the block exits
        cleanly. If the block raises, nothing is written.
        """
        records = self._load(collection)
        yield records
        self._save(collection, records)
