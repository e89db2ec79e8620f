from typing import Any, Dict, List, Mapping, Optional
from core.repository import RecordRepository


class EntityService:
    """CRUD passthrough to the repository for a single collection."""

    collection: str = None

    def __init__(self, repository: RecordRepository):
        self.repository = repository

    def get_all(self) -> List[Dict[str, Any]]:
        return self.repository.get_all(self.collection)

    def get_by_id(self, record_id: str) -> Optional[Dict[str, Any]]:
        return self.repository.get_by_id(self.collection, record_id)

    def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return self.repository.create(self.collection, data)

    def update(self, record_id: str, data: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        return self.repository.update(self.collection, record_id, data)

    def remove(self, record_id: str) -> bool:
        return self.repository.remove(self.collection, record_id)
