from typing import Optional
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from core.config import settings
from core.repository import RecordRepository
from core.seed import SAMPLE_DATA
from core.storage import FileStore, KeyValueStore, MemoryStore, MongoStore
import logging

logger = logging.getLogger(__name__)

# Collection names (one JSON array per key in the store)
ADDRESSES = "addresses"
RESTAURANTS = "restaurants"
MENU_ITEMS = "menuItems"
USERS = "users"
CATEGORIES = "categories"
ORDERS = "orders"
PAYMENT_METHODS = "payment_methods"
FAVORITES = "user_favorites"


class MongoDB:
    client: MongoClient = None
    db: Database = None

    def connect_to_database(self):
        try:
            self.client = MongoClient(settings.MONGO_URI)
            self.db = self.client[settings.MONGO_DB]
            logger.info("Connected to MongoDB")
            return self.db
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise e

    def close_database_connection(self):
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Closed MongoDB connection")

    def get_collection(self, collection_name: str) -> Collection:
        if self.db is None:
            self.connect_to_database()
        return self.db[collection_name]


mongodb = MongoDB()


def build_store(backend: Optional[str] = None) -> KeyValueStore:
    backend = backend or settings.STORAGE_BACKEND

    if backend == "memory":
        return MemoryStore()
    if backend == "file":
        logger.info(f"Using file storage at {settings.STORAGE_PATH}")
        return FileStore(settings.STORAGE_PATH)
    if backend == "mongo":
        return MongoStore(mongodb.get_collection(settings.MONGO_KV_COLLECTION))

    raise ValueError(f"Unknown storage backend: {backend}")


class Storage:
    store: KeyValueStore = None
    repository: RecordRepository = None

    def open(self, store: Optional[KeyValueStore] = None) -> RecordRepository:
        self.store = store or build_store()
        seed_data = SAMPLE_DATA if settings.SEED_SAMPLE_DATA else None
        self.repository = RecordRepository(self.store, seed_data=seed_data)
        self.repository.initialize()
        return self.repository

    def close(self):
        if settings.STORAGE_BACKEND == "mongo":
            mongodb.close_database_connection()
        self.store = None
        self.repository = None


storage = Storage()


def get_store() -> KeyValueStore:
    if storage.store is None:
        storage.open()
    return storage.store


def get_repository() -> RecordRepository:
    if storage.repository is None:
        storage.open()
    return storage.repository
