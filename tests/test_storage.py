from core.repository import RecordRepository
from core.storage import FileStore, MemoryStore, MongoStore


class FakeCollection:
    """Just enough of a pymongo Collection for MongoStore."""

    def __init__(self):
        self.documents = {}

    def find_one(self, query):
        return self.documents.get(query["_id"])

    def replace_one(self, query, document, upsert=False):
        if query["_id"] in self.documents or upsert:
            self.documents[query["_id"]] = dict(document)

    def delete_one(self, query):
        self.documents.pop(query["_id"], None)

    def find(self, query, projection=None):
        return [{"_id": key} for key in self.documents]


def test_memory_store_roundtrip():
    store = MemoryStore()
    store.set_item("cart:1", "[]")

    assert store.get_item("cart:1") == "[]"
    assert list(store.keys()) == ["cart:1"]

    store.remove_item("cart:1")
    store.remove_item("cart:1")
    assert store.get_item("cart:1") is None


def test_file_store_persists_between_instances(tmp_path):
    first = FileStore(str(tmp_path))
    first.set_item("menuItems", '[{"id": "1"}]')
    first.set_item("cart:abc", "[]")

    second = FileStore(str(tmp_path))
    assert second.get_item("menuItems") == '[{"id": "1"}]'
    assert sorted(second.keys()) == ["cart:abc", "menuItems"]

    second.remove_item("cart:abc")
    assert first.get_item("cart:abc") is None
    assert not list(tmp_path.glob("*.tmp"))


def test_repository_over_file_store(tmp_path):
    repo = RecordRepository(FileStore(str(tmp_path)))
    created = repo.create("categories", {"name": "Bebidas"})

    reopened = RecordRepository(FileStore(str(tmp_path)))
    assert reopened.get_by_id("categories", created["id"]) == created


def test_mongo_store_upserts_documents():
    collection = FakeCollection()
    store = MongoStore(collection)

    assert store.get_item("users") is None
    store.set_item("users", "[]")
    store.set_item("users", '[{"id": "1"}]')

    assert store.get_item("users") == '[{"id": "1"}]'
    assert list(store.keys()) == ["users"]

    store.remove_item("users")
    assert store.get_item("users") is None


def test_file_store_keys_round_trip(tmp_path):
    store = FileStore(str(tmp_path))
    for key in ("cart:abc", "cart__abc", "a/b", "100%"):
        store.set_item(key, key)

    reopened = FileStore(str(tmp_path))
    assert sorted(reopened.keys()) == sorted(["cart:abc", "cart__abc", "a/b", "100%"])
    assert reopened.get_item("cart__abc") == "cart__abc"
    assert reopened.get_item("cart:abc") == "cart:abc"
