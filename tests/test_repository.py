import json

import pytest

from core.repository import RecordRepository
from core.storage import MemoryStore


@pytest.fixture
def repo():
    return RecordRepository(MemoryStore())


def test_create_then_get_by_id_returns_input_plus_id(repo):
    data = {"street": "Rua Augusta", "number": "10", "city": "São Paulo"}
    created = repo.create("addresses", data)

    assert created["id"]
    assert repo.get_by_id("addresses", created["id"]) == {**data, "id": created["id"]}


def test_create_ignores_caller_id_and_generates_distinct_ids(repo):
    ids = {repo.create("addresses", {"id": "fixed", "n": i})["id"] for i in range(20)}

    assert len(ids) == 20
    assert "fixed" not in ids


def test_update_merges_fields(repo):
    created = repo.create("menuItems", {"name": "Pizza", "price": 30.0})

    updated = repo.update("menuItems", created["id"], {"price": 35.5})

    assert updated == {"id": created["id"], "name": "Pizza", "price": 35.5}
    assert repo.get_by_id("menuItems", created["id"]) == updated


def test_update_cannot_change_id(repo):
    created = repo.create("menuItems", {"name": "Pizza"})

    updated = repo.update("menuItems", created["id"], {"id": "other", "name": "Calzone"})

    assert updated["id"] == created["id"]
    assert repo.get_by_id("menuItems", "other") is None


def test_update_missing_id_returns_none_without_writing():
    store = MemoryStore()
    repo = RecordRepository(store)

    assert repo.update("menuItems", "nope", {"name": "x"}) is None
    assert store.get_item("menuItems") is None


def test_remove(repo):
    created = repo.create("categories", {"name": "Sushi"})

    assert repo.remove("categories", created["id"]) is True
    assert repo.get_by_id("categories", created["id"]) is None
    assert repo.remove("categories", created["id"]) is False


def test_returned_records_are_copies(repo):
    created = repo.create("restaurants", {"name": "Doce Paixão", "tags": ["doces"]})
    created["name"] = "changed"
    created["tags"].append("bolos")

    fetched = repo.get_by_id("restaurants", created["id"])
    fetched["name"] = "changed again"

    assert repo.get_by_id("restaurants", created["id"]) == {
        "id": created["id"], "name": "Doce Paixão", "tags": ["doces"]
    }


def test_malformed_collection_is_treated_as_empty():
    store = MemoryStore({"users": "{not json", "categories": json.dumps({"a": 1})})
    repo = RecordRepository(store)

    assert repo.get_all("users") == []
    assert repo.get_all("categories") == []

    created = repo.create("users", {"name": "Ana"})
    assert repo.get_all("users") == [created]


def test_seeding_is_lazy_and_never_overwrites():
    store = MemoryStore({"categories": json.dumps([{"id": "9", "name": "Existing"}])})
    seed = {
        "categories": [{"id": "1", "name": "Pizza"}],
        "restaurants": [{"id": "1", "name": "Doce Paixão"}],
    }
    repo = RecordRepository(store, seed_data=seed)

    assert repo.get_all("restaurants") == [{"id": "1", "name": "Doce Paixão"}]
    assert repo.get_all("categories") == [{"id": "9", "name": "Existing"}]

    repo.remove("restaurants", "1")
    assert repo.initialize() == []
    assert repo.get_all("restaurants") == []


def test_find_filters_by_equality(repo):
    repo.create("menuItems", {"restaurant_id": "1", "name": "Bolo"})
    repo.create("menuItems", {"restaurant_id": "2", "name": "Temaki"})

    assert [r["name"] for r in repo.find("menuItems", restaurant_id="2")] == ["Temaki"]


def test_transaction_writes_once_on_success(repo):
    a = repo.create("addresses", {"is_default": True})
    b = repo.create("addresses", {"is_default": False})

    with repo.transaction("addresses") as records:
        for record in records:
            record["is_default"] = record["id"] == b["id"]

    assert repo.get_by_id("addresses", a["id"])["is_default"] is False
    assert repo.get_by_id("addresses", b["id"])["is_default"] is True


def test_transaction_discards_changes_on_error(repo):
    created = repo.create("addresses", {"is_default": True})

    with pytest.raises(RuntimeError):
        with repo.transaction("addresses") as records:
            records[0]["is_default"] = False
            raise RuntimeError("boom")

    assert repo.get_by_id("addresses", created["id"])["is_default"] is True
