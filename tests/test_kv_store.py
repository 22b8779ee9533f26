from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.core.kv_store import (
    InMemoryKeyValueStore,
    MongoKeyValueStore,
    get_kv_store,
    set_kv_store,
)


@pytest.fixture
def collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.replace_one = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


class TestMongoKeyValueStore:
    async def test_get_item_reads_value(self, collection):
        collection.find_one.return_value = {"_id": "k", "value": "[]"}
        store = MongoKeyValueStore(collection)

        assert await store.get_item("k") == "[]"
        collection.find_one.assert_awaited_once_with({"_id": "k"})

    async def test_get_missing_item(self, collection):
        collection.find_one.return_value = None
        assert await MongoKeyValueStore(collection).get_item("k") is None

    async def test_set_item_upserts(self, collection):
        await MongoKeyValueStore(collection).set_item("k", "v")
        collection.replace_one.assert_awaited_once_with(
            {"_id": "k"}, {"_id": "k", "value": "v"}, upsert=True
        )

    async def test_remove_item(self, collection):
        await MongoKeyValueStore(collection).remove_item("k")
        collection.delete_one.assert_awaited_once_with({"_id": "k"})


class TestInMemoryKeyValueStore:
    async def test_round_trip(self):
        store = InMemoryKeyValueStore()
        assert await store.get_item("k") is None
        await store.set_item("k", "v")
        assert await store.get_item("k") == "v"
        await store.remove_item("k")
        await store.remove_item("k")
        assert await store.get_item("k") is None


class TestGetKvStore:
    def teardown_method(self):
        set_kv_store(None)

    def test_memory_backend(self):
        set_kv_store(None)
        with patch("app.core.kv_store.settings") as mock_settings:
            mock_settings.KV_BACKEND = "memory"
            store = get_kv_store()
        assert isinstance(store, InMemoryKeyValueStore)
        assert get_kv_store() is store

    def test_mongo_backend(self, collection):
        set_kv_store(None)
        with patch("app.core.kv_store.settings") as mock_settings, patch(
            "app.core.kv_store.get_key_value_collection", return_value=collection
        ):
            mock_settings.KV_BACKEND = "mongo"
            store = get_kv_store()
        assert isinstance(store, MongoKeyValueStore)
        assert store.collection is collection

    def test_unknown_backend(self):
        set_kv_store(None)
        with patch("app.core.kv_store.settings") as mock_settings:
            mock_settings.KV_BACKEND = "sqlite"
            with pytest.raises(ValueError):
                get_kv_store()
