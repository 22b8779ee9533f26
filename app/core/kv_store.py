from abc import ABC, abstractmethod
from typing import Dict, Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from app.core.config import settings
from app.core.mongodb import get_key_value_collection


class KeyValueStore(ABC):
    """Async string key-value storage with atomic per-key overwrite."""

    @abstractmethod
    async def get_item(self, key: str) -> Optional[str]: ...

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None: ...

    @abstractmethod
    async def remove_item(self, key: str) -> None: ...


class MongoKeyValueStore(KeyValueStore):
    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self.collection = collection

    async def get_item(self, key: str) -> Optional[str]:
        document = await self.collection.find_one({"_id": key})
        if not document:
            return None
        return document.get("value")

    async def set_item(self, key: str, value: str) -> None:
        await self.collection.replace_one(
            {"_id": key}, {"_id": key, "value": value}, upsert=True
        )

    async def remove_item(self, key: str) -> None:
        await self.collection.delete_one({"_id": key})


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


_store: Optional[KeyValueStore] = None


def get_kv_store() -> KeyValueStore:
    global _store
    if _store is None:
        if settings.KV_BACKEND == "memory":
            _store = InMemoryKeyValueStore()
        elif settings.KV_BACKEND == "mongo":
            _store = MongoKeyValueStore(get_key_value_collection())
        else:
            raise ValueError(f"Unknown KV_BACKEND '{settings.KV_BACKEND}'")
    return _store


def set_kv_store(store: Optional[KeyValueStore]) -> None:
    """Replace the process-wide store; ``None`` resets to the configured backend."""
    global _store
    _store = store
