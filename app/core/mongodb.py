from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from app.core.config import settings

_client: AsyncIOMotorClient = None
_database: AsyncIOMotorDatabase = None


def _ensure_database() -> AsyncIOMotorDatabase:
    global _client, _database
    if _client is None:
        mongo_uri = settings.MONGO_DIRECT_URI or settings.MONGO_URI
        _client = AsyncIOMotorClient(mongo_uri, uuidRepresentation="standard")
    if _database is None:
        _database = _client[settings.MONGO_DB_NAME]
    return _database


async def init_mongo_client() -> None:
    _ensure_database()


async def close_mongo_client() -> None:
    global _client, _database
    if _client is not None:
        _client.close()
    _client = None
    _database = None


def get_key_value_collection() -> AsyncIOMotorCollection:
    """Collection holding one document per key: ``{"_id": key, "value": str}``."""
    return _ensure_database()[settings.KV_COLLECTION_NAME]
