import json
import logging
import time
from typing import List, Optional
from uuid import uuid4

from pydantic import TypeAdapter

from app.core.kv_store import KeyValueStore, get_kv_store
from app.models.recent_search import (
    MAX_RECENT_SEARCHES,
    RecentSearch,
    RecentSearchCreate,
)

logger = logging.getLogger(__name__)

RECENT_SEARCHES_KEY = "@recent_searches"

_recent_search_list = TypeAdapter(List[RecentSearch])

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def make_recent_search_id(timestamp_ms: Optional[int] = None) -> str:
    """``<base36 epoch-ms>-<8 random hex chars>``."""
    if timestamp_ms is None:
        timestamp_ms = _now_ms()
    return f"{_to_base36(timestamp_ms)}-{uuid4().hex[:8]}"


async def read_recent_searches(store: Optional[KeyValueStore] = None) -> List[RecentSearch]:
    store = store or get_kv_store()
    try:
        raw = await store.get_item(RECENT_SEARCHES_KEY)
        if not raw:
            return []
        return _recent_search_list.validate_json(raw)
    except Exception:
        logger.exception("Failed to read recent searches")
        return []


async def save_recent_search(
    item: RecentSearchCreate, store: Optional[KeyValueStore] = None
) -> Optional[RecentSearch]:
    # Plain read-modify-write: concurrent saves are not serialized and the last
    # write wins.
    store = store or get_kv_store()
    try:
        current = await read_recent_searches(store)
        timestamp = _now_ms()
        entry = RecentSearch(
            id=make_recent_search_id(timestamp),
            title=item.title,
            subtitle=item.subtitle,
            thumbnail_uri=item.thumbnail_uri,
            timestamp=timestamp,
        )
        updated = [entry, *current][:MAX_RECENT_SEARCHES]
        payload = json.dumps(
            [search.model_dump(mode="json", by_alias=True) for search in updated]
        )
        await store.set_item(RECENT_SEARCHES_KEY, payload)
        return entry
    except Exception:
        logger.exception("Failed to save recent search")
        return None


async def clear_recent_searches(store: Optional[KeyValueStore] = None) -> bool:
    store = store or get_kv_store()
    try:
        await store.remove_item(RECENT_SEARCHES_KEY)
        return True
    except Exception:
        logger.exception("Failed to clear recent searches")
        return False
