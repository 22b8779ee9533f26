import json
from unittest.mock import AsyncMock, patch

from app.collections.recent_searches import (
    RECENT_SEARCHES_KEY,
    clear_recent_searches,
    make_recent_search_id,
    read_recent_searches,
    save_recent_search,
)
from app.core.kv_store import InMemoryKeyValueStore
from app.models.recent_search import RecentSearchCreate


class TestReadRecentSearches:
    async def test_empty_store(self):
        assert await read_recent_searches(InMemoryKeyValueStore()) == []

    async def test_uses_default_store(self, memory_store):
        await save_recent_search(RecentSearchCreate(title="Maize"))
        assert [s.title for s in await read_recent_searches()] == ["Maize"]

    async def test_corrupt_payload_returns_empty(self):
        store = InMemoryKeyValueStore({RECENT_SEARCHES_KEY: "{not json"})
        assert await read_recent_searches(store) == []

    async def test_read_error_returns_empty(self):
        store = InMemoryKeyValueStore()
        store.get_item = AsyncMock(side_effect=ConnectionError("down"))
        assert await read_recent_searches(store) == []

    async def test_reads_persisted_camel_case(self):
        raw = json.dumps(
            [
                {
                    "id": "abc-1",
                    "title": "Wheat rust",
                    "timestamp": 1700000000000,
                    "thumbnailUri": "file:///t.png",
                }
            ]
        )
        store = InMemoryKeyValueStore({RECENT_SEARCHES_KEY: raw})

        [search] = await read_recent_searches(store)

        assert search.thumbnail_uri == "file:///t.png"
        assert search.subtitle is None


class TestSaveRecentSearch:
    async def test_creates_record(self):
        store = InMemoryKeyValueStore()

        entry = await save_recent_search(
            RecentSearchCreate(title="Soybean", subtitle="Pune"), store
        )

        assert entry.title == "Soybean"
        assert entry.subtitle == "Pune"
        assert entry.thumbnail_uri is None
        assert isinstance(entry.timestamp, int)
        stored = json.loads(await store.get_item(RECENT_SEARCHES_KEY))
        assert stored == [
            {
                "id": entry.id,
                "title": "Soybean",
                "subtitle": "Pune",
                "timestamp": entry.timestamp,
                "thumbnailUri": None,
            }
        ]

    async def test_keeps_twenty_newest(self):
        store = InMemoryKeyValueStore()
        for i in range(25):
            await save_recent_search(RecentSearchCreate(title=f"search {i}"), store)

        searches = await read_recent_searches(store)

        assert len(searches) == 20
        assert [s.title for s in searches] == [f"search {i}" for i in range(24, 4, -1)]

    async def test_distinct_ids_within_same_millisecond(self):
        store = InMemoryKeyValueStore()
        with patch("app.collections.recent_searches._now_ms", return_value=1700000000000):
            first = await save_recent_search(RecentSearchCreate(title="a"), store)
            second = await save_recent_search(RecentSearchCreate(title="b"), store)

        assert first.timestamp == second.timestamp
        assert first.id != second.id

    async def test_round_trip(self):
        store = InMemoryKeyValueStore()
        saved = [
            await save_recent_search(
                RecentSearchCreate(title="Rice", subtitle="Kharif", thumbnail_uri="file:///r.png"),
                store,
            ),
            await save_recent_search(RecentSearchCreate(title="Cotton"), store),
        ]

        assert await read_recent_searches(store) == list(reversed(saved))

    async def test_write_error_returns_none(self):
        store = InMemoryKeyValueStore()
        store.set_item = AsyncMock(side_effect=ConnectionError("down"))
        assert await save_recent_search(RecentSearchCreate(title="x"), store) is None

    async def test_replaces_corrupt_payload(self):
        store = InMemoryKeyValueStore({RECENT_SEARCHES_KEY: "garbage"})
        entry = await save_recent_search(RecentSearchCreate(title="x"), store)
        assert await read_recent_searches(store) == [entry]


class TestClearRecentSearches:
    async def test_clears(self):
        store = InMemoryKeyValueStore()
        await save_recent_search(RecentSearchCreate(title="x"), store)

        assert await clear_recent_searches(store) is True
        assert await read_recent_searches(store) == []

    async def test_error_returns_false(self):
        store = InMemoryKeyValueStore()
        store.remove_item = AsyncMock(side_effect=ConnectionError("down"))
        assert await clear_recent_searches(store) is False


class TestMakeRecentSearchId:
    def test_format(self):
        prefix, suffix = make_recent_search_id(36**3).split("-")
        assert prefix == "1000"
        assert len(suffix) == 8
        int(suffix, 16)
