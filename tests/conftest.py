import json

import httpx
import pytest

from app.core.kv_store import InMemoryKeyValueStore, set_kv_store
from app.core.llm_client import CompletionClient

LLM_URL = "https://llm.test/ai/llm"


def make_completion_client(handler) -> CompletionClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CompletionClient(LLM_URL, http_client=http_client)


def completion_handler(completion, sent=None, status_code=200):
    """Handler answering every request with ``{"completion": completion}``.

    Request bodies are appended to ``sent`` when given.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if sent is not None:
            sent.append(json.loads(request.content))
        body = {} if completion is None else {"completion": completion}
        return httpx.Response(status_code, json=body)

    return handler


@pytest.fixture
def memory_store():
    store = InMemoryKeyValueStore()
    set_kv_store(store)
    yield store
    set_kv_store(None)
