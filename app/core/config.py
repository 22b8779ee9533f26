import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    LLM_API_URL: str = os.environ.get("LLM_API_URL", "https://api.a0.dev/ai/llm")
    LLM_TIMEOUT_SECONDS: float = 30.0
    KV_BACKEND: str = os.environ.get("KV_BACKEND", "mongo")
    KV_COLLECTION_NAME: str = "key_value_store"
    MONGO_URI: str = os.environ.get("MONGO_URI", "")
    MONGO_DIRECT_URI: str = os.environ.get("MONGO_DIRECT_URI", "")
    MONGO_DB_NAME: str = "main"


settings = Settings()
