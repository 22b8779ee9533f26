import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from app.models.advisory import CompletionRequest, CompletionResponse

from .config import settings

logger = logging.getLogger(__name__)


class CompletionClient:
    """Single-turn client for the remote completion endpoint.

    The endpoint takes ``{"messages": [{"role", "content"}, ...]}`` and answers
    with JSON carrying a ``completion`` string. Any transport error, non-2xx
    status or malformed body is reported as ``None`` so callers can fall back.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.url = url
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def complete(self, request: CompletionRequest) -> Optional[str]:
        payload = request.model_dump(mode="json")
        try:
            response = await self._http_client.post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
            data = CompletionResponse.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Completion request failed with status %s", e.response.status_code
            )
            return None
        except httpx.HTTPError as e:
            logger.warning("Completion request error (%s): %s", type(e).__name__, e)
            return None
        except (ValueError, ValidationError) as e:
            logger.warning("Completion response could not be decoded: %s", e)
            return None

        return data.completion or None

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()


_completion_client: Optional[CompletionClient] = None


def get_completion_client() -> CompletionClient:
    global _completion_client
    if _completion_client is None:
        _completion_client = CompletionClient(
            settings.LLM_API_URL, timeout=settings.LLM_TIMEOUT_SECONDS
        )
    return _completion_client


async def close_completion_client() -> None:
    global _completion_client
    if _completion_client is not None:
        await _completion_client.aclose()
    _completion_client = None
