"""``openai`` SDK transport for the mittwald endpoint.

The mittwald endpoint speaks the OpenAI wire protocol, so the official SDK
is the HTTP client. :class:`OpenAITransport` is the only place SDK clients
are created; the asynchronous client is built on first async use.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Dict, Iterator, List, Optional

from openai import AsyncOpenAI, OpenAI

from ..base.models import ModelDescriptor


class OpenAITransport:
    """:class:`~mittwald_providers.base.interfaces.ChatTransport` over the ``openai`` SDK.

    Args:
        api_key: Bearer credential.
        base_url: Fully qualified endpoint, e.g.
            ``https://llm.aihosting.mittwald.de/v1``.
        client: Optional pre-built synchronous client (tests, custom HTTP setup).
        async_client: Optional pre-built asynchronous client.

    Raises:
        openai.OpenAIError: When the SDK rejects the configuration (for
            instance a missing API key).
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        *,
        client: Optional[Any] = None,
        async_client: Optional[Any] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._client = client if client is not None else OpenAI(api_key=api_key, base_url=base_url)
        self._async_client = async_client

    @property
    def base_url(self) -> str:
        return self._base_url

    def _async(self) -> Any:
        if self._async_client is None:
            self._async_client = AsyncOpenAI(api_key=self._api_key, base_url=self._base_url)
        return self._async_client

    def list_models(self) -> List[ModelDescriptor]:
        page = self._client.models.list()
        data = getattr(page, "data", None)
        if data is None and isinstance(page, dict):
            data = page.get("data")
        return [ModelDescriptor.from_raw(item) for item in (data or ())]

    def create_chat_completion(self, payload: Dict[str, Any]) -> Any:
        return self._client.chat.completions.create(**payload)

    def create_chat_completion_streamed(self, payload: Dict[str, Any]) -> Iterator[Any]:
        stream = self._client.chat.completions.create(**payload, stream=True)
        try:
            yield from stream
        finally:
            close = getattr(stream, "close", None)
            if callable(close):
                close()

    async def create_chat_completion_streamed_async(self, payload: Dict[str, Any]) -> AsyncIterator[Any]:
        stream = await self._async().chat.completions.create(**payload, stream=True)
        try:
            async for chunk in stream:
                yield chunk
        finally:
            close = getattr(stream, "close", None)
            if callable(close):
                await close()

    def create_embedding(self, payload: Dict[str, Any]) -> Any:
        return self._client.embeddings.create(**payload)


__all__ = ["OpenAITransport"]
