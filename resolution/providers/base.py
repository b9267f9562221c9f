"""Base class for game-data providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from exceptions import SearchProviderError
from resolution.models import Fact, FactSource
from settings import DEFAULT_USER_AGENT


class FactProvider(ABC):
    """One external game-data source.

    ``search`` performs a single best-effort lookup and returns a Fact, or
    None when the source has no hit. Transport and payload problems are
    raised; ``run_provider_with_status`` turns them into a status snapshot.
    """

    provider_id: str
    source: FactSource

    def __init__(
        self,
        *,
        timeout_seconds: float = 8.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self._transport = transport

    @property
    def label(self) -> str:
        return self.source.value

    def is_enabled(self) -> bool:
        return True

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout_seconds,
            headers={"User-Agent": self.user_agent, "Accept": "application/json"},
            transport=self._transport,
        )

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        resp = await client.get(url, params=params, headers=headers)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise SearchProviderError(
                f"Expected a JSON object from {url}, got {type(data).__name__}",
                provider=self.provider_id,
            )
        return data

    @abstractmethod
    async def search(self, name: str) -> Optional[Fact]:
        pass
