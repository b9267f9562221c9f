import os
import sys
from typing import Callable, Dict, List, Optional

import httpx
import pytest

# Add parent directory to path to allow importing the app modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("SENTRY_ENABLE", "false")

from resolution.models import FactSource, ModpackFact, Preferences, StorefrontFact
from resolution.providers.base import FactProvider


class StubProvider(FactProvider):
    """Provider returning a canned fact (or raising) and recording every call."""

    def __init__(self, provider_id: str, source: FactSource, fact=None, error: Optional[Exception] = None, enabled: bool = True):
        super().__init__()
        self.provider_id = provider_id
        self.source = source
        self._fact = fact
        self._error = error
        self._enabled = enabled
        self.calls: List[str] = []

    def is_enabled(self) -> bool:
        return self._enabled

    async def search(self, name: str):
        self.calls.append(name)
        if self._error is not None:
            raise self._error
        return self._fact


class FakeLLM:
    """Stands in for LLMClient.complete: returns a fixed reply or raises."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[Dict[str, object]] = []

    async def complete(self, system, prompt, *, max_tokens=4096, temperature=0.2, timeout=30.0):
        self.calls.append({"system": system, "prompt": prompt, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return self.reply


def json_transport(routes: Dict[str, Callable[[httpx.Request], httpx.Response]]) -> httpx.MockTransport:
    """MockTransport dispatching on URL path; unknown paths return 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        return route(request)

    return httpx.MockTransport(handler)


@pytest.fixture
def preferences() -> Preferences:
    return Preferences(platform="Twitch", language="German", descriptionLength="Long", profileId="profile-7")


@pytest.fixture
def steam_fact() -> StorefrontFact:
    return StorefrontFact(
        name="Baldur's Gate 3",
        description="Gather your party.",
        genres=["RPG", "Strategy"],
        developers=["Larian Studios"],
    )


@pytest.fixture
def modrinth_fact() -> ModpackFact:
    return ModpackFact(
        source="Modrinth",
        title="Fabulously Optimized",
        description="Improve your graphics and performance.",
        categories=["optimization"],
        versions=["1.20.1", "1.20.4"],
        downloads=1200000,
    )


@pytest.fixture
def stub_provider():
    return StubProvider


@pytest.fixture
def fake_llm():
    return FakeLLM


@pytest.fixture
def make_transport():
    return json_transport
