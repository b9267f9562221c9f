import asyncio

import httpx
import pytest

from resolution.executors import run_provider_with_status
from resolution.models import FactSource
from resolution.providers import ModrinthProvider
from resolution.providers.base import FactProvider


class SlowProvider(FactProvider):
    provider_id = "slow"
    source = FactSource.STEAM

    def __init__(self, delay: float):
        super().__init__()
        self.delay = delay

    async def search(self, name: str):
        await asyncio.sleep(self.delay)
        return None


def _http_error(code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://api.example.com/search?key=supersecret")
    response = httpx.Response(code, request=request)
    return httpx.HTTPStatusError(f"HTTP {code}", request=request, response=response)


@pytest.mark.asyncio
async def test_ok_status_carries_fact(stub_provider, steam_fact):
    provider = stub_provider("steam", FactSource.STEAM, fact=steam_fact)
    result = await run_provider_with_status(provider, "Baldur's Gate 3", timeout_seconds=1.0)

    assert result.found
    assert result.fact == steam_fact
    assert result.status.status == "ok"
    assert result.status.provider_id == "steam"
    assert result.status.latency_ms is not None


@pytest.mark.asyncio
async def test_not_found_status(stub_provider):
    provider = stub_provider("modrinth", FactSource.MODRINTH)
    result = await run_provider_with_status(provider, "nothing", timeout_seconds=1.0)

    assert not result.found
    assert result.status.status == "not_found"


@pytest.mark.asyncio
async def test_timeout_status():
    result = await run_provider_with_status(SlowProvider(delay=0.05), "anything", timeout_seconds=0.001)

    assert result.fact is None
    assert result.status.status == "timeout"
    assert result.status.message == "Search timed out"


@pytest.mark.asyncio
async def test_http_500_is_error(stub_provider):
    provider = stub_provider("steam", FactSource.STEAM, error=_http_error(500))
    result = await run_provider_with_status(provider, "anything")

    assert result.fact is None
    assert result.status.status == "error"
    assert result.status.message == "HTTP 500"


@pytest.mark.asyncio
async def test_http_429_is_rate_limited(stub_provider):
    provider = stub_provider("curseforge", FactSource.CURSEFORGE, error=_http_error(429))
    result = await run_provider_with_status(provider, "anything")

    assert result.status.status == "rate_limited"
    assert result.status.message == "Rate limit exceeded"


@pytest.mark.asyncio
async def test_unexpected_exception_is_contained_and_redacted(stub_provider):
    provider = stub_provider(
        "curseforge",
        FactSource.CURSEFORGE,
        error=ValueError("bad body from https://api.example.com/?api_key=supersecret"),
    )
    result = await run_provider_with_status(provider, "anything")

    assert result.status.status == "error"
    assert result.status.message.startswith("Search failed: ")
    assert "supersecret" not in result.status.message
    assert "[REDACTED]" in result.status.message


@pytest.mark.asyncio
async def test_disabled_provider_is_skipped_without_search(stub_provider, modrinth_fact):
    provider = stub_provider("curseforge", FactSource.CURSEFORGE, fact=modrinth_fact, enabled=False)
    result = await run_provider_with_status(provider, "anything")

    assert result.status.status == "skipped"
    assert result.fact is None
    assert provider.calls == []


@pytest.mark.asyncio
async def test_malformed_provider_json_becomes_error(make_transport):
    provider = ModrinthProvider(
        transport=make_transport({"/v2/search": lambda r: httpx.Response(200, content=b"<html>oops</html>")})
    )
    result = await run_provider_with_status(provider, "anything", timeout_seconds=1.0)

    assert result.fact is None
    assert result.status.status == "error"
