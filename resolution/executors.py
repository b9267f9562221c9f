"""Provider executor with status instrumentation."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

import httpx

from observability.metrics import search_provider_duration_seconds, search_provider_errors_total
from resolution.models import ProviderResult, ProviderStatusSnapshot
from utils.security import redact_secrets_from_text

if TYPE_CHECKING:
    from resolution.providers.base import FactProvider

logger = logging.getLogger(__name__)


async def run_provider_with_status(
    provider: "FactProvider",
    name: str,
    *,
    timeout_seconds: float = 8.0,
) -> ProviderResult:
    """Run one provider search and report what happened. Never raises for provider faults."""
    provider_id = provider.provider_id

    if not provider.is_enabled():
        logger.info(f"[{provider_id}] Provider not configured, skipping")
        return ProviderResult(
            status=ProviderStatusSnapshot(
                provider_id=provider_id,
                status="skipped",
                message="Provider not configured",
            )
        )

    logger.info(f"[{provider_id}] Searching for {name!r}")
    started = time.monotonic()

    def _snapshot(status: str, message=None) -> ProviderStatusSnapshot:
        elapsed = time.monotonic() - started
        search_provider_duration_seconds.labels(provider=provider_id).observe(elapsed)
        if status in ("timeout", "rate_limited", "error"):
            search_provider_errors_total.labels(provider=provider_id, error_type=status).inc()
        return ProviderStatusSnapshot(
            provider_id=provider_id,
            status=status,
            latency_ms=int(elapsed * 1000),
            message=message,
        )

    try:
        fact = await asyncio.wait_for(provider.search(name), timeout=timeout_seconds)
    except asyncio.TimeoutError:
        logger.warning(f"[{provider_id}] Search timed out after {timeout_seconds}s")
        return ProviderResult(status=_snapshot("timeout", "Search timed out"))
    except httpx.HTTPStatusError as e:
        code = e.response.status_code
        logger.error(f"[{provider_id}] Search failed with HTTP {code}")
        if code == 429:
            return ProviderResult(status=_snapshot("rate_limited", "Rate limit exceeded"))
        return ProviderResult(status=_snapshot("error", f"HTTP {code}"))
    except Exception as e:
        error_msg = redact_secrets_from_text(str(e))
        logger.error(f"[{provider_id}] Search error: {type(e).__name__}: {error_msg}")
        return ProviderResult(status=_snapshot("error", f"Search failed: {error_msg[:100]}"))

    if fact is None:
        return ProviderResult(status=_snapshot("not_found"))

    return ProviderResult(fact=fact, status=_snapshot("ok"))
