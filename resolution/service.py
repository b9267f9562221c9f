"""
Fact resolution: turn a raw user query into one verified Fact, or a NotFound.

Pipeline:
  1. NameResolver.resolve() → canonical name (falls back to the raw query)
  2. Providers in fixed priority order, one at a time, first hit wins
  3. No hit anywhere → FactsNotFound carrying the original query and preferences
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import httpx

from observability.metrics import fact_resolution_total
from resolution.executors import run_provider_with_status
from resolution.models import (
    FactsFound,
    Preferences,
    ProviderStatusSnapshot,
    ResolutionOutcome,
)
from resolution.name_resolver import NameResolver, TextCompleter
from resolution.normalizers import build_not_found
from resolution.providers import FactProvider, build_default_providers
from settings import Settings

logger = logging.getLogger(__name__)


class FactResolutionService:
    def __init__(
        self,
        name_resolver: NameResolver,
        providers: Sequence[FactProvider],
        *,
        provider_timeout_seconds: float = 8.0,
    ):
        self.name_resolver = name_resolver
        self.providers: List[FactProvider] = list(providers)
        self.provider_timeout_seconds = provider_timeout_seconds

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        llm: Optional[TextCompleter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "FactResolutionService":
        return cls(
            NameResolver(llm, timeout_seconds=settings.name_resolver_timeout_seconds),
            build_default_providers(settings, transport=transport),
            provider_timeout_seconds=settings.provider_timeout_seconds,
        )

    @property
    def source_labels(self) -> List[str]:
        return [provider.label for provider in self.providers]

    async def resolve_facts(self, query: str, preferences: Preferences) -> ResolutionOutcome:
        searched_name = await self.name_resolver.resolve(query)
        logger.info(f"[FactResolution] Searching providers with name: {searched_name!r}")

        statuses: List[ProviderStatusSnapshot] = []
        for provider in self.providers:
            result = await run_provider_with_status(
                provider, searched_name, timeout_seconds=self.provider_timeout_seconds
            )
            statuses.append(result.status)
            if result.fact is None:
                continue

            logger.info(
                f"[FactResolution] Resolved {query!r} via {result.fact.source}: {result.fact.display_name!r}"
            )
            fact_resolution_total.labels(outcome="found", source=result.fact.source).inc()
            return FactsFound(
                fact=result.fact,
                searched_name=searched_name,
                original_query=query,
                preferences=preferences,
                provider_statuses=statuses,
            )

        logger.info(f"[FactResolution] Content not found in any source for {searched_name!r}")
        fact_resolution_total.labels(outcome="not_found", source="none").inc()
        return build_not_found(
            searched_name,
            query,
            preferences,
            self.source_labels,
            provider_statuses=statuses,
        )
