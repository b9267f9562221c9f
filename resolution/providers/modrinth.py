"""Modrinth provider: modpack-scoped project search."""

from __future__ import annotations

import json
import logging
from typing import Optional

from resolution.models import FactSource, ModpackFact
from resolution.normalizers import normalize_modrinth_hit
from resolution.providers.base import FactProvider

logger = logging.getLogger(__name__)

SEARCH_URL = "https://api.modrinth.com/v2/search"
MODPACK_FACETS = json.dumps([["project_type:modpack"]])


class ModrinthProvider(FactProvider):
    provider_id = "modrinth"
    source = FactSource.MODRINTH

    async def search(self, name: str) -> Optional[ModpackFact]:
        async with self._client() as client:
            payload = await self._get_json(
                client,
                SEARCH_URL,
                params={"query": name, "limit": 1, "facets": MODPACK_FACETS},
            )

        hits = payload.get("hits") or []
        if not hits or not isinstance(hits[0], dict):
            logger.info(f"[ModrinthProvider] No modpack results for {name!r}")
            return None

        fact = normalize_modrinth_hit(hits[0])
        if fact:
            logger.info(f"[ModrinthProvider] Found modpack {fact.title!r}")
        return fact
