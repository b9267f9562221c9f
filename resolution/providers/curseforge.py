"""CurseForge provider: Minecraft modpack search. Needs an API key."""

from __future__ import annotations

import logging
from typing import Optional

from resolution.models import FactSource, ModpackFact
from resolution.normalizers import normalize_curseforge_mod
from resolution.providers.base import FactProvider

logger = logging.getLogger(__name__)

SEARCH_URL = "https://api.curseforge.com/v1/mods/search"
MINECRAFT_GAME_ID = 432
MODPACK_CLASS_ID = 4471


class CurseForgeProvider(FactProvider):
    provider_id = "curseforge"
    source = FactSource.CURSEFORGE

    def __init__(self, api_key: Optional[str], **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key

    def is_enabled(self) -> bool:
        return bool(self.api_key)

    async def search(self, name: str) -> Optional[ModpackFact]:
        if not self.api_key:
            logger.info("[CurseForgeProvider] API key not configured, skipping")
            return None

        async with self._client() as client:
            payload = await self._get_json(
                client,
                SEARCH_URL,
                params={
                    "gameId": MINECRAFT_GAME_ID,
                    "searchFilter": name,
                    "classId": MODPACK_CLASS_ID,
                    "pageSize": 1,
                },
                headers={"x-api-key": self.api_key},
            )

        mods = payload.get("data") or []
        if not mods or not isinstance(mods[0], dict):
            logger.info(f"[CurseForgeProvider] No modpack results for {name!r}")
            return None

        fact = normalize_curseforge_mod(mods[0])
        if fact:
            logger.info(f"[CurseForgeProvider] Found modpack {fact.title!r}")
        return fact
