"""Steam storefront provider: store search, then app details for the first hit."""

from __future__ import annotations

import logging
from typing import Optional

from resolution.models import FactSource, StorefrontFact
from resolution.normalizers import normalize_steam_details
from resolution.providers.base import FactProvider

logger = logging.getLogger(__name__)

STORE_SEARCH_URL = "https://store.steampowered.com/api/storesearch/"
APP_DETAILS_URL = "https://store.steampowered.com/api/appdetails"


class SteamProvider(FactProvider):
    provider_id = "steam"
    source = FactSource.STEAM

    def __init__(self, *, language: str = "en", country: str = "us", **kwargs):
        super().__init__(**kwargs)
        self.language = language
        self.country = country

    async def search(self, name: str) -> Optional[StorefrontFact]:
        async with self._client() as client:
            payload = await self._get_json(
                client,
                STORE_SEARCH_URL,
                params={"term": name, "l": self.language, "cc": self.country},
            )
            items = payload.get("items") or []
            if not items or not isinstance(items[0], dict) or items[0].get("id") is None:
                logger.info(f"[SteamProvider] No store results for {name!r}")
                return None

            # First hit wins; the store search has its own ordering.
            app_id = items[0]["id"]
            logger.info(f"[SteamProvider] Found AppID {app_id} for {name!r}")

            details = await self._get_json(client, APP_DETAILS_URL, params={"appids": app_id})

        entry = details.get(str(app_id))
        if not isinstance(entry, dict) or not entry.get("success", True) or not isinstance(entry.get("data"), dict):
            logger.info(f"[SteamProvider] No app details for AppID {app_id}")
            return None

        return normalize_steam_details(entry["data"])
