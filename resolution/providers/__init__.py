"""Game-data providers, in the order the resolver tries them."""

from __future__ import annotations

from typing import List, Optional

import httpx

from resolution.providers.base import FactProvider
from resolution.providers.curseforge import CurseForgeProvider
from resolution.providers.modrinth import ModrinthProvider
from resolution.providers.steam import SteamProvider
from settings import Settings


def build_default_providers(
    settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
) -> List[FactProvider]:
    """Steam first (widest catalog), then Modrinth, then CurseForge (most niche)."""
    common = {
        "timeout_seconds": settings.provider_timeout_seconds,
        "user_agent": settings.user_agent,
        "transport": transport,
    }
    return [
        SteamProvider(language=settings.steam_language, country=settings.steam_country, **common),
        ModrinthProvider(**common),
        CurseForgeProvider(settings.curseforge_api_key, **common),
    ]


__all__ = [
    "FactProvider",
    "SteamProvider",
    "ModrinthProvider",
    "CurseForgeProvider",
    "build_default_providers",
]
