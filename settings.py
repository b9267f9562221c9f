"""Runtime configuration for the StreamTitle backend.

Read once from the environment at composition time and passed explicitly
into providers, the name resolver and the LLM client.

Environment variables:
  GEMINI_API_KEY / GOOGLE_GENERATIVE_AI_API_KEY - Gemini REST API key
  OPENROUTER_API_KEY                            - OpenRouter key (tried first)
  GEMINI_MODEL, OPENROUTER_MODEL                - model identifiers
  CURSEFORGE_API_KEY                            - enables the CurseForge provider
  RESOLUTION_PROVIDER_TIMEOUT_SECONDS           - per-provider call budget
  NAME_RESOLVER_TIMEOUT_SECONDS                 - name expansion call budget
  STEAM_LANGUAGE, STEAM_COUNTRY                 - Steam store search locale
  HTTP_USER_AGENT                               - sent to game-data APIs
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"
DEFAULT_USER_AGENT = f"streamtitle-backend/{APP_VERSION}"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"[Settings] Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


def _env_str(name: str) -> Optional[str]:
    value = (os.getenv(name) or "").strip()
    return value or None


class Settings(BaseModel):
    gemini_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    openrouter_model: str = "google/gemini-2.5-flash"
    curseforge_api_key: Optional[str] = None
    provider_timeout_seconds: float = Field(8.0, gt=0)
    name_resolver_timeout_seconds: float = Field(10.0, gt=0)
    steam_language: str = "en"
    steam_country: str = "us"
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gemini_api_key=_env_str("GOOGLE_GENERATIVE_AI_API_KEY") or _env_str("GEMINI_API_KEY"),
            openrouter_api_key=_env_str("OPENROUTER_API_KEY"),
            gemini_model=_env_str("GEMINI_MODEL") or "gemini-2.5-flash",
            openrouter_model=_env_str("OPENROUTER_MODEL") or "google/gemini-2.5-flash",
            curseforge_api_key=_env_str("CURSEFORGE_API_KEY"),
            provider_timeout_seconds=_env_float("RESOLUTION_PROVIDER_TIMEOUT_SECONDS", 8.0),
            name_resolver_timeout_seconds=_env_float("NAME_RESOLVER_TIMEOUT_SECONDS", 10.0),
            steam_language=_env_str("STEAM_LANGUAGE") or "en",
            steam_country=_env_str("STEAM_COUNTRY") or "us",
            user_agent=_env_str("HTTP_USER_AGENT") or DEFAULT_USER_AGENT,
        )

    @property
    def has_llm_key(self) -> bool:
        return bool(self.openrouter_api_key or self.gemini_api_key)
