"""
Content generation: the LLM side of every AI action.

Each method sends one JSON payload with a fixed system prompt and returns
the JSON object the model produced. LLM and parse failures raise LLMError.
"""

import json
import logging
from typing import Any, Dict, Optional

from resolution.models import Fact, Preferences
from services.llm import LLMClient, extract_json
from services.prompts import (
    COMPETITOR_PROMPT,
    KEYWORDS_PROMPT,
    OPTIMIZE_PROMPT,
    OUTLIERS_PROMPT,
    PACKAGE_PROMPT,
)

logger = logging.getLogger(__name__)

GENERATION_MAX_TOKENS = 8192


class ContentGenerator:
    def __init__(self, llm: LLMClient, *, timeout_seconds: float = 60.0):
        self.llm = llm
        self.timeout_seconds = timeout_seconds

    async def _generate(self, system: str, payload: Dict[str, Any], *, temperature: float) -> Dict[str, Any]:
        raw_text = await self.llm.complete(
            system,
            json.dumps(payload, ensure_ascii=False),
            max_tokens=GENERATION_MAX_TOKENS,
            temperature=temperature,
            timeout=self.timeout_seconds,
        )
        logger.debug(f"[ContentGenerator] Raw output: {raw_text[:500]!r}")
        return extract_json(raw_text)

    async def generate_package(
        self,
        fact: Fact,
        preferences: Preferences,
        creator_profile: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Titles, description, tags, Discord blurb and thumbnail recipe for one Fact."""
        logger.info(f"[ContentGenerator] Generating package for {fact.display_name!r} ({fact.source})")
        payload = {
            "facts": fact.model_dump(mode="json"),
            "preferences": preferences.to_payload(),
            "creatorProfile": creator_profile or {},
        }
        return await self._generate(PACKAGE_PROMPT, payload, temperature=0.8)

    async def optimize_video(
        self, video_details: Dict[str, Any], creator_profile: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        payload = {"videoDetails": video_details, "creatorProfile": creator_profile or {}}
        return await self._generate(OPTIMIZE_PROMPT, payload, temperature=0.7)

    async def discover_outliers(
        self, topic: str, creator_profile: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        payload = {"topic": topic, "creatorProfile": creator_profile or {}}
        return await self._generate(OUTLIERS_PROMPT, payload, temperature=0.8)

    async def discover_keywords(
        self, topic: str, creator_profile: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        payload = {"topic": topic, "creatorProfile": creator_profile or {}}
        return await self._generate(KEYWORDS_PROMPT, payload, temperature=0.7)

    async def analyze_competitor(
        self, topic: str, creator_profile: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        payload = {"competitorTopic": topic, "creatorProfile": creator_profile or {}}
        return await self._generate(COMPETITOR_PROMPT, payload, temperature=0.7)
