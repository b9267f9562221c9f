"""Expand short or informal game names ("bg3", "RDR2") to the official title."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

EXPANDER_INSTRUCTION = """
You are a database lookup assistant. The user will provide a short game name, nickname, or acronym.
Respond with ONLY the full, official name of the game.
If the input is already the full name, or you are unsure, just repeat the input.
Examples:
User: "RDR2" -> Respond: "Red Dead Redemption 2"
User: "BG3" -> Respond: "Baldur's Gate 3"
User: "Elden Ring" -> Respond: "Elden Ring"
User: "Lethal" -> Respond: "Lethal Company"
""".strip()


class TextCompleter(Protocol):
    async def complete(
        self,
        system: str,
        prompt: str,
        *,
        max_tokens: int = ...,
        temperature: float = ...,
        timeout: float = ...,
    ) -> str: ...


class NameResolver:
    """Best-effort name expansion. One attempt, never raises."""

    def __init__(
        self,
        llm: Optional[TextCompleter],
        *,
        timeout_seconds: float = 10.0,
        max_output_tokens: int = 100,
    ):
        self.llm = llm
        self.timeout_seconds = timeout_seconds
        self.max_output_tokens = max_output_tokens

    async def resolve(self, query: str) -> str:
        if self.llm is None:
            return query

        logger.info(f"[NameResolver] Expanding short form: {query!r}")
        try:
            expanded = await asyncio.wait_for(
                self.llm.complete(
                    EXPANDER_INSTRUCTION,
                    query,
                    max_tokens=self.max_output_tokens,
                    temperature=0.0,
                    timeout=self.timeout_seconds,
                ),
                timeout=self.timeout_seconds,
            )
        except Exception as e:
            logger.warning(
                f"[NameResolver] Expansion failed, proceeding with original name: {type(e).__name__}: {e}"
            )
            return query

        expanded = (expanded or "").strip()
        if expanded and expanded.lower() != query.lower():
            logger.info(f"[NameResolver] Expanded {query!r} to {expanded!r}")
            return expanded

        logger.info("[NameResolver] No expansion needed")
        return query
