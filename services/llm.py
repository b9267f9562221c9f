"""
LLM client: OpenRouter first, Gemini REST API as fallback.

Uses httpx to call both APIs directly. Everything that talks to a language
model (name expansion, content generation) goes through LLMClient.complete.
"""

import json
import logging
import re
import time
from typing import Optional

import httpx

from exceptions import LLMError
from observability.metrics import llm_api_duration_seconds, llm_api_errors_total
from settings import Settings

logger = logging.getLogger(__name__)

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
GEMINI_URL_TEMPLATE = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


def extract_json(text: str) -> dict:
    """Extract a JSON object from an LLM response, handling markdown fences and prose."""
    cleaned = re.sub(r"```(?:json)?\s*\n?", "", text or "")
    cleaned = re.sub(r"\n?```", "", cleaned)
    first_brace = cleaned.find("{")
    last_brace = cleaned.rfind("}")
    if first_brace == -1 or last_brace <= first_brace:
        raise LLMError("No valid JSON object found in LLM response")
    try:
        data = json.loads(cleaned[first_brace : last_brace + 1])
    except json.JSONDecodeError as e:
        raise LLMError(f"LLM returned malformed JSON: {e}") from e
    if not isinstance(data, dict):
        raise LLMError("LLM response JSON is not an object")
    return data


class LLMClient:
    def __init__(
        self,
        *,
        openrouter_api_key: Optional[str] = None,
        gemini_api_key: Optional[str] = None,
        openrouter_model: str = "google/gemini-2.5-flash",
        gemini_model: str = "gemini-2.5-flash",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.openrouter_api_key = openrouter_api_key
        self.gemini_api_key = gemini_api_key
        self.openrouter_model = openrouter_model
        self.gemini_model = gemini_model
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "LLMClient":
        return cls(
            openrouter_api_key=settings.openrouter_api_key,
            gemini_api_key=settings.gemini_api_key,
            openrouter_model=settings.openrouter_model,
            gemini_model=settings.gemini_model,
            transport=transport,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.openrouter_api_key or self.gemini_api_key)

    async def _call_openrouter(
        self, system: str, prompt: str, *, max_tokens: int, temperature: float, timeout: float
    ) -> str:
        headers = {
            "Authorization": f"Bearer {self.openrouter_api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.openrouter_model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }

        started = time.monotonic()
        async with httpx.AsyncClient(transport=self._transport) as client:
            resp = await client.post(OPENROUTER_URL, headers=headers, json=payload, timeout=timeout)
            resp.raise_for_status()
            data = resp.json()
        llm_api_duration_seconds.labels(provider="openrouter", model=self.openrouter_model).observe(
            time.monotonic() - started
        )

        choices = data.get("choices", [])
        if not choices:
            raise LLMError("OpenRouter returned no choices")
        content = (choices[0].get("message") or {}).get("content") or ""
        if not content.strip():
            raise LLMError("OpenRouter returned an empty completion")
        return content

    async def _call_gemini_direct(
        self, system: str, prompt: str, *, max_tokens: int, temperature: float, timeout: float
    ) -> str:
        url = GEMINI_URL_TEMPLATE.format(model=self.gemini_model)
        payload = {
            "systemInstruction": {"parts": [{"text": system}]},
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_tokens,
            },
        }

        started = time.monotonic()
        async with httpx.AsyncClient(transport=self._transport) as client:
            resp = await client.post(
                url,
                headers={"x-goog-api-key": self.gemini_api_key},
                json=payload,
                timeout=timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        llm_api_duration_seconds.labels(provider="gemini", model=self.gemini_model).observe(
            time.monotonic() - started
        )

        candidates = data.get("candidates", [])
        if not candidates:
            raise LLMError("Gemini returned no candidates")
        parts = candidates[0].get("content", {}).get("parts", [])
        if not parts:
            raise LLMError("Gemini returned no content parts")
        text = "".join(part.get("text", "") for part in parts)
        if not text.strip():
            raise LLMError("Gemini returned an empty completion")
        return text

    async def complete(
        self,
        system: str,
        prompt: str,
        *,
        max_tokens: int = 4096,
        temperature: float = 0.2,
        timeout: float = 30.0,
    ) -> str:
        """Run one completion: OpenRouter first, then Gemini direct."""
        kwargs = {"max_tokens": max_tokens, "temperature": temperature, "timeout": timeout}

        if self.openrouter_api_key:
            try:
                return await self._call_openrouter(system, prompt, **kwargs)
            except Exception as e:
                llm_api_errors_total.labels(provider="openrouter", error_type=type(e).__name__).inc()
                if not self.gemini_api_key:
                    raise LLMError(f"OpenRouter call failed: {type(e).__name__}") from e
                logger.warning(f"[LLM] OpenRouter failed, trying Gemini direct: {type(e).__name__}")

        if self.gemini_api_key:
            try:
                return await self._call_gemini_direct(system, prompt, **kwargs)
            except LLMError:
                llm_api_errors_total.labels(provider="gemini", error_type="LLMError").inc()
                raise
            except Exception as e:
                llm_api_errors_total.labels(provider="gemini", error_type=type(e).__name__).inc()
                logger.error(f"[LLM] Gemini direct also failed: {type(e).__name__}")
                raise LLMError(f"Gemini call failed: {type(e).__name__}") from e

        raise LLMError("No LLM API key configured (OPENROUTER_API_KEY or GEMINI_API_KEY)")
