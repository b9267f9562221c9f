"""
FastAPI dependencies wiring settings, the LLM client, the resolution
service and the content generator.

Built lazily once per process from Settings.from_env(); tests replace them
through app.dependency_overrides.
"""

from typing import Optional

from resolution import FactResolutionService
from services import ContentGenerator, LLMClient
from settings import Settings

_settings: Optional[Settings] = None
_llm_client: Optional[LLMClient] = None
_resolution_service: Optional[FactResolutionService] = None
_content_generator: Optional[ContentGenerator] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_llm_client() -> LLMClient:
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient.from_settings(get_settings())
    return _llm_client


def get_resolution_service() -> FactResolutionService:
    global _resolution_service
    if _resolution_service is None:
        llm = get_llm_client()
        # No LLM key: skip expansion, providers get the query verbatim.
        _resolution_service = FactResolutionService.from_settings(
            get_settings(), llm=llm if llm.is_configured else None
        )
    return _resolution_service


def get_content_generator() -> ContentGenerator:
    global _content_generator
    if _content_generator is None:
        _content_generator = ContentGenerator(get_llm_client())
    return _content_generator
