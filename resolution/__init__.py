"""Fact resolution: query → canonical name → first provider hit → Fact."""

from .models import (
    Fact,
    FactSource,
    FactsFound,
    FactsNotFound,
    ModpackFact,
    Preferences,
    ProviderResult,
    ProviderStatusSnapshot,
    ResolutionOutcome,
    StorefrontFact,
)
from .name_resolver import NameResolver
from .normalizers import build_not_found_response
from .service import FactResolutionService

__all__ = [
    "Fact",
    "FactSource",
    "FactsFound",
    "FactsNotFound",
    "ModpackFact",
    "Preferences",
    "ProviderResult",
    "ProviderStatusSnapshot",
    "ResolutionOutcome",
    "StorefrontFact",
    "NameResolver",
    "FactResolutionService",
    "build_not_found_response",
]
