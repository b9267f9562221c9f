"""Typed models for the fact-resolution pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ProviderStatus = Literal["ok", "not_found", "skipped", "timeout", "rate_limited", "error"]


class FactSource(str, Enum):
    """Provenance tag for a Fact. Values are the public names of each source."""

    STEAM = "Steam"
    MODRINTH = "Modrinth"
    CURSEFORGE = "CurseForge"


class StorefrontFact(BaseModel):
    """A game found in the Steam storefront catalog."""

    model_config = ConfigDict(frozen=True)

    source: Literal["Steam"] = "Steam"
    name: str
    description: str = ""
    genres: List[str] = Field(default_factory=list)
    developers: List[str] = Field(default_factory=lambda: ["Unknown"])

    @property
    def display_name(self) -> str:
        return self.name


class ModpackFact(BaseModel):
    """A modpack found in a package or mod registry (Modrinth, CurseForge)."""

    model_config = ConfigDict(frozen=True)

    source: Literal["Modrinth", "CurseForge"]
    title: str
    description: str = ""
    categories: List[str] = Field(default_factory=list)
    versions: List[str] = Field(default_factory=list)
    downloads: int = Field(0, ge=0)

    @property
    def display_name(self) -> str:
        return self.title


Fact = Annotated[Union[StorefrontFact, ModpackFact], Field(discriminator="source")]


class Preferences(BaseModel):
    """Caller-supplied generation preferences.

    Opaque to resolution; threaded through unchanged so a failed request can
    be replayed by the client. Unknown keys are kept as-is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    platform: str = "YouTube"
    language: str = "English"
    description_length: str = Field("Medium", alias="descriptionLength")
    profile_id: Optional[str] = Field(None, alias="profileId")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ProviderStatusSnapshot(BaseModel):
    provider_id: str
    status: ProviderStatus
    latency_ms: Optional[int] = None
    message: Optional[str] = None


class ProviderResult(BaseModel):
    """Explicit result of one provider attempt: a fact, or a status saying why not."""

    fact: Optional[Fact] = None
    status: ProviderStatusSnapshot

    @property
    def found(self) -> bool:
        return self.fact is not None


class FactsFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["found"] = "found"
    fact: Fact
    searched_name: str
    original_query: str
    preferences: Preferences
    provider_statuses: List[ProviderStatusSnapshot] = Field(default_factory=list)


class FactsNotFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"
    reason: str
    searched_name: str
    original_query: str
    preferences: Preferences
    provider_statuses: List[ProviderStatusSnapshot] = Field(default_factory=list)


ResolutionOutcome = Union[FactsFound, FactsNotFound]
