"""
Content-package generation endpoint.

  1. NameResolver → canonical game/modpack name
  2. Steam → Modrinth → CurseForge, first hit wins
  3. Not found → 404 with the original query and preferences echoed back
  4. Found → ContentGenerator.generate_package() with facts + preferences + profile
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from dependencies import get_content_generator, get_resolution_service
from exceptions import LLMError, ValidationError
from resolution import FactResolutionService, FactsNotFound, Preferences, build_not_found_response
from services import ContentGenerator

logger = logging.getLogger(__name__)
router = APIRouter(tags=["generate"])

GENERATION_FAILED_MESSAGE = "Failed to generate content. Please check the server logs."


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_name: Optional[str] = Field(None, alias="gameName")
    platform: str = "YouTube"
    language: str = "English"
    description_length: str = Field("Medium", alias="descriptionLength")
    profile_id: Optional[str] = Field(None, alias="profileId")
    creator_profile: Optional[Dict[str, Any]] = Field(None, alias="creatorProfile")

    def to_preferences(self) -> Preferences:
        return Preferences(
            platform=self.platform,
            language=self.language,
            description_length=self.description_length,
            profile_id=self.profile_id,
        )


@router.post("/api/v1/generate")
async def generate_content(
    body: GenerateRequest,
    resolver: FactResolutionService = Depends(get_resolution_service),
    generator: ContentGenerator = Depends(get_content_generator),
):
    if not body.game_name or not body.game_name.strip():
        raise ValidationError("Game name is required")

    query = body.game_name
    preferences = body.to_preferences()
    logger.info(
        f"[Generate] Request for {query!r}: Platform={preferences.platform}, "
        f"Lang={preferences.language}, Length={preferences.description_length}"
    )
    if body.profile_id and not body.creator_profile:
        logger.info(f"[Generate] Profile {body.profile_id} referenced without profile data, using defaults")

    outcome = await resolver.resolve_facts(query, preferences)
    if isinstance(outcome, FactsNotFound):
        return JSONResponse(status_code=404, content=build_not_found_response(outcome))

    try:
        package = await generator.generate_package(outcome.fact, preferences, body.creator_profile)
    except LLMError as e:
        logger.error(f"[Generate] Generation failed for {outcome.fact.display_name!r}: {e.message}")
        return JSONResponse(status_code=500, content={"error": GENERATION_FAILED_MESSAGE})

    package["preferences"] = {**preferences.to_payload(), "originalQuery": query}
    return package
