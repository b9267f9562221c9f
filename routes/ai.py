"""Secondary AI actions: optimize an existing video, discover ideas, analyze a competitor."""

import logging
from typing import Any, Awaitable, Dict, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from dependencies import get_content_generator
from exceptions import LLMError, ValidationError
from services import ContentGenerator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/ai", tags=["ai"])


class ProfileScopedRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    profile_id: Optional[str] = Field(None, alias="profileId")
    creator_profile: Optional[Dict[str, Any]] = Field(None, alias="creatorProfile")


class OptimizeRequest(ProfileScopedRequest):
    video_details: Optional[Dict[str, Any]] = Field(None, alias="videoDetails")


class TopicRequest(ProfileScopedRequest):
    topic: Optional[str] = None


def _require_topic(body: TopicRequest, message: str) -> str:
    if not body.topic or not body.topic.strip():
        raise ValidationError(message)
    return body.topic.strip()


async def _run(action: str, call: Awaitable[Dict[str, Any]], failure_message: str):
    try:
        return await call
    except LLMError as e:
        logger.error(f"[AI] {action} failed: {e.message}")
        return JSONResponse(status_code=500, content={"error": failure_message})


@router.post("/optimize")
async def optimize_video(
    body: OptimizeRequest, generator: ContentGenerator = Depends(get_content_generator)
):
    if not body.video_details:
        raise ValidationError("Video details are required.")
    return await _run(
        "Optimize",
        generator.optimize_video(body.video_details, body.creator_profile),
        "Failed to optimize video.",
    )


@router.post("/discover/outliers")
async def discover_outliers(
    body: TopicRequest, generator: ContentGenerator = Depends(get_content_generator)
):
    topic = _require_topic(body, "Topic is required.")
    return await _run(
        "Outliers",
        generator.discover_outliers(topic, body.creator_profile),
        "Failed to generate ideas.",
    )


@router.post("/discover/keywords")
async def discover_keywords(
    body: TopicRequest, generator: ContentGenerator = Depends(get_content_generator)
):
    topic = _require_topic(body, "Topic is required.")
    return await _run(
        "Keywords",
        generator.discover_keywords(topic, body.creator_profile),
        "Failed to generate ideas.",
    )


@router.post("/discover/competitor")
async def discover_competitor(
    body: TopicRequest, generator: ContentGenerator = Depends(get_content_generator)
):
    topic = _require_topic(body, "Competitor topic is required.")
    return await _run(
        "Competitor",
        generator.analyze_competitor(topic, body.creator_profile),
        "Failed to generate analysis.",
    )
