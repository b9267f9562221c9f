"""
StreamTitle backend: FastAPI application.

Game/modpack fact resolution feeding LLM content generation for creators.
"""
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
import logging

from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env", override=False)

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel

from dependencies import get_resolution_service, get_settings
from exceptions import StreamTitleError
from observability.metrics import metrics_registry
from observability.middleware import ObservabilityMiddleware
from observability.sentry_config import init_sentry
from resolution import FactResolutionService
from routes import ai as ai_routes
from routes import generate as generate_routes
from settings import APP_VERSION, Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_sentry()
    settings = get_settings()
    logger.info(
        "StreamTitle backend starting",
        extra={
            "version": APP_VERSION,
            "llm_configured": settings.has_llm_key,
            "curseforge_configured": bool(settings.curseforge_api_key),
        },
    )
    yield
    logger.info("StreamTitle backend shutting down")


app = FastAPI(
    title="StreamTitle Backend",
    description="Verified game facts and AI content packages for gaming creators",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(ObservabilityMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(generate_routes.router)
app.include_router(ai_routes.router)


class HealthResponse(BaseModel):
    status: str
    version: str


@app.get("/health", response_model=HealthResponse)
async def health_check():
    return {
        "status": "healthy",
        "version": APP_VERSION,
    }


@app.get("/health/ready")
async def readiness_check(
    settings: Settings = Depends(get_settings),
    resolver: FactResolutionService = Depends(get_resolution_service),
):
    """
    Readiness check - reports which collaborators are configured.

    Returns 503 when no LLM key is set (generation cannot work at all).
    Providers without credentials are reported as "skipped", not failures.
    """
    checks = {"llm": "ok" if settings.has_llm_key else "error: no API key configured"}
    for provider in resolver.providers:
        checks[provider.provider_id] = "ok" if provider.is_enabled() else "skipped"

    all_ok = checks["llm"] == "ok"
    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={
            "status": "ready" if all_ok else "degraded",
            "checks": checks,
            "timestamp": datetime.utcnow().isoformat(),
        },
    )


@app.get("/metrics")
async def metrics():
    return Response(generate_latest(metrics_registry), media_type=CONTENT_TYPE_LATEST)


@app.exception_handler(StreamTitleError)
async def streamtitle_error_handler(request: Request, exc: StreamTitleError):
    if exc.status_code >= 500:
        logger.error(f"[{type(exc).__name__}] {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unhandled errors.

    Logs the full traceback under an error id and returns a safe message.
    """
    error_id = f"ERR-{datetime.utcnow().strftime('%Y%m%d%H%M%S')}-{id(exc)}"
    logger.error(
        f"[{error_id}] Unhandled exception on {request.method} {request.url.path}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please try again.",
        },
    )
