"""FastAPI app entry: config, logging, health, and the planning route."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from chunk_planner.config.chunking.static import load_override_profiles
from chunk_planner.config.logging import configure_logging, get_logger
from chunk_planner.config.settings import get_settings
from chunk_planner.controllers.routes.plan import router as plan_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging and override profiles. A broken static.json fails startup."""
    settings = get_settings()
    configure_logging()
    profiles = load_override_profiles()
    logger.info(
        "Application starting",
        extra={"app_name": settings.app_name, "environment": settings.environment, "profiles": len(profiles)},
    )
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Chunk Planner",
    description="Analyze documents and plan adaptive chunking for a RAG system",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(plan_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: no stack traces or internals leak to the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
