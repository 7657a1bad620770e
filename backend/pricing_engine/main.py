"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pricing_engine.api.v1.router import api_router
from pricing_engine.config import settings
from pricing_engine.services.guideline_loader import GuidelineLoader
from pricing_engine.services.guideline_service import GuidelineService

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load pricing guidelines before serving requests."""
    summary = app.state.guideline_service.reload()
    if summary.success:
        logger.info(f"Loaded pricing guidelines for {summary.states} states")
    else:
        logger.error(f"Starting without pricing guidelines: {summary.message}")
    yield


# Create FastAPI application
app = FastAPI(
    title="Pricing Rule Engine API",
    description="API for evaluating deals against state pricing guidelines",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

app.state.guideline_service = GuidelineService(
    loader=GuidelineLoader(settings.GUIDELINES_PATH, settings.GUIDELINES_FORMAT),
    clear_on_failure=settings.CLEAR_GUIDELINES_ON_LOAD_FAILURE,
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router with v1 prefix
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": "Pricing Rule Engine API",
        "version": "1.0.0",
        "docs": "/api/docs",
    }


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "pricing_engine.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )
