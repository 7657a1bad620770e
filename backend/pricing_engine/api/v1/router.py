"""API v1 router configuration."""

from fastapi import APIRouter

from pricing_engine.api.v1.endpoints import evaluation, guidelines, health

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    evaluation.router,
    tags=["evaluation"],
)

api_router.include_router(
    guidelines.router,
    prefix="/guidelines",
    tags=["guidelines"],
)
