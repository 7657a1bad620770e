"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from pricing_engine.deps import get_guideline_service
from pricing_engine.services.guideline_service import GuidelineService

router = APIRouter()


@router.get("/health")
async def health_check(
    guideline_service: Annotated[GuidelineService, Depends(get_guideline_service)],
) -> dict:
    """
    Health check endpoint.

    Reports whether any pricing guidelines are loaded.

    Returns:
        dict: Health status with API and guideline store status
    """
    store = guideline_service.store
    loaded = store.state_count > 0

    return {
        "status": "healthy" if loaded else "degraded",
        "api": "healthy",
        "guidelines": {
            "states": store.state_count,
            "rules": store.rule_count,
            "loadedAt": store.loaded_at.isoformat() if store.loaded_at else None,
        },
    }
