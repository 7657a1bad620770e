"""Dependency injection for FastAPI endpoints."""

from typing import Annotated

from fastapi import Depends, Request

from pricing_engine.services.evaluation_service import EvaluationService
from pricing_engine.services.guideline_service import GuidelineService

__all__ = ["get_evaluation_service", "get_guideline_service"]


def get_guideline_service(request: Request) -> GuidelineService:
    """Get the process-wide guideline service attached to the application."""
    return request.app.state.guideline_service


def get_evaluation_service(
    guideline_service: Annotated[GuidelineService, Depends(get_guideline_service)],
) -> EvaluationService:
    """
    Get an evaluation service bound to the guideline store.

    A new service is built per request; it only reads the store.
    """
    return EvaluationService(guideline_service.store)
