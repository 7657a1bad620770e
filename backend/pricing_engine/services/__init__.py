"""Service layer for business logic."""

from pricing_engine.services.evaluation_service import EvaluationReport, EvaluationService
from pricing_engine.services.guideline_loader import GuidelineLoader, LoadResult
from pricing_engine.services.guideline_service import GuidelineService, ReloadSummary
from pricing_engine.services.guideline_store import GuidelineStore

__all__ = [
    "EvaluationReport",
    "EvaluationService",
    "GuidelineLoader",
    "GuidelineService",
    "GuidelineStore",
    "LoadResult",
    "ReloadSummary",
]
