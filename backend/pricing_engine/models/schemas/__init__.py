"""Pydantic schemas for API validation and serialization."""

from pricing_engine.models.schemas.evaluation import (
    EvaluationRequest,
    EvaluationResponse,
    EvaluationSummary,
    ViolationResponse,
)
from pricing_engine.models.schemas.guideline import (
    ClauseDefinition,
    FormattedGuideline,
    GuidelineStatesResponse,
    ReloadResponse,
    RuleDefinition,
    StateGuidelinesResponse,
)

__all__ = [
    # Evaluation schemas
    "EvaluationRequest",
    "EvaluationResponse",
    "EvaluationSummary",
    "ViolationResponse",
    # Guideline schemas
    "ClauseDefinition",
    "FormattedGuideline",
    "GuidelineStatesResponse",
    "ReloadResponse",
    "RuleDefinition",
    "StateGuidelinesResponse",
]
