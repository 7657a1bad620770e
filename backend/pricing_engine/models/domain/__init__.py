"""Domain models for the application."""

from pricing_engine.models.domain.deal import Deal
from pricing_engine.models.domain.guideline import Clause, ClauseValue, Guideline

__all__ = [
    "Clause",
    "ClauseValue",
    "Deal",
    "Guideline",
]
