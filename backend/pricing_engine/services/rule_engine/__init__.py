"""Rule engine for evaluating deals against state pricing guidelines."""

from .clause_evaluator import evaluate_clause, to_decimal
from .explainer import (
    FIELD_FORMATTERS,
    describe_clause,
    describe_conditions,
    describe_requirements,
    explain,
)
from .matcher import MatchOutcome, match_guideline

__all__ = [
    "FIELD_FORMATTERS",
    "MatchOutcome",
    "describe_clause",
    "describe_conditions",
    "describe_requirements",
    "evaluate_clause",
    "explain",
    "match_guideline",
    "to_decimal",
]
