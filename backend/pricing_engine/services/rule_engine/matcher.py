"""Guideline matching: applicability and violation of a single guideline."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple

from pricing_engine.models.domain.guideline import Clause, Guideline
from pricing_engine.services.rule_engine.clause_evaluator import evaluate_clause


@dataclass(frozen=True)
class MatchOutcome:
    """
    Result of matching one guideline against a deal.

    Attributes:
        applies: All conditions hold (always true without conditions)
        violated: The guideline applies and at least one requirement fails
        failed_requirements: Requirement clauses that did not hold
    """

    applies: bool
    violated: bool
    failed_requirements: Tuple[Clause, ...] = field(default_factory=tuple)


NOT_APPLICABLE = MatchOutcome(applies=False, violated=False)


def match_guideline(guideline: Guideline, deal_values: Mapping[str, Any]) -> MatchOutcome:
    """
    Match a guideline against deal values.

    Args:
        guideline: Guideline with conditions and requirements
        deal_values: Mapping of deal attribute name to value

    Returns:
        MatchOutcome describing applicability and violation
    """
    applies = all(evaluate_clause(clause, deal_values) for clause in guideline.conditions)
    if not applies:
        return NOT_APPLICABLE

    failed = tuple(
        clause
        for clause in guideline.requirements
        if not evaluate_clause(clause, deal_values)
    )
    return MatchOutcome(applies=True, violated=bool(failed), failed_requirements=failed)
