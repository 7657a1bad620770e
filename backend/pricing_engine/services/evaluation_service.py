"""Evaluation service for checking deals against state pricing guidelines."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from pricing_engine.core.exceptions import MissingFieldError
from pricing_engine.models.domain.deal import Deal
from pricing_engine.models.domain.guideline import Guideline
from pricing_engine.services.guideline_loader import normalize_state
from pricing_engine.services.guideline_store import GuidelineStore
from pricing_engine.services.rule_engine import (
    MatchOutcome,
    describe_clause,
    describe_conditions,
    describe_requirements,
    explain,
    match_guideline,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Violation:
    """
    A guideline whose conditions were met but a requirement failed.

    Attributes:
        rule_id: Identifier of the violated guideline
        rule_text: Guideline text as loaded
        notes: Explanation prefixed with the evaluated state
    """

    rule_id: Optional[str]
    rule_text: str
    notes: str


@dataclass(frozen=True)
class GuidelineEvaluation:
    """
    An applicable guideline with formatted clauses and its outcome.

    ``failed_requirements`` describes the requirement clauses that did not hold.
    """

    rule_id: Optional[str]
    rule_text: str
    conditions: Tuple[str, ...]
    requirements: Tuple[str, ...]
    explanation: str
    violated: bool
    failed_requirements: Tuple[str, ...] = ()


@dataclass
class EvaluationReport:
    """
    Result of evaluating a deal against one state's guidelines.

    Attributes:
        state: Normalized state code
        violations: Violated guidelines in guideline order
        applicable_guidelines: Every guideline whose conditions were met
        total_rules: Guidelines available for the state
        rules_evaluated: Guidelines whose conditions were met
        rules_passed: Applicable guidelines without a failed requirement
        rules_violated: Applicable guidelines with a failed requirement
    """

    state: str
    violations: List[Violation] = field(default_factory=list)
    applicable_guidelines: List[GuidelineEvaluation] = field(default_factory=list)
    total_rules: int = 0
    rules_evaluated: int = 0
    rules_passed: int = 0
    rules_violated: int = 0

    @property
    def violation_count(self) -> int:
        return len(self.violations)


class EvaluationService:
    """
    Evaluation service orchestrating guideline matching for a deal.

    This service:
    - Looks up the state's guidelines in a single store snapshot
    - Runs the rule matcher over each guideline in order
    - Synthesizes explanations for violated and applicable guidelines
    - Aggregates violations and summary counts into a report
    """

    def __init__(self, store: GuidelineStore):
        """
        Initialize the evaluation service.

        Args:
            store: Guideline store to read from
        """
        self.store = store

    def evaluate(self, state: Optional[str], deal: Deal) -> EvaluationReport:
        """
        Evaluate a deal against the guidelines of a state.

        Args:
            state: State code, case-insensitive
            deal: The deal to evaluate

        Returns:
            EvaluationReport with violations and summary counts

        Raises:
            MissingFieldError: If state is missing or blank
        """
        state_code = normalize_state(state)
        if not state_code:
            raise MissingFieldError("state")

        guidelines = self.store.snapshot().get(state_code, ())
        deal_values = deal.to_values()
        report = EvaluationReport(state=state_code, total_rules=len(guidelines))

        for guideline in guidelines:
            outcome = match_guideline(guideline, deal_values)
            if not outcome.applies:
                continue

            explanation = explain(guideline)
            report.rules_evaluated += 1
            report.applicable_guidelines.append(
                self._describe(guideline, explanation, outcome)
            )

            if outcome.violated:
                report.rules_violated += 1
                report.violations.append(
                    Violation(
                        rule_id=guideline.id,
                        rule_text=guideline.text,
                        notes=f"{state_code}: {explanation}",
                    )
                )
            else:
                report.rules_passed += 1

        logger.info(
            f"Evaluated deal for {state_code}: {report.rules_evaluated}/{report.total_rules} "
            f"guidelines applied, {report.violation_count} violated"
        )
        return report

    def evaluate_deal(self, deal: Deal) -> EvaluationReport:
        """Evaluate a deal against the guidelines of its own state."""
        return self.evaluate(deal.state, deal)

    @staticmethod
    def _describe(guideline: Guideline, explanation: str, outcome: MatchOutcome) -> GuidelineEvaluation:
        return GuidelineEvaluation(
            rule_id=guideline.id,
            rule_text=guideline.text,
            conditions=tuple(describe_conditions(guideline)),
            requirements=tuple(describe_requirements(guideline)),
            explanation=explanation,
            violated=outcome.violated,
            failed_requirements=tuple(
                describe_clause(clause, is_requirement=True)
                for clause in outcome.failed_requirements
            ),
        )
