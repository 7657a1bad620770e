"""Pydantic schemas for deal evaluation requests and reports."""

from decimal import Decimal
from typing import Any, Optional

from pydantic import ConfigDict, Field

from pricing_engine.models.domain.deal import Deal
from pricing_engine.models.schemas.guideline import CamelModel, FormattedGuideline


class EvaluationRequest(CamelModel):
    """
    Deal submitted for evaluation.

    ``state`` is optional at the schema level so a missing state surfaces as
    a 400 with a descriptive message rather than a validation error.
    Attributes beyond the listed ones are kept and may be referenced by
    guideline clauses.
    """

    state: Optional[str] = None
    amount: Optional[Decimal] = None
    business_form: Optional[str] = None
    residual_type: Optional[str] = None
    yield_: Optional[Decimal] = Field(None, alias="yield")
    points: Optional[Decimal] = None

    model_config = ConfigDict(extra="allow")

    def to_deal(self) -> Deal:
        """Convert the request into a domain Deal."""
        return Deal(
            state=self.state,
            amount=self.amount,
            business_form=self.business_form,
            residual_type=self.residual_type,
            yield_=self.yield_,
            points=self.points,
            extra=dict(self.model_extra or {}),
        )


class ViolationResponse(CamelModel):
    """A violated guideline with its explanation."""

    rule_id: Optional[str] = None
    rule: str
    notes: str


class EvaluationSummary(CamelModel):
    """Counts of guidelines considered for a deal."""

    total_rules: int = 0
    rules_evaluated: int = 0
    rules_passed: int = 0
    rules_violated: int = 0


class EvaluationResponse(CamelModel):
    """Evaluation report for a deal."""

    state: str
    violation_count: int
    violations: list[ViolationResponse] = Field(default_factory=list)
    guidelines: Optional[list[FormattedGuideline]] = None
    evaluation_summary: Optional[EvaluationSummary] = None

    @classmethod
    def from_report(cls, report: Any) -> "EvaluationResponse":
        """Build the response from an EvaluationReport."""
        return cls(
            state=report.state,
            violation_count=len(report.violations),
            violations=[
                ViolationResponse(rule_id=v.rule_id, rule=v.rule_text, notes=v.notes)
                for v in report.violations
            ],
            guidelines=[
                FormattedGuideline(
                    rule_id=g.rule_id,
                    rule=g.rule_text,
                    conditions=list(g.conditions),
                    requirements=list(g.requirements),
                    explanation=g.explanation,
                    violated=g.violated,
                    failed_requirements=list(g.failed_requirements),
                )
                for g in report.applicable_guidelines
            ],
            evaluation_summary=EvaluationSummary(
                total_rules=report.total_rules,
                rules_evaluated=report.rules_evaluated,
                rules_passed=report.rules_passed,
                rules_violated=report.rules_violated,
            ),
        )
