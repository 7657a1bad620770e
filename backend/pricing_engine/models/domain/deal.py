"""Deal domain model."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional

from pricing_engine.core.enums import DealField


@dataclass(frozen=True)
class Deal:
    """
    A deal submitted for guideline evaluation.

    Yield and points are fractions (0.08 for 8%). Attributes not listed
    here are carried in ``extra`` so guidelines may reference them.
    """

    state: Optional[str]
    amount: Optional[Decimal] = None
    business_form: Optional[str] = None
    residual_type: Optional[str] = None
    yield_: Optional[Decimal] = None
    points: Optional[Decimal] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_values(self) -> Dict[str, Any]:
        """Build the field-name to value mapping clauses are evaluated against."""
        values: Dict[str, Any] = dict(self.extra)
        values.update(
            {
                DealField.AMOUNT.value: self.amount,
                DealField.BUSINESS_FORM.value: self.business_form,
                DealField.RESIDUAL_TYPE.value: self.residual_type,
                DealField.YIELD.value: self.yield_,
                DealField.POINTS.value: self.points,
            }
        )
        return values
