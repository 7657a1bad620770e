"""Core enums for type safety across the application."""

from enum import Enum
from typing import Optional


class Operator(str, Enum):
    """Comparison operators recognized in guideline clauses."""

    EQ = "="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    @classmethod
    def parse(cls, symbol: object) -> Optional["Operator"]:
        """Return the operator for a symbol, or None if it is not recognized."""
        if not isinstance(symbol, str):
            return None
        try:
            return cls(symbol.strip())
        except ValueError:
            return None

    @property
    def is_ordering(self) -> bool:
        return self not in (Operator.EQ, Operator.NE)


class DealField(str, Enum):
    """Deal attributes with dedicated handling in explanations."""

    AMOUNT = "amount"
    BUSINESS_FORM = "businessForm"
    RESIDUAL_TYPE = "residualType"
    YIELD = "yield"
    POINTS = "points"


class GuidelineFormat(str, Enum):
    """Supported guideline source formats."""

    CSV = "csv"
    JSON = "json"
