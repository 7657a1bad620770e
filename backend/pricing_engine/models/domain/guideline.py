"""Guideline domain models: clauses, conditions and requirements."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple, Union

ClauseValue = Union[str, int, float, Decimal]


@dataclass(frozen=True)
class Clause:
    """
    A single comparison test against one deal attribute.

    Attributes:
        field: Name of the deal attribute (e.g. "amount", "businessForm")
        operator: Comparison symbol; one of =, !=, <, <=, >, >=
        value: Right-hand operand, a string or a number
    """

    field: str
    operator: str
    value: ClauseValue


@dataclass(frozen=True)
class Guideline:
    """
    A state pricing guideline.

    Conditions decide whether the guideline applies to a deal; requirements
    must then all hold or the guideline is violated.

    Attributes:
        id: Source identifier, may be missing or duplicated
        text: Human-readable guideline text shown in reports
        state: Uppercased state code the guideline was loaded for
        conditions: Clauses that must all hold for the guideline to apply
        requirements: Clauses that must all hold once the guideline applies
    """

    id: Optional[str]
    text: str
    state: str = ""
    conditions: Tuple[Clause, ...] = field(default_factory=tuple)
    requirements: Tuple[Clause, ...] = field(default_factory=tuple)
