"""Clause evaluation: comparing a single clause against deal values."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from pricing_engine.core.enums import Operator
from pricing_engine.models.domain.guideline import Clause

logger = logging.getLogger(__name__)


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Coerce a number or numeric-looking string to a finite Decimal.

    Args:
        value: Candidate operand

    Returns:
        The Decimal value, or None if the operand is not numeric
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not number.is_finite():
        return None
    return number


def _normalize_text(value: Any) -> str:
    return str(value).strip().casefold()


def _compare(operator: Operator, left: Any, right: Any) -> bool:
    if operator == Operator.EQ:
        return left == right
    if operator == Operator.NE:
        return left != right
    if operator == Operator.LT:
        return left < right
    if operator == Operator.LE:
        return left <= right
    if operator == Operator.GT:
        return left > right
    return left >= right


def evaluate_clause(clause: Clause, deal_values: Mapping[str, Any]) -> bool:
    """
    Decide whether a clause holds for the given deal values.

    Missing deal attributes and unrecognized operators never satisfy a
    clause. Numeric deal values (or numeric-looking strings) are compared
    numerically against the clause value; otherwise both sides are compared
    as trimmed, case-insensitive strings, where only = and != are meaningful.

    Args:
        clause: The clause to evaluate
        deal_values: Mapping of deal attribute name to value

    Returns:
        True if the clause is satisfied
    """
    actual = deal_values.get(clause.field)
    if actual is None:
        return False

    operator = Operator.parse(clause.operator)
    if operator is None:
        logger.debug(f"Unrecognized operator {clause.operator!r} on field {clause.field}")
        return False

    actual_number = to_decimal(actual)
    if actual_number is not None:
        expected_number = to_decimal(clause.value)
        if expected_number is not None:
            return _compare(operator, actual_number, expected_number)

    if operator.is_ordering:
        return False

    return _compare(operator, _normalize_text(actual), _normalize_text(clause.value))
