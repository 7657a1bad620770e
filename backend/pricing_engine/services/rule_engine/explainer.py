"""Explanation synthesis: turning guideline clauses into readable prose.

Each deal field maps to a formatter in ``FIELD_FORMATTERS``; fields without
an entry use the generic ``"<field> <operator> <value>"`` form. Formatters
receive the clause and whether it is a requirement, since conditions read
"is / is not" while requirements read "must be / cannot be".
"""

from decimal import Decimal
from typing import Callable, Dict, List, Optional

from pricing_engine.core.enums import DealField, Operator
from pricing_engine.models.domain.guideline import Clause, Guideline
from pricing_engine.services.rule_engine.clause_evaluator import to_decimal

ClauseFormatter = Callable[[Clause, bool], str]

NO_CLAUSES_EXPLANATION = "No specific conditions or requirements defined."

# Values with a decimal exponent beyond this are shown verbatim
MAX_RENDERED_EXPONENT = 15


def _renderable(value) -> Optional[Decimal]:
    number = to_decimal(value)
    if number is None or abs(number.adjusted()) > MAX_RENDERED_EXPONENT:
        return None
    return number


def format_currency(value) -> str:
    """Format an amount with a dollar sign and thousands separators."""
    number = _renderable(value)
    if number is None:
        return str(value)
    if number == number.to_integral_value():
        return f"${number:,.0f}"
    return f"${number:,.2f}"


def format_percentage(value) -> str:
    """Format a fractional rate (0.08) as a percentage (8.00%)."""
    number = _renderable(value)
    if number is None:
        return str(value)
    return f"{number * Decimal(100):.2f}%"


def _generic(clause: Clause, is_requirement: bool) -> str:
    return f"{clause.field} {clause.operator} {clause.value}"


def _amount(clause: Clause, is_requirement: bool) -> str:
    operator = Operator.parse(clause.operator)
    value = format_currency(clause.value)
    if operator is None:
        return _generic(clause, is_requirement)
    if not is_requirement:
        return f"Amount {operator.value} {value}"

    phrasing = {
        Operator.GE: f"Minimum amount requirement is {value}",
        Operator.GT: f"Amount must exceed {value}",
        Operator.LE: f"Maximum amount allowed is {value}",
        Operator.LT: f"Amount must be less than {value}",
        Operator.EQ: f"Amount must be {value}",
        Operator.NE: f"Amount cannot be {value}",
    }
    return phrasing[operator]


def _rate(label: str) -> ClauseFormatter:
    """Build a formatter for fractional rate fields such as yield and points."""

    def formatter(clause: Clause, is_requirement: bool) -> str:
        operator = Operator.parse(clause.operator)
        value = format_percentage(clause.value)
        if operator is None:
            return _generic(clause, is_requirement)
        if not is_requirement:
            return f"{label} {operator.value} {value}"

        lowered = label.lower()
        phrasing = {
            Operator.LE: f"Maximum {lowered} allowed is {value}",
            Operator.LT: f"{label} must be below {value}",
            Operator.GE: f"Minimum {lowered} required is {value}",
            Operator.GT: f"{label} must exceed {value}",
            Operator.EQ: f"{label} must be {value}",
            Operator.NE: f"{label} cannot be {value}",
        }
        return phrasing[operator]

    return formatter


def _categorical(label: str) -> ClauseFormatter:
    """Build a formatter for categorical fields such as business form."""

    def formatter(clause: Clause, is_requirement: bool) -> str:
        operator = Operator.parse(clause.operator)
        if operator == Operator.EQ:
            verb = "must be" if is_requirement else "is"
        elif operator == Operator.NE:
            verb = "cannot be" if is_requirement else "is not"
        else:
            return _generic(clause, is_requirement)
        return f"{label} {verb} {clause.value}"

    return formatter


FIELD_FORMATTERS: Dict[str, ClauseFormatter] = {
    DealField.AMOUNT.value: _amount,
    DealField.BUSINESS_FORM.value: _categorical("Business form"),
    DealField.RESIDUAL_TYPE.value: _categorical("Residual type"),
    DealField.YIELD.value: _rate("Yield"),
    DealField.POINTS.value: _rate("Points"),
}


def describe_clause(clause: Clause, is_requirement: bool = False) -> str:
    """Describe a single clause using its field's formatter."""
    formatter = FIELD_FORMATTERS.get(clause.field, _generic)
    return formatter(clause, is_requirement)


def describe_conditions(guideline: Guideline) -> List[str]:
    return [describe_clause(clause) for clause in guideline.conditions]


def describe_requirements(guideline: Guideline) -> List[str]:
    return [describe_clause(clause, is_requirement=True) for clause in guideline.requirements]


def explain(guideline: Guideline) -> str:
    """
    Explain a guideline in plain language.

    Condition descriptions and requirement descriptions are each joined with
    " AND " and emitted as one sentence per part, conditions first.

    Args:
        guideline: The guideline to explain

    Returns:
        Explanation text, or a generic fallback when the guideline has no clauses
    """
    sentences = [
        " AND ".join(descriptions) + "."
        for descriptions in (describe_conditions(guideline), describe_requirements(guideline))
        if descriptions
    ]
    if not sentences:
        return NO_CLAUSES_EXPLANATION
    return " ".join(sentences)
