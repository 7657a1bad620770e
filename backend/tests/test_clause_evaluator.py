from decimal import Decimal

import pytest

from pricing_engine.models.domain.guideline import Clause
from pricing_engine.services.rule_engine.clause_evaluator import evaluate_clause, to_decimal


@pytest.mark.parametrize("operator", ["==", "=>", "~", "", "LIKE", None])
@pytest.mark.parametrize("actual, expected", [(10, 10), ("LLC", "LLC"), (Decimal("0.08"), 0.08)])
def test_unknown_operator_is_never_satisfied(operator, actual, expected) -> None:
    clause = Clause("field", operator, expected)
    assert evaluate_clause(clause, {"field": actual}) is False


@pytest.mark.parametrize("operator", ["=", "!=", "<", "<=", ">", ">="])
def test_missing_field_is_never_satisfied(operator) -> None:
    clause = Clause("amount", operator, 50000)
    assert evaluate_clause(clause, {}) is False
    assert evaluate_clause(clause, {"amount": None}) is False


def test_string_equality_ignores_case_and_whitespace() -> None:
    clause = Clause("businessForm", "=", "LLC")
    assert evaluate_clause(clause, {"businessForm": " llc "}) is True
    assert evaluate_clause(clause, {"businessForm": "Corp"}) is False


def test_string_inequality() -> None:
    clause = Clause("residualType", "!=", "FMV")
    assert evaluate_clause(clause, {"residualType": "$1 Buyout"}) is True
    assert evaluate_clause(clause, {"residualType": " fmv"}) is False


@pytest.mark.parametrize(
    "operator, actual, expected",
    [
        (">=", Decimal("10000"), False),
        (">=", Decimal("50000"), True),
        (">", Decimal("50000"), False),
        ("<", Decimal("49999.99"), True),
        ("<=", 50000, True),
        ("=", 50000.0, True),
        ("!=", 50000, False),
    ],
)
def test_numeric_comparisons(operator, actual, expected) -> None:
    clause = Clause("amount", operator, 50000)
    assert evaluate_clause(clause, {"amount": actual}) is expected


def test_numeric_looking_strings_are_compared_numerically() -> None:
    assert evaluate_clause(Clause("amount", ">=", "50000"), {"amount": "75,000"}) is True
    assert evaluate_clause(Clause("amount", "<", 9), {"amount": "10"}) is False
    assert evaluate_clause(Clause("yield", "<=", 0.08), {"yield": Decimal("0.095")}) is False


def test_ordering_on_non_numeric_operands_is_not_satisfied() -> None:
    assert evaluate_clause(Clause("businessForm", "<", "Z"), {"businessForm": "LLC"}) is False
    assert evaluate_clause(Clause("amount", ">", "large"), {"amount": 10}) is False


def test_numeric_deal_value_against_text_clause_value() -> None:
    assert evaluate_clause(Clause("amount", "=", "large"), {"amount": 10}) is False
    assert evaluate_clause(Clause("amount", "!=", "large"), {"amount": 10}) is True


def test_to_decimal() -> None:
    assert to_decimal("1,000") == Decimal("1000")
    assert to_decimal(" 0.08 ") == Decimal("0.08")
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal("NaN") is None
    assert to_decimal("Infinity") is None
    assert to_decimal("LLC") is None
    assert to_decimal("") is None
    assert to_decimal(True) is None
    assert to_decimal(None) is None
