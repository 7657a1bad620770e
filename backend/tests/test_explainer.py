import pytest

from pricing_engine.models.domain.guideline import Clause, Guideline
from pricing_engine.services.rule_engine.explainer import (
    FIELD_FORMATTERS,
    NO_CLAUSES_EXPLANATION,
    describe_clause,
    describe_conditions,
    describe_requirements,
    explain,
    format_currency,
    format_percentage,
)


def test_explain_condition_then_requirement(llc_minimum_guideline) -> None:
    assert explain(llc_minimum_guideline) == (
        "Business form is LLC. Minimum amount requirement is $50,000."
    )


def test_explain_requirement_only(max_yield_guideline) -> None:
    assert explain(max_yield_guideline) == "Maximum yield allowed is 8.00%."


def test_explain_conditions_only() -> None:
    guideline = Guideline(id=None, text="", conditions=(Clause("residualType", "=", "FMV"),))
    assert explain(guideline) == "Residual type is FMV."


def test_explain_without_clauses_uses_fallback() -> None:
    assert explain(Guideline(id=None, text="")) == NO_CLAUSES_EXPLANATION


def test_explain_joins_clauses_with_and() -> None:
    guideline = Guideline(
        id="1",
        text="",
        conditions=(Clause("businessForm", "!=", "Corp"), Clause("amount", "<", 25000)),
        requirements=(Clause("residualType", "!=", "FMV"), Clause("points", "<=", 0.02)),
    )
    assert explain(guideline) == (
        "Business form is not Corp AND Amount < $25,000. "
        "Residual type cannot be FMV AND Maximum points allowed is 2.00%."
    )


@pytest.mark.parametrize(
    "operator, expected",
    [
        (">=", "Minimum amount requirement is $50,000"),
        ("<=", "Maximum amount allowed is $50,000"),
        (">", "Amount must exceed $50,000"),
        ("<", "Amount must be less than $50,000"),
        ("=", "Amount must be $50,000"),
        ("!=", "Amount cannot be $50,000"),
    ],
)
def test_amount_requirement_phrasing(operator, expected) -> None:
    assert describe_clause(Clause("amount", operator, 50000), is_requirement=True) == expected


@pytest.mark.parametrize(
    "operator, expected",
    [
        ("<=", "Maximum yield allowed is 8.00%"),
        (">=", "Minimum yield required is 8.00%"),
        ("<", "Yield must be below 8.00%"),
        (">", "Yield must exceed 8.00%"),
        ("=", "Yield must be 8.00%"),
        ("!=", "Yield cannot be 8.00%"),
    ],
)
def test_yield_requirement_phrasing(operator, expected) -> None:
    assert describe_clause(Clause("yield", operator, 0.08), is_requirement=True) == expected


def test_condition_phrasing() -> None:
    assert describe_clause(Clause("amount", ">=", 1250000.5)) == "Amount >= $1,250,000.50"
    assert describe_clause(Clause("yield", ">", 0.065)) == "Yield > 6.50%"
    assert describe_clause(Clause("points", "<=", "0.015")) == "Points <= 1.50%"
    assert describe_clause(Clause("businessForm", "=", "LLC")) == "Business form is LLC"


def test_categorical_requirement_phrasing() -> None:
    assert describe_clause(Clause("residualType", "=", "$1 Buyout"), is_requirement=True) == (
        "Residual type must be $1 Buyout"
    )
    assert describe_clause(Clause("businessForm", "!=", "Sole Proprietorship"), is_requirement=True) == (
        "Business form cannot be Sole Proprietorship"
    )


def test_unlisted_fields_and_operators_use_generic_phrasing() -> None:
    assert "termMonths" not in FIELD_FORMATTERS
    assert describe_clause(Clause("termMonths", "<=", 60)) == "termMonths <= 60"
    assert describe_clause(Clause("businessForm", "<", "Z")) == "businessForm < Z"
    assert describe_clause(Clause("amount", "~", 5), is_requirement=True) == "amount ~ 5"


def test_non_numeric_values_are_shown_verbatim() -> None:
    assert format_currency("TBD") == "TBD"
    assert format_percentage("market") == "market"


def test_describe_lists(llc_minimum_guideline) -> None:
    assert describe_conditions(llc_minimum_guideline) == ["Business form is LLC"]
    assert describe_requirements(llc_minimum_guideline) == ["Minimum amount requirement is $50,000"]


@pytest.mark.parametrize("value", ["1e999999", "-1e999999", "1e-999999", "5e16"])
def test_extreme_magnitudes_are_shown_verbatim(value) -> None:
    assert format_currency(value) == value
    assert format_percentage(value) == value


def test_extreme_requirement_value_is_explained() -> None:
    guideline = Guideline(id="1", text="", requirements=(Clause("yield", "<=", "1e999999"),))
    assert explain(guideline) == "Maximum yield allowed is 1e999999."
