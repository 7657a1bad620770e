from pathlib import Path

import pytest

from pricing_engine.models.domain.guideline import Clause, Guideline
from pricing_engine.services.guideline_store import GuidelineStore
from tests.helpers import CSV_HEADER


@pytest.fixture
def write_csv(tmp_path):
    def _write(*rows: str, name: str = "guidelines.csv") -> Path:
        path = tmp_path / name
        path.write_text(CSV_HEADER + "".join(rows), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def llc_minimum_guideline() -> Guideline:
    return Guideline(
        id="CA-001",
        text="LLC deals in California must be at least $50,000.",
        state="CA",
        conditions=(Clause("businessForm", "=", "LLC"),),
        requirements=(Clause("amount", ">=", 50000),),
    )


@pytest.fixture
def max_yield_guideline() -> Guideline:
    return Guideline(
        id="CA-002",
        text="Maximum yield in California is 8%.",
        state="CA",
        requirements=(Clause("yield", "<=", 0.08),),
    )


@pytest.fixture
def store(llc_minimum_guideline, max_yield_guideline) -> GuidelineStore:
    return GuidelineStore({"CA": [llc_minimum_guideline, max_yield_guideline]})
