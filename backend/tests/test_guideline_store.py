import pytest

from pricing_engine.services.guideline_loader import GuidelineLoader
from pricing_engine.services.guideline_service import GuidelineService
from pricing_engine.services.guideline_store import GuidelineStore
from tests.helpers import csv_row

YIELD_RULE = {"requirements": [{"field": "yield", "operator": "<=", "value": 0.08}]}


def test_store_lookup_is_case_insensitive(store, llc_minimum_guideline) -> None:
    assert store.get("ca")[0] == llc_minimum_guideline
    assert store.get("NV") == ()
    assert store.state_count == 1
    assert store.rule_count == 2


def test_snapshot_is_read_only_and_detached(llc_minimum_guideline) -> None:
    source = {"CA": [llc_minimum_guideline]}
    store = GuidelineStore(source)

    source["CA"].append(llc_minimum_guideline)
    source["NY"] = []

    snapshot = store.snapshot()
    assert len(snapshot["CA"]) == 1
    assert "NY" not in snapshot
    with pytest.raises(TypeError):
        snapshot["NY"] = ()


def test_replace_swaps_whole_snapshot(store, max_yield_guideline) -> None:
    before = store.snapshot()

    store.replace({"ny": [max_yield_guideline]})

    assert list(store.snapshot()) == ["NY"]
    assert list(before) == ["CA"]
    assert store.loaded_at is not None


def test_reload_replaces_store(write_csv) -> None:
    path = write_csv(
        csv_row("CA-001", "CA", "yield", YIELD_RULE),
        csv_row("CA-002", "CA", "broken", "{"),
        csv_row("NY-001", "NY", "yield", YIELD_RULE),
    )
    service = GuidelineService(GuidelineLoader(path))

    summary = service.reload()

    assert summary.success is True
    assert (summary.states, summary.rules, summary.skipped) == (2, 2, 1)
    assert [g.id for g in service.store.get("CA")] == ["CA-001"]


def test_reload_does_not_merge_with_previous_snapshot(write_csv) -> None:
    path = write_csv(csv_row("CA-001", "CA", "old", YIELD_RULE))
    service = GuidelineService(GuidelineLoader(path))
    service.reload()

    write_csv(csv_row("CA-009", "CA", "new", YIELD_RULE))
    service.reload()

    assert [g.id for g in service.store.get("CA")] == ["CA-009"]


def test_unavailable_source_keeps_previous_snapshot_by_default(write_csv) -> None:
    path = write_csv(csv_row("CA-001", "CA", "yield", YIELD_RULE))
    service = GuidelineService(GuidelineLoader(path))
    service.reload()
    before = service.store.snapshot()

    path.unlink()
    summary = service.reload()

    assert summary.success is False
    assert (summary.states, summary.rules) == (0, 0)
    assert summary.message
    assert service.store.snapshot() is before
    assert [g.id for g in service.store.get("CA")] == ["CA-001"]


def test_unavailable_source_clears_store_when_configured(write_csv) -> None:
    path = write_csv(csv_row("CA-001", "CA", "yield", YIELD_RULE))
    service = GuidelineService(GuidelineLoader(path), clear_on_failure=True)
    service.reload()

    path.unlink()
    summary = service.reload()

    assert summary.success is False
    assert (summary.states, summary.rules) == (0, 0)
    assert service.store.snapshot() == {}
    assert service.store.get("CA") == ()
