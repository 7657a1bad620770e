"""Guideline listing and reload endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from pricing_engine.deps import get_guideline_service
from pricing_engine.models.schemas.guideline import (
    FormattedGuideline,
    GuidelineStatesResponse,
    ReloadResponse,
    StateGuidelinesResponse,
)
from pricing_engine.services.guideline_loader import normalize_state
from pricing_engine.services.guideline_service import GuidelineService
from pricing_engine.services.rule_engine import (
    describe_conditions,
    describe_requirements,
    explain,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=GuidelineStatesResponse,
    summary="List loaded states",
    description="Number of pricing guidelines loaded per state",
)
async def list_states(
    guideline_service: Annotated[GuidelineService, Depends(get_guideline_service)],
) -> GuidelineStatesResponse:
    """List the states with loaded guidelines and their rule counts."""
    snapshot = guideline_service.store.snapshot()
    states = {state: len(rules) for state, rules in sorted(snapshot.items())}
    return GuidelineStatesResponse(
        state_count=len(states),
        rule_count=sum(states.values()),
        states=states,
    )


@router.get(
    "/{state}",
    response_model=StateGuidelinesResponse,
    summary="Get guidelines for a state",
    description="Formatted pricing guidelines for one state, in load order",
)
async def get_state_guidelines(
    state: str,
    guideline_service: Annotated[GuidelineService, Depends(get_guideline_service)],
) -> StateGuidelinesResponse:
    """
    Get the guidelines loaded for a state.

    Unknown states return an empty list rather than 404.
    """
    state_code = normalize_state(state)
    guidelines = guideline_service.store.get(state_code)
    return StateGuidelinesResponse(
        state=state_code,
        rule_count=len(guidelines),
        guidelines=[
            FormattedGuideline(
                rule_id=guideline.id,
                rule=guideline.text,
                conditions=describe_conditions(guideline),
                requirements=describe_requirements(guideline),
                explanation=explain(guideline),
            )
            for guideline in guidelines
        ],
    )


@router.post(
    "/reload",
    response_model=ReloadResponse,
    summary="Reload guidelines",
    description="Re-read the guideline source and replace the in-memory guidelines",
)
def reload_guidelines(
    guideline_service: Annotated[GuidelineService, Depends(get_guideline_service)],
) -> ReloadResponse:
    """
    Reload pricing guidelines from the configured source.

    Declared sync so the blocking source read runs in the threadpool.
    Source failures do not raise; they are reported with success=false
    and zero loaded states.
    """
    summary = guideline_service.reload()
    logger.info(
        f"Guideline reload finished: success={summary.success}, "
        f"states={summary.states}, rules={summary.rules}"
    )
    return ReloadResponse(
        success=summary.success,
        states=summary.states,
        rules=summary.rules,
        skipped=summary.skipped,
        message=summary.message,
    )
