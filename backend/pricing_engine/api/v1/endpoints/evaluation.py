"""Deal evaluation endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from pricing_engine.core.exceptions import MissingFieldError
from pricing_engine.deps import get_evaluation_service
from pricing_engine.models.schemas.evaluation import EvaluationRequest, EvaluationResponse
from pricing_engine.services.evaluation_service import EvaluationService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/evaluate",
    response_model=EvaluationResponse,
    summary="Evaluate a deal",
    description="Check a deal against the pricing guidelines of its state",
)
async def evaluate_deal(
    request: EvaluationRequest,
    service: Annotated[EvaluationService, Depends(get_evaluation_service)],
) -> EvaluationResponse:
    """
    Evaluate a deal against state pricing guidelines.

    Returns:
    - The normalized state and the number of violations
    - Violated guidelines with explanatory notes
    - Every applicable guideline with formatted conditions and requirements
    - Summary counts (available, evaluated, passed, violated)
    """
    try:
        report = service.evaluate(request.state, request.to_deal())
        return EvaluationResponse.from_report(report)

    except MissingFieldError as e:
        logger.warning(f"Rejected evaluation request: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error evaluating deal: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to evaluate deal",
        )
