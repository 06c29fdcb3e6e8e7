"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from loan_gateway.api.v1.schemas import DecisionRequest, DecisionResponse
from loan_gateway.api.dependencies import get_decision_engine, get_request_id
from loan_gateway.domain.engine import DecisionEngine
from loan_gateway.domain.models import RejectionReason
from loan_gateway.infrastructure.observability.metrics import record_decision
from loan_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()

# Malformed input -> 400, business rejection -> 404
REJECTION_STATUS_CODES = {
    RejectionReason.INVALID_IDENTITY_CODE: 400,
    RejectionReason.INVALID_LOAN_AMOUNT: 400,
    RejectionReason.INVALID_LOAN_PERIOD: 400,
    RejectionReason.UNRECOGNIZED_CENTURY_DIGIT: 400,
    RejectionReason.AGE_INELIGIBLE: 404,
    RejectionReason.NO_VALID_LOAN: 404,
}


@router.post(
    "/loan/decision",
    response_model=DecisionResponse,
    responses={400: {"model": DecisionResponse}, 404: {"model": DecisionResponse}, 500: {"model": DecisionResponse}},
)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide on a loan application.

    Returns the maximum approvable amount and its period, which may be larger
    than requested or use a longer period. Rejections carry an error message
    with null amount and period.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        decision = engine.decide(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
        )
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        response = DecisionResponse(error_message="An unexpected error occurred")
        return JSONResponse(status_code=500, content=response.model_dump())

    duration_ms = (time.time() - start_time) * 1000
    reason = None if decision.approved else decision.reason.value
    record_decision(decision)
    log_decision(request_id, decision.approved, decision.loan_amount, decision.loan_period, reason, duration_ms)

    response = DecisionResponse.from_decision(decision)
    if decision.approved:
        return response

    return JSONResponse(status_code=REJECTION_STATUS_CODES[decision.reason], content=response.model_dump())
