"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Optional

from loan_gateway.domain.models import Decision


class DecisionRequest(BaseModel):
    """Request body for POST /v1/loan/decision"""

    # No range constraints: out-of-range values get a decision with an error message
    personal_code: str = Field(..., description="Estonian personal identification code")
    loan_amount: int = Field(..., description="Requested loan amount in EUR")
    loan_period: int = Field(..., description="Requested loan period in months")


class DecisionResponse(BaseModel):
    """Response for POST /v1/loan/decision"""

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None

    @classmethod
    def from_decision(cls, decision: Decision) -> "DecisionResponse":
        return cls(
            loan_amount=decision.loan_amount,
            loan_period=decision.loan_period,
            error_message=decision.error_message,
        )
