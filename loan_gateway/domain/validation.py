"""Request validation - structural checks run before any scoring"""

from typing import Callable

from loan_gateway.domain.models import LoanRequest
from loan_gateway.domain.policy import LoanPolicy
from loan_gateway.domain.exceptions import (
    InvalidIdentityCodeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
)


def validate_request(
    request: LoanRequest,
    policy: LoanPolicy,
    is_valid_code: Callable[[str], bool],
) -> None:
    """
    Reject malformed applications.

    Checks run in order (personal code, amount, period) and the first
    failure is raised.

    Raises:
        InvalidIdentityCodeError: Personal code fails structural/checksum validation
        InvalidLoanAmountError: Amount outside [min_loan_amount, max_loan_amount]
        InvalidLoanPeriodError: Period outside [min_loan_period, max_loan_period]
    """
    if not is_valid_code(request.personal_code):
        raise InvalidIdentityCodeError()

    if not policy.min_loan_amount <= request.loan_amount <= policy.max_loan_amount:
        raise InvalidLoanAmountError()

    if not policy.min_loan_period <= request.loan_period <= policy.max_loan_period:
        raise InvalidLoanPeriodError()
