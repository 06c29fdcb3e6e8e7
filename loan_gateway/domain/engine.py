"""Decision engine - validate, profile and optimize a loan application"""

import logging
from datetime import date
from typing import Callable, Optional

from loan_gateway.domain.models import Decision, LoanApproval, LoanRejection, LoanRequest
from loan_gateway.domain.policy import LoanPolicy
from loan_gateway.domain.exceptions import DecisionRejectedError
from loan_gateway.domain.identity import is_valid_personal_code
from loan_gateway.domain.validation import validate_request
from loan_gateway.domain.demographics import extract_credit_profile
from loan_gateway.domain.optimizer import optimize_loan


class DecisionEngine:
    """
    Computes loan decisions.

    Holds only immutable collaborators, so a single instance can serve
    concurrent requests. The credit modifier travels through the call as a
    value on the CreditProfile.
    """

    def __init__(
        self,
        policy: Optional[LoanPolicy] = None,
        is_valid_code: Optional[Callable[[str], bool]] = None,
        clock: Optional[Callable[[], date]] = None,
    ):
        self.policy = policy or LoanPolicy()
        self.is_valid_code = is_valid_code or is_valid_personal_code
        self.clock = clock or date.today

    def decide(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Main entry point: return the maximum approvable loan or the rejection reason.

        Flow:
        1. Validate personal code, amount and period
        2. Extract birth date, age and credit segment; check age eligibility
        3. Search for the best amount/period the credit modifier supports

        Expected rejections come back as LoanRejection; anything else raises.
        """
        request = LoanRequest(personal_code, loan_amount, loan_period)

        try:
            validate_request(request, self.policy, self.is_valid_code)
            profile = extract_credit_profile(request.personal_code, self.clock(), self.policy)
            amount, period = optimize_loan(
                profile.credit_modifier,
                request.loan_amount,
                request.loan_period,
                self.policy,
            )
        except DecisionRejectedError as e:
            logging.debug("Loan application rejected", extra={"reason": e.reason.value})
            return LoanRejection(reason=e.reason, error_message=str(e))

        return LoanApproval(loan_amount=amount, loan_period=period)
