"""Loan optimizer - search for the largest approvable amount/period combination"""

from typing import Tuple

from loan_gateway.domain.policy import LoanPolicy
from loan_gateway.domain.exceptions import NoValidLoanError

APPROVAL_THRESHOLD = 1.0


def calculate_credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """Credit score = (modifier / amount) * period; approvable at >= 1.0"""
    return (credit_modifier / loan_amount) * loan_period


def highest_valid_loan_amount(credit_modifier: int, loan_period: int) -> int:
    """Largest amount whose score is exactly at the threshold for this period"""
    return credit_modifier * loan_period


def optimize_loan(
    credit_modifier: int,
    loan_amount: int,
    loan_period: int,
    policy: LoanPolicy,
) -> Tuple[int, int]:
    """
    Find the approvable (amount, period) offer for an applicant.

    Search order, starting from the requested values:
    1. Lower the amount in fixed steps while it is above the minimum
    2. Only then extend the period one month at a time up to the maximum
    3. Give up when neither dimension can move

    The returned amount is not the one the search stopped at: it is the
    highest amount the modifier supports at the final period, capped at the
    maximum loan amount. This can exceed the requested amount.

    Raises:
        NoValidLoanError: Applicant is in debt or no combination reaches the threshold
    """
    if credit_modifier == 0:
        raise NoValidLoanError()

    credit_score = calculate_credit_score(credit_modifier, loan_amount, loan_period)

    while credit_score < APPROVAL_THRESHOLD:
        if loan_amount > policy.min_loan_amount:
            loan_amount -= policy.loan_amount_step
        elif loan_period < policy.max_loan_period:
            loan_period += 1
        else:
            raise NoValidLoanError()

        credit_score = calculate_credit_score(credit_modifier, loan_amount, loan_period)

    approved_amount = min(policy.max_loan_amount, highest_valid_loan_amount(credit_modifier, loan_period))

    return approved_amount, loan_period
