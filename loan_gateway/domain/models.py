"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union


class CreditSegment(str, Enum):
    """Credit segment derived from the last four digits of a personal code"""

    NONE = "none"  # debt, never eligible
    SEGMENT_1 = "segment_1"
    SEGMENT_2 = "segment_2"
    SEGMENT_3 = "segment_3"


class RejectionReason(str, Enum):
    """Why a loan application was not approved"""

    INVALID_IDENTITY_CODE = "invalid_identity_code"
    INVALID_LOAN_AMOUNT = "invalid_loan_amount"
    INVALID_LOAN_PERIOD = "invalid_loan_period"
    UNRECOGNIZED_CENTURY_DIGIT = "unrecognized_century_digit"
    AGE_INELIGIBLE = "age_ineligible"
    NO_VALID_LOAN = "no_valid_loan"


@dataclass(frozen=True)
class LoanRequest:
    """Incoming loan application"""

    personal_code: str
    loan_amount: int
    loan_period: int  # months


@dataclass(frozen=True)
class CreditProfile:
    """Demographic and credit facts extracted from a personal code"""

    birth_date: date
    age: int
    segment: CreditSegment
    credit_modifier: int


@dataclass(frozen=True)
class LoanApproval:
    """Approved loan: the largest amount the applicant qualifies for"""

    loan_amount: int
    loan_period: int

    @property
    def approved(self) -> bool:
        return True

    @property
    def error_message(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class LoanRejection:
    """Rejected application with a machine-readable reason"""

    reason: RejectionReason
    error_message: str

    @property
    def approved(self) -> bool:
        return False

    @property
    def loan_amount(self) -> Optional[int]:
        return None

    @property
    def loan_period(self) -> Optional[int]:
        return None


Decision = Union[LoanApproval, LoanRejection]
