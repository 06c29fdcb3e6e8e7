"""Loan policy constants - amount/period bounds, age limits and segment modifiers"""

from dataclasses import dataclass

from loan_gateway.config import Settings
from loan_gateway.domain.models import CreditSegment


@dataclass(frozen=True)
class LoanPolicy:
    """
    Read-only lending rules for a single country (Estonia).

    Defaults mirror Settings so the domain can be used without loading
    configuration, e.g. in unit tests.
    """

    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    loan_amount_step: int = 100
    min_loan_period: int = 12
    max_loan_period: int = 60
    minimum_allowed_age: int = 18
    maximum_allowed_age: int = 80
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    def __post_init__(self) -> None:
        if self.loan_amount_step <= 0:
            raise ValueError("loan_amount_step must be positive")
        if not 0 < self.min_loan_amount <= self.max_loan_amount:
            raise ValueError("loan amount bounds must satisfy 0 < min <= max")
        if not 0 < self.min_loan_period <= self.max_loan_period:
            raise ValueError("loan period bounds must satisfy 0 < min <= max")
        if not 0 <= self.minimum_allowed_age < self.maximum_allowed_age:
            raise ValueError("age bounds must satisfy 0 <= minimum < maximum")

    @classmethod
    def from_settings(cls, settings: Settings) -> "LoanPolicy":
        return cls(
            min_loan_amount=settings.min_loan_amount,
            max_loan_amount=settings.max_loan_amount,
            loan_amount_step=settings.loan_amount_step,
            min_loan_period=settings.min_loan_period,
            max_loan_period=settings.max_loan_period,
            minimum_allowed_age=settings.minimum_allowed_age,
            maximum_allowed_age=settings.maximum_allowed_age,
            segment_1_credit_modifier=settings.segment_1_credit_modifier,
            segment_2_credit_modifier=settings.segment_2_credit_modifier,
            segment_3_credit_modifier=settings.segment_3_credit_modifier,
        )

    @property
    def max_eligible_age(self) -> int:
        """Oldest age at which even the longest loan matures within life expectancy"""
        return self.maximum_allowed_age - self.max_loan_period // 12

    def credit_modifier(self, segment: CreditSegment) -> int:
        """Credit modifier for a segment (0 for applicants in debt)"""
        modifiers = {
            CreditSegment.NONE: 0,
            CreditSegment.SEGMENT_1: self.segment_1_credit_modifier,
            CreditSegment.SEGMENT_2: self.segment_2_credit_modifier,
            CreditSegment.SEGMENT_3: self.segment_3_credit_modifier,
        }
        return modifiers[segment]
