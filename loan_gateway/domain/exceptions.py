"""Domain-specific exceptions"""

from loan_gateway.domain.models import RejectionReason


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DecisionRejectedError(DomainException):
    """Application cannot be approved; carries the reason surfaced to the caller"""

    reason: RejectionReason
    default_message: str = "Loan application rejected"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidIdentityCodeError(DecisionRejectedError):
    """Personal code fails the format, date or checksum check"""

    reason = RejectionReason.INVALID_IDENTITY_CODE
    default_message = "Invalid personal ID code!"


class InvalidLoanAmountError(DecisionRejectedError):
    """Requested amount is outside the allowed range"""

    reason = RejectionReason.INVALID_LOAN_AMOUNT
    default_message = "Invalid loan amount!"


class InvalidLoanPeriodError(DecisionRejectedError):
    """Requested period is outside the allowed range"""

    reason = RejectionReason.INVALID_LOAN_PERIOD
    default_message = "Invalid loan period!"


class UnrecognizedCenturyDigitError(DecisionRejectedError):
    """Century digit passed the structural check but cannot be mapped to a birth century"""

    reason = RejectionReason.UNRECOGNIZED_CENTURY_DIGIT

    def __init__(self, digit: int):
        self.digit = digit
        super().__init__(f"Unknown first digit {digit} in the personal code")


class AgeIneligibleError(DecisionRejectedError):
    """Applicant is too young, or too old for the longest loan to mature"""

    reason = RejectionReason.AGE_INELIGIBLE
    default_message = "Customer is ineligible for a loan due to age constraints."


class NoValidLoanError(DecisionRejectedError):
    """No amount/period combination reaches the credit score threshold"""

    reason = RejectionReason.NO_VALID_LOAN
    default_message = "No valid loan found!"
