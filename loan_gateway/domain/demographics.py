"""Demographic extraction - birth date, age and credit segment from a personal code"""

from datetime import date

from loan_gateway.domain import identity
from loan_gateway.domain.models import CreditProfile, CreditSegment
from loan_gateway.domain.policy import LoanPolicy
from loan_gateway.domain.exceptions import (
    AgeIneligibleError,
    InvalidIdentityCodeError,
    UnrecognizedCenturyDigitError,
)
from loan_gateway.utils.date_utils import full_years_between


def get_century(first_digit: int) -> int:
    """
    Map the first digit of a personal code to a birth century.

    Only applicants born in the 1900s (3, 4) and 2000s (5, 6) are supported.
    """
    if first_digit in (3, 4):
        return 1900
    if first_digit in (5, 6):
        return 2000
    raise UnrecognizedCenturyDigitError(first_digit)


def parse_birth_date(personal_code: str) -> date:
    try:
        first_digit = identity.century_digit(personal_code)
    except (ValueError, IndexError) as e:
        raise InvalidIdentityCodeError(f"Invalid century digit in personal ID code: {e}") from e

    century = get_century(first_digit)
    try:
        return date(
            century + identity.year_field(personal_code),
            identity.month_field(personal_code),
            identity.day_field(personal_code),
        )
    except ValueError as e:
        raise InvalidIdentityCodeError(f"Invalid birth date in personal ID code: {e}") from e


def calculate_age(birth_date: date, today: date) -> int:
    """Exact elapsed years, not calendar-year difference"""
    return full_years_between(birth_date, today)


def validate_age(age: int, policy: LoanPolicy) -> None:
    """
    Check the applicant is of age and young enough for the longest loan to mature.

    The upper bound always subtracts the maximum loan period, regardless of the
    period actually requested.
    """
    if age < policy.minimum_allowed_age or age > policy.max_eligible_age:
        raise AgeIneligibleError()


def get_credit_segment(personal_code: str) -> CreditSegment:
    """
    Segment the applicant by the last four digits of the personal code.

    Segments:
    - 0000-2499: debt (no credit)
    - 2500-4999: segment 1
    - 5000-7499: segment 2
    - 7500-9999: segment 3
    """
    try:
        segment = identity.segment_field(personal_code)
    except ValueError as e:
        raise InvalidIdentityCodeError(f"Invalid serial number in personal ID code: {e}") from e

    if segment < 2500:
        return CreditSegment.NONE
    elif segment < 5000:
        return CreditSegment.SEGMENT_1
    elif segment < 7500:
        return CreditSegment.SEGMENT_2
    else:
        return CreditSegment.SEGMENT_3


def extract_credit_profile(personal_code: str, today: date, policy: LoanPolicy) -> CreditProfile:
    """
    Build the applicant's credit profile.

    Raises:
        UnrecognizedCenturyDigitError: Birth century not supported
        InvalidIdentityCodeError: Birth date fields do not form a real date
        AgeIneligibleError: Applicant outside the allowed age window
    """
    birth_date = parse_birth_date(personal_code)
    age = calculate_age(birth_date, today)
    validate_age(age, policy)

    segment = get_credit_segment(personal_code)

    return CreditProfile(
        birth_date=birth_date,
        age=age,
        segment=segment,
        credit_modifier=policy.credit_modifier(segment),
    )
