"""Unit tests for the complete decision flow"""

import pytest
from datetime import date
from loan_gateway.domain.engine import DecisionEngine
from loan_gateway.domain.models import LoanApproval, LoanRejection, RejectionReason

SEGMENT_1_CODE = "39002013007"
SEGMENT_2_CODE = "39002016009"
SEGMENT_3_CODE = "39002017518"
DEBT_CODE = "39002011002"


def test_segment_3_gets_maximum_amount(engine):
    decision = engine.decide(SEGMENT_3_CODE, 4000, 12)

    assert decision == LoanApproval(loan_amount=10000, loan_period=12)
    assert decision.approved is True
    assert decision.error_message is None


def test_segment_2_offer(engine):
    assert engine.decide(SEGMENT_2_CODE, 4000, 12) == LoanApproval(loan_amount=3600, loan_period=12)


def test_segment_1_period_extended(engine):
    assert engine.decide(SEGMENT_1_CODE, 4000, 12) == LoanApproval(loan_amount=2000, loan_period=20)


@pytest.mark.parametrize("code", [DEBT_CODE, "39002012490", "37605030299"])
def test_debt_segment_rejected(engine, code):
    decision = engine.decide(code, 4000, 12)

    assert decision == LoanRejection(RejectionReason.NO_VALID_LOAN, "No valid loan found!")
    assert decision.approved is False
    assert decision.loan_amount is None
    assert decision.loan_period is None


def test_invalid_personal_code(engine):
    decision = engine.decide("39002017519", 4000, 12)

    assert isinstance(decision, LoanRejection)
    assert decision.reason == RejectionReason.INVALID_IDENTITY_CODE
    assert decision.error_message == "Invalid personal ID code!"


@pytest.mark.parametrize("amount", [1999, 10001])
def test_invalid_amount_regardless_of_segment(engine, amount):
    for code in (SEGMENT_3_CODE, DEBT_CODE, "50701167515"):
        decision = engine.decide(code, amount, 12)
        assert decision.reason == RejectionReason.INVALID_LOAN_AMOUNT
        assert decision.error_message == "Invalid loan amount!"


def test_invalid_period(engine):
    decision = engine.decide(SEGMENT_3_CODE, 4000, 61)
    assert decision.reason == RejectionReason.INVALID_LOAN_PERIOD


def test_unsupported_century_rejected(engine):
    """19th-century code passes the checksum but has no supported birth century"""
    decision = engine.decide("19002017516", 4000, 12)

    assert decision.reason == RejectionReason.UNRECOGNIZED_CENTURY_DIGIT
    assert decision.error_message == "Unknown first digit 1 in the personal code"


def test_unrecognized_century_with_lenient_validator(policy, today):
    engine = DecisionEngine(policy=policy, is_valid_code=lambda code: True, clock=lambda: today)

    decision = engine.decide("99002017518", 4000, 12)

    assert decision.reason == RejectionReason.UNRECOGNIZED_CENTURY_DIGIT
    assert decision.error_message == "Unknown first digit 9 in the personal code"


def test_age_exactly_minimum_is_eligible(engine):
    """Born 2007-01-15, today 2025-01-15"""
    assert engine.decide("50701157519", 4000, 12).approved is True
    assert engine.decide("60701157511", 4000, 12).approved is True


def test_one_day_younger_than_minimum_is_rejected(engine):
    """Born 2007-01-16, turns 18 tomorrow"""
    decision = engine.decide("50701167515", 4000, 12)

    assert decision.reason == RejectionReason.AGE_INELIGIBLE
    assert decision.error_message == "Customer is ineligible for a loan due to age constraints."


def test_age_upper_bound(engine):
    assert engine.decide("35001157517", 4000, 12).approved is True  # 75
    assert engine.decide("34901157517", 4000, 12).reason == RejectionReason.AGE_INELIGIBLE  # 76


def test_age_upper_bound_ignores_requested_period(engine):
    """A 76 year old is rejected even for the shortest loan"""
    assert engine.decide("34901157517", 2000, 12).reason == RejectionReason.AGE_INELIGIBLE


def test_clock_is_consulted_per_decision(policy):
    days = iter([date(2025, 1, 14), date(2025, 1, 15)])
    engine = DecisionEngine(policy=policy, clock=lambda: next(days))

    assert engine.decide("50701157519", 4000, 12).reason == RejectionReason.AGE_INELIGIBLE
    assert engine.decide("50701157519", 4000, 12).approved is True


def test_idempotent(engine):
    for args in [(SEGMENT_1_CODE, 4000, 12), (DEBT_CODE, 4000, 12), ("50701167515", 4000, 12)]:
        assert engine.decide(*args) == engine.decide(*args)


@pytest.mark.parametrize("code", [SEGMENT_1_CODE, SEGMENT_2_CODE, SEGMENT_3_CODE])
@pytest.mark.parametrize("period", [12, 24, 60])
def test_approved_amount_monotonic_in_requested_amount(engine, code, period):
    previous = 0
    for amount in range(2000, 10001, 100):
        decision = engine.decide(code, amount, period)
        assert decision.approved is True
        assert decision.loan_amount >= previous
        previous = decision.loan_amount


def test_modifier_not_shared_between_calls(engine):
    """A debtor's decision does not leak into the next applicant's"""
    assert engine.decide(DEBT_CODE, 4000, 12).approved is False
    assert engine.decide(SEGMENT_3_CODE, 4000, 12).loan_amount == 10000
    assert engine.decide(SEGMENT_1_CODE, 4000, 12).loan_amount == 2000


def test_default_clock_is_today(policy):
    engine = DecisionEngine(policy=policy)
    assert engine.clock() == date.today()


def test_unexpected_errors_propagate(policy, today):
    def broken_validator(code: str) -> bool:
        raise RuntimeError("validator unavailable")

    engine = DecisionEngine(policy=policy, is_valid_code=broken_validator, clock=lambda: today)

    with pytest.raises(RuntimeError):
        engine.decide(SEGMENT_3_CODE, 4000, 12)


@pytest.mark.parametrize("code", ["390020175ab", "a9002017518", "39002"])
def test_malformed_code_from_lenient_validator_is_rejected(policy, today, code):
    """Unparseable fields become an invalid-code decision, never a raw ValueError"""
    engine = DecisionEngine(policy=policy, is_valid_code=lambda code: True, clock=lambda: today)

    decision = engine.decide(code, 4000, 12)

    assert decision.reason == RejectionReason.INVALID_IDENTITY_CODE
    assert decision.loan_amount is None
