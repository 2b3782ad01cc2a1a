"""Unit tests for credit scoring and risk classification"""

import math
import pytest
from credit_risk.domain.exceptions import InvalidArgumentError
from credit_risk.domain.models import RiskTier
from credit_risk.domain.scoring import DEFAULT_POLICY, ScoringPolicy, calculate_score, classify


def test_calculate_score_reference_customer():
    """0.4*90 + 0.3*60 + 0.3*5 = 55.5, rounds to 56"""
    assert calculate_score(90, 40, 5) == 56


def test_calculate_score_caps_credit_age():
    """Credit history beyond 10 years counts as 10"""
    assert calculate_score(70, 90, 15) == 34
    assert calculate_score(70, 90, 15) == calculate_score(70, 90, 10)


def test_calculate_score_maximum():
    """Perfect payments, no utilization, long history"""
    assert calculate_score(100, 0, 20) == 73


def test_calculate_score_minimum():
    """No on-time payments, fully utilized, no history"""
    assert calculate_score(0, 100, 0) == 0


def test_calculate_score_rounds_half_to_even():
    """Exact midpoints round to the even neighbour"""
    assert calculate_score(6.25, 100, 0) == 2  # raw 2.5
    assert calculate_score(3.75, 100, 0) == 2  # raw 1.5


def test_calculate_score_returns_int():
    """Score is an integer, not a float"""
    assert isinstance(calculate_score(90, 40, 5), int)


def test_calculate_score_is_deterministic():
    """Same inputs always give the same score"""
    assert calculate_score(82.5, 33.3, 7.25) == calculate_score(82.5, 33.3, 7.25)


@pytest.mark.parametrize("payment_history", [0, 25.5, 50, 99.9, 100])
@pytest.mark.parametrize("credit_utilization", [0, 50, 100])
@pytest.mark.parametrize("age", [0, 3.5, 10, 40])
def test_calculate_score_stays_in_attainable_range(payment_history, credit_utilization, age):
    """Any valid input scores within 0-73"""
    score = calculate_score(payment_history, credit_utilization, age)
    assert 0 <= score <= 73


@pytest.mark.parametrize(
    "args,argument,message",
    [
        ((-1, 50, 5), "payment_history", "payment_history out of range"),
        ((101, 50, 5), "payment_history", "payment_history out of range"),
        ((50, -1, 5), "credit_utilization", "credit_utilization out of range"),
        ((50, 101, 5), "credit_utilization", "credit_utilization out of range"),
        ((50, 50, -1), "age_of_credit_history", "age_of_credit_history negative"),
    ],
)
def test_calculate_score_rejects_out_of_range(args, argument, message):
    """Out-of-range inputs raise InvalidArgumentError naming the argument"""
    with pytest.raises(InvalidArgumentError, match=message) as exc_info:
        calculate_score(*args)

    assert exc_info.value.argument == argument


def test_calculate_score_rejects_nan():
    """NaN never satisfies a range check"""
    with pytest.raises(InvalidArgumentError):
        calculate_score(math.nan, 50, 5)
    with pytest.raises(InvalidArgumentError):
        calculate_score(50, 50, math.nan)


def test_invalid_argument_error_is_value_error():
    """Callers catching ValueError also catch scoring errors"""
    with pytest.raises(ValueError):
        calculate_score(50, 50, -0.5)


def test_classify_threshold():
    """50 is the first low-risk score"""
    assert classify(49) == RiskTier.HIGH_RISK
    assert classify(50) == RiskTier.LOW_RISK


def test_classify_extremes():
    """Bottom and top of the scale"""
    assert classify(0) == RiskTier.HIGH_RISK
    assert classify(100) == RiskTier.LOW_RISK


def test_risk_tier_external_strings():
    """Tier values are the exact RiskStatus strings"""
    assert RiskTier.HIGH_RISK.value == "High Risk"
    assert RiskTier.LOW_RISK.value == "Low Risk"
    assert RiskTier("High Risk") is RiskTier.HIGH_RISK


def test_default_policy_constants():
    """Default weighting, age cap and threshold"""
    assert DEFAULT_POLICY.payment_history_weight == 0.4
    assert DEFAULT_POLICY.utilization_weight == 0.3
    assert DEFAULT_POLICY.credit_age_weight == 0.3
    assert DEFAULT_POLICY.max_credit_age_years == 10
    assert DEFAULT_POLICY.high_risk_threshold == 50


def test_injected_policy_threshold():
    """Alternative threshold moves the tier boundary"""
    strict = ScoringPolicy(high_risk_threshold=60)

    assert classify(55) == RiskTier.LOW_RISK
    assert classify(55, strict) == RiskTier.HIGH_RISK


def test_injected_policy_age_cap():
    """Alternative age cap changes how much history counts"""
    long_memory = ScoringPolicy(max_credit_age_years=20)

    assert calculate_score(100, 0, 20, long_memory) == 76
