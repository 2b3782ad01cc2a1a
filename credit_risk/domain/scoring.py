"""Credit scoring engine - core business logic for risk assessment"""

from dataclasses import dataclass

from credit_risk.domain.exceptions import InvalidArgumentError
from credit_risk.domain.models import RiskTier
from credit_risk.domain.validation import is_percentage


@dataclass(frozen=True)
class ScoringPolicy:
    """Fixed scoring constants; injectable so tests can exercise other thresholds"""

    payment_history_weight: float = 0.4
    utilization_weight: float = 0.3
    credit_age_weight: float = 0.3
    max_credit_age_years: float = 10
    high_risk_threshold: int = 50


DEFAULT_POLICY = ScoringPolicy()


def calculate_score(
    payment_history: float,
    credit_utilization: float,
    age_of_credit_history: float,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> int:
    """
    Calculate credit score from a customer's financial profile.

    Formula:
        0.4 * payment_history + 0.3 * (100 - credit_utilization) + 0.3 * min(age, 10)

    Scoring weights:
    - 40%: Payment history (direct indicator of reliability)
    - 30%: Credit utilization (lower is better, so the inverse is scored)
    - 30%: Age of credit history in years, capped at 10

    The raw score is rounded half-to-even, so 2.5 -> 2 and 55.5 -> 56.
    With the default weights the attainable range is 0-73.

    Raises:
        InvalidArgumentError: percentages outside [0, 100] or negative age
    """
    if not is_percentage(payment_history):
        raise InvalidArgumentError("payment_history out of range", argument="payment_history")

    if not is_percentage(credit_utilization):
        raise InvalidArgumentError("credit_utilization out of range", argument="credit_utilization")

    if not age_of_credit_history >= 0:
        raise InvalidArgumentError("age_of_credit_history negative", argument="age_of_credit_history")

    capped_age = min(age_of_credit_history, policy.max_credit_age_years)

    score = (
        (policy.payment_history_weight * payment_history)
        + (policy.utilization_weight * (100 - credit_utilization))
        + (policy.credit_age_weight * capped_age)
    )

    return round(score)


def classify(score: int, policy: ScoringPolicy = DEFAULT_POLICY) -> RiskTier:
    """
    Map credit score to risk tier.

    Score bands:
    - below 50: High Risk
    - 50 and above: Low Risk
    """
    if score < policy.high_risk_threshold:
        return RiskTier.HIGH_RISK
    return RiskTier.LOW_RISK
