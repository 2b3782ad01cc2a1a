"""Batch evaluation of customer profiles"""

from typing import Iterable, List

from credit_risk.domain.exceptions import InvalidArgumentError
from credit_risk.domain.models import CustomerProfile, EvaluationResult, RecordOutcome, RiskTier
from credit_risk.domain.scoring import DEFAULT_POLICY, ScoringPolicy, calculate_score, classify
from credit_risk.domain.validation import is_valid


def evaluate_one(profile: CustomerProfile, policy: ScoringPolicy = DEFAULT_POLICY) -> EvaluationResult:
    """
    Score and classify a single customer.

    Identifier and name are copied verbatim, untrimmed.

    Raises:
        InvalidArgumentError: profile fails validation
    """
    if not is_valid(profile):
        raise InvalidArgumentError("invalid customer data")

    credit_score = calculate_score(
        profile.payment_history,
        profile.credit_utilization,
        profile.age_of_credit_history,
        policy,
    )

    return EvaluationResult(
        customer_id=profile.customer_id,
        name=profile.name,
        credit_score=credit_score,
        risk_tier=classify(credit_score, policy),
    )


def order_by_score(results: Iterable[EvaluationResult]) -> List[EvaluationResult]:
    """Highest score first; equal scores keep their input order (sorted is stable)"""
    return sorted(results, key=lambda r: r.credit_score, reverse=True)


def evaluate_all(
    profiles: Iterable[CustomerProfile],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> List[EvaluationResult]:
    """
    Evaluate a batch of customers, highest score first.

    The first invalid profile aborts the whole batch: its InvalidArgumentError
    propagates and no partial results are returned.
    """
    results = [evaluate_one(profile, policy) for profile in profiles]
    return order_by_score(results)


def evaluate_all_collecting_errors(
    profiles: Iterable[CustomerProfile],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> List[RecordOutcome]:
    """
    Evaluate every profile, recording failures instead of aborting.

    Returns one outcome per input profile, in input order.
    """
    outcomes = []
    for index, profile in enumerate(profiles):
        try:
            result = evaluate_one(profile, policy)
        except InvalidArgumentError as e:
            outcomes.append(RecordOutcome(index=index, customer_id=profile.customer_id, error=e))
        else:
            outcomes.append(RecordOutcome(index=index, customer_id=profile.customer_id, result=result))
    return outcomes


def successful_results(outcomes: Iterable[RecordOutcome]) -> List[EvaluationResult]:
    """Successful results of a collected batch, ordered as evaluate_all orders them"""
    return order_by_score(o.result for o in outcomes if o.ok)


def filter_high_risk(results: Iterable[EvaluationResult]) -> List[EvaluationResult]:
    """Return only high-risk results, preserving order"""
    return [r for r in results if r.risk_tier is RiskTier.HIGH_RISK]
