"""Summary statistics over evaluation results"""

from typing import Iterable

from credit_risk.domain.models import EvaluationResult, ReportSummary, RiskTier


def summarize(results: Iterable[EvaluationResult]) -> ReportSummary:
    """
    Count results per risk tier and average their scores.

    An empty result set yields zero counts and an average of 0.0; callers
    decide how to display it.
    """
    results = list(results)
    total = len(results)
    high_risk = sum(1 for r in results if r.risk_tier is RiskTier.HIGH_RISK)

    # Average score (avoid division by zero)
    average = sum(r.credit_score for r in results) / total if total > 0 else 0.0

    return ReportSummary(
        total_count=total,
        high_risk_count=high_risk,
        low_risk_count=total - high_risk,
        average_score=average,
    )
