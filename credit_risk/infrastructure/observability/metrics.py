"""Prometheus metrics for monitoring risk tier distribution and batch evaluations"""

from typing import Iterable

from prometheus_client import Counter, Histogram

from credit_risk.domain.models import EvaluationResult

# Evaluation metrics
evaluation_counter = Counter(
    "credit_risk_evaluation_total",
    "Total customer evaluations",
    ["risk_status"],  # High Risk | Low Risk
)

credit_score_histogram = Histogram(
    "credit_risk_score",
    "Distribution of credit scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

rejected_customer_counter = Counter(
    "credit_risk_rejected_customers_total",
    "Customer records rejected as invalid",
)

# Batch metrics
batch_size_histogram = Histogram(
    "credit_risk_batch_size",
    "Number of customers per evaluated batch",
    buckets=[1, 5, 10, 50, 100, 500, 1000],
)

batch_duration_histogram = Histogram(
    "credit_risk_batch_duration_seconds",
    "Time spent evaluating a batch",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_evaluations(results: Iterable[EvaluationResult], duration_seconds: float) -> None:
    """Record per-tier counts and score distribution for an evaluated batch"""
    size = 0
    for result in results:
        evaluation_counter.labels(risk_status=result.risk_status).inc()
        credit_score_histogram.observe(result.credit_score)
        size += 1

    batch_size_histogram.observe(size)
    batch_duration_histogram.observe(duration_seconds)


def record_rejections(count: int) -> None:
    """Record invalid customer records skipped during evaluation"""
    if count > 0:
        rejected_customer_counter.inc(count)
