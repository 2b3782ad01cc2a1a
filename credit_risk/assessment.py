"""Assessment pipeline shared by the CLI and the HTTP API"""

import time
from dataclasses import dataclass, field
from typing import Iterable, List

from credit_risk.domain.evaluation import evaluate_all, evaluate_all_collecting_errors, successful_results
from credit_risk.domain.models import CustomerProfile, EvaluationResult, RecordOutcome
from credit_risk.domain.reporting import summarize
from credit_risk.infrastructure.observability.logging import log_batch_evaluated, log_invalid_customer
from credit_risk.infrastructure.observability.metrics import record_evaluations, record_rejections


@dataclass
class Assessment:
    """Evaluated batch: ordered results plus per-record outcomes when errors were collected"""

    results: List[EvaluationResult]
    outcomes: List[RecordOutcome] = field(default_factory=list)

    @property
    def rejected(self) -> List[RecordOutcome]:
        return [o for o in self.outcomes if not o.ok]


def assess_customers(
    profiles: Iterable[CustomerProfile],
    request_id: str,
    skip_invalid: bool = False,
) -> Assessment:
    """
    Evaluate a batch of customers, recording metrics and logs.

    Flow:
    1. Evaluate (eager-fail, or collect per-record errors when skip_invalid)
    2. Record tier/score metrics
    3. Log batch outcome

    Raises:
        InvalidArgumentError: invalid profile when skip_invalid is False
    """
    start_time = time.time()

    if skip_invalid:
        outcomes = evaluate_all_collecting_errors(profiles)
        results = successful_results(outcomes)
    else:
        results = evaluate_all(profiles)
        outcomes = []

    duration = time.time() - start_time
    rejected = [o for o in outcomes if not o.ok]

    for outcome in rejected:
        log_invalid_customer(request_id, outcome)

    record_evaluations(results, duration)
    record_rejections(len(rejected))
    log_batch_evaluated(request_id, summarize(results), len(rejected), duration * 1000)

    return Assessment(results=results, outcomes=outcomes)
