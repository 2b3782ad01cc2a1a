"""POST /v1/evaluations - customer credit risk evaluation endpoints"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from credit_risk.api.dependencies import get_request_id
from credit_risk.api.v1.schemas import EvaluationRequest, EvaluationResponse, OutcomeItem, OutcomesResponse
from credit_risk.assessment import Assessment, assess_customers
from credit_risk.domain.evaluation import filter_high_risk
from credit_risk.domain.exceptions import InvalidArgumentError
from credit_risk.domain.models import CustomerProfile
from credit_risk.infrastructure.observability.metrics import record_rejections
from credit_risk.infrastructure.storage.models import ResultRecord

router = APIRouter()


def assess_or_reject(profiles: List[CustomerProfile], request_id: str) -> Assessment:
    """Eager-fail assessment; an invalid customer rejects the request with 422"""
    try:
        return assess_customers(profiles, request_id)
    except InvalidArgumentError as e:
        record_rejections(1)
        logging.warning(f"Invalid customer data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/evaluations", response_model=EvaluationResponse, response_model_by_alias=True)
def create_evaluation(request_body: EvaluationRequest, request_id: str = Depends(get_request_id)):
    """
    Score and classify a batch of customers.

    The whole batch is rejected with 422 if any customer record is invalid.
    """
    profiles = [c.to_domain() for c in request_body.customers]
    assessment = assess_or_reject(profiles, request_id)

    return EvaluationResponse(results=[ResultRecord.from_domain(r) for r in assessment.results])


@router.post("/evaluations/high-risk", response_model=EvaluationResponse, response_model_by_alias=True)
def create_high_risk_evaluation(request_body: EvaluationRequest, request_id: str = Depends(get_request_id)):
    """Evaluate a batch and return only the high-risk customers, highest score first"""
    profiles = [c.to_domain() for c in request_body.customers]
    assessment = assess_or_reject(profiles, request_id)

    high_risk = filter_high_risk(assessment.results)
    return EvaluationResponse(results=[ResultRecord.from_domain(r) for r in high_risk])


@router.post("/evaluations/outcomes", response_model=OutcomesResponse, response_model_by_alias=True)
def create_evaluation_outcomes(request_body: EvaluationRequest, request_id: str = Depends(get_request_id)):
    """
    Evaluate every customer without aborting on invalid records.

    Returns one outcome per input record (input order) plus the successful
    results ordered by score.
    """
    profiles = [c.to_domain() for c in request_body.customers]
    assessment = assess_customers(profiles, request_id, skip_invalid=True)

    items = [
        OutcomeItem(
            index=o.index,
            customer_id=o.customer_id,
            ok=o.ok,
            result=ResultRecord.from_domain(o.result) if o.ok else None,
            error=None if o.ok else str(o.error),
        )
        for o in assessment.outcomes
    ]

    return OutcomesResponse(
        outcomes=items,
        results=[ResultRecord.from_domain(r) for r in assessment.results],
        rejected_count=len(assessment.rejected),
    )
