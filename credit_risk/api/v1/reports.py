"""/v1/reports - credit risk summary reports"""

from pathlib import Path

from fastapi import APIRouter, Depends

from credit_risk.api.dependencies import get_customer_data_path, get_request_id
from credit_risk.api.v1.evaluations import assess_or_reject
from credit_risk.api.v1.schemas import EvaluationRequest
from credit_risk.infrastructure.storage.customers import load_customers
from credit_risk.infrastructure.storage.models import CreditReport
from credit_risk.infrastructure.storage.reports import build_report

router = APIRouter()


@router.post("/reports", response_model=CreditReport, response_model_by_alias=True)
def create_report(request_body: EvaluationRequest, request_id: str = Depends(get_request_id)):
    """
    Evaluate the posted customers and return the summary report.

    Same payload as the persisted JSON report: generation time, tier counts,
    full-precision average score and the ordered results.
    """
    profiles = [c.to_domain() for c in request_body.customers]
    assessment = assess_or_reject(profiles, request_id)
    return build_report(assessment.results)


@router.get("/reports", response_model=CreditReport, response_model_by_alias=True)
def get_report(
    request_id: str = Depends(get_request_id),
    data_path: Path = Depends(get_customer_data_path),
):
    """
    Report over the configured customer data file.

    Returns 404 when the file is missing and 422 when it is malformed.
    """
    profiles = load_customers(data_path)
    assessment = assess_or_reject(profiles, request_id)
    return build_report(assessment.results)
