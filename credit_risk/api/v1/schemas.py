"""Pydantic schemas for API request/response validation"""

from typing import List, Optional

from pydantic import BaseModel, Field

from credit_risk.infrastructure.storage.models import CustomerRecord, ResultRecord


class EvaluationRequest(BaseModel):
    """Request body for POST /v1/evaluations and its variants"""

    customers: List[CustomerRecord] = Field(default_factory=list, description="Customers to evaluate")


class EvaluationResponse(BaseModel):
    """Evaluated customers, highest score first"""

    results: List[ResultRecord]


class OutcomeItem(BaseModel):
    """Per-record outcome of an error-collecting evaluation"""

    index: int
    customer_id: int
    ok: bool
    result: Optional[ResultRecord] = None
    error: Optional[str] = None


class OutcomesResponse(BaseModel):
    """Response for POST /v1/evaluations/outcomes"""

    outcomes: List[OutcomeItem]
    results: List[ResultRecord]
    rejected_count: int
