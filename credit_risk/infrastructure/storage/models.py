"""Pydantic models for the customer data and credit report JSON files"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from credit_risk.domain.models import CustomerProfile, EvaluationResult, ReportSummary, RiskTier


class CustomerRecord(BaseModel):
    """Customer entry as stored in customers.json"""

    model_config = ConfigDict(populate_by_name=True)

    # Missing fields fall back to empty values so the record fails validation, not parsing
    customer_id: int = Field(0, alias="CustomerId")
    name: Optional[str] = Field("", alias="Name")
    payment_history: float = Field(0.0, alias="PaymentHistory")
    credit_utilization: float = Field(0.0, alias="CreditUtilization")
    age_of_credit_history: float = Field(0.0, alias="AgeOfCreditHistory")

    def to_domain(self) -> CustomerProfile:
        return CustomerProfile(
            customer_id=self.customer_id,
            name=self.name,
            payment_history=self.payment_history,
            credit_utilization=self.credit_utilization,
            age_of_credit_history=self.age_of_credit_history,
        )


class ResultRecord(BaseModel):
    """Evaluation result as written to reports"""

    model_config = ConfigDict(populate_by_name=True)

    customer_id: int = Field(..., alias="CustomerId")
    name: str = Field(..., alias="Name")
    credit_score: int = Field(..., alias="CreditScore")
    risk_status: RiskTier = Field(..., alias="RiskStatus")

    @classmethod
    def from_domain(cls, result: EvaluationResult) -> "ResultRecord":
        return cls(
            customer_id=result.customer_id,
            name=result.name,
            credit_score=result.credit_score,
            risk_status=result.risk_tier,
        )


class CreditReport(BaseModel):
    """Persisted credit risk report"""

    model_config = ConfigDict(populate_by_name=True)

    generated_at: datetime = Field(..., alias="GeneratedAt")
    total_customers: int = Field(..., alias="TotalCustomers")
    high_risk_count: int = Field(..., alias="HighRiskCount")
    low_risk_count: int = Field(..., alias="LowRiskCount")
    average_score: float = Field(..., alias="AverageScore")
    customers: List[ResultRecord] = Field(default_factory=list, alias="Customers")

    @classmethod
    def from_summary(
        cls,
        summary: ReportSummary,
        results: List[EvaluationResult],
        generated_at: datetime,
    ) -> "CreditReport":
        return cls(
            generated_at=generated_at,
            total_customers=summary.total_count,
            high_risk_count=summary.high_risk_count,
            low_risk_count=summary.low_risk_count,
            average_score=summary.average_score,
            customers=[ResultRecord.from_domain(r) for r in results],
        )
