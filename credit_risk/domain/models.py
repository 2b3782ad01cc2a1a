"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from credit_risk.domain.exceptions import InvalidArgumentError


class RiskTier(str, Enum):
    """Risk classification; values are the external RiskStatus strings"""

    HIGH_RISK = "High Risk"
    LOW_RISK = "Low Risk"


@dataclass(frozen=True)
class CustomerProfile:
    """Customer financial profile supplied for scoring"""

    customer_id: int
    name: Optional[str]  # None when the source record has a null name
    payment_history: float  # % of payments made on time, 0-100
    credit_utilization: float  # % of credit limit used, 0-100
    age_of_credit_history: float  # years


@dataclass(frozen=True)
class EvaluationResult:
    """Output of a single customer evaluation"""

    customer_id: int
    name: str
    credit_score: int
    risk_tier: RiskTier

    @property
    def risk_status(self) -> str:
        return self.risk_tier.value

    @property
    def is_high_risk(self) -> bool:
        return self.risk_tier is RiskTier.HIGH_RISK

    def __str__(self) -> str:
        return (
            f"ID: {self.customer_id:<4} | Name: {self.name:<15} | "
            f"Credit Score: {self.credit_score:<3} | Risk Status: {self.risk_status}"
        )


@dataclass(frozen=True)
class RecordOutcome:
    """Per-record outcome when evaluating a batch without aborting on errors"""

    index: int  # position in the input batch
    customer_id: int
    result: Optional[EvaluationResult] = None
    error: Optional[InvalidArgumentError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ReportSummary:
    """Aggregate statistics over a set of evaluation results"""

    total_count: int
    high_risk_count: int
    low_risk_count: int
    average_score: float  # 0.0 when there are no results

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0
