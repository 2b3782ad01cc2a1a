"""Pytest fixtures for testing"""

import json
import pytest
from pathlib import Path
from typing import Callable
from fastapi.testclient import TestClient
from credit_risk.api.main import create_app
from credit_risk.domain.models import CustomerProfile


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def make_profile() -> Callable[..., CustomerProfile]:
    """Build a valid profile, overriding any field by keyword"""

    def _make(**overrides) -> CustomerProfile:
        fields = {
            "customer_id": 1,
            "name": "Alice Johnson",
            "payment_history": 90.0,
            "credit_utilization": 40.0,
            "age_of_credit_history": 5.0,
        }
        fields.update(overrides)
        return CustomerProfile(**fields)

    return _make


@pytest.fixture
def sample_profiles() -> list[CustomerProfile]:
    """Mixed batch: two low-risk, two high-risk, one tie on score"""
    return [
        # 0.4*90 + 0.3*60 + 0.3*5 = 55.5 -> 56
        CustomerProfile(1, "Alice Johnson", 90.0, 40.0, 5.0),
        # 0.4*70 + 0.3*10 + 0.3*10 = 34
        CustomerProfile(2, "Bob Smith", 70.0, 90.0, 15.0),
        # 0.4*100 + 0.3*100 + 0.3*10 = 73
        CustomerProfile(3, "Carol White", 100.0, 0.0, 20.0),
        # 0.4*60 + 0.3*80 + 0.3*2 = 48.6 -> 49
        CustomerProfile(4, "Dan Brown", 60.0, 20.0, 2.0),
        # 0.4*80 + 0.3*70 + 0.3*10 = 56
        CustomerProfile(5, "Eve Davis", 80.0, 30.0, 12.0),
    ]


@pytest.fixture
def customer_payload() -> list[dict]:
    """Customer records in the external JSON shape"""
    return [
        {"CustomerId": 1, "Name": "Alice Johnson", "PaymentHistory": 90, "CreditUtilization": 40, "AgeOfCreditHistory": 5},
        {"CustomerId": 2, "Name": "Bob Smith", "PaymentHistory": 70, "CreditUtilization": 90, "AgeOfCreditHistory": 15},
        {"CustomerId": 3, "Name": "Carol White", "PaymentHistory": 100, "CreditUtilization": 0, "AgeOfCreditHistory": 20},
    ]


@pytest.fixture
def customers_file(tmp_path: Path, customer_payload: list[dict]) -> Path:
    """customers.json written to a temporary directory"""
    path = tmp_path / "Data" / "customers.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(customer_payload), encoding="utf-8")
    return path
