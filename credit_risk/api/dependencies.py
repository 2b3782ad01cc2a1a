"""Dependency injection for FastAPI endpoints"""

from pathlib import Path

from fastapi import Request

from credit_risk.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_customer_data_path() -> Path:
    """Customer data file used when a report request carries no customers"""
    return Path(settings.customer_data_path)
