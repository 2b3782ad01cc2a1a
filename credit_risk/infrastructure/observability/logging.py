"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from credit_risk.config import settings
from credit_risk.domain.models import RecordOutcome, ReportSummary


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stderr, stdout carries the console report
    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_batch_evaluated(
    request_id: str,
    summary: ReportSummary,
    rejected_count: int,
    duration_ms: float,
) -> None:
    """Log structured batch outcome for analysis"""
    logging.info(
        "Batch evaluated",
        extra={
            "request_id": request_id,
            "step": "batch_complete",
            "total_customers": summary.total_count,
            "high_risk_count": summary.high_risk_count,
            "low_risk_count": summary.low_risk_count,
            "average_score": summary.average_score,
            "rejected_count": rejected_count,
            "duration_ms": duration_ms,
        },
    )


def log_invalid_customer(request_id: str, outcome: RecordOutcome) -> None:
    """Log a customer record rejected during error-collecting evaluation"""
    logging.warning(
        "Invalid customer record skipped",
        extra={
            "request_id": request_id,
            "step": "validation",
            "record_index": outcome.index,
            "customer_id": outcome.customer_id,
            "error": str(outcome.error),
        },
    )
