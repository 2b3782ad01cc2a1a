"""Credit report persistence as JSON snapshots"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from credit_risk.domain.models import EvaluationResult
from credit_risk.domain.reporting import summarize
from credit_risk.infrastructure.storage.models import CreditReport
from credit_risk.utils.date_utils import report_filename

logger = logging.getLogger(__name__)


def build_report(
    results: List[EvaluationResult],
    generated_at: Optional[datetime] = None,
) -> CreditReport:
    """Assemble report payload: summary counts, full-precision average and results"""
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)

    return CreditReport.from_summary(summarize(results), results, generated_at)


def save_report(
    results: List[EvaluationResult],
    path: Union[str, Path],
    generated_at: Optional[datetime] = None,
) -> Path:
    """Write report as indented JSON, creating parent directories"""
    path = Path(path)
    report = build_report(results, generated_at)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report.model_dump_json(by_alias=True, indent=2), encoding="utf-8")

    logger.info("Report saved", extra={"path": str(path), "total_customers": report.total_customers})
    return path


def save_timestamped_report(
    results: List[EvaluationResult],
    reports_dir: Union[str, Path],
    generated_at: Optional[datetime] = None,
) -> Path:
    """Save report under reports_dir as credit_report_<timestamp>.json"""
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)

    return save_report(results, Path(reports_dir) / report_filename(generated_at), generated_at)
