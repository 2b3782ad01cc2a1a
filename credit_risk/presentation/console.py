"""Plain-text console rendering of credit risk reports"""

from typing import List

from credit_risk.domain.evaluation import filter_high_risk
from credit_risk.domain.models import EvaluationResult, RecordOutcome
from credit_risk.domain.reporting import summarize

WIDTH = 80


def render_console_report(results: List[EvaluationResult]) -> str:
    """Render results table and summary; average is shown with two decimals"""
    lines = [
        "",
        "=" * WIDTH,
        "CREDIT RISK ASSESSMENT REPORT",
        "=" * WIDTH,
        "",
    ]

    summary = summarize(results)
    if summary.is_empty:
        lines.append("No customers to report.")
        return "\n".join(lines)

    lines.append(f"{'ID':<4} | {'Name':<15} | {'Credit Score':<3} | {'Risk Status':<10}")
    lines.append("-" * WIDTH)
    lines.extend(str(result) for result in results)
    lines.append("-" * WIDTH)

    lines += [
        "",
        f"Total Customers: {summary.total_count}",
        f"High Risk: {summary.high_risk_count}",
        f"Low Risk: {summary.low_risk_count}",
        f"Average Credit Score: {summary.average_score:.2f}",
        "=" * WIDTH,
        "",
    ]
    return "\n".join(lines)


def render_high_risk_alert(results: List[EvaluationResult]) -> str:
    """List high-risk customers; empty string when there are none"""
    high_risk = filter_high_risk(results)
    if not high_risk:
        return ""

    lines = ["", "HIGH-RISK CUSTOMERS ALERT:", "-" * WIDTH]
    lines.extend(
        f"  * {r.name} (ID: {r.customer_id}) - Score: {r.credit_score}" for r in high_risk
    )
    lines.append("-" * WIDTH)
    return "\n".join(lines)


def render_rejected_records(rejected: List[RecordOutcome]) -> str:
    """List records skipped as invalid; empty string when there are none"""
    if not rejected:
        return ""

    lines = ["", f"SKIPPED INVALID RECORDS: {len(rejected)}", "-" * WIDTH]
    lines.extend(
        f"  * Record #{o.index} (ID: {o.customer_id}) - {o.error}" for o in rejected
    )
    lines.append("-" * WIDTH)
    return "\n".join(lines)
