"""
Command-line entry point: load customers, evaluate, print and save the report.

Usage:
    credit-risk --input Data/customers.json --reports-dir Reports
    python -m credit_risk --skip-invalid --no-save
"""

import argparse
import logging
import sys
import uuid
from typing import List, Optional

from credit_risk.assessment import assess_customers
from credit_risk.config import settings
from credit_risk.domain.exceptions import DomainException
from credit_risk.infrastructure.observability.logging import setup_logging
from credit_risk.infrastructure.storage.customers import load_customers
from credit_risk.infrastructure.storage.reports import save_timestamped_report
from credit_risk.presentation.console import (
    render_console_report,
    render_high_risk_alert,
    render_rejected_records,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="credit-risk",
        description="Score customers and produce a credit risk report",
    )
    parser.add_argument("--input", default=settings.customer_data_path, help="Customer data JSON file")
    parser.add_argument("--reports-dir", default=settings.reports_dir, help="Directory for JSON reports")
    parser.add_argument(
        "--skip-invalid",
        action=argparse.BooleanOptionalAction,
        default=settings.skip_invalid_customers,
        help="Skip invalid customer records instead of aborting the batch (default from SKIP_INVALID_CUSTOMERS)",
    )
    parser.add_argument("--no-save", action="store_true", help="Do not write a JSON report")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level.upper())
    request_id = str(uuid.uuid4())

    try:
        print("Loading customer data...")
        customers = load_customers(args.input)

        if not customers:
            print("No customers found in data file.")
            return 0

        print(f"Loaded {len(customers)} customers.")
        print("\nEvaluating customer credit scores...")
        assessment = assess_customers(customers, request_id, skip_invalid=args.skip_invalid)

        print(render_console_report(assessment.results))

        alert = render_high_risk_alert(assessment.results)
        if alert:
            print(alert)

        skipped = render_rejected_records(assessment.rejected)
        if skipped:
            print(skipped)

        if not args.no_save:
            path = save_timestamped_report(assessment.results, args.reports_dir)
            print(f"Report saved successfully to: {path}")

    except DomainException as e:
        logger.error(f"Assessment failed: {e}", extra={"request_id": request_id})
        print(f"\nApplication Error: {e}")
        return 1

    except OSError as e:
        logger.error(f"File error: {e}", extra={"request_id": request_id})
        print(f"\nApplication Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
