"""Date manipulation utilities"""

from datetime import datetime


def report_filename(moment: datetime) -> str:
    """File name for a report generated at moment, e.g. credit_report_20240131_154500.json"""
    return f"credit_report_{moment:%Y%m%d_%H%M%S}.json"
