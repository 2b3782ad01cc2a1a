"""Customer data loading from JSON files"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from credit_risk.domain.exceptions import CustomerDataFormatError, CustomerDataNotFoundError
from credit_risk.domain.models import CustomerProfile
from credit_risk.infrastructure.storage.models import CustomerRecord

logger = logging.getLogger(__name__)

_customer_list = TypeAdapter(Optional[List[CustomerRecord]])


def parse_customers(raw: Union[str, bytes]) -> List[CustomerProfile]:
    """
    Parse a JSON array of customer records.

    A JSON null document yields an empty list.

    Raises:
        CustomerDataFormatError: malformed JSON or records of the wrong shape
    """
    try:
        records = _customer_list.validate_json(raw)
    except ValidationError as e:
        raise CustomerDataFormatError(f"Invalid customer data: {e.error_count()} error(s)") from e

    return [record.to_domain() for record in records or []]


def load_customers(path: Union[str, Path]) -> List[CustomerProfile]:
    """
    Load customer profiles from a JSON file.

    Raises:
        CustomerDataNotFoundError: file does not exist
        CustomerDataFormatError: file contents are not a customer list
    """
    path = Path(path)
    if not path.is_file():
        raise CustomerDataNotFoundError(f"Customer data file not found: {path}")

    customers = parse_customers(path.read_bytes())
    logger.info("Customer data loaded", extra={"path": str(path), "customer_count": len(customers)})
    return customers
