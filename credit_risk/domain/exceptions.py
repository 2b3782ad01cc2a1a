"""Domain-specific exceptions"""

from typing import Optional


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidArgumentError(DomainException, ValueError):
    """Scoring input is out of range or a customer profile is invalid"""

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class CustomerDataNotFoundError(DomainException):
    """Customer data source does not exist"""

    pass


class CustomerDataFormatError(DomainException):
    """Customer data source is malformed"""

    pass
