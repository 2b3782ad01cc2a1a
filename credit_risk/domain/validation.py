"""Customer profile validation"""

from numbers import Real

from credit_risk.domain.models import CustomerProfile


def is_percentage(value: float) -> bool:
    """True when value is a number in [0, 100]; NaN is rejected"""
    return isinstance(value, Real) and 0 <= value <= 100


def is_valid(profile: CustomerProfile) -> bool:
    """
    Check a profile before scoring.

    Valid when the name has non-whitespace content, payment history and
    credit utilization are percentages and credit history age is a
    non-negative number. Never raises.
    """
    if not isinstance(profile.name, str) or not profile.name.strip():
        return False

    return (
        is_percentage(profile.payment_history)
        and is_percentage(profile.credit_utilization)
        and isinstance(profile.age_of_credit_history, Real)
        and profile.age_of_credit_history >= 0
    )
