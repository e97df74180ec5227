"""
Discount rules over the customer variants
"""

import logging
from decimal import Decimal
from typing import Union

from .customer import Customer, Eligible, Registered, Guest
from .exceptions import InvalidSpendError, UnreachableVariantError

logger = logging.getLogger(__name__)

# Fixed business rule: 10% off at or above 100
DISCOUNT_THRESHOLD = Decimal("100")
DISCOUNT_RATE = Decimal("0.10")

# Extra reduction applied on top of the discounted total for eligible customers
BONUS_RATE = Decimal("0.05")


def validate_spend(spend: Union[Decimal, int]) -> Decimal:
    """
    Normalize a spend amount to Decimal

    Accepts Decimal and int. Floats are refused since they cannot hold
    currency amounts exactly.

    Returns the spend as a Decimal
    """
    # bool is a subclass of int
    if isinstance(spend, bool) or not isinstance(spend, (Decimal, int)):
        raise InvalidSpendError(
            f"Spend must be a Decimal or int, got {type(spend).__name__}"
        )

    amount = Decimal(spend)
    if not amount.is_finite():
        raise InvalidSpendError(f"Spend must be a finite amount, got {amount}")
    if amount < 0:
        raise InvalidSpendError(f"Spend must not be negative, got {amount}")
    return amount


def _unreachable(customer) -> UnreachableVariantError:
    return UnreachableVariantError(
        f"Unknown customer variant: {type(customer).__name__}"
    )


def calculate_total(customer: Customer, spend: Union[Decimal, int]) -> Decimal:
    """
    Calculate the total a customer pays for a given spend

    Eligible customers get DISCOUNT_RATE off when spending at least
    DISCOUNT_THRESHOLD. Everyone else pays the spend unchanged.
    """
    amount = validate_spend(spend)

    if isinstance(customer, Eligible):
        if amount >= DISCOUNT_THRESHOLD:
            total = amount * (1 - DISCOUNT_RATE)
        else:
            total = amount
    elif isinstance(customer, (Registered, Guest)):
        total = amount
    else:
        raise _unreachable(customer)

    logger.debug(f"Total for {customer!r} spending {amount}: {total}")
    return total


def calculate_with_bonus(customer: Customer, spend: Union[Decimal, int]) -> Decimal:
    """
    Calculate the total with the extra bonus reduction for eligible customers

    The bonus is applied to the already discounted total.
    """
    base_total = calculate_total(customer, spend)

    if isinstance(customer, Eligible):
        return base_total * (1 - BONUS_RATE)
    return base_total


def describe_customer(customer: Customer) -> str:
    """Human readable label for a customer"""
    if isinstance(customer, Eligible):
        return f"VIP Customer: {customer.id}"
    elif isinstance(customer, Registered):
        return f"Regular Customer: {customer.id}"
    elif isinstance(customer, Guest):
        return f"Guest: {customer.id}"
    raise _unreachable(customer)


def classification(customer: Customer) -> str:
    """Variant name used in demo output"""
    if isinstance(customer, Eligible):
        return "Eligible"
    elif isinstance(customer, Registered):
        return "Registered"
    elif isinstance(customer, Guest):
        return "Guest"
    raise _unreachable(customer)
