"""
Naive customer model built from two independent booleans

Kept as a negative example: nothing stops a customer from being eligible
without being registered.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .customer import validate_customer_id, validate_flag
from .discount import DISCOUNT_RATE, DISCOUNT_THRESHOLD, validate_spend
from .exceptions import UnreachableVariantError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NaiveCustomer:
    """
    Customer with eligibility and registration as separate flags

    Attributes:
        id: customer identifier
        is_eligible: eligible for the loyalty discount
        is_registered: has registered an account
    """
    id: str
    is_eligible: bool
    is_registered: bool

    def __post_init__(self):
        validate_customer_id(self.id)
        validate_flag("is_eligible", self.is_eligible)
        validate_flag("is_registered", self.is_registered)

    @property
    def is_illegal(self) -> bool:
        """Eligible but not registered, which the business rules forbid"""
        return self.is_eligible and not self.is_registered


def _require_naive(customer) -> NaiveCustomer:
    if not isinstance(customer, NaiveCustomer):
        raise UnreachableVariantError(
            f"Unknown customer variant: {type(customer).__name__}"
        )
    return customer


def calculate_total(customer: NaiveCustomer, spend: Union[Decimal, int]) -> Decimal:
    """
    Calculate the total, checking both flags

    Correct only as long as every caller remembers the registration check.
    """
    _require_naive(customer)
    amount = validate_spend(spend)
    if customer.is_eligible and customer.is_registered and amount >= DISCOUNT_THRESHOLD:
        return amount * (1 - DISCOUNT_RATE)
    return amount


def calculate_total_unchecked(customer: NaiveCustomer, spend: Union[Decimal, int]) -> Decimal:
    """
    Calculate the total without the registration check

    DEFECTIVE on purpose: an eligible but unregistered customer is granted
    the discount.
    """
    _require_naive(customer)
    amount = validate_spend(spend)
    if customer.is_illegal:
        logger.debug(f"Discounting illegal customer state: {customer!r}")
    if customer.is_eligible and amount >= DISCOUNT_THRESHOLD:
        return amount * (1 - DISCOUNT_RATE)
    return amount


def classification(customer: NaiveCustomer) -> str:
    """Label for the flag combination"""
    _require_naive(customer)
    if customer.is_eligible and customer.is_registered:
        return "Eligible + Registered"
    if customer.is_registered:
        return "Registered"
    if customer.is_eligible:
        return "Eligible but NOT Registered"
    return "Guest"
