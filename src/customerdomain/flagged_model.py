"""
Customer variants with eligibility as a flag on registered customers

Guests have no eligibility field, so an eligible guest cannot be built.
Registered customers still carry a boolean that every rule has to check.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .customer import validate_customer_id, validate_flag
from .discount import DISCOUNT_RATE, DISCOUNT_THRESHOLD, validate_spend
from .exceptions import UnreachableVariantError


@dataclass(frozen=True)
class Registered:
    id: str
    is_eligible: bool

    def __post_init__(self):
        validate_customer_id(self.id)
        validate_flag("is_eligible", self.is_eligible)


@dataclass(frozen=True)
class Guest:
    id: str

    def __post_init__(self):
        validate_customer_id(self.id)


FlaggedCustomer = Union[Registered, Guest]


def new_registered(customer_id: str, is_eligible: bool) -> Registered:
    return Registered(customer_id, is_eligible)


def new_guest(customer_id: str) -> Guest:
    return Guest(customer_id)


def calculate_total(customer: FlaggedCustomer, spend: Union[Decimal, int]) -> Decimal:
    """Apply the discount to eligible registered customers at or above the threshold"""
    amount = validate_spend(spend)

    if isinstance(customer, Registered):
        if customer.is_eligible and amount >= DISCOUNT_THRESHOLD:
            return amount * (1 - DISCOUNT_RATE)
        return amount
    elif isinstance(customer, Guest):
        return amount
    raise UnreachableVariantError(
        f"Unknown customer variant: {type(customer).__name__}"
    )


def classification(customer: FlaggedCustomer) -> str:
    if isinstance(customer, Registered):
        return "Registered, Eligible" if customer.is_eligible else "Registered, NOT Eligible"
    elif isinstance(customer, Guest):
        return "Guest"
    raise UnreachableVariantError(
        f"Unknown customer variant: {type(customer).__name__}"
    )
