"""
Customer model with eligibility expressed as a variant

A customer is exactly one of Eligible, Registered or Guest. None of the
variants carries an eligibility or registration flag, so an eligible guest
cannot be built.
"""

from dataclasses import dataclass
from typing import Union

from .exceptions import InvalidCustomerError, UnreachableVariantError


def validate_customer_id(customer_id: str) -> str:
    """
    Check that a customer id is a non-empty string

    Returns the id unchanged so it can be used inline.
    """
    if not isinstance(customer_id, str):
        raise InvalidCustomerError(
            f"Customer id must be a string, got {type(customer_id).__name__}"
        )
    if not customer_id.strip():
        raise InvalidCustomerError("Customer id must not be empty")
    return customer_id


def validate_flag(name: str, value: bool) -> bool:
    """
    Check that a customer flag is a real bool

    Truthy strings such as "False" would otherwise read as set.
    """
    if not isinstance(value, bool):
        raise InvalidCustomerError(
            f"Customer flag {name} must be a bool, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class Eligible:
    """Registered customer who qualifies for the loyalty discount"""
    id: str

    def __post_init__(self):
        validate_customer_id(self.id)


@dataclass(frozen=True)
class Registered:
    """Registered customer who does not qualify for the discount"""
    id: str

    def __post_init__(self):
        validate_customer_id(self.id)


@dataclass(frozen=True)
class Guest:
    """Unregistered customer, the discount is out of reach"""
    id: str

    def __post_init__(self):
        validate_customer_id(self.id)


Customer = Union[Eligible, Registered, Guest]

CUSTOMER_VARIANTS = (Eligible, Registered, Guest)


def new_eligible(customer_id: str) -> Eligible:
    """Create a registered customer eligible for the discount"""
    return Eligible(customer_id)


def new_registered(customer_id: str) -> Registered:
    """Create a registered customer without the discount"""
    return Registered(customer_id)


def new_guest(customer_id: str) -> Guest:
    """Create an unregistered customer"""
    return Guest(customer_id)


def customer_id(customer: Customer) -> str:
    """
    Get the id of any customer variant

    Raises UnreachableVariantError for anything that is not a customer.
    """
    if isinstance(customer, Eligible):
        return customer.id
    elif isinstance(customer, Registered):
        return customer.id
    elif isinstance(customer, Guest):
        return customer.id
    raise UnreachableVariantError(
        f"Unknown customer variant: {type(customer).__name__}"
    )


def is_eligible(customer: Customer) -> bool:
    """Check whether the customer is the Eligible variant"""
    if not isinstance(customer, CUSTOMER_VARIANTS):
        raise UnreachableVariantError(
            f"Unknown customer variant: {type(customer).__name__}"
        )
    return isinstance(customer, Eligible)
