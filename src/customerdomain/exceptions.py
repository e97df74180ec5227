"""
Custom exceptions
"""


class CustomerDomainError(Exception):
    """Base exception"""
    pass


class UnreachableVariantError(CustomerDomainError):
    """A value outside the closed set of customer variants reached a dispatch"""
    pass


class InvalidSpendError(CustomerDomainError):
    """Spend is not a non-negative monetary amount"""
    pass


class InvalidCustomerError(CustomerDomainError):
    """Customer data failed validation at construction time"""
    pass


class DemoNotFoundError(CustomerDomainError):
    """Unknown demo requested"""
    pass


class FormattingError(CustomerDomainError):
    """Issues formatting output"""
    pass
