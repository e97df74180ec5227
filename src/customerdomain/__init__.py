__version__ = "0.1.0"

# Package metadata
__description__ = "Customer discount demos: making illegal states unrepresentable with variants"

# Public API
from .customer import (
    Customer,
    Eligible,
    Registered,
    Guest,
    CUSTOMER_VARIANTS,
    new_eligible,
    new_registered,
    new_guest,
    customer_id,
    is_eligible,
)
from .discount import (
    DISCOUNT_THRESHOLD,
    DISCOUNT_RATE,
    BONUS_RATE,
    calculate_total,
    calculate_with_bonus,
    describe_customer,
    classification,
)
from .demos import DemoName, DemoLine, DemoReport, run_demo
from .formatter import DemoFormatter, format_money, format_line
from .exceptions import (
    CustomerDomainError,
    UnreachableVariantError,
    InvalidSpendError,
    InvalidCustomerError,
    DemoNotFoundError,
    FormattingError
)

__all__ = [
    # Version
    "__version__",

    # Customer model
    "Customer",
    "Eligible",
    "Registered",
    "Guest",
    "CUSTOMER_VARIANTS",
    "new_eligible",
    "new_registered",
    "new_guest",
    "customer_id",
    "is_eligible",

    # Discount rules
    "DISCOUNT_THRESHOLD",
    "DISCOUNT_RATE",
    "BONUS_RATE",
    "calculate_total",
    "calculate_with_bonus",
    "describe_customer",
    "classification",

    # Demos and output
    "DemoName",
    "DemoLine",
    "DemoReport",
    "run_demo",
    "DemoFormatter",
    "format_money",
    "format_line",

    # Exceptions
    "CustomerDomainError",
    "UnreachableVariantError",
    "InvalidSpendError",
    "InvalidCustomerError",
    "DemoNotFoundError",
    "FormattingError"
]
