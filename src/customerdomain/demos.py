"""
Demo runs for each iteration of the customer model

Every demo builds its customers from the same sample table and returns a
DemoReport, leaving presentation to the formatter.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Callable, Dict, List, NamedTuple, Optional, Union

from . import customer as final_model
from . import discount
from . import flagged_model
from . import naive_model
from .exceptions import DemoNotFoundError

logger = logging.getLogger(__name__)


class DemoName(str, Enum):
    """Available demos, in teaching order"""
    NAIVE = "naive"
    FLAGGED = "flagged"
    FINAL = "final"


class SampleCustomer(NamedTuple):
    """One row of the sample table"""
    name: str
    is_eligible: bool
    is_registered: bool
    spend: Decimal
    expected: Optional[Decimal]


# Grinch is eligible without being registered, so no total is defined
SAMPLE_CUSTOMERS = [
    SampleCustomer("John", True, True, Decimal("100"), Decimal("90")),
    SampleCustomer("Mary", True, True, Decimal("99"), Decimal("99")),
    SampleCustomer("Richard", False, True, Decimal("100"), Decimal("100")),
    SampleCustomer("Sarah", False, False, Decimal("100"), Decimal("100")),
    SampleCustomer("Grinch", True, False, Decimal("100"), None),
]


@dataclass
class DemoLine:
    """
    A single computed total

    Attributes:
        name: customer name
        classification: how the model classifies the customer
        spend: amount spent
        total: amount charged after discounts
        expected: total the business expects, None when undefined
    """
    name: str
    classification: str
    spend: Decimal
    total: Decimal
    expected: Optional[Decimal] = None

    @property
    def matches_expected(self) -> bool:
        """True when the total agrees with the expectation, or none is defined"""
        return self.expected is None or self.total == self.expected


@dataclass
class DemoReport:
    """
    Result of running one demo

    Attributes:
        title: demo heading
        tagline: one-line summary of what the iteration shows
        lines: computed totals
        sections: extra headed groups of lines or text, in display order
        notes: closing remarks
    """
    title: str
    tagline: str
    lines: List[DemoLine] = field(default_factory=list)
    sections: Dict[str, List[Union[str, DemoLine]]] = field(default_factory=OrderedDict)
    notes: List[str] = field(default_factory=list)

    @property
    def mismatches(self) -> List[DemoLine]:
        return [line for line in self.lines if not line.matches_expected]


def _final_customer(sample: SampleCustomer) -> final_model.Customer:
    if sample.is_eligible:
        return final_model.new_eligible(sample.name)
    if sample.is_registered:
        return final_model.new_registered(sample.name)
    return final_model.new_guest(sample.name)


def _flagged_customer(sample: SampleCustomer) -> flagged_model.FlaggedCustomer:
    if sample.is_registered:
        return flagged_model.new_registered(sample.name, sample.is_eligible)
    return flagged_model.new_guest(sample.name)


def _legal_samples() -> List[SampleCustomer]:
    return [sample for sample in SAMPLE_CUSTOMERS if not (sample.is_eligible and not sample.is_registered)]


def run_naive_demo() -> DemoReport:
    """Boolean flags: the illegal Grinch state is constructible"""
    report = DemoReport(
        title="Iteration 0: Naive Model",
        tagline="Problem: can create illegal states!",
    )

    for sample in SAMPLE_CUSTOMERS:
        customer = naive_model.NaiveCustomer(sample.name, sample.is_eligible, sample.is_registered)
        report.lines.append(DemoLine(
            name=sample.name,
            classification=naive_model.classification(customer),
            spend=sample.spend,
            total=naive_model.calculate_total(customer, sample.spend),
            expected=sample.expected,
        ))

    # Same customers through the calculator that forgets the registration check
    unchecked = []
    for sample in SAMPLE_CUSTOMERS:
        customer = naive_model.NaiveCustomer(sample.name, sample.is_eligible, sample.is_registered)
        line = DemoLine(
            name=sample.name,
            classification=naive_model.classification(customer),
            spend=sample.spend,
            total=naive_model.calculate_total_unchecked(customer, sample.spend),
            expected=sample.expected,
        )
        unchecked.append(line)
    report.sections["Without the registration check (defective)"] = unchecked

    report.notes.append("Grinch is eligible but NOT registered. This shouldn't be possible!")
    report.notes.append("The type system doesn't prevent it, and the unchecked calculator grants a discount.")
    return report


def run_flagged_demo() -> DemoReport:
    """Variants with an eligibility flag: guests can no longer be eligible"""
    report = DemoReport(
        title="Iteration 1: Union with Boolean Flag",
        tagline="Better: can't be eligible without being registered!",
    )

    for sample in _legal_samples():
        customer = _flagged_customer(sample)
        report.lines.append(DemoLine(
            name=sample.name,
            classification=flagged_model.classification(customer),
            spend=sample.spend,
            total=flagged_model.calculate_total(customer, sample.spend),
            expected=sample.expected,
        ))

    report.notes.append("Improvement: a Guest doesn't even HAVE is_eligible.")
    report.notes.append("Grinch can't be built: Guest(id, is_eligible=True) is a TypeError.")
    return report


def run_final_demo() -> DemoReport:
    """Eligibility as its own variant: no flags left to check"""
    report = DemoReport(
        title="Customer Discount System: Final Version",
        tagline="Best: eligibility is explicit in the type!",
    )

    customers = {}
    for sample in _legal_samples():
        customer = _final_customer(sample)
        customers[sample.name] = customer
        report.lines.append(DemoLine(
            name=sample.name,
            classification=discount.classification(customer),
            spend=sample.spend,
            total=discount.calculate_total(customer, sample.spend),
            expected=sample.expected,
        ))

    report.sections["Pattern Matching"] = [
        discount.describe_customer(customers[name])
        for name in ("John", "Richard", "Sarah")
    ]

    john_bonus = DemoLine(
        name="John with bonus",
        classification=discount.classification(customers["John"]),
        spend=Decimal("100"),
        total=discount.calculate_with_bonus(customers["John"], Decimal("100")),
        expected=Decimal("85.50"),
    )
    report.sections["Bonus Calculation"] = [john_bonus]

    alice = final_model.new_eligible("Alice")
    alice_total = discount.calculate_total(alice, Decimal("150"))
    report.sections["Accessors"] = [
        f"Customer {final_model.customer_id(alice)} "
        f"(Eligible: {final_model.is_eligible(alice)}) spends £150.00: £{alice_total:.2f}"
    ]

    report.notes.append("No booleans to check. No illegal states possible.")
    return report


DEMOS: Dict[DemoName, Callable[[], DemoReport]] = OrderedDict([
    (DemoName.NAIVE, run_naive_demo),
    (DemoName.FLAGGED, run_flagged_demo),
    (DemoName.FINAL, run_final_demo),
])


def run_demo(name: Union[DemoName, str]) -> DemoReport:
    """
    Run a demo by name

    Raises DemoNotFoundError if the name is unknown
    """
    try:
        demo_name = DemoName(name)
    except ValueError:
        available = ", ".join(demo.value for demo in DemoName)
        raise DemoNotFoundError(f"Unknown demo '{name}'. Available: {available}")

    logger.debug(f"Running demo: {demo_name.value}")
    return DEMOS[demo_name]()
