"""
Tests for the variants with an eligibility flag
"""

import dataclasses
from decimal import Decimal

import pytest

from customerdomain.flagged_model import (
    Registered,
    Guest,
    new_registered,
    new_guest,
    calculate_total,
    classification,
)
from customerdomain.exceptions import InvalidCustomerError, UnreachableVariantError


class TestFlaggedModel:
    """Test cases for the flagged model"""

    def setup_method(self):
        """Set up test fixtures"""
        self.john = new_registered("John", is_eligible=True)
        self.mary = new_registered("Mary", is_eligible=True)
        self.richard = new_registered("Richard", is_eligible=False)
        self.sarah = new_guest("Sarah")

    def test_guest_has_no_eligibility(self):
        """An eligible guest cannot be built"""
        assert [f.name for f in dataclasses.fields(Guest)] == ["id"]
        with pytest.raises(TypeError):
            Guest("Grinch", is_eligible=True)

    def test_registered_keeps_flag(self):
        """Eligibility is still a boolean on registered customers"""
        assert isinstance(self.john, Registered)
        assert self.john.is_eligible is True
        assert self.richard.is_eligible is False

    def test_totals(self):
        """Same business rule as the other iterations"""
        assert calculate_total(self.john, Decimal("100")) == Decimal("90")
        assert calculate_total(self.mary, Decimal("99")) == Decimal("99")
        assert calculate_total(self.richard, Decimal("100")) == Decimal("100")
        assert calculate_total(self.sarah, Decimal("100")) == Decimal("100")

    def test_classification(self):
        """Labels include the flag"""
        assert classification(self.john) == "Registered, Eligible"
        assert classification(self.richard) == "Registered, NOT Eligible"
        assert classification(self.sarah) == "Guest"

    def test_unknown_variant(self):
        """Values outside the two variants raise"""
        with pytest.raises(UnreachableVariantError):
            calculate_total({"id": "Grinch"}, Decimal("100"))

        with pytest.raises(UnreachableVariantError):
            classification("Grinch")

    @pytest.mark.parametrize("flag", ["False", "", 0, None])
    def test_eligibility_must_be_bool(self, flag):
        """A string "False" must not read as eligible"""
        with pytest.raises(InvalidCustomerError):
            new_registered("Grinch", flag)

    def test_false_flag_denies_discount(self):
        """A real False keeps the full price"""
        grinch = new_registered("Grinch", False)
        assert calculate_total(grinch, Decimal("100")) == Decimal("100")
