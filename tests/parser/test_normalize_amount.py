# -*- coding: utf-8 -*-
"""
Unit tests for normalize_amount module.
"""

from decimal import Decimal

import pytest

from app.parser.normalize_amount import (
    normalize_amount,
    normalize_attached_fraction,
    normalize_whole_plus_subunit,
)
from app.parser.types import AmountShape


class TestAttachedFraction:
    """123,20 р. style amounts"""

    def test_two_digits(self):
        assert normalize_attached_fraction("123", "20") == Decimal("123.20")

    def test_single_digit_is_tenths(self):
        """,5 -> 0.5, not 0.05"""
        assert normalize_attached_fraction("0", "5") == Decimal("0.5")
        assert normalize_attached_fraction("123", "5") == Decimal("123.50")

    def test_leading_zero_fraction(self):
        assert normalize_attached_fraction("123", "05") == Decimal("123.05")

    def test_two_places_when_fraction_present(self):
        assert str(normalize_attached_fraction("123", "2")) == "123.20"

    def test_empty_fraction_is_whole(self):
        value = normalize_attached_fraction("123", "")
        assert value == Decimal("123")
        assert str(value) == "123"

    def test_missing_fraction_is_whole(self):
        assert normalize_attached_fraction("7", None) == Decimal("7")

    def test_too_many_fraction_digits(self):
        with pytest.raises(ValueError):
            normalize_attached_fraction("1", "234")


class TestWholePlusSubunit:
    """123 руб 20 коп style amounts"""

    def test_whole_and_subunit(self):
        assert normalize_whole_plus_subunit("123", "20") == Decimal("123.20")

    def test_subunit_only(self):
        value = normalize_whole_plus_subunit(None, "5")
        assert value == Decimal("0.05")
        assert str(value) == "0.05"

    def test_whole_only(self):
        value = normalize_whole_plus_subunit("123", None)
        assert value == Decimal("123")
        assert str(value) == "123"

    def test_neither(self):
        with pytest.raises(ValueError):
            normalize_whole_plus_subunit(None, None)

    def test_subunit_out_of_range(self):
        with pytest.raises(ValueError):
            normalize_whole_plus_subunit("1", "100")


class TestNormalizeAmount:

    def test_shapes_agree(self):
        """123,20 and 123 руб 20 коп are the same amount"""
        attached = normalize_amount({"integer": "123", "fraction": "20"}, AmountShape.ATTACHED_FRACTION)
        subunit = normalize_amount({"integer": "123", "subunit": "20"}, AmountShape.WHOLE_PLUS_SUBUNIT)
        assert attached == subunit == Decimal("123.20")


class TestLongAmounts:
    """Integer parts longer than the default Decimal precision"""

    def test_attached_fraction_thirty_digits(self):
        value = normalize_attached_fraction("9" * 30, "20")
        assert value == Decimal("9" * 30 + ".20")
        assert str(value) == "9" * 30 + ".20"

    def test_attached_fraction_single_digit_thirty_digits(self):
        assert str(normalize_attached_fraction("9" * 30, "5")) == "9" * 30 + ".50"

    def test_whole_plus_subunit_thirty_digits(self):
        value = normalize_whole_plus_subunit("9" * 30, "20")
        assert str(value) == "9" * 30 + ".20"

    def test_whole_only_four_hundred_digits(self):
        """No int() round trip, so no limit on digit count"""
        assert str(normalize_whole_plus_subunit("9" * 400, None)) == "9" * 400
        assert str(normalize_attached_fraction("9" * 5000, "")) == "9" * 5000
