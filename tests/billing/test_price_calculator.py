"""Tests for VAT-aware price calculation."""

import pytest
from decimal import Decimal

from store_products.billing.models import ProductTax
from store_products.billing.price_calculator import PriceCalculator
from store_products.core.errors import InvalidArgumentError


def test_excluding_vat_returns_base_price():
    calculator = PriceCalculator(prices_include_vat=False)
    taxes = [ProductTax("VAT", Decimal("25"))]
    assert calculator.calculate_price(Decimal("100"), taxes) == Decimal("100")


def test_including_vat_single_tax():
    calculator = PriceCalculator(prices_include_vat=True)
    taxes = [ProductTax("VAT", Decimal("25"))]
    assert calculator.calculate_price(Decimal("100"), taxes) == Decimal("125")


def test_no_taxes_leaves_price_unchanged():
    calculator = PriceCalculator(prices_include_vat=True)
    assert calculator.calculate_price(Decimal("9.99"), []) == Decimal("9.99")
    assert calculator.calculate_price(Decimal("9.99"), None) == Decimal("9.99")


def test_cumulative_taxes_compound_in_order():
    """Second tax is charged on price plus the first tax."""
    calculator = PriceCalculator(prices_include_vat=True)
    taxes = [
        ProductTax("GST", Decimal("10")),
        ProductTax("QST", Decimal("10")),
    ]
    # 100 + 10 = 110; 110 * 10% = 11
    assert calculator.calculate_tax(Decimal("100"), taxes) == Decimal("21")
    assert calculator.calculate_price(Decimal("100"), taxes) == Decimal("121")


def test_non_cumulative_tax_uses_base_price():
    calculator = PriceCalculator(prices_include_vat=True)
    taxes = [
        ProductTax("GST", Decimal("10")),
        ProductTax("PST", Decimal("7"), cumulative=False),
    ]
    assert calculator.calculate_price(Decimal("100"), taxes) == Decimal("117")


def test_decimal_precision_kept():
    calculator = PriceCalculator(prices_include_vat=True)
    taxes = [ProductTax("VAT", Decimal("12.5"))]
    assert calculator.calculate_price(Decimal("0.10"), taxes) == Decimal("0.1125")


def test_negative_price_rejected():
    calculator = PriceCalculator(prices_include_vat=False)
    with pytest.raises(InvalidArgumentError, match="must not be negative"):
        calculator.calculate_price(Decimal("-1"), [])


def test_negative_tax_rejected():
    calculator = PriceCalculator(prices_include_vat=True)
    with pytest.raises(InvalidArgumentError, match="negative percent"):
        calculator.calculate_price(Decimal("10"), [ProductTax("Bad", Decimal("-5"))])
