"""
Price calculation with or without VAT.

Billing prices are stored excluding tax. When the storefront displays prices
including VAT, the product's tax schedule is applied in list order:
cumulative taxes are charged on the running total, non-cumulative taxes on
the base price only.
"""

from decimal import Decimal
from typing import Iterable, Optional

from store_products.billing.models import ProductTax
from store_products.core.errors import InvalidArgumentError


class PriceCalculator:
    """Turns a base price and a tax schedule into a display price."""

    def __init__(self, prices_include_vat: bool):
        self.prices_include_vat = prices_include_vat

    def calculate_tax(self, base_price: Decimal, taxes: Optional[Iterable[ProductTax]]) -> Decimal:
        """
        Total tax charged on base_price by the schedule.

        Raises:
            InvalidArgumentError: If the price or any tax percent is negative
        """
        if base_price < 0:
            raise InvalidArgumentError(f"Price must not be negative: {base_price}", argument="base_price")

        total_tax = Decimal("0")
        for tax in taxes or []:
            if tax.percent < 0:
                raise InvalidArgumentError(f"Tax '{tax.name}' has negative percent {tax.percent}", argument="taxes")

            taxable = base_price + total_tax if tax.cumulative else base_price
            total_tax += taxable * tax.percent / Decimal(100)

        return total_tax

    def calculate_price(self, base_price: Decimal, taxes: Optional[Iterable[ProductTax]]) -> Decimal:
        """
        Price to display for base_price.

        Args:
            base_price: Price excluding tax, as stored in billing
            taxes: Ordered tax schedule of the product

        Returns:
            base_price plus taxes when showing prices including VAT,
            otherwise base_price unchanged
        """
        tax = self.calculate_tax(base_price, taxes)
        if self.prices_include_vat:
            return base_price + tax
        return base_price
