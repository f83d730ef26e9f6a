"""
Billing product service integration.

Provides:
- BillingProduct models parsed from the public billing API
- ProductMapper: billing product -> storefront product
- PriceCalculator: VAT-aware price calculation
- BillingApiClient / ProductsProvider: retrieval plus mapping
"""

from store_products.billing.models import (
    BillingProduct,
    MultilanguageText,
    ProductPrice,
    ProductRenewalPeriod,
    ProductTax,
)
from store_products.billing.price_calculator import PriceCalculator
from store_products.billing.mapper import ProductMapper, MappingResult
from store_products.billing.client import BillingApiClient, create_billing_client
from store_products.billing.provider import ProductsProvider

__all__ = [
    "BillingProduct",
    "MultilanguageText",
    "ProductPrice",
    "ProductRenewalPeriod",
    "ProductTax",
    "PriceCalculator",
    "ProductMapper",
    "MappingResult",
    "BillingApiClient",
    "create_billing_client",
    "ProductsProvider",
]
