"""
store_products - Billing product normalization for the storefront

Maps product records from the billing product service into localized,
currency- and VAT-aware storefront products.
"""

__version__ = "1.0.0"

from store_products.billing.mapper import ProductMapper, MappingResult
from store_products.billing.models import BillingProduct
from store_products.core.schema import Product, PricingVariant, RenewalPeriod, CustomAttribute
from store_products.core.preferences import ConfiguredPreferences, Language
from store_products.core.errors import InvalidArgumentError, PriceNotFoundError

__all__ = [
    "ProductMapper",
    "MappingResult",
    "BillingProduct",
    "Product",
    "PricingVariant",
    "RenewalPeriod",
    "CustomAttribute",
    "ConfiguredPreferences",
    "Language",
    "InvalidArgumentError",
    "PriceNotFoundError",
]
