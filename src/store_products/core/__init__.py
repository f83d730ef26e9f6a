"""Core infrastructure: configuration, schema, preferences, errors."""

from store_products.core.config import (
    validate_config,
    get_config_summary,
    BILLING_API_URL,
    STORE_DEFAULT_CURRENCY,
    STORE_DEFAULT_LANGUAGE,
)
from store_products.core.errors import (
    ProductMappingError,
    InvalidArgumentError,
    PriceNotFoundError,
    BillingAPIError,
)
from store_products.core.preferences import (
    Language,
    LanguagePreferenceProvider,
    CurrencyPreferenceProvider,
    VatDisplayPreferenceProvider,
    ConfiguredPreferences,
)
from store_products.core.schema import (
    Product,
    PricingVariant,
    RenewalPeriod,
    CustomAttribute,
    dataclass_to_dict,
    to_json,
)

__all__ = [
    "validate_config",
    "get_config_summary",
    "BILLING_API_URL",
    "STORE_DEFAULT_CURRENCY",
    "STORE_DEFAULT_LANGUAGE",
    "ProductMappingError",
    "InvalidArgumentError",
    "PriceNotFoundError",
    "BillingAPIError",
    "Language",
    "LanguagePreferenceProvider",
    "CurrencyPreferenceProvider",
    "VatDisplayPreferenceProvider",
    "ConfiguredPreferences",
    "Product",
    "PricingVariant",
    "RenewalPeriod",
    "CustomAttribute",
    "dataclass_to_dict",
    "to_json",
]
