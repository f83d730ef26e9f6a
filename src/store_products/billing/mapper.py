"""
Product Mapper

Maps products from the billing product service to storefront products.

The mapper captures the visitor's language, currency and VAT display mode
once, at construction, and then maps any number of billing products with
them. Mapping is pure: nothing is cached per product and nothing is logged
above DEBUG, so failures are left to the caller to report.

Usage:
    from store_products.billing.mapper import ProductMapper
    from store_products.core.preferences import ConfiguredPreferences

    preferences = ConfiguredPreferences(language="sv-SE", currency="SEK")
    mapper = ProductMapper(preferences, preferences, preferences)
    product = mapper.map(billing_product)
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional

from store_products.billing.models import BillingProduct, MultilanguageText, ProductPrice, ProductTax
from store_products.billing.price_calculator import PriceCalculator
from store_products.core.errors import InvalidArgumentError, ProductMappingError, PriceNotFoundError
from store_products.core.preferences import (
    CurrencyPreferenceProvider,
    LanguagePreferenceProvider,
    VatDisplayPreferenceProvider,
)
from store_products.core.schema import CustomAttribute, PricingVariant, Product, RenewalPeriod

logger = logging.getLogger(__name__)


@dataclass
class MappingResult:
    """Outcome of ProductMapper.try_map: either a product or the error that stopped it."""
    product: Optional[Product] = None
    error: Optional[ProductMappingError] = None

    @property
    def success(self) -> bool:
        return self.error is None


class ProductMapper:
    """Maps billing products to storefront products for one set of preferences."""

    def __init__(
        self,
        language_preference_provider: LanguagePreferenceProvider,
        currency_preference_provider: CurrencyPreferenceProvider,
        vat_display_preference_provider: VatDisplayPreferenceProvider
    ):
        """
        Query each provider once and keep the answers for the mapper's lifetime.

        Raises:
            InvalidArgumentError: If any provider is None
        """
        if language_preference_provider is None:
            raise InvalidArgumentError("language_preference_provider is required", argument="language_preference_provider")

        if currency_preference_provider is None:
            raise InvalidArgumentError("currency_preference_provider is required", argument="currency_preference_provider")

        if vat_display_preference_provider is None:
            raise InvalidArgumentError("vat_display_preference_provider is required", argument="vat_display_preference_provider")

        language = language_preference_provider.get_current_language()
        self._primary_tag = language.primary_tag.upper()
        self._region_tag = language.region_tag.upper()
        self._currency_code = currency_preference_provider.get_current_currency()
        self._prices_include_vat = vat_display_preference_provider.show_prices_including_vat()
        self._price_calculator = PriceCalculator(self._prices_include_vat)

    @property
    def currency_code(self) -> str:
        return self._currency_code

    @property
    def prices_include_vat(self) -> bool:
        return self._prices_include_vat

    # =========================================================================
    # Mapping
    # =========================================================================

    def map(self, billing_product: BillingProduct) -> Product:
        """
        Map a billing product to a storefront product.

        Raises:
            PriceNotFoundError: If any price list the product is priced from
                lacks the current currency
        """
        return Product(
            article_number=billing_product.article_number,
            category=billing_product.category,
            name=self._localize(billing_product.name, billing_product.multilanguage_names),
            description=self._localize(billing_product.description, billing_product.multilanguage_descriptions),
            pricing_variants=self._pricing_variants(billing_product),
            custom_attributes=[
                CustomAttribute(name=key, value=value)
                for key, value in billing_product.properties.items()
            ],
        )

    def try_map(self, billing_product: BillingProduct) -> MappingResult:
        """Like map, but returns the mapping error instead of raising it."""
        try:
            return MappingResult(product=self.map(billing_product))
        except ProductMappingError as e:
            return MappingResult(error=e)

    def map_all(self, billing_products: Iterable[BillingProduct]) -> List[Product]:
        """Map products in order; the first failure aborts the whole batch."""
        return [self.map(p) for p in billing_products]

    # =========================================================================
    # Localization
    # =========================================================================

    def _localize(self, default: str, translations: Optional[List[MultilanguageText]]) -> str:
        """
        Pick the translation for the current language.

        A translation matching language and region wins over the first
        translation matching the language only; with neither, the unlocalized
        default is kept. Source order decides between equal candidates.
        """
        if not translations:
            return default

        candidates = [t for t in translations if (t.language_iso639_name or "").upper() == self._primary_tag]
        if not candidates:
            return default

        for candidate in candidates:
            if (candidate.language_culture or "").upper() == self._region_tag:
                return candidate.value

        logger.debug(f"No {self._primary_tag}-{self._region_tag} translation, using {candidates[0].language_culture or 'neutral'}")
        return candidates[0].value

    # =========================================================================
    # Pricing
    # =========================================================================

    def _pricing_variants(self, billing_product: BillingProduct) -> List[PricingVariant]:
        taxes = billing_product.taxes

        if billing_product.renewal_periods:
            return [
                PricingVariant(
                    price=self._get_price(period.prices, taxes, billing_product.article_number),
                    renewal_period=RenewalPeriod(period.renewal_period_value, period.renewal_period_unit),
                )
                for period in billing_product.renewal_periods
            ]

        return [
            PricingVariant(
                price=self._get_price(billing_product.prices, taxes, billing_product.article_number),
                renewal_period=None,
            )
        ]

    def _get_price(
        self,
        prices: Optional[List[ProductPrice]],
        taxes: Optional[List[ProductTax]],
        article_number: str
    ) -> Decimal:
        """Price in the current currency, with or without taxes applied."""
        price = next((p for p in prices or [] if p.currency_code == self._currency_code), None)
        if price is None:
            raise PriceNotFoundError(self._currency_code, article_number=article_number)

        return self._price_calculator.calculate_price(price.value, taxes)
