"""
Storefront preference providers.

The product mapper needs three values that depend on the current visitor:
language, currency and whether prices are displayed including VAT. Each is
supplied by a single-method provider so that web, CLI and test callers can
plug in their own resolution.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from store_products.core import config
from store_products.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Language:
    """
    A storefront language.

    primary_tag: ISO 639 language code, e.g. "EN"
    region_tag: culture/region code, e.g. "US"
    Both are stored upper-cased; comparisons against them are case-insensitive.
    """
    primary_tag: str
    region_tag: str = ""

    def __post_init__(self):
        object.__setattr__(self, "primary_tag", (self.primary_tag or "").upper())
        object.__setattr__(self, "region_tag", (self.region_tag or "").upper())

    @classmethod
    def parse(cls, tag: str) -> "Language":
        """
        Parse a language tag such as "en-US", "sv_SE" or "de".

        Raises:
            InvalidArgumentError: If the tag is empty
        """
        cleaned = (tag or "").strip().replace("_", "-")
        if not cleaned:
            raise InvalidArgumentError("Language tag must not be empty", argument="tag")
        primary, _, region = cleaned.partition("-")
        return cls(primary_tag=primary, region_tag=region)

    def __str__(self) -> str:
        if self.region_tag:
            return f"{self.primary_tag.lower()}-{self.region_tag}"
        return self.primary_tag.lower()


# ============================================================================
# PROVIDER CONTRACTS
# ============================================================================

class LanguagePreferenceProvider(ABC):
    """Supplies the visitor's current language."""

    @abstractmethod
    def get_current_language(self) -> Language:
        pass


class CurrencyPreferenceProvider(ABC):
    """Supplies the visitor's current currency code."""

    @abstractmethod
    def get_current_currency(self) -> str:
        pass


class VatDisplayPreferenceProvider(ABC):
    """Decides whether prices are displayed including VAT."""

    @abstractmethod
    def show_prices_including_vat(self) -> bool:
        pass


# ============================================================================
# CONFIGURED PROVIDER
# ============================================================================

class ConfiguredPreferences(LanguagePreferenceProvider, CurrencyPreferenceProvider, VatDisplayPreferenceProvider):
    """
    Preferences fixed at construction, defaulting to the storefront configuration.

    Implements all three provider contracts, so one instance can be passed
    for each of the mapper's providers.
    """

    def __init__(
        self,
        language: Optional[str] = None,
        currency: Optional[str] = None,
        prices_include_vat: Optional[bool] = None
    ):
        """
        Args:
            language: Language tag like "en-US" (defaults to STORE_DEFAULT_LANGUAGE)
            currency: Currency code (defaults to STORE_DEFAULT_CURRENCY)
            prices_include_vat: VAT display mode (defaults to STORE_PRICES_INCLUDE_VAT)
        """
        self.language = Language.parse(language or config.STORE_DEFAULT_LANGUAGE)
        self.currency = (currency or config.STORE_DEFAULT_CURRENCY).strip().upper()
        if prices_include_vat is None:
            prices_include_vat = config.STORE_PRICES_INCLUDE_VAT
        self.prices_include_vat = prices_include_vat

        logger.debug(
            f"Preferences: language={self.language}, currency={self.currency}, "
            f"including VAT={self.prices_include_vat}"
        )

    def get_current_language(self) -> Language:
        return self.language

    def get_current_currency(self) -> str:
        return self.currency

    def show_prices_including_vat(self) -> bool:
        return self.prices_include_vat
