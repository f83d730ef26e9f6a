"""Shared test fixtures for store_products tests."""

import pytest
from decimal import Decimal

from store_products.billing.mapper import ProductMapper
from store_products.billing.models import (
    BillingProduct,
    MultilanguageText,
    ProductPrice,
    ProductRenewalPeriod,
    ProductTax,
)
from store_products.core.preferences import ConfiguredPreferences


@pytest.fixture
def make_mapper():
    """Factory for mappers with explicit preferences."""
    def _make(language="en-US", currency="USD", prices_include_vat=False):
        preferences = ConfiguredPreferences(
            language=language,
            currency=currency,
            prices_include_vat=prices_include_vat
        )
        return ProductMapper(preferences, preferences, preferences)
    return _make


@pytest.fixture
def widget():
    """Plain one-off product priced in USD only."""
    return BillingProduct(
        article_number="WDG-001",
        category="Hardware",
        name="Widget",
        description="A widget",
        prices=[ProductPrice("USD", Decimal("10.00"))],
    )


@pytest.fixture
def localized_product():
    """Product with English names for two regions and a Swedish description."""
    return BillingProduct(
        article_number="GDG-001",
        category="Hardware",
        name="Default name",
        description="Default description",
        multilanguage_names=[
            MultilanguageText("en", "US", "Gadget"),
            MultilanguageText("en", "GB", "Widget-UK"),
        ],
        multilanguage_descriptions=[
            MultilanguageText("sv", "SE", "En pryl"),
        ],
        prices=[ProductPrice("USD", Decimal("20")), ProductPrice("SEK", Decimal("200"))],
    )


@pytest.fixture
def subscription_product():
    """Hosting subscription renewed monthly or yearly, taxed at 25%."""
    return BillingProduct(
        article_number="HST-001",
        category="Hosting",
        name="Hosting",
        description="Web hosting",
        renewal_periods=[
            ProductRenewalPeriod(1, "MONTH", [ProductPrice("USD", Decimal("5")), ProductPrice("EUR", Decimal("4"))]),
            ProductRenewalPeriod(1, "YEAR", [ProductPrice("USD", Decimal("50")), ProductPrice("EUR", Decimal("40"))]),
        ],
        taxes=[ProductTax("VAT", Decimal("25"))],
        properties={"disk_space": "10 GB", "domains": "1"},
    )


@pytest.fixture
def billing_api_payload():
    """Product as returned by the billing API (PascalCase keys)."""
    return {
        "ArticleNumber": "DMN-SE",
        "Category": "Domain",
        "Name": "Domain .se",
        "Description": "Swedish domain",
        "MultilanguageNames": [
            {"LanguageIso639Name": "sv", "LanguageCulture": "SE", "Value": "Domän .se"},
        ],
        "MultilanguageDescriptions": None,
        "Prices": [
            {"CurrencyCode": "SEK", "Value": "99.00"},
            {"CurrencyCode": "USD", "Value": 10.5},
        ],
        "RenewalPeriods": [],
        "Taxes": [{"Name": "Moms", "Percent": "25", "Cumulative": True}],
        "Properties": [
            {"Key": "tld", "Value": ".se"},
            {"Key": "registry", "Value": "IIS"},
        ],
    }
