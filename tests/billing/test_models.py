"""Tests for parsing billing API payloads."""

import pytest
from decimal import Decimal

from store_products.billing.models import BillingProduct, ProductTax
from store_products.core.errors import InvalidArgumentError


def test_from_dict_pascal_case(billing_api_payload):
    product = BillingProduct.from_dict(billing_api_payload)

    assert product.article_number == "DMN-SE"
    assert product.category == "Domain"
    assert product.name == "Domain .se"
    assert product.multilanguage_names[0].language_iso639_name == "sv"
    assert product.multilanguage_names[0].language_culture == "SE"
    assert product.multilanguage_names[0].value == "Domän .se"
    assert product.multilanguage_descriptions is None
    assert product.renewal_periods == []


def test_prices_parsed_as_decimal(billing_api_payload):
    product = BillingProduct.from_dict(billing_api_payload)

    assert [p.currency_code for p in product.prices] == ["SEK", "USD"]
    assert product.prices[0].value == Decimal("99.00")
    # floats go through str() so no binary noise leaks in
    assert product.prices[1].value == Decimal("10.5")


def test_taxes_parsed(billing_api_payload):
    product = BillingProduct.from_dict(billing_api_payload)
    assert product.taxes == [ProductTax("Moms", Decimal("25"), cumulative=True)]


def test_properties_from_key_value_list(billing_api_payload):
    product = BillingProduct.from_dict(billing_api_payload)
    assert list(product.properties.items()) == [("tld", ".se"), ("registry", "IIS")]


def test_snake_case_payload():
    product = BillingProduct.from_dict({
        "article_number": "HST-1",
        "name": "Hosting",
        "renewal_periods": [
            {
                "renewal_period_value": 3,
                "renewal_period_unit": "MONTH",
                "prices": [{"currency_code": "EUR", "value": "15"}],
            }
        ],
        "taxes": [{"name": "PST", "percent": 7, "cumulative": "false"}],
        "properties": {"b": "2", "a": "1"},
    })

    period = product.renewal_periods[0]
    assert period.renewal_period_value == 3
    assert period.renewal_period_unit == "MONTH"
    assert period.prices[0].value == Decimal("15")
    assert product.taxes[0].cumulative is False
    assert list(product.properties) == ["b", "a"]
    assert product.prices is None


def test_missing_optional_fields_default():
    product = BillingProduct.from_dict({"ArticleNumber": "X"})

    assert product.name == ""
    assert product.multilanguage_names is None
    assert product.prices is None
    assert product.renewal_periods is None
    assert product.taxes == []
    assert product.properties == {}


def test_invalid_price_raises():
    with pytest.raises(InvalidArgumentError, match="Invalid numeric value for price"):
        BillingProduct.from_dict({"ArticleNumber": "X", "Prices": [{"CurrencyCode": "USD", "Value": "ten"}]})


def test_non_object_payload_raises():
    with pytest.raises(InvalidArgumentError, match="must be an object"):
        BillingProduct.from_dict(["not", "a", "product"])


def test_missing_price_value_raises():
    """A price entry without an amount must not become a free product."""
    with pytest.raises(InvalidArgumentError, match="Missing numeric value for price"):
        BillingProduct.from_dict({"ArticleNumber": "X", "Prices": [{"CurrencyCode": "USD"}]})


def test_missing_tax_percent_raises():
    with pytest.raises(InvalidArgumentError, match="tax percent"):
        BillingProduct.from_dict({"ArticleNumber": "X", "Taxes": [{"Name": "VAT"}]})


@pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", "sNaN"])
def test_non_finite_price_raises(value):
    with pytest.raises(InvalidArgumentError, match="Non-finite value for price"):
        BillingProduct.from_dict({"ArticleNumber": "X", "Prices": [{"CurrencyCode": "USD", "Value": value}]})


def test_non_finite_decimal_price_raises():
    with pytest.raises(InvalidArgumentError, match="Non-finite"):
        BillingProduct.from_dict({"ArticleNumber": "X", "Prices": [{"CurrencyCode": "USD", "Value": Decimal("NaN")}]})


@pytest.mark.parametrize("value", ["one", None])
def test_invalid_renewal_period_value_raises(value):
    payload = {
        "ArticleNumber": "HST",
        "RenewalPeriods": [
            {"RenewalPeriodValue": value, "RenewalPeriodUnit": "MONTH", "Prices": []},
        ],
    }
    with pytest.raises(InvalidArgumentError, match="renewal period value"):
        BillingProduct.from_dict(payload)


def test_renewal_period_value_from_string():
    payload = {
        "ArticleNumber": "HST",
        "RenewalPeriods": [
            {"RenewalPeriodValue": "12", "RenewalPeriodUnit": "MONTH", "Prices": []},
        ],
    }
    assert BillingProduct.from_dict(payload).renewal_periods[0].renewal_period_value == 12


def test_property_entry_without_key_raises():
    payload = {
        "ArticleNumber": "X",
        "Properties": [{"Key": "tld", "Value": ".se"}, {"Value": "orphan"}],
    }
    with pytest.raises(InvalidArgumentError, match="Property entry without a key"):
        BillingProduct.from_dict(payload)
