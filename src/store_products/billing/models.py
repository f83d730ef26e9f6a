"""
Billing Product Models

Raw product records as returned by the public billing API. These are
read-only inputs to the product mapper and mirror the API's shape closely:
localized names/descriptions, per-currency prices, renewal periods with
their own prices, a tax schedule and free-form properties.

Usage:
    from store_products.billing.models import BillingProduct

    product = BillingProduct.from_dict(api_json)
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from store_products.core.errors import InvalidArgumentError


def _get(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key; the API uses PascalCase, exports often snake_case"""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _to_decimal(value: Any, field_name: str) -> Decimal:
    if value is None:
        raise InvalidArgumentError(f"Missing numeric value for {field_name}", argument=field_name)
    try:
        # str() first so 0.1 stays 0.1 instead of its binary float expansion
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidArgumentError(f"Invalid numeric value for {field_name}: {value!r}", argument=field_name)
    if not result.is_finite():
        raise InvalidArgumentError(f"Non-finite value for {field_name}: {value!r}", argument=field_name)
    return result


def _to_int(value: Any, field_name: str) -> int:
    if value is None:
        raise InvalidArgumentError(f"Missing integer value for {field_name}", argument=field_name)
    try:
        return int(value)
    except (ValueError, TypeError):
        raise InvalidArgumentError(f"Invalid integer value for {field_name}: {value!r}", argument=field_name)


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return bool(value)


# ============================================================================
# RAW PRODUCT PARTS
# ============================================================================

@dataclass(frozen=True)
class MultilanguageText:
    """One localized value, e.g. ("en", "GB", "Colour printer")"""
    language_iso639_name: str
    language_culture: str
    value: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MultilanguageText":
        return cls(
            language_iso639_name=_get(data, "LanguageIso639Name", "language_iso639_name", default=""),
            language_culture=_get(data, "LanguageCulture", "language_culture", default=""),
            value=_get(data, "Value", "value", default=""),
        )


@dataclass(frozen=True)
class ProductPrice:
    """Price in a single currency"""
    currency_code: str
    value: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductPrice":
        return cls(
            currency_code=_get(data, "CurrencyCode", "currency_code", default=""),
            value=_to_decimal(_get(data, "Value", "value"), "price"),
        )


@dataclass(frozen=True)
class ProductTax:
    """
    One entry of a product's tax schedule.

    A cumulative tax is charged on the running total (price plus the taxes
    before it in the schedule); a non-cumulative tax only on the base price.
    """
    name: str
    percent: Decimal
    cumulative: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductTax":
        return cls(
            name=_get(data, "Name", "name", default=""),
            percent=_to_decimal(_get(data, "Percent", "percent"), "tax percent"),
            cumulative=_to_bool(_get(data, "Cumulative", "cumulative", default=True)),
        )


@dataclass(frozen=True)
class ProductRenewalPeriod:
    """Subscription renewal period with the prices charged per renewal"""
    renewal_period_value: int
    renewal_period_unit: str
    prices: List[ProductPrice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductRenewalPeriod":
        return cls(
            renewal_period_value=_to_int(_get(data, "RenewalPeriodValue", "renewal_period_value"), "renewal period value"),
            renewal_period_unit=_get(data, "RenewalPeriodUnit", "renewal_period_unit", default=""),
            prices=[ProductPrice.from_dict(p) for p in _get(data, "Prices", "prices", default=[])],
        )


# ============================================================================
# RAW PRODUCT
# ============================================================================

@dataclass
class BillingProduct:
    """
    Product as stored in the billing system.

    Optional collections are None when the API omitted them; the mapper
    treats None and empty the same way.
    """
    article_number: str
    category: str = ""
    name: str = ""
    description: str = ""
    multilanguage_names: Optional[List[MultilanguageText]] = None
    multilanguage_descriptions: Optional[List[MultilanguageText]] = None
    prices: Optional[List[ProductPrice]] = None
    renewal_periods: Optional[List[ProductRenewalPeriod]] = None
    taxes: List[ProductTax] = field(default_factory=list)
    properties: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BillingProduct":
        """
        Build a billing product from a billing API JSON object.

        Args:
            data: Product object (PascalCase API keys or snake_case keys)

        Returns:
            BillingProduct

        Raises:
            InvalidArgumentError: If the payload is not an object, a price,
                tax percent or renewal period value is missing or not a finite
                number, or a property entry has no key
        """
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Billing product must be an object, got {type(data).__name__}", argument="data")

        def texts(*keys: str) -> Optional[List[MultilanguageText]]:
            raw = _get(data, *keys)
            if raw is None:
                return None
            return [MultilanguageText.from_dict(t) for t in raw]

        prices = _get(data, "Prices", "prices")
        renewal_periods = _get(data, "RenewalPeriods", "renewal_periods")

        return cls(
            article_number=_get(data, "ArticleNumber", "article_number", default=""),
            category=_get(data, "Category", "category", default=""),
            name=_get(data, "Name", "name", default=""),
            description=_get(data, "Description", "description", default=""),
            multilanguage_names=texts("MultilanguageNames", "multilanguage_names"),
            multilanguage_descriptions=texts("MultilanguageDescriptions", "multilanguage_descriptions"),
            prices=[ProductPrice.from_dict(p) for p in prices] if prices is not None else None,
            renewal_periods=(
                [ProductRenewalPeriod.from_dict(r) for r in renewal_periods]
                if renewal_periods is not None else None
            ),
            taxes=[ProductTax.from_dict(t) for t in _get(data, "Taxes", "taxes", default=[])],
            properties=_parse_properties(_get(data, "Properties", "properties", default={})),
        )


def _parse_properties(raw: Any) -> Dict[str, str]:
    """
    Properties come either as an object or as a list of {Key, Value} pairs.
    Insertion order of the result follows the payload order.
    """
    if isinstance(raw, dict):
        return {str(k): "" if v is None else str(v) for k, v in raw.items()}

    properties: Dict[str, str] = {}
    for entry in raw or []:
        key = _get(entry, "Key", "key", "Name", "name")
        if key is None:
            raise InvalidArgumentError(f"Property entry without a key: {entry!r}", argument="properties")
        value = _get(entry, "Value", "value", default="")
        properties[str(key)] = str(value)
    return properties
