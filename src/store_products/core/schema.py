"""
Normalized Storefront Product Schema

This module defines the presentation-ready product format that billing
products are mapped into before being shown in the storefront.

Key Design Principles:
1. Exactly one resolved name and description per product (already localized)
2. Every pricing variant is denominated in the storefront's current currency
   and already honors the VAT display preference
3. Subscription products carry one pricing variant per renewal period;
   one-off products carry a single variant without a renewal period
"""

from dataclasses import dataclass, field, asdict
from decimal import Decimal
from typing import List, Dict, Any, Optional
import json


# ============================================================================
# NORMALIZED SCHEMA DEFINITIONS
# ============================================================================

@dataclass(frozen=True)
class RenewalPeriod:
    """Subscription billing interval, e.g. 1 MONTH or 2 YEAR"""
    period: int
    unit: str

    def __str__(self) -> str:
        return f"{self.period} {self.unit}"


@dataclass
class PricingVariant:
    """
    One purchasable price of a product.

    `renewal_period` is None for products that are not renewed.
    """
    price: Decimal
    renewal_period: Optional[RenewalPeriod] = None


@dataclass
class CustomAttribute:
    """Free-form product attribute copied from the billing product properties"""
    name: str
    value: str


@dataclass
class Product:
    """
    Storefront product.

    All mapping sources normalize to this structure.
    """
    article_number: str
    category: str
    name: str = ""
    description: str = ""
    pricing_variants: List[PricingVariant] = field(default_factory=list)
    custom_attributes: List[CustomAttribute] = field(default_factory=list)

    def get_attribute(self, name: str) -> Optional[str]:
        """Value of the first custom attribute called `name`, if any"""
        for attribute in self.custom_attributes:
            if attribute.name == name:
                return attribute.value
        return None


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def dataclass_to_dict(obj) -> Any:
    """Convert dataclass to dict, handling nested dataclasses and Decimal prices"""
    if hasattr(obj, '__dataclass_fields__'):
        return {k: dataclass_to_dict(v) for k, v in asdict(obj).items()}
    elif isinstance(obj, list):
        return [dataclass_to_dict(item) for item in obj]
    elif isinstance(obj, dict):
        return {k: dataclass_to_dict(v) for k, v in obj.items()}
    elif isinstance(obj, Decimal):
        # Strings keep the exact amount; floats would not
        return str(obj)
    return obj


def to_json(products, indent: int = 2) -> str:
    """Convert a Product (or list of them) to a JSON string"""
    return json.dumps(dataclass_to_dict(products), indent=indent, ensure_ascii=False)
