"""
Exceptions raised while mapping billing products and talking to the billing API.
"""

from typing import Any, Dict, Optional


class ProductMappingError(Exception):
    """Base class for errors raised by the product mapping engine."""


class InvalidArgumentError(ProductMappingError, ValueError):
    """A required collaborator or input value is missing or invalid."""

    def __init__(self, message: str, argument: Optional[str] = None):
        self.message = message
        self.argument = argument
        super().__init__(self.message)


class PriceNotFoundError(ProductMappingError, LookupError):
    """
    No price in the resolved currency exists for a product.

    Raised as a hard failure: the whole mapping call is aborted and no
    partially mapped product is returned.
    """

    def __init__(self, currency_code: str, article_number: Optional[str] = None):
        self.currency_code = currency_code
        self.article_number = article_number
        self.message = f"No prices available for currency code {currency_code}"
        if article_number:
            self.message += f" (article {article_number})"
        super().__init__(self.message)


class BillingAPIError(Exception):
    """Exception raised for billing API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Optional[Dict[str, Any]] = None):
        self.message = message
        self.status_code = status_code
        self.response = response
        super().__init__(self.message)
