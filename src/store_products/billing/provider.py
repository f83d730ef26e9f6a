"""
Storefront products provider: fetch from billing, map for the current visitor.
"""

import logging
from typing import List, Optional

from store_products.billing.client import BillingApiClient
from store_products.billing.mapper import ProductMapper
from store_products.core.errors import PriceNotFoundError
from store_products.core.schema import Product

logger = logging.getLogger(__name__)


class ProductsProvider:
    """Combines the billing API client with a product mapper."""

    def __init__(self, client: BillingApiClient, mapper: ProductMapper):
        self.client = client
        self.mapper = mapper

    def get_product(self, article_number: str) -> Product:
        """
        Fetch and map one product.

        Raises:
            BillingAPIError: If the product cannot be fetched
            PriceNotFoundError: If it has no price in the current currency
        """
        return self.mapper.map(self.client.get_product(article_number))

    def get_products(self, category: Optional[str] = None) -> List[Product]:
        """
        Fetch and map a product listing.

        Products without a price in the current currency are left out of the
        listing rather than failing it.
        """
        products = []
        for billing_product in self.client.list_products(category):
            try:
                products.append(self.mapper.map(billing_product))
            except PriceNotFoundError as e:
                logger.warning(f"Skipping product: {e.message}")

        return products
