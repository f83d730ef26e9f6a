#!/usr/bin/env python3
"""
Public Billing API Client.

Fetches raw product records from the billing system's public product
service and parses them into BillingProduct models. Mapping them to
storefront products is left to ProductMapper.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urljoin

import requests

from store_products.billing.models import BillingProduct
from store_products.core.config import (
    BILLING_API_URL,
    BILLING_API_KEY,
    BILLING_API_TIMEOUT,
    BILLING_RESELLER_ID,
)
from store_products.core.errors import BillingAPIError

logger = logging.getLogger(__name__)


class BillingApiClient:
    """
    Client for the public billing product API.

    Provides:
    - get_product: one product by article number
    - list_products: all products, optionally of one category
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        reseller_id: Optional[str] = None
    ):
        """
        Initialize the billing API client.

        Args:
            base_url: API base URL (defaults to env var)
            api_key: Bearer token (defaults to env var)
            timeout: Request timeout in seconds (defaults to env var)
            reseller_id: Reseller whose catalog to read (defaults to env var)
        """
        self.base_url = base_url or BILLING_API_URL
        self.api_key = api_key or BILLING_API_KEY
        self.timeout = timeout or BILLING_API_TIMEOUT
        self.reseller_id = reseller_id or BILLING_RESELLER_ID

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    # =========================================================================
    # API Request Helpers
    # =========================================================================

    def _make_request(self, method: str, endpoint: str, params: Optional[Dict] = None) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method
            endpoint: API endpoint path
            params: Query parameters

        Returns:
            Response JSON

        Raises:
            BillingAPIError: If the request fails
        """
        url = urljoin(self.base_url + "/", endpoint.lstrip("/"))

        if params is None:
            params = {}
        if self.reseller_id:
            params["resellerId"] = self.reseller_id

        logger.debug(f"Billing API {method} {url}")

        try:
            response = requests.request(
                method=method,
                url=url,
                headers=self._get_headers(),
                params=params,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise BillingAPIError(f"Request failed: {e}")

        try:
            response_data = response.json() if response.content else {}
        except ValueError:
            raise BillingAPIError(
                f"Invalid JSON in response from {url}",
                status_code=response.status_code
            )

        if response.status_code >= 400:
            error_message = None
            if isinstance(response_data, dict):
                error_message = response_data.get("Message") or response_data.get("message")
            raise BillingAPIError(
                f"API error: {error_message or response.text}",
                status_code=response.status_code,
                response=response_data if isinstance(response_data, dict) else None
            )

        return response_data

    # =========================================================================
    # Products API
    # =========================================================================

    def get_product(self, article_number: str) -> BillingProduct:
        """
        Get a single product by article number.

        Raises:
            BillingAPIError: If the product does not exist (status 404) or the request fails
        """
        data = self._make_request("GET", f"/products/{quote(article_number, safe='')}")
        if isinstance(data, dict) and isinstance(data.get("Product"), dict):
            data = data["Product"]
        return BillingProduct.from_dict(data)

    def list_products(self, category: Optional[str] = None) -> List[BillingProduct]:
        """
        List products, optionally filtered by category.

        Returns:
            Billing products in the order the API returned them
        """
        params = {}
        if category:
            params["category"] = category

        data = self._make_request("GET", "/products", params=params)

        if isinstance(data, dict):
            data = data.get("Products") or data.get("products") or []

        products = [BillingProduct.from_dict(item) for item in data]
        logger.info(f"Fetched {len(products)} products from billing API" + (f" (category {category})" if category else ""))
        return products


def create_billing_client() -> BillingApiClient:
    """Create a billing API client from environment configuration."""
    return BillingApiClient()
