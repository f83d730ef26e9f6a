#!/usr/bin/env python3
"""
Store Products CLI - Map billing products to storefront products.

Usage:
    store-products map product.json                       # Map a JSON export, print to stdout
    store-products map products.json --currency SEK       # Override the storefront currency
    store-products fetch HOSTING-01 --language sv-SE      # Fetch from the billing API and map
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from store_products.billing.client import BillingApiClient
from store_products.billing.mapper import ProductMapper
from store_products.billing.models import BillingProduct
from store_products.core.config import LOG_LEVEL
from store_products.core.errors import BillingAPIError, InvalidArgumentError, ProductMappingError
from store_products.core.preferences import ConfiguredPreferences
from store_products.core.schema import to_json


def build_mapper(args: argparse.Namespace) -> ProductMapper:
    """Create a mapper from the command line preference overrides."""
    preferences = ConfiguredPreferences(
        language=args.language,
        currency=args.currency,
        prices_include_vat=args.include_vat
    )
    return ProductMapper(preferences, preferences, preferences)


def load_billing_products(path: str) -> Tuple[List[BillingProduct], bool]:
    """
    Load billing products from a JSON file holding one product or a list.

    Returns:
        The products and whether the file held a list of them

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict) and "Products" in data:
        data = data["Products"]
    if isinstance(data, dict):
        return [BillingProduct.from_dict(data)], False
    if not isinstance(data, list):
        raise InvalidArgumentError(f"Expected a product object or a list, got {type(data).__name__}", argument="path")

    return [BillingProduct.from_dict(item) for item in data], True


def write_output(text: str, output_path: Optional[str]) -> None:
    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"Saved to: {output_path}", file=sys.stderr)
    else:
        print(text)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="store-products",
        description="Map billing products to localized, currency- and VAT-aware storefront products.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s map product.json                        # Map a product export
  %(prog)s map products.json --include-vat -o out.json
  %(prog)s fetch HOSTING-01 --language sv-SE --currency SEK

Environment:
  BILLING_API_URL           Billing API base URL (for fetch)
  STORE_DEFAULT_LANGUAGE    Default language, e.g. en-US
  STORE_DEFAULT_CURRENCY    Default currency code, e.g. USD
  STORE_PRICES_INCLUDE_VAT  Show prices including VAT (true/false)
        """
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    map_parser = subparsers.add_parser("map", help="Map billing products from a JSON file")
    map_parser.add_argument("file", type=str, help="JSON file with one billing product or a list of them")

    fetch_parser = subparsers.add_parser("fetch", help="Fetch a product from the billing API and map it")
    fetch_parser.add_argument("article_number", type=str, help="Article number of the product")

    for sub in (map_parser, fetch_parser):
        sub.add_argument("--language", type=str, help="Language tag, e.g. en-US (default: STORE_DEFAULT_LANGUAGE)")
        sub.add_argument("--currency", type=str, help="Currency code (default: STORE_DEFAULT_CURRENCY)")
        vat_group = sub.add_mutually_exclusive_group()
        vat_group.add_argument("--include-vat", dest="include_vat", action="store_true", default=None,
                               help="Show prices including VAT")
        vat_group.add_argument("--exclude-vat", dest="include_vat", action="store_false", default=None,
                               help="Show prices excluding VAT")
        sub.add_argument("-o", "--output", type=str, help="Write JSON to this file instead of stdout")
        sub.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    try:
        mapper = build_mapper(args)

        if args.command == "map":
            billing_products, is_list = load_billing_products(args.file)
            products = mapper.map_all(billing_products)
            result = products if is_list else products[0]
        else:
            client = BillingApiClient()
            result = mapper.map(client.get_product(args.article_number))

        write_output(to_json(result), args.output)

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: invalid JSON in {args.file}: {e}", file=sys.stderr)
        sys.exit(1)
    except (ProductMappingError, BillingAPIError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
