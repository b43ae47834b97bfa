"""
Command line entry point.

    python -m ali_importer scrape https://www.aliexpress.com/item/1005001.html
    python -m ali_importer import https://www.aliexpress.com/item/1005001.html --category 3 --price 19.9
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .config import load_settings
from .errors import StoreApiError
from .importer import import_product_from_scrape
from .models import ImportOverrides
from .pipeline import scrape_product_from_url
from .store_api import StoreClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ali_importer", description="Import AliExpress/Alibaba products")
    parser.add_argument("--config", help="YAML settings file (default: importer.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p_scrape = sub.add_parser("scrape", help="Extract product data and print it as JSON")
    p_scrape.add_argument("url")

    p_import = sub.add_parser("import", help="Extract product data and create it in the store")
    p_import.add_argument("url")
    p_import.add_argument("--category", type=int, required=True)
    p_import.add_argument("--name")
    p_import.add_argument("--price", type=float)
    p_import.add_argument("--description")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings(args.config)

    result = scrape_product_from_url(args.url, settings)
    if args.command == "scrape" or not result.success:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0 if result.success else 1

    overrides = ImportOverrides(
        category_id=args.category,
        custom_name=args.name,
        custom_price=args.price,
        custom_description=args.description,
    )
    try:
        client = StoreClient.from_settings(settings)
    except StoreApiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    imported = import_product_from_scrape(result.data, overrides, client)
    print(json.dumps({"success": imported.success, "productId": imported.product_id, "error": imported.error},
                     ensure_ascii=False, indent=2))
    return 0 if imported.success else 1


if __name__ == "__main__":
    sys.exit(main())
