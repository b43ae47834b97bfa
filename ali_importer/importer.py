"""
Turns a reviewed ScrapedProduct into a product in the store.

Only place where the scraped record is mapped to the store's
product-creation payload; adjust defaults here.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

from .config import DEFAULT_PRICE_USD, DEFAULT_STOCK, PLACEHOLDER_IMAGE
from .errors import ProductImportError
from .models import ImportOverrides, ImportResult, ProductInput, ScrapedProduct

logger = logging.getLogger(__name__)


class ProductCreator(Protocol):
    def create_product(self, payload: dict) -> Mapping[str, Any]:
        """Create the product and return the stored record (with its `id`)."""
        ...


def build_product_input(scraped: ScrapedProduct, overrides: ImportOverrides) -> ProductInput:
    # empty strings / 0 count as "not provided"
    return ProductInput(
        name=overrides.custom_name or scraped.title,
        description=overrides.custom_description or scraped.description,
        details=scraped.details or None,
        price_usd=float(overrides.custom_price or scraped.price or DEFAULT_PRICE_USD),
        is_offer=False,
        stock=DEFAULT_STOCK,
        image=scraped.images[0] if scraped.images else PLACEHOLDER_IMAGE,
        images=list(scraped.images),
        videos=list(scraped.videos),
        category_id=overrides.category_id,
    )


def _product_id(record: Mapping[str, Any]) -> int:
    if not isinstance(record, Mapping) or record.get("id") is None:
        raise ProductImportError(f"Store did not return a product id: {record!r}")
    return record["id"]


def import_product_from_scrape(
    scraped: ScrapedProduct,
    overrides: ImportOverrides,
    creator: ProductCreator,
) -> ImportResult:
    """Create the product through `creator`; never raises."""
    if not overrides.category_id:
        return ImportResult.fail("Selecciona una categoría antes de importar.")

    product = build_product_input(scraped, overrides)
    try:
        record = creator.create_product(product.to_payload())
        product_id = _product_id(record)
    except Exception as e:
        logger.error(f"Error importing product '{product.name}': {e}")
        return ImportResult.fail(str(e) or "Error al importar")

    logger.info(f"Imported '{product.name}' as product {product_id} ({len(product.images)} images)")
    return ImportResult.ok(product_id)
