"""
Import AliExpress / Alibaba products into the store.
"""

from .config import Settings, load_settings
from .importer import build_product_input, import_product_from_scrape
from .models import ImportOverrides, ImportResult, ScrapedProduct, ScrapeResult, SourcePlatform
from .pipeline import extract_product, scrape_product_from_url, scrape_products
from .supplier_registry import classify_source

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "load_settings",
    "SourcePlatform",
    "ScrapedProduct",
    "ScrapeResult",
    "ImportOverrides",
    "ImportResult",
    "classify_source",
    "extract_product",
    "scrape_product_from_url",
    "scrape_products",
    "build_product_input",
    "import_product_from_scrape",
]
