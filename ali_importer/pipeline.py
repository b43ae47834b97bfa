from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from .config import MIN_TITLE_LENGTH, Settings
from .errors import ExtractionError, FetchError, UnsupportedSourceError
from .extractors import (
    extract_description,
    extract_details,
    extract_images,
    extract_price,
    extract_title,
    extract_videos,
)
from .fetch import fetch_html, looks_like_bot_wall
from .models import RawDocument, ScrapedProduct, ScrapeResult, SourcePlatform
from .supplier_registry import classify_source

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, Settings], RawDocument]


def extract_product(html: str, source: SourcePlatform, settings: Optional[Settings] = None) -> ScrapedProduct:
    """Run every extractor over `html`. Raises ExtractionError without a usable title."""
    settings = settings or Settings()

    title = extract_title(html)
    if len(title) < MIN_TITLE_LENGTH:
        if looks_like_bot_wall(html):
            logger.warning(f"No title found; page looks like a bot check ({len(html)} chars)")
        raise ExtractionError()

    description = extract_description(html)
    details, attributes = extract_details(html, settings.attribute_limit)

    return ScrapedProduct(
        title=title,
        description=description or f"Producto importado: {title}",
        details=details or "",
        price=extract_price(html),
        images=extract_images(html, settings.image_limit),
        videos=extract_videos(html, settings.video_limit),
        attributes=attributes,
        source=source,
    )


def scrape_product_from_url(
    url: str,
    settings: Optional[Settings] = None,
    fetcher: Fetcher = fetch_html,
) -> ScrapeResult:
    """
    classify -> fetch -> extract for one URL.

    Never raises; failures come back as ScrapeResult.fail(message).
    """
    settings = settings or Settings()
    try:
        source = classify_source(url)
        if source is SourcePlatform.UNKNOWN:
            raise UnsupportedSourceError(url)

        doc = fetcher(url, settings)
        product = extract_product(doc.html, source, settings)
    except (UnsupportedSourceError, FetchError, ExtractionError) as e:
        logger.info(f"Scrape failed for {url}: {e}")
        return ScrapeResult.fail(str(e))
    except Exception as e:
        logger.exception(f"Error scraping product {url}")
        return ScrapeResult.fail(str(e) or "Error desconocido")

    logger.info(
        f"Scraped {source.value} product '{product.title}' "
        f"(price={product.price}, images={len(product.images)}, videos={len(product.videos)})"
    )
    return ScrapeResult.ok(product)


def scrape_products(
    urls: Iterable[str],
    settings: Optional[Settings] = None,
    fetcher: Fetcher = fetch_html,
) -> List[ScrapeResult]:
    """One independent scrape per URL, in order."""
    results = []
    for url in urls:
        url = (url or "").strip()
        if not url:
            continue
        results.append(scrape_product_from_url(url, settings, fetcher))
    return results
