from __future__ import annotations

import logging
from typing import Optional

import cloudscraper
import requests

from .config import DEFAULT_HEADERS, Settings
from .errors import FetchError
from .models import RawDocument

logger = logging.getLogger(__name__)

BOT_WALL_MARKERS = (
    "captcha",
    "slide to verify",
    "punish",
    "x5secdata",
    "<title>just a moment",
)


def create_browser_session() -> requests.Session:
    """Session that looks like desktop Chrome (cloudscraper handles JS challenges)."""
    scraper = cloudscraper.create_scraper(
        browser={"browser": "chrome", "platform": "windows", "desktop": True, "mobile": False}
    )
    scraper.headers.update(DEFAULT_HEADERS)
    return scraper


def _proxy_params(url: str, settings: Settings) -> dict:
    # requests url-encodes the target
    return {
        "api_key": settings.render_api_key,
        "url": url,
        "render": "true",
        "country_code": settings.render_country,
    }


def fetch_html(url: str, settings: Optional[Settings] = None, session: Optional[requests.Session] = None) -> RawDocument:
    """
    Single GET for `url`, direct or through the rendering proxy.

    The strategy depends only on whether a render API key is configured.
    No retries: non-2xx or a network error raises FetchError.
    """
    settings = settings or Settings()
    via_proxy = settings.uses_render_proxy

    # sessions created here are closed here; a caller's session stays open
    owned = session is None
    if owned:
        session = requests.Session() if via_proxy else create_browser_session()

    try:
        if via_proxy:
            logger.info(f"Fetching {url} through rendering proxy")
            r = session.get(
                settings.render_proxy_url,
                params=_proxy_params(url, settings),
                timeout=settings.request_timeout,
            )
        else:
            logger.info(f"Fetching {url}")
            r = session.get(url, headers=DEFAULT_HEADERS, timeout=settings.request_timeout)
    except requests.RequestException as e:
        logger.error(f"Error fetching {url}: {e}")
        raise FetchError(f"Error al acceder: {e}") from e
    finally:
        if owned:
            session.close()

    if not 200 <= r.status_code < 300:
        logger.warning(f"Fetch {url} returned HTTP {r.status_code}")
        raise FetchError.from_status(r.status_code)

    return RawDocument(url=url, html=r.text, status_code=r.status_code, via_proxy=via_proxy)


def looks_like_bot_wall(html: str) -> bool:
    h = (html or "").lower()
    return len(h) < 2500 or any(marker in h for marker in BOT_WALL_MARKERS)
