"""
Configuration for the product importer
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

# Browser signature for direct fetches
DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "es-ES,es;q=0.9,en;q=0.8",
    "Cache-Control": "no-cache",
}

# Image CDN host fragments used by AliExpress / Alibaba
CDN_MARKERS = ("alicdn", "ae01", "cbu01")
# Avatars, icons and thumbnails
EXCLUDED_IMAGE_MARKERS = ("avatar", "icon", "50x50", "100x100")

# Detected prices outside (MIN, MAX) are false positives
MIN_PRICE = 0.0
MAX_PRICE = 10000.0

MIN_TITLE_LENGTH = 5
MIN_DETAILS_LENGTH = 10
MAX_DETAILS_LENGTH = 1000

# Import defaults
DEFAULT_PRICE_USD = 10.0
DEFAULT_STOCK = 10
PLACEHOLDER_IMAGE = "https://via.placeholder.com/400x500?text=Sin+Imagen"

CONFIG_FILE = Path("importer.yaml")

ENV_PREFIX = "IMPORTER_"


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read-only once loaded"""
    render_api_key: Optional[str] = None
    render_proxy_url: str = "https://api.scraperapi.com/"
    render_country: str = "us"
    request_timeout: Optional[float] = None
    image_limit: int = 15
    video_limit: int = 5
    attribute_limit: int = 10
    store_api_url: Optional[str] = None
    store_api_key: Optional[str] = None

    @property
    def uses_render_proxy(self) -> bool:
        return bool(self.render_api_key)


def _coerce(name: str, raw):
    """Convert a YAML/env value to the type of the Settings field."""
    if raw is None or raw == "":
        return None
    if name in ("image_limit", "video_limit", "attribute_limit"):
        return int(raw)
    if name == "request_timeout":
        return float(raw)
    return str(raw).strip()


def load_settings(path: Path | str | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from an optional YAML file, then IMPORTER_* env vars.

    Env vars win over the file, e.g. IMPORTER_RENDER_API_KEY overrides
    `render_api_key:` from importer.yaml.
    """
    environ = os.environ if environ is None else environ
    known = {f.name for f in fields(Settings)}
    values: dict = {}

    p = Path(path) if path else CONFIG_FILE
    if p.exists():
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {p} must contain a mapping")
        for k, v in data.items():
            if k not in known:
                logger.warning(f"Ignoring unknown config key '{k}' in {p}")
                continue
            values[k] = _coerce(k, v)
    elif path:
        raise FileNotFoundError(f"Config file not found: {p}")

    for name in known:
        env_val = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if env_val is not None:
            values[name] = _coerce(name, env_val)

    # drop empties so dataclass defaults apply
    values = {k: v for k, v in values.items() if v is not None}
    return Settings(**values)
