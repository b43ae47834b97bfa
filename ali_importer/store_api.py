from __future__ import annotations

import requests

from .config import Settings
from .errors import StoreApiError


class StoreClient:
    """HTTP client for the storefront's product and category API."""

    def __init__(self, base_url: str, api_key: str | None = None, timeout: float = 90):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": "Mozilla/5.0 (Product Importer)",
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        if api_key:
            self.session.headers["Authorization"] = f"Bearer {api_key}"

    @classmethod
    def from_settings(cls, settings: Settings) -> "StoreClient":
        if not settings.store_api_url:
            raise StoreApiError("store_api_url is not configured")
        return cls(settings.store_api_url, settings.store_api_key)

    def _unwrap(self, r: requests.Response):
        r.raise_for_status()
        data = r.json()
        if isinstance(data, dict) and data.get("error"):
            raise StoreApiError(f"Store API error: {data['error']}")
        return data.get("data", data) if isinstance(data, dict) else data

    def _get(self, path: str):
        return self._unwrap(self.session.get(f"{self.base_url}/{path}", timeout=self.timeout))

    def _post(self, path: str, payload: dict):
        return self._unwrap(self.session.post(f"{self.base_url}/{path}", json=payload, timeout=self.timeout))

    def list_categories(self) -> list[dict]:
        return self._get("categories")

    def create_product(self, payload: dict) -> dict:
        return self._post("products", payload)
