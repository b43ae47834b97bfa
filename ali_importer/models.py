from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class SourcePlatform(Enum):
    ALIEXPRESS = "aliexpress"
    ALIBABA = "alibaba"
    UNKNOWN = "unknown"


@dataclass
class RawDocument:
    url: str
    html: str
    status_code: int
    via_proxy: bool = False


@dataclass
class ScrapedProduct:
    title: str
    description: str = ""
    details: str = ""
    # 0 = not detected
    price: float = 0.0
    images: List[str] = field(default_factory=list)
    videos: List[str] = field(default_factory=list)
    attributes: Dict[str, str] = field(default_factory=dict)
    source: SourcePlatform = SourcePlatform.UNKNOWN

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "details": self.details,
            "price": self.price,
            "images": list(self.images),
            "videos": list(self.videos),
            "attributes": dict(self.attributes),
            "source": self.source.value,
        }


@dataclass
class ScrapeResult:
    success: bool
    data: Optional[ScrapedProduct] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: ScrapedProduct) -> "ScrapeResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ScrapeResult":
        return cls(success=False, error=error)

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "data": self.data.to_dict()}
        return {"success": False, "error": self.error}


@dataclass
class ImportOverrides:
    """User corrections applied on top of a ScrapedProduct before import"""
    category_id: Optional[int]
    custom_name: Optional[str] = None
    custom_price: Optional[float] = None
    custom_description: Optional[str] = None


@dataclass
class ProductInput:
    name: str
    description: str
    details: Optional[str]
    price_usd: float
    is_offer: bool
    stock: int
    image: str
    images: List[str] = field(default_factory=list)
    videos: List[str] = field(default_factory=list)
    category_id: Optional[int] = None

    def to_payload(self) -> dict:
        """Shape expected by the store's product-creation endpoint."""
        return {
            "name": self.name,
            "description": self.description,
            "details": self.details,
            "priceUsd": self.price_usd,
            "isOffer": self.is_offer,
            "stock": self.stock,
            "image": self.image,
            "images": list(self.images),
            "videos": list(self.videos),
            "categoryId": self.category_id,
        }


@dataclass
class ImportResult:
    success: bool
    product_id: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, product_id: int) -> "ImportResult":
        return cls(success=True, product_id=product_id)

    @classmethod
    def fail(cls, error: str) -> "ImportResult":
        return cls(success=False, error=error)
