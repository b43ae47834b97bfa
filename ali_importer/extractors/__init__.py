from .description import extract_description
from .details import extract_attributes, extract_details
from .media import extract_images, extract_videos
from .price import extract_price
from .title import extract_title

__all__ = [
    "extract_title",
    "extract_description",
    "extract_details",
    "extract_attributes",
    "extract_price",
    "extract_images",
    "extract_videos",
]
