"""
Product images and videos.

Higher-confidence sources are read first; every candidate goes through the
same de-duplicating, capped list so later (noisier) sources only fill the
remaining slots.
"""

from __future__ import annotations

import logging
import re
from typing import List

from ..config import CDN_MARKERS, EXCLUDED_IMAGE_MARKERS
from .base import CappedUniqueList, load_embedded_json, meta_contents

logger = logging.getLogger(__name__)

QUOTED_RE = re.compile(r'"([^"]+)"')
CDN_IMAGE_RE = re.compile(
    r"""(https?://[^"'\s<>]+(?:%s)[^"'\s<>]+\.(?:jpg|jpeg|png|webp))""" % "|".join(CDN_MARKERS),
    re.IGNORECASE,
)
# also matches JSON-escaped "https:\/\/...\/clip.mp4"
MP4_RE = re.compile(r"""(https?:(?:\\?/){2}[^"'\s<>]+?\.mp4)""", re.IGNORECASE)


def _json_url_list(html: str, key: str) -> List[str]:
    """Quoted http(s) entries of a `"key": [...]` array, backslash escapes removed."""
    m = re.search(r'"%s":\s*\[([^\]]+)\]' % re.escape(key), html)
    if not m:
        return []
    out = []
    for item in QUOTED_RE.findall(m.group(1)):
        url = item.replace("\\", "")
        if url.startswith("http"):
            out.append(url)
    return out


def _cdn_images(html: str) -> List[str]:
    out = []
    for m in CDN_IMAGE_RE.finditer(html):
        url = m.group(1)
        if any(marker in url for marker in EXCLUDED_IMAGE_MARKERS):
            continue
        out.append(url)
    return out


def extract_images(html: str, limit: int = 15) -> List[str]:
    images = CappedUniqueList(limit)
    images.extend(meta_contents(html, properties=("og:image", "og:image:url")))
    images.extend(_json_url_list(html, "imagePathList"))
    images.extend(_json_url_list(html, "galleryUrls"))
    images.extend(_cdn_images(html))
    logger.debug(f"{len(images)} images")
    return images.to_list()


def _video_module(html: str) -> List[str]:
    module = load_embedded_json(html, "videoModule", opener="{")
    if isinstance(module, dict) and isinstance(module.get("videoUrl"), str):
        return [module["videoUrl"]]
    return []


def _video_from_ids(html: str) -> List[str]:
    # videoId + videoUid appear on some pages, but there is no known rule to
    # build a playable URL from them.
    return []


def _mp4_links(html: str) -> List[str]:
    return [m.replace("\\/", "/") for m in MP4_RE.findall(html)]


VIDEO_STRATEGIES = (_video_module, _video_from_ids, _mp4_links)


def extract_videos(html: str, limit: int = 5) -> List[str]:
    videos = CappedUniqueList(limit)
    for strategy in VIDEO_STRATEGIES:
        videos.extend(strategy(html))
    return videos.to_list()
