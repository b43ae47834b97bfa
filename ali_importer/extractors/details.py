"""
Specifications block and attribute pairs.

details comes from, in order:
  1. the embedded "skuPropertyList" JSON
  2. <div class="...specification..."> fragments
  3. the attrName/attrValue pairs (only when 1 and 2 gave nothing)
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Tuple

from bs4 import BeautifulSoup

from ..config import MAX_DETAILS_LENGTH, MIN_DETAILS_LENGTH
from .base import load_embedded_json

logger = logging.getLogger(__name__)

SPEC_DIV_RE = re.compile(
    r'<div[^>]*class="[^"]*specification[^"]*"[^>]*>[\s\S]*?</div>',
    re.IGNORECASE,
)
ATTR_PAIR_RE = re.compile(
    r'"attrName":\s*"([^"]+)",\s*"attrValue":\s*"([^"]+)"',
    re.IGNORECASE,
)


def details_from_sku_properties(html: str) -> str:
    specs = load_embedded_json(html, "skuPropertyList")
    if not isinstance(specs, list):
        return ""

    lines = []
    for spec in specs:
        if not isinstance(spec, dict):
            continue
        name = spec.get("skuPropertyName")
        values = spec.get("skuPropertyValues")
        if not name or not isinstance(values, list):
            continue
        shown = [
            str(v.get("propertyValueDisplayName") or v.get("propertyValueName"))
            for v in values
            if isinstance(v, dict) and (v.get("propertyValueDisplayName") or v.get("propertyValueName"))
        ]
        lines.append(f"{name}: {', '.join(shown)}")
    return "\n".join(lines)


def details_from_spec_blocks(html: str) -> str:
    fragments = SPEC_DIV_RE.findall(html)
    if not fragments:
        return ""
    text = BeautifulSoup(" ".join(fragments), "lxml").get_text(" ")
    text = " ".join(text.split())
    if len(text) > MIN_DETAILS_LENGTH:
        return text[:MAX_DETAILS_LENGTH]
    return ""


def extract_attributes(html: str, limit: int = 10) -> Dict[str, str]:
    attributes: Dict[str, str] = {}
    for m in ATTR_PAIR_RE.finditer(html):
        if len(attributes) >= limit:
            break
        attributes[m.group(1)] = m.group(2)
    return attributes


def extract_details(html: str, attribute_limit: int = 10) -> Tuple[str, Dict[str, str]]:
    """Return (details, attributes)."""
    details = details_from_sku_properties(html)
    if not details:
        details = details_from_spec_blocks(html)

    attributes = extract_attributes(html, attribute_limit)

    if not details and attributes:
        details = "\n".join(f"{k}: {v}" for k, v in attributes.items())

    logger.debug(f"details: {len(details)} chars, {len(attributes)} attributes")
    return details, attributes
