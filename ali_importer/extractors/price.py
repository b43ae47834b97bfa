from __future__ import annotations

import logging
import re
from typing import Optional

from ..config import MAX_PRICE, MIN_PRICE

logger = logging.getLogger(__name__)

# Order matters: the first pattern giving a plausible price wins
PRICE_PATTERNS = (
    re.compile(r"\$\s*([\d,]+\.?\d*)"),
    re.compile(r"USD\s*([\d,]+\.?\d*)", re.IGNORECASE),
    re.compile(r'"minPrice":\s*"?([\d.]+)', re.IGNORECASE),
    re.compile(r'"formatedActivityPrice":\s*"[^"]*\$\s*([\d.]+)', re.IGNORECASE),
    re.compile(r'"formatedPrice":\s*"[^"]*\$\s*([\d.]+)', re.IGNORECASE),
)


def parse_price(raw: str) -> Optional[float]:
    """'1,299.00' -> 1299.0; None when it is not a plausible retail price."""
    try:
        value = float(raw.replace(",", ""))
    except ValueError:
        return None
    if MIN_PRICE < value < MAX_PRICE:
        return value
    return None


def extract_price(html: str) -> float:
    for pattern in PRICE_PATTERNS:
        m = pattern.search(html)
        if not m:
            continue
        value = parse_price(m.group(1))
        if value is not None:
            logger.debug(f"price {value} from {pattern.pattern!r}")
            return value
    return 0.0
