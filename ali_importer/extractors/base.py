"""
Shared helpers for the field extractors.

Extractors work on the raw HTML text with targeted patterns, no DOM tree.
Each one returns an empty value when nothing is found and never raises for
a missing field.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Callable, Iterable, Iterator, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# quoted attribute values may contain ">"
META_TAG_RE = re.compile(r"""<meta\b(?:[^>"']|"[^"]*"|'[^']*')*>""", re.IGNORECASE)
ATTR_RE = re.compile(r"""([\w:.-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")


def iter_meta(html: str) -> Iterator[dict]:
    """Yield the attributes of every <meta> tag (names lower-cased), in document order."""
    for m in META_TAG_RE.finditer(html):
        attrs = {}
        for name, dq, sq in ATTR_RE.findall(m.group(0)):
            attrs[name.lower()] = dq if dq or not sq else sq
        yield attrs


def meta_contents(html: str, *, properties: Iterable[str] = (), names: Iterable[str] = ()) -> List[str]:
    """Contents of the meta tags whose property or name is one of the given values."""
    props = {p.lower() for p in properties}
    nms = {n.lower() for n in names}
    out = []
    for attrs in iter_meta(html):
        content = attrs.get("content")
        if not content:
            continue
        if attrs.get("property", "").lower() in props or attrs.get("name", "").lower() in nms:
            out.append(content)
    return out


def run_chain(strategies: Iterable[Callable[[str], Optional[T]]], html: str) -> Optional[T]:
    """First truthy strategy result wins."""
    for strategy in strategies:
        value = strategy(html)
        if value:
            return value
    return None


def balanced_literal(html: str, key: str, opener: str = "[") -> Optional[str]:
    """
    Find `"key": [ ... ]` (or `{ ... }`) and return the bracketed literal.

    Brackets inside JSON strings are skipped. Returns None if the key is
    missing or the literal is never closed.
    """
    closer = "]" if opener == "[" else "}"
    m = re.search(r'"%s"\s*:\s*%s' % (re.escape(key), re.escape(opener)), html)
    if not m:
        return None

    start = m.end() - 1
    depth = 0
    in_str = False
    escaped = False
    for i in range(start, len(html)):
        ch = html[i]
        if in_str:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_str = False
            continue
        if ch == '"':
            in_str = True
        elif ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return html[start:i + 1]
    return None


def load_embedded_json(html: str, key: str, opener: str = "["):
    """Parse an embedded JSON literal; malformed or missing yields None."""
    raw = balanced_literal(html, key, opener)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        logger.debug(f"Ignoring malformed '{key}' JSON: {e}")
        return None


class CappedUniqueList:
    """Order-preserving list that drops duplicates and anything past `limit`."""

    def __init__(self, limit: int):
        self.limit = limit
        self._items: List[str] = []
        self._seen = set()

    def add(self, value: Optional[str]) -> bool:
        if not value or value in self._seen or self.full:
            return False
        self._seen.add(value)
        self._items.append(value)
        return True

    def extend(self, values: Iterable[str]) -> None:
        for v in values:
            self.add(v)

    @property
    def full(self) -> bool:
        return len(self._items) >= self.limit

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> List[str]:
        return list(self._items)
