import html as html_lib
import re

from .base import meta_contents, run_chain

TITLE_TAG_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
SITE_SUFFIX_RES = (
    re.compile(r"-\s*AliExpress.*$", re.IGNORECASE | re.DOTALL),
    re.compile(r"-\s*Alibaba.*$", re.IGNORECASE | re.DOTALL),
)
PIPE_SUFFIX_RE = re.compile(r"\|.*$", re.DOTALL)


def clean_title(raw: str, strip_pipe: bool = False) -> str:
    t = html_lib.unescape(raw or "")
    for rx in SITE_SUFFIX_RES:
        t = rx.sub("", t)
    if strip_pipe:
        t = PIPE_SUFFIX_RE.sub("", t)
    return t.strip()


def _og_title(html: str) -> str:
    for content in meta_contents(html, properties=("og:title",)):
        title = clean_title(content)
        if title:
            return title
    return ""


def _document_title(html: str) -> str:
    m = TITLE_TAG_RE.search(html)
    return clean_title(m.group(1), strip_pipe=True) if m else ""


TITLE_STRATEGIES = (_og_title, _document_title)


def extract_title(html: str) -> str:
    """og:title, then <title>. Empty string when neither yields text."""
    return run_chain(TITLE_STRATEGIES, html) or ""
