from urllib.parse import urlparse

from .models import SourcePlatform

# host fragment -> platform, checked in order
PLATFORM_HOSTS = (
    ("aliexpress.com", SourcePlatform.ALIEXPRESS),
    ("alibaba.com", SourcePlatform.ALIBABA),
)


def domain_from_url(url: str) -> str:
    # "es.aliexpress.com/item/1.html" has no scheme, so netloc would be empty
    if "://" not in url and not url.startswith("//"):
        url = "//" + url
    try:
        host = urlparse(url).hostname
    except ValueError:
        # e.g. "https://[aliexpress.com/..." (unbalanced IPv6 bracket)
        return ""
    return (host or "").lower()


def normalize_domain(domain: str) -> str:
    d = domain.lower()
    if d.startswith("www."):
        d = d[4:]
    return d


def classify_source(url: str) -> SourcePlatform:
    host = normalize_domain(domain_from_url((url or "").strip()))
    for fragment, platform in PLATFORM_HOSTS:
        if fragment in host:
            return platform
    return SourcePlatform.UNKNOWN
