import pytest

from ali_importer.models import RawDocument

from .helpers import make_page


@pytest.fixture
def fake_fetcher():
    """Fetcher returning a fixed page and recording the URLs it was called with."""

    class FakeFetcher:
        def __init__(self):
            self.html = ""
            self.calls = []

        def __call__(self, url, settings=None):
            self.calls.append(url)
            return RawDocument(url=url, html=self.html, status_code=200)

    return FakeFetcher()


@pytest.fixture
def product_page():
    head = (
        '<title>Blue Hat | AliExpress</title>'
        '<meta property="og:title" content="Blue Hat - AliExpress">'
        '<meta property="og:description" content="Nice hat">'
        '<meta property="og:image" content="https://ae01.alicdn.com/kf/hat-front.jpg">'
        '<meta property="og:image" content="https://ae01.alicdn.com/kf/hat-side.jpg">'
    )
    body = '<div class="product-price"><span>$12.50</span></div>'
    return make_page(head, body)
