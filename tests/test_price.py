import pytest

from ali_importer.extractors.price import extract_price, parse_price

from .helpers import make_page


def test_dollar_price():
    assert extract_price(make_page(body="<span>$49.99</span>")) == 49.99


def test_out_of_range_price_is_rejected():
    assert extract_price(make_page(body="<span>$15000</span>")) == 0.0


def test_thousands_separator():
    assert extract_price(make_page(body="<span>US $1,299.00</span>")) == 1299.0


def test_usd_prefix():
    assert extract_price(make_page(body="<span>usd 7.25</span>")) == 7.25


def test_falls_through_to_structured_fields():
    html = make_page(body='<script>{"skuId": 12, "minPrice": "3.80", "maxPrice": "9.10"}</script>')
    assert extract_price(html) == 3.8


def test_out_of_range_dollar_falls_through_to_next_pattern():
    html = make_page(body='<b>$25000</b><script>{"formatedActivityPrice": "US $18.40"}</script>')
    # "US $18.40" is not a USD match, so the promo price field decides
    assert extract_price(html) == 18.4


def test_first_pattern_wins_over_sale_price():
    html = make_page(body='<b>$30.00</b><script>{"formatedActivityPrice": "US $18.40"}</script>')
    assert extract_price(html) == 30.0


def test_no_price_is_zero():
    assert extract_price(make_page(body="<p>Contact supplier</p>")) == 0.0


@pytest.mark.parametrize("raw,expected", [
    ("12.5", 12.5),
    ("0", None),
    ("10000", None),
    ("9999.99", 9999.99),
    (",", None),
    ("1.2.3", None),
])
def test_parse_price(raw, expected):
    assert parse_price(raw) == expected
