from unittest import mock

import pytest
import requests

from ali_importer.config import Settings
from ali_importer.errors import StoreApiError
from ali_importer.store_api import StoreClient


def _response(json_data, status=200):
    r = mock.Mock(status_code=status)
    r.json.return_value = json_data
    if status >= 400:
        r.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    return r


def test_create_product_posts_payload():
    client = StoreClient("https://shop.example/api/", api_key="tok")
    with mock.patch.object(client.session, "post", return_value=_response({"data": {"id": 7}})) as post:
        record = client.create_product({"name": "Blue Hat"})

    post.assert_called_once_with("https://shop.example/api/products", json={"name": "Blue Hat"}, timeout=90)
    assert record == {"id": 7}
    assert client.session.headers["Authorization"] == "Bearer tok"


def test_list_categories():
    client = StoreClient("https://shop.example/api")
    cats = [{"id": 1, "name": "Gorros"}]
    with mock.patch.object(client.session, "get", return_value=_response(cats)):
        assert client.list_categories() == cats
    assert "Authorization" not in client.session.headers


def test_error_payload_raises():
    client = StoreClient("https://shop.example/api")
    with mock.patch.object(client.session, "post", return_value=_response({"error": "invalid categoryId"})):
        with pytest.raises(StoreApiError, match="invalid categoryId"):
            client.create_product({})


def test_http_error_propagates():
    client = StoreClient("https://shop.example/api")
    with mock.patch.object(client.session, "post", return_value=_response({}, status=500)):
        with pytest.raises(requests.HTTPError):
            client.create_product({})


def test_from_settings_requires_url():
    with pytest.raises(StoreApiError):
        StoreClient.from_settings(Settings())
    assert StoreClient.from_settings(Settings(store_api_url="https://shop.example/api")).base_url == "https://shop.example/api"
