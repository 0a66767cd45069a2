"""Tests for the REST backend data source."""

from unittest.mock import MagicMock

import pytest
import requests

from txdash.datasource.factories import DEFAULT_API_URL, create_http_data_source
from txdash.datasource.http import HttpDataSource
from txdash.domain.entities import Customer, Transaction
from txdash.domain.errors import DecodeError, NetworkError


def _response(payload=None, status_error=None, json_error=None):
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def _source(*responses):
    session = MagicMock()
    session.get.side_effect = list(responses)
    return HttpDataSource("http://backend.test/api/", timeout=3, session=session), session


def test_fetch_customers():
    source, session = _source(_response([{"id": 1, "name": "Alice"}]))

    assert source.fetch_customers() == [Customer(id=1, name="Alice")]
    session.get.assert_called_once_with("http://backend.test/api/customers", timeout=3)


def test_fetch_transactions():
    source, session = _source(
        _response([{"customer_id": 1, "date": "2024-01-01", "amount": 12.5}])
    )

    assert source.fetch_transactions() == [
        Transaction(customer_id=1, date="2024-01-01", amount=12.5)
    ]
    session.get.assert_called_once_with("http://backend.test/api/transactions", timeout=3)


def test_connection_error_becomes_network_error():
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("refused")
    source = HttpDataSource("http://backend.test/api", session=session)

    with pytest.raises(NetworkError, match="refused"):
        source.fetch_customers()


def test_http_status_error_becomes_network_error():
    source, _ = _source(_response(status_error=requests.HTTPError("500 Server Error")))

    with pytest.raises(NetworkError, match="500"):
        source.fetch_transactions()


def test_invalid_json_becomes_decode_error():
    source, _ = _source(_response(json_error=ValueError("Expecting value")))

    with pytest.raises(DecodeError):
        source.fetch_customers()


def test_wrong_shape_becomes_decode_error():
    source, _ = _source(_response({"data": []}))

    with pytest.raises(DecodeError):
        source.fetch_customers()


def test_factory_defaults(monkeypatch):
    monkeypatch.delenv("TXDASH_API_URL", raising=False)
    monkeypatch.delenv("TXDASH_HTTP_TIMEOUT", raising=False)

    source = create_http_data_source()

    assert source.base_url == DEFAULT_API_URL
    assert source.timeout == 10.0


def test_factory_reads_environment(monkeypatch):
    monkeypatch.setenv("TXDASH_API_URL", "http://env.test/api")
    monkeypatch.setenv("TXDASH_HTTP_TIMEOUT", "2.5")

    source = create_http_data_source()

    assert source.base_url == "http://env.test/api"
    assert source.timeout == 2.5


def test_factory_argument_wins(monkeypatch):
    monkeypatch.setenv("TXDASH_API_URL", "http://env.test/api")
    assert create_http_data_source("http://arg.test").base_url == "http://arg.test"


def test_disconnect_closes_session():
    source, session = _source()

    source.disconnect()

    session.close.assert_called_once_with()
