# tests/test_api_client.py
from __future__ import annotations

import pytest
import requests

from fakes import FakeResponse, FakeSession
from services.api_client import ApiClient


def test_sets_json_content_type_on_session():
    session = FakeSession()
    ApiClient("http://localhost:8080", session=session)
    assert session.headers["Content-Type"] == "application/json"


@pytest.mark.parametrize(
    "base, path, expected",
    [
        ("http://localhost:8080", "/api/spending/categories", "http://localhost:8080/api/spending/categories"),
        ("http://localhost:8080/", "/categories", "http://localhost:8080/categories"),
        ("http://localhost:8080/api/spending", "current-week", "http://localhost:8080/api/spending/current-week"),
    ],
)
def test_url_for_joins_without_double_slashes(base, path, expected):
    client = ApiClient(base, session=FakeSession())
    assert client.url_for(path) == expected


def test_get_returns_parsed_body():
    session = FakeSession(FakeResponse(200, [{"id": 1, "name": "Food"}]))
    client = ApiClient("http://api", session=session)

    body = client.get("/categories")

    assert body == [{"id": 1, "name": "Food"}]
    assert session.calls == [
        {"method": "GET", "url": "http://api/categories", "json": None, "timeout": None}
    ]


def test_post_sends_json_payload_and_timeout():
    session = FakeSession(FakeResponse(201, {"id": 7}))
    client = ApiClient("http://api", timeout=3.5, session=session)

    body = client.post("/transactions", {"amount": 10.0, "categoryName": "Food"})

    assert body == {"id": 7}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["json"] == {"amount": 10.0, "categoryName": "Food"}
    assert call["timeout"] == 3.5


def test_empty_body_returns_none():
    client = ApiClient("http://api", session=FakeSession(FakeResponse(204, None)))
    assert client.get("/anything") is None


def test_http_error_status_is_raised():
    client = ApiClient("http://api", session=FakeSession(FakeResponse(500, {"error": "boom"})))
    with pytest.raises(requests.HTTPError) as exc_info:
        client.get("/current-week")
    assert exc_info.value.response.status_code == 500


def test_transport_error_propagates_unchanged():
    err = requests.ConnectionError("refused")
    client = ApiClient("http://api", session=FakeSession(err))
    with pytest.raises(requests.ConnectionError) as exc_info:
        client.get("/current-week")
    assert exc_info.value is err


def test_close_closes_session():
    session = FakeSession()
    ApiClient("http://api", session=session).close()
    assert session.closed
