from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from marketing_site.services.bcms_client import BCMSApiError, BCMSClient


class _FakeResponse:
    def __init__(self, status_code: int, body: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)
        self.reason = "Reason"

    def json(self) -> Any:
        if self._body is None:
            raise ValueError("no json")
        return self._body


class _FakeSession:
    def __init__(self, response: _FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.requests: list[dict[str, Any]] = []

    def get(self, url: str, headers: dict | None = None, timeout: float | None = None) -> _FakeResponse:
        self.requests.append({"url": url, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _client(session: _FakeSession) -> BCMSClient:
    return BCMSClient(
        "org-1",
        "inst-1",
        "key-id",
        "key-secret",
        origin="https://cms.example.com/",
        timeout=5,
        session=session,
    )


def test_get_all_requests_parsed_entries() -> None:
    entries = [{"meta": {"en": {"slug": "a"}}}, {"meta": {"en": {"slug": "b"}}}]
    session = _FakeSession(_FakeResponse(200, {"items": entries}))

    result = _client(session).entry.get_all("blog_post")

    assert result == entries
    sent = session.requests[0]
    assert sent["url"] == "https://cms.example.com/api/v3/org/org-1/instance/inst-1/template/blog_post/entry/all/parse"
    assert sent["headers"]["Authorization"] == "ApiKey key-id.key-secret"
    assert sent["timeout"] == 5


def test_get_all_accepts_bare_list() -> None:
    session = _FakeSession(_FakeResponse(200, [{"meta": {}}]))
    assert _client(session).entry.get_all("service") == [{"meta": {}}]


def test_get_by_slug_unwraps_item_and_quotes_slug() -> None:
    entry = {"meta": {"en": {"slug": "hello world"}}}
    session = _FakeSession(_FakeResponse(200, {"item": entry}))

    assert _client(session).entry.get_by_slug("hello world", "blog_post") == entry
    assert session.requests[0]["url"].endswith("/template/blog_post/entry/hello%20world/parse")


def test_http_error_raises_api_error() -> None:
    session = _FakeSession(_FakeResponse(404, {"message": "Entry not found"}))

    with pytest.raises(BCMSApiError) as excinfo:
        _client(session).entry.get_by_slug("nope", "blog_post")

    assert excinfo.value.status == 404
    assert excinfo.value.message == "Entry not found"


def test_http_error_without_json_uses_text() -> None:
    session = _FakeSession(_FakeResponse(502, None, text="Bad gateway"))

    with pytest.raises(BCMSApiError) as excinfo:
        _client(session).entry.get_all("service")

    assert excinfo.value.status == 502
    assert "Bad gateway" in str(excinfo.value)


def test_transport_error_raises_api_error() -> None:
    session = _FakeSession(error=requests.ConnectionError("refused"))

    with pytest.raises(BCMSApiError) as excinfo:
        _client(session).entry.get_all("service")

    assert excinfo.value.status == 0


def test_unexpected_payload_shape() -> None:
    session = _FakeSession(_FakeResponse(200, {"items": "oops"}))

    with pytest.raises(BCMSApiError):
        _client(session).entry.get_all("service")
