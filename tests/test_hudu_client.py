"""Tests for core/hudu_client.py against an in-process httpx transport."""

import asyncio

import httpx
import pytest

from core.config import HuduConfig
from core.errors import HuduApiError, HuduConnectionError
from core.hudu_client import ARTICLES, ASSET_PASSWORDS, COMPANIES, HuduClient

CONFIG = HuduConfig(api_key="secret-key", base_url="https://docs.example.com")


def run_with(handler, operation):
    """Run ``operation(client)`` against a client wired to ``handler``."""

    async def scenario():
        async with HuduClient(CONFIG, transport=httpx.MockTransport(handler)) as client:
            return await operation(client)

    return asyncio.run(scenario())


def test_list_sends_key_and_normalized_query():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={
            "companies": [{"id": 1, "name": "Acme"}],
            "meta": {"current_page": 2, "total_count": 1},
        })

    result = run_with(handler, lambda c: c.list(COMPANIES, {"page": "2", "page_size": 999, "name": "Acme"}))

    request = seen[0]
    assert request.url.path == "/api/v1/companies"
    assert request.headers["x-api-key"] == "secret-key"
    assert dict(request.url.params) == {"page": "2", "page_size": "100", "name": "Acme"}
    assert result.data == [{"id": 1, "name": "Acme"}]
    assert result.meta == {"current_page": 2, "total_count": 1}


def test_list_tolerates_missing_collection_and_meta():
    result = run_with(
        lambda request: httpx.Response(200, json={}),
        lambda c: c.list(ASSET_PASSWORDS),
    )

    assert result.data == []
    assert result.meta == {}


def test_booleans_are_sent_as_lowercase_strings():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"articles": []})

    run_with(handler, lambda c: c.list(ARTICLES, {"draft": False}))

    assert seen[0].url.params["draft"] == "false"


def test_get_returns_the_singular_record():
    def handler(request):
        assert request.url.path == "/api/v1/articles/17"
        return httpx.Response(200, json={"article": {"id": 17, "name": "Backups"}})

    record = run_with(handler, lambda c: c.get(ARTICLES, 17))

    assert record == {"id": 17, "name": "Backups"}


def test_http_error_carries_status_and_detail():
    def handler(request):
        return httpx.Response(401, json={"error": "Invalid API key"})

    with pytest.raises(HuduApiError) as excinfo:
        run_with(handler, lambda c: c.list(COMPANIES))

    assert excinfo.value.status_code == 401
    assert str(excinfo.value) == "HUDU API Error (401): Invalid API key"


def test_http_error_without_json_body_uses_reason_phrase():
    with pytest.raises(HuduApiError) as excinfo:
        run_with(lambda request: httpx.Response(503, text="oops"), lambda c: c.get_api_info())

    assert str(excinfo.value) == "HUDU API Error (503): Service Unavailable"


def test_transport_failure_is_connection_error():
    def handler(request):
        raise httpx.ConnectError("name resolution failed", request=request)

    with pytest.raises(HuduConnectionError) as excinfo:
        run_with(handler, lambda c: c.list(COMPANIES))

    assert "/api/v1/companies" in str(excinfo.value)
    assert "ConnectError" in str(excinfo.value)
