# =============================================================================
# core/hudu_client.py  —  HUDU REST Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Talks to the HUDU REST API.  Two operations cover every read the server
#   needs:
#     list(resource, params)  → GET /api/v1/<path>?...  → PaginatedResult
#     get(resource, id)       → GET /api/v1/<path>/<id> → one record
#   plus get_api_info() for the startup connectivity check.
#
# WHAT IT DOES NOT DO:
#   No retries, no caching.  A failed request fails the tool call; the host
#   decides whether to call again.
#
# FAILURES:
#   Non-2xx status  → HuduApiError ("HUDU API Error (<status>): <detail>")
#   No response     → HuduConnectionError (DNS, refused, timeout...)
#
# WHY httpx.AsyncClient?
#   The MCP server runs on one event loop.  An async client lets a slow HUDU
#   request wait without blocking other tool calls the host may overlap.
# =============================================================================

from typing import Any, Mapping, Optional

import httpx

from core.config import HuduConfig
from core.errors import HuduApiError, HuduConnectionError
from core.models import PaginatedResult, Resource
from core.params import normalize_pagination_params


# =============================================================================
# The HUDU record types this server reads
# =============================================================================
COMPANIES = Resource("companies", "companies", "company")
ARTICLES = Resource("articles", "articles", "article")
ASSETS = Resource("assets", "assets", "asset")
ASSET_PASSWORDS = Resource("asset_passwords", "asset_passwords", "asset_password")
ASSET_LAYOUTS = Resource("asset_layouts", "asset_layouts", "asset_layout")
ACTIVITY_LOGS = Resource("activity_logs", "activity_logs", "activity_log")
FOLDERS = Resource("folders", "folders", "folder")
USERS = Resource("users", "users", "user")
NETWORKS = Resource("networks", "networks", "network")
PROCEDURES = Resource("procedures", "procedures", "procedure")


class HuduClient:
    """Async client for one HUDU instance.

    Use as an async context manager, or call ``aclose()`` when done::

        async with HuduClient(config) as client:
            page = await client.list(COMPANIES, {"page_size": 10})
    """

    def __init__(
        self,
        config: HuduConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            headers={
                "x-api-key": config.api_key,
                "Content-Type": "application/json",
            },
            timeout=config.timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "HuduClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # -- operations ----------------------------------------------------------

    async def get_api_info(self) -> dict[str, Any]:
        return await self._get("/api/v1/api_info")

    async def list(
        self, resource: Resource, params: Optional[Mapping[str, Any]] = None
    ) -> PaginatedResult:
        """Fetch one page of ``resource`` records."""
        query = normalize_pagination_params(params or {})
        body = await self._get(resource.endpoint, params=query)
        return PaginatedResult(
            data=body.get(resource.collection_key) or [],
            meta=body.get("meta") or {},
        )

    async def get(self, resource: Resource, record_id: int) -> Any:
        """Fetch a single ``resource`` record by id."""
        body = await self._get(f"{resource.endpoint}/{record_id}")
        return body.get(resource.item_key)

    # -- transport -----------------------------------------------------------

    async def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        try:
            response = await self._http.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise HuduApiError(exc.response.status_code, _error_detail(exc.response)) from exc
        except httpx.RequestError as exc:
            raise HuduConnectionError(
                f"Request to {path} failed: {type(exc).__name__}: {exc}"
            ) from exc
        return response.json()


def _error_detail(response: httpx.Response) -> str:
    """Pull a readable message out of a HUDU error response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("error", "message", "errors"):
            if body.get(key):
                return str(body[key])
    return response.reason_phrase or "Request failed"
