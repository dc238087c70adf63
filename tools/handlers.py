# =============================================================================
# tools/handlers.py  —  Resource handler groups (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares every tool the server exposes and what each one does with
#   HUDU.  HUDU's resources all look alike (a paginated list endpoint and a
#   get-by-id endpoint), so instead of hand-writing seventeen handlers there
#   is ONE ResourceHandler class, instantiated once per resource with:
#     - the Resource (REST path + JSON keys)
#     - its list and/or get ToolSpec (name, description, argument schema)
#     - how to phrase the summary line
#     - an optional post-processing step (masking, preview trimming)
#
# TOOL NAMING CONVENTIONS:
#   - get_*    → Read-only retrieval (idempotent, safe to retry)
#   - search_* → Query with filters (idempotent, safe to retry)
#   All tools are read-only.  Nothing here writes to HUDU.
#
# CONTEXT BUDGET DISCIPLINE:
#   Every reply goes through create_tool_response(), which bounds its size.
#   Listings that carry heavy fields (article HTML) are trimmed to previews
#   before that, so truncation is the exception rather than the rule.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from core import hudu_client as hudu
from core.envelope import create_tool_response
from core.errors import HuduApiError
from core.models import Resource
from core.params import ToolParams, validate_arguments
from core import schemas
from tools.errors import MethodNotFoundError
from tools.log import log_status

PASSWORD_MASK = "***MASKED***"
ARTICLE_PREVIEW_LENGTH = 200

# Phrases appended to a list summary for each filter the caller used, in the
# order the handler lists them: 'Found 3 assets for company ID 7 with layout ID 2'
_FILTER_PHRASES = {
    "name": ' matching "{}"',
    "search": ' matching "{}"',
    "company_id": " for company ID {}",
    "asset_layout_id": " with layout ID {}",
}


@dataclass(frozen=True)
class ToolSpec:
    """Name, description and argument schema of one MCP tool."""

    name: str
    description: str
    params: type[ToolParams]

    def input_schema(self) -> dict[str, Any]:
        return self.params.model_json_schema()


@dataclass(frozen=True)
class ResourceHandler:
    """List and get tools for one HUDU resource."""

    group: str
    resource: Resource
    list_tool: Optional[ToolSpec] = None
    get_tool: Optional[ToolSpec] = None
    noun: str = "records"
    verb: str = "Found"
    detail_summary: str = "Details for record: {name}"
    filter_phrases: tuple[str, ...] = ()
    transform: Optional[Callable[[list[Any]], list[Any]]] = None
    note: Optional[str] = None
    access_denied: Optional[Callable[[], dict[str, Any]]] = None

    @property
    def tools(self) -> list[ToolSpec]:
        return [spec for spec in (self.list_tool, self.get_tool) if spec is not None]

    async def handle(self, tool_name: str, arguments: Any, client: Any) -> dict[str, Any]:
        if self.list_tool is not None and tool_name == self.list_tool.name:
            return await self._list(arguments, client)
        if self.get_tool is not None and tool_name == self.get_tool.name:
            return await self._get(arguments, client)
        raise MethodNotFoundError(f"Unknown {self.group} tool: {tool_name}")

    async def _list(self, arguments: Any, client: Any) -> dict[str, Any]:
        query = validate_arguments(self.list_tool.params, arguments).to_query()

        try:
            result = await client.list(self.resource, query)
        except HuduApiError as exc:
            if exc.status_code == 401 and self.access_denied is not None:
                log_status(f"{self.list_tool.name}: HUDU refused access (401), replying with guidance")
                return create_tool_response(self.access_denied())
            raise

        log_status(f"HUDU returned {len(result.data)} {self.resource.collection_key}")
        records = self.transform(result.data) if self.transform else result.data
        summary = self.describe_list(len(result.data), query)

        payload = {
            self.resource.collection_key: records,
            "pagination": result.meta,
            "summary": summary,
        }
        if self.note:
            payload["note"] = self.note
        return create_tool_response(payload, summary)

    async def _get(self, arguments: Any, client: Any) -> dict[str, Any]:
        params = validate_arguments(self.get_tool.params, arguments)
        record = await client.get(self.resource, params.id)
        if record is None:
            raise LookupError(
                f"HUDU returned no {self.resource.item_key} for id {params.id}"
            )

        name = record.get("name") if isinstance(record, dict) else None
        summary = self.detail_summary.format(name=name or f"#{params.id}")
        return create_tool_response({self.resource.item_key: record, "summary": summary}, summary)

    def describe_list(self, count: int, query: Mapping[str, Any]) -> str:
        qualifiers = "".join(
            _FILTER_PHRASES[field].format(query[field])
            for field in self.filter_phrases
            if query.get(field)
        )
        return f"{self.verb} {count} {self.noun}{qualifiers}"


# =============================================================================
# Post-processing steps
# =============================================================================
def mask_password_secrets(records: list[Any]) -> list[Any]:
    """Replace secret values so the listing never returns them.

    ``password`` is always masked.  ``otp_secret`` is masked when set and
    removed otherwise, so an empty secret can't be told apart from a hidden one.
    """
    masked = []
    for record in records:
        item = dict(record)
        item["password"] = PASSWORD_MASK
        if item.get("otp_secret"):
            item["otp_secret"] = PASSWORD_MASK
        else:
            item.pop("otp_secret", None)
        masked.append(item)
    return masked


def summarize_articles(records: list[Any]) -> list[Any]:
    """Trim search results to metadata plus a short content preview."""
    summaries = []
    for article in records:
        content = article.get("content") or ""
        if len(content) > ARTICLE_PREVIEW_LENGTH:
            content = f"{content[:ARTICLE_PREVIEW_LENGTH]}..."
        summaries.append({
            "id": article.get("id"),
            "name": article.get("name"),
            "slug": article.get("slug"),
            "company_id": article.get("company_id"),
            "archived": article.get("archived"),
            "created_at": article.get("created_at"),
            "updated_at": article.get("updated_at"),
            "content_preview": content,
        })
    return summaries


def password_access_denied() -> dict[str, Any]:
    """Reply for a key that isn't allowed to read passwords."""
    return {
        "error": "Access Denied",
        "message": (
            "Your API key does not have permission to access password data. "
            "This is a security feature in Hudu that can be configured per API key."
        ),
        "suggestion": (
            "Contact your Hudu administrator to enable password access for your API key, "
            "or use other asset management tools that don't require password permissions."
        ),
        "asset_passwords": [],
        "pagination": {"current_page": 1, "per_page": 0, "total_pages": 0, "total_count": 0},
    }


# =============================================================================
# The routing table's building blocks
# =============================================================================
HANDLERS: tuple[ResourceHandler, ...] = (
    ResourceHandler(
        group="companies",
        resource=hudu.COMPANIES,
        list_tool=ToolSpec(
            "get_companies",
            "Retrieve a list of companies/customers with advanced filtering options",
            schemas.GetCompaniesParams,
        ),
        get_tool=ToolSpec(
            "get_company_details",
            "Get detailed information about a specific company",
            schemas.GetCompanyDetailsParams,
        ),
        noun="companies",
        detail_summary="Details for company: {name}",
        filter_phrases=("name",),
    ),
    ResourceHandler(
        group="articles",
        resource=hudu.ARTICLES,
        list_tool=ToolSpec(
            "search_articles",
            "Search knowledge base articles with advanced filtering options. "
            "Returns metadata and a short content preview; use get_article for full content.",
            schemas.SearchArticlesParams,
        ),
        get_tool=ToolSpec(
            "get_article",
            "Get detailed content of a specific article",
            schemas.GetArticleParams,
        ),
        noun="articles",
        detail_summary="Full content for article: {name}",
        filter_phrases=("search", "company_id"),
        transform=summarize_articles,
    ),
    ResourceHandler(
        group="assets",
        resource=hudu.ASSETS,
        list_tool=ToolSpec(
            "get_assets",
            "Retrieve assets with advanced filtering options",
            schemas.GetAssetsParams,
        ),
        noun="assets",
        filter_phrases=("company_id", "asset_layout_id"),
    ),
    ResourceHandler(
        group="assets",
        resource=hudu.ASSET_PASSWORDS,
        list_tool=ToolSpec(
            "get_asset_passwords",
            "Retrieve password assets (credentials) for a company. Secret values are masked.",
            schemas.GetAssetPasswordsParams,
        ),
        noun="password assets",
        filter_phrases=("company_id", "name"),
        transform=mask_password_secrets,
        note="Passwords and OTP secrets are masked for security.",
        access_denied=password_access_denied,
    ),
    ResourceHandler(
        group="assets",
        resource=hudu.ASSET_LAYOUTS,
        list_tool=ToolSpec(
            "get_asset_layouts",
            "Retrieve asset layouts from HUDU",
            schemas.GetAssetLayoutsParams,
        ),
        get_tool=ToolSpec(
            "get_asset_layout",
            "Get detailed information about a specific asset layout",
            schemas.GetAssetLayoutParams,
        ),
        noun="asset layouts",
        detail_summary="Details for asset layout: {name}",
    ),
    ResourceHandler(
        group="activity",
        resource=hudu.ACTIVITY_LOGS,
        list_tool=ToolSpec(
            "get_activity_logs",
            "Retrieve activity logs with advanced filtering options",
            schemas.GetActivityLogsParams,
        ),
        noun="activity log entries",
        verb="Retrieved",
    ),
    ResourceHandler(
        group="folders",
        resource=hudu.FOLDERS,
        list_tool=ToolSpec(
            "get_folders", "Retrieve folders from HUDU", schemas.GetFoldersParams
        ),
        get_tool=ToolSpec(
            "get_folder",
            "Get detailed information about a specific folder",
            schemas.GetFolderParams,
        ),
        noun="folders",
        detail_summary="Folder details for: {name}",
        filter_phrases=("name", "company_id"),
    ),
    ResourceHandler(
        group="users",
        resource=hudu.USERS,
        list_tool=ToolSpec("get_users", "Retrieve users from HUDU", schemas.GetUsersParams),
        get_tool=ToolSpec(
            "get_user",
            "Get detailed information about a specific user",
            schemas.GetUserParams,
        ),
        noun="users",
        detail_summary="Details for user: {name}",
        filter_phrases=("name",),
    ),
    ResourceHandler(
        group="networks",
        resource=hudu.NETWORKS,
        list_tool=ToolSpec(
            "get_networks", "Retrieve networks from HUDU", schemas.GetNetworksParams
        ),
        get_tool=ToolSpec(
            "get_network",
            "Get detailed information about a specific network",
            schemas.GetNetworkParams,
        ),
        noun="networks",
        detail_summary="Details for network: {name}",
        filter_phrases=("name", "company_id"),
    ),
    ResourceHandler(
        group="procedures",
        resource=hudu.PROCEDURES,
        list_tool=ToolSpec(
            "get_procedures",
            "Get a list of procedures with optional filtering",
            schemas.GetProceduresParams,
        ),
        get_tool=ToolSpec(
            "get_procedure", "Get a specific procedure by ID", schemas.GetProcedureParams
        ),
        noun="procedures",
        detail_summary="Details for procedure: {name}",
        filter_phrases=("name", "company_id"),
    ),
)
