# =============================================================================
# core/schemas.py  —  Per-Tool Argument Schemas
# =============================================================================
#
# One pydantic model per tool.  Field descriptions matter: they end up in the
# JSON schema the host shows the LLM, and the LLM reads them to decide WHAT
# to pass.
#
# Pagination comes from PaginatedParams, the required ``id`` from
# DetailParams (see core/params.py).
# =============================================================================

from typing import Literal, Optional

from pydantic import Field

from core.params import DetailParams, PaginatedParams

_RANGE_HINT = (
    'Format: "start_datetime,end_datetime" for range, "exact_datetime" for exact match'
)


# --- Companies ---------------------------------------------------------------
class GetCompaniesParams(PaginatedParams):
    name: Optional[str] = Field(default=None, description="Filter companies by name")
    phone_number: Optional[str] = Field(
        default=None, description="Filter companies by phone number"
    )
    website: Optional[str] = Field(default=None, description="Filter companies by website")
    city: Optional[str] = Field(default=None, description="Filter companies by city")
    id_number: Optional[str] = Field(
        default=None, description="Filter companies by ID number"
    )
    state: Optional[str] = Field(default=None, description="Filter companies by state")
    slug: Optional[str] = Field(default=None, description="Filter companies by URL slug")
    search: Optional[str] = Field(
        default=None, description="Filter companies using a search query"
    )
    id_in_integration: Optional[str] = Field(
        default=None,
        description="Filter companies by ID/identifier in PSA/RMM/outside integration",
    )
    updated_at: Optional[str] = Field(
        default=None,
        description=f"Filter companies updated within a range or at an exact time. {_RANGE_HINT}",
    )


class GetCompanyDetailsParams(DetailParams):
    id: int = Field(ge=1, description="Company ID")


# --- Articles ----------------------------------------------------------------
class SearchArticlesParams(PaginatedParams):
    search: Optional[str] = Field(default=None, description="Search query for articles")
    name: Optional[str] = Field(
        default=None, description="Filter articles by exact name match"
    )
    company_id: Optional[int] = Field(
        default=None, ge=1, description="Filter articles by company ID"
    )
    slug: Optional[str] = Field(default=None, description="Filter articles by slug")
    draft: Optional[bool] = Field(
        default=None,
        description="Filter by draft status (true for drafts, false for published)",
    )
    enable_sharing: Optional[bool] = Field(
        default=None, description="Filter by sharing status (true for shared articles)"
    )
    updated_at: Optional[str] = Field(
        default=None,
        description='Filter by update date. Use ISO 8601 format for exact match, or "start_datetime,end_datetime" for range',
    )


class GetArticleParams(DetailParams):
    id: int = Field(ge=1, description="Article ID")


# --- Assets, passwords, layouts ----------------------------------------------
class GetAssetsParams(PaginatedParams):
    company_id: Optional[int] = Field(
        default=None, ge=1, description="Company ID to filter assets"
    )
    asset_layout_id: Optional[int] = Field(
        default=None, ge=1, description="Filter by asset layout ID"
    )
    id: Optional[int] = Field(default=None, ge=1, description="Filter assets by their ID")
    name: Optional[str] = Field(default=None, description="Filter assets by their name")
    primary_serial: Optional[str] = Field(
        default=None, description="Filter assets by their primary serial number"
    )
    archived: Optional[bool] = Field(
        default=None, description="Set to true to display only archived assets"
    )
    slug: Optional[str] = Field(default=None, description="Filter assets by their URL slug")
    search: Optional[str] = Field(
        default=None, description="Filter assets using a search query"
    )
    updated_at: Optional[str] = Field(
        default=None,
        description=f"Filter assets updated within a range or at an exact time. {_RANGE_HINT}",
    )


class GetAssetPasswordsParams(PaginatedParams):
    company_id: Optional[int] = Field(
        default=None, ge=1, description="Company ID to filter passwords"
    )
    name: Optional[str] = Field(default=None, description="Filter by password name")


class GetAssetLayoutsParams(PaginatedParams):
    pass


class GetAssetLayoutParams(DetailParams):
    id: int = Field(ge=1, description="Asset layout ID")


# --- Activity logs -----------------------------------------------------------
class GetActivityLogsParams(PaginatedParams):
    user_id: Optional[int] = Field(
        default=None, description="Filter logs by a specific user ID"
    )
    user_email: Optional[str] = Field(
        default=None, description="Filter logs by a user's email address"
    )
    resource_id: Optional[int] = Field(
        default=None,
        description="Filter logs by resource ID; must be used in conjunction with resource_type",
    )
    resource_type: Optional[str] = Field(
        default=None,
        description=(
            "Filter logs by resource type (Asset, AssetPassword, Company, Article, etc.); "
            "must be used in conjunction with resource_id"
        ),
    )
    action_message: Optional[str] = Field(
        default=None, description="Filter logs by the action performed"
    )
    start_date: Optional[str] = Field(
        default=None,
        description="Filter logs starting from a specific date; must be in ISO 8601 format",
    )
    search: Optional[str] = Field(default=None, description="Search query for activity logs")


# --- Folders -----------------------------------------------------------------
class GetFoldersParams(PaginatedParams):
    name: Optional[str] = Field(default=None, description="Filter folders by name")
    company_id: Optional[int] = Field(
        default=None, ge=1, description="Filter folders by company ID"
    )
    in_company: Optional[bool] = Field(
        default=None, description="When true, only returns company-specific folders"
    )


class GetFolderParams(DetailParams):
    id: int = Field(ge=1, description="Folder ID")


# --- Users -------------------------------------------------------------------
class GetUsersParams(PaginatedParams):
    name: Optional[str] = Field(default=None, description="Filter users by name")
    email: Optional[str] = Field(default=None, description="Filter users by email address")
    security_level: Optional[str] = Field(
        default=None,
        description=(
            "Filter users by security level (super_admin, admin, spectator, editor, "
            "author, portal_member, portal_admin)"
        ),
    )


class GetUserParams(DetailParams):
    id: int = Field(ge=1, description="User ID")


# --- Networks ----------------------------------------------------------------
class GetNetworksParams(PaginatedParams):
    name: Optional[str] = Field(default=None, description="Filter networks by name")
    company_id: Optional[int] = Field(
        default=None, description="Filter networks by company ID"
    )
    location_id: Optional[int] = Field(
        default=None, description="Filter networks by location ID"
    )
    created_at: Optional[str] = Field(
        default=None,
        description="Filter networks by creation date (format: start_datetime,end_datetime or exact_datetime)",
    )
    updated_at: Optional[str] = Field(
        default=None,
        description="Filter networks by update date (format: start_datetime,end_datetime or exact_datetime)",
    )
    archived: Optional[bool] = Field(
        default=None, description="Filter networks by archive status"
    )


class GetNetworkParams(DetailParams):
    id: int = Field(ge=1, description="Network ID")


# --- Procedures --------------------------------------------------------------
class GetProceduresParams(PaginatedParams):
    name: Optional[str] = Field(default=None, description="Filter by procedure name")
    company_id: Optional[int] = Field(default=None, description="Filter by company ID")
    global_template: Optional[Literal["true", "false"]] = Field(
        default=None, description="Filter for global templates"
    )
    company_template: Optional[int] = Field(
        default=None,
        description="Filter for company-specific templates by company ID",
    )
    parent_procedure_id: Optional[int] = Field(
        default=None, description="Filter for child procedures of a specific parent"
    )


class GetProcedureParams(DetailParams):
    id: int = Field(ge=1, description="The ID of the procedure to retrieve")
