"""Tests for core/params.py and the per-tool schemas."""

import pytest
from pydantic import ValidationError

from core import schemas
from core.params import (
    DEFAULT_PAGE_SIZE,
    coerce_page,
    coerce_page_size,
    format_validation_error,
    normalize_pagination_params,
    validate_arguments,
)


@pytest.mark.parametrize(
    "raw, expected",
    [(250, 100), (100, 100), (1, 1), (0, 1), (-7, 1), (42.9, 42), ("30", 30)],
)
def test_page_size_is_clamped_into_range(raw, expected):
    assert coerce_page_size(raw) == expected


@pytest.mark.parametrize("raw", ["lots", "", None, True, float("nan"), float("inf"), [5]])
def test_non_numeric_page_size_falls_back_to_default(raw):
    assert coerce_page_size(raw) == DEFAULT_PAGE_SIZE


@pytest.mark.parametrize(
    "raw, expected",
    [(3, 3), (0, 1), (-2, 1), (2.7, 2), ("4", 4), ("abc", 1), (False, 1)],
)
def test_page_is_at_least_one(raw, expected):
    assert coerce_page(raw) == expected


def test_normalize_pagination_leaves_absent_fields_absent():
    assert normalize_pagination_params({"name": "Acme"}) == {"name": "Acme"}


def test_normalize_pagination_drops_nulls_and_keeps_other_fields():
    normalized = normalize_pagination_params(
        {"page": "2", "page_size": 500, "search": "vpn", "company_id": None}
    )

    assert normalized == {"page": 2, "page_size": 100, "search": "vpn"}


def test_list_schema_clamps_pagination_instead_of_rejecting():
    params = validate_arguments(schemas.GetCompaniesParams, {"page": -3, "page_size": 250})

    assert params.page == 1
    assert params.page_size == 100


def test_unknown_fields_are_dropped():
    params = validate_arguments(
        schemas.GetCompaniesParams, {"name": "Acme", "favourite_colour": "teal"}
    )

    assert params.to_query() == {"name": "Acme"}


def test_to_query_omits_fields_not_supplied():
    params = validate_arguments(schemas.GetAssetsParams, {"company_id": 7})

    assert params.to_query() == {"company_id": 7}


def test_missing_arguments_are_treated_as_empty():
    params = validate_arguments(schemas.GetAssetLayoutsParams, None)

    assert params.to_query() == {}


def test_declared_field_with_wrong_type_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        validate_arguments(schemas.GetCompanyDetailsParams, {"id": "abc"})

    message = format_validation_error(excinfo.value)
    assert message.startswith("Invalid parameters: id: ")


def test_every_failing_field_is_named():
    with pytest.raises(ValidationError) as excinfo:
        validate_arguments(
            schemas.GetFoldersParams,
            {"name": 12, "company_id": "many", "in_company": "perhaps"},
        )

    message = format_validation_error(excinfo.value)
    for field in ("name", "company_id", "in_company"):
        assert f"{field}: " in message
    assert message.count(", ") >= 2


def test_required_id_must_be_present_and_positive():
    with pytest.raises(ValidationError) as missing:
        validate_arguments(schemas.GetArticleParams, {})
    with pytest.raises(ValidationError) as zero:
        validate_arguments(schemas.GetArticleParams, {"id": 0})

    assert "id: Field required" in format_validation_error(missing.value)
    assert "id: " in format_validation_error(zero.value)


def test_enum_field_accepts_only_declared_values():
    ok = validate_arguments(schemas.GetProceduresParams, {"global_template": "true"})
    assert ok.global_template == "true"

    with pytest.raises(ValidationError) as excinfo:
        validate_arguments(schemas.GetProceduresParams, {"global_template": "yes"})
    assert "global_template: " in format_validation_error(excinfo.value)


def test_non_mapping_arguments_are_reported_as_arguments():
    with pytest.raises(ValidationError) as excinfo:
        validate_arguments(schemas.GetUsersParams, ["not", "a", "dict"])

    assert format_validation_error(excinfo.value).startswith("Invalid parameters: arguments: ")


def test_input_schema_advertises_pagination_bounds():
    schema = schemas.GetCompaniesParams.model_json_schema()

    page_size = schema["properties"]["page_size"]
    bounds = page_size["anyOf"][0]
    assert bounds["maximum"] == 100
    assert bounds["minimum"] == 1
    assert schemas.GetCompanyDetailsParams.model_json_schema()["required"] == ["id"]
