"""Tests for ParamsBuilder / pb_params."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import pytest

from cqrs_ddd_pocketbase import (
    BuildResult,
    ParamsBuilder,
    ParamsConfig,
    RawFilter,
    pb_params,
)


@dataclass
class User:
    id: str
    name: str
    email: str


# -- Construction ------------------------------------------------------------


def test_build_empty(params: ParamsBuilder[Any]) -> None:
    assert params.build() == {}


def test_instances_are_independent() -> None:
    first = pb_params().fields(["id"])
    second = pb_params()
    assert first is not second
    assert second.build() == {}


# -- Filter ------------------------------------------------------------------


def test_filter_end_to_end(params: ParamsBuilder[Any]) -> None:
    result = params.filter(
        lambda q: q.equal("role", "admin").or_().equal("role", "user")
    ).build_typed()
    assert result.params == {"filter": "role={:role1} || role={:role2}"}
    assert result.raw.filter == "role={:role1} || role={:role2}"
    assert result.raw.values == {"role1": "admin", "role2": "user"}


def test_empty_filter_is_omitted(params: ParamsBuilder[Any]) -> None:
    assert "filter" not in params.filter(lambda q: q.custom("")).build()


def test_filter_overwrites_and_restarts_numbering(params: ParamsBuilder[Any]) -> None:
    params.filter(lambda q: q.equal("role", "admin"))
    result = params.filter(lambda q: q.equal("role", "user")).build_typed()
    assert result.raw.filter == "role={:role1}"
    assert result.raw.values == {"role1": "user"}


def test_filter_if(params: ParamsBuilder[Any]) -> None:
    assert params.filter_if(False, lambda q: q.equal("a", 1)).build() == {}
    assert params.filter_if(True, lambda q: q.equal("a", 1)).build() == {
        "filter": "a={:a1}"
    }


# -- Fields & expand ---------------------------------------------------------


def test_fields(params: ParamsBuilder[Any]) -> None:
    assert params.fields(["id", "name", "email"]).build() == {
        "fields": "id,name,email"
    }


def test_fields_derive_expand(params: ParamsBuilder[Any]) -> None:
    built = params.fields(
        ["id", "expand.profile.bio", "expand.profile.expand.preferences.theme"]
    ).build()
    assert built["fields"] == (
        "id,expand.profile.bio,expand.profile.expand.preferences.theme"
    )
    assert built["expand"] == "profile,profile.preferences"


def test_expand_absent_without_marker(params: ParamsBuilder[Any]) -> None:
    assert "expand" not in params.fields(["id", "name"]).build()


def test_fields_overwrite(params: ParamsBuilder[Any]) -> None:
    assert params.fields(["a"]).fields(["b"]).build()["fields"] == "b"


def test_fields_if(params: ParamsBuilder[Any]) -> None:
    built = params.fields_if(True, ["id", "name"]).fields_if(False, ["x"]).build()
    assert built["fields"] == "id,name"


def test_fields_list_is_copied(params: ParamsBuilder[Any]) -> None:
    fields = ["id"]
    params.fields(fields)
    fields.append("name")
    assert params.build()["fields"] == "id"


def test_config_drives_expand() -> None:
    config = ParamsConfig().with_nested_relations("settings")
    built = pb_params(config=config).fields(["expand.user.settings"]).build()
    assert built["expand"] == "user,user.settings"


# -- Sort --------------------------------------------------------------------


def test_sort(params: ParamsBuilder[Any]) -> None:
    assert params.sort(["-created", "name"]).build() == {"sort": "-created,name"}


def test_sort_if(params: ParamsBuilder[Any]) -> None:
    assert "sort" not in params.sort_if(False, ["-created"]).build()


def test_sort_overwrite(params: ParamsBuilder[Any]) -> None:
    assert params.sort(["a"]).sort(["-b"]).build()["sort"] == "-b"


# -- Pagination --------------------------------------------------------------


def test_page_with_count(params: ParamsBuilder[Any]) -> None:
    assert params.page(2, 50).build() == {"page": 2, "perPage": 50}


def test_page_default_count(params: ParamsBuilder[Any]) -> None:
    assert params.page(2).build() == {"page": 2, "perPage": 20}


def test_page_default_from_config() -> None:
    built = pb_params(config=ParamsConfig(default_per_page=100)).page(1).build()
    assert built == {"page": 1, "perPage": 100}


def test_page_is_not_validated(params: ParamsBuilder[Any]) -> None:
    assert params.page(-1, 0).build() == {"page": -1, "perPage": 0}


# -- Build -------------------------------------------------------------------


def test_build_combined(params: ParamsBuilder[Any]) -> None:
    built = (
        params.filter(lambda q: q.equal("verified", True))
        .fields(["id", "name", "email", "expand.profile.bio"])
        .sort(["-created", "-expand.organization.name"])
        .page(1, 20)
        .build()
    )
    assert built == {
        "filter": "verified={:verified1}",
        "fields": "id,name,email,expand.profile.bio",
        "expand": "profile",
        "sort": "-created,-expand.organization.name",
        "page": 1,
        "perPage": 20,
    }
    assert list(built) == ["filter", "fields", "expand", "sort", "page", "perPage"]


def test_build_is_idempotent(params: ParamsBuilder[Any]) -> None:
    params.filter(lambda q: q.in_("role", ["a", "b"])).fields(["expand.team.name"])
    assert params.build() == params.build()
    assert params.build_typed() == params.build_typed()


def test_fluent_calls_return_same_builder(params: ParamsBuilder[Any]) -> None:
    assert params.filter(lambda q: q.is_null("a")) is params
    assert params.filter_if(False, lambda q: q.is_null("a")) is params
    assert params.fields(["a"]) is params
    assert params.fields_if(False, ["a"]) is params
    assert params.sort(["a"]) is params
    assert params.sort_if(False, ["a"]) is params
    assert params.page(1) is params


def test_build_logs_keys(
    params: ParamsBuilder[Any], caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="cqrs_ddd.pocketbase"):
        params.fields(["id"]).page(1).build()
    assert "fields, page, perPage" in caplog.text


# -- Typed build -------------------------------------------------------------


def test_build_typed_without_filter(params: ParamsBuilder[Any]) -> None:
    result = params.fields(["id", "name"]).build_typed()
    assert isinstance(result, BuildResult)
    assert result.params == {"fields": "id,name"}
    assert result.raw == RawFilter(filter="", values={})
    assert result.result_type is None


def test_build_typed_carries_record_type() -> None:
    result = pb_params(User).fields(["id"]).build_typed()
    assert result.result_type is User


def test_build_typed_values_are_a_copy(params: ParamsBuilder[Any]) -> None:
    params.filter(lambda q: q.equal("a", 1))
    result = params.build_typed()
    result.raw.values["a2"] = 2
    assert params.build_typed().raw.values == {"a1": 1}


def test_raw_filter_bind(params: ParamsBuilder[Any]) -> None:
    result = params.filter(
        lambda q: q.equal("name", "O'Brien").and_().greater_than("age", 18)
    ).build_typed()
    assert result.raw.bind() == "name='O\\'Brien' && age>18"


def test_build_results_are_not_hashable(params: ParamsBuilder[Any]) -> None:
    result = params.filter(lambda q: q.equal("a", 1)).build_typed()
    with pytest.raises(TypeError, match="unhashable"):
        hash(result)
    with pytest.raises(TypeError, match="unhashable"):
        hash(result.raw)
