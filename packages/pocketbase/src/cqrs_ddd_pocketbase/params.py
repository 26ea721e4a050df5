"""
Fluent builder for PocketBase list/view query parameters.

Example::

    params = (
        pb_params()
        .filter(lambda q: q.equal("role", "admin").or_().equal("role", "user"))
        .fields(["id", "name", "expand.profile.bio"])
        .sort(["-created", "name"])
        .page(2)
        .build()
    )
    # → {
    #     "filter": "role={:role1} || role={:role2}",
    #     "fields": "id,name,expand.profile.bio",
    #     "expand": "profile",
    #     "sort": "-created,name",
    #     "page": 2,
    #     "perPage": 20,
    # }

The filter text keeps its ``{:key}`` placeholders; ``build_typed()`` exposes
the matching values for the HTTP layer to bind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypedDict, TypeVar

from .binding import bind_filter
from .config import DEFAULT_CONFIG
from .expand import ExpandPathExtractor
from .filter_builder import FilterBuilder

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .config import ParamsConfig
    from .filter_builder import FilterCallback

logger = logging.getLogger("cqrs_ddd.pocketbase")

T = TypeVar("T")


class QueryParams(TypedDict, total=False):
    """Flat query parameters; a key is absent when it was not requested."""

    filter: str
    fields: str
    expand: str
    sort: str
    page: int
    perPage: int


@dataclass(frozen=True)
class RawFilter:
    """
    Filter text with its placeholders unresolved, plus their values.

    Not hashable: ``values`` is a plain dict.
    """

    __hash__ = None  # type: ignore[assignment]

    filter: str = ""
    values: dict[str, Any] = field(default_factory=dict)

    def bind(self, *, strict: bool = False) -> str:
        """Return the filter with every placeholder replaced by its literal."""
        return bind_filter(self.filter, self.values, strict=strict)


@dataclass(frozen=True)
class BuildResult(Generic[T]):
    """
    Output of :meth:`ParamsBuilder.build_typed`.

    Attributes:
        params: Same dict that ``build()`` returns.
        raw: Unbound filter text and its value map.
        result_type: Record type the query targets.  Carried for typing and
            introspection only; never instantiated.

    Not hashable, for the same reason as :class:`RawFilter`.
    """

    __hash__ = None  # type: ignore[assignment]

    params: QueryParams
    raw: RawFilter
    result_type: type[T] | None = None


class ParamsBuilder(Generic[T]):
    """
    Collects filter, field selection, sort and pagination for one request.

    Every method returns ``self``.  ``fields``, ``sort`` and ``filter``
    replace the previous selection rather than merging with it.  ``expand``
    is never set directly: it is derived from ``expand.``-prefixed fields.
    """

    def __init__(
        self,
        record_type: type[T] | None = None,
        *,
        config: ParamsConfig | None = None,
    ) -> None:
        self._record_type = record_type
        self._config = config or DEFAULT_CONFIG
        self._expand_extractor = ExpandPathExtractor(self._config)
        self._filter_query = ""
        self._filter_values: dict[str, Any] = {}
        self._selected_fields: list[str] = []
        self._sort_fields: list[str] = []
        self._page: int | None = None
        self._per_page: int | None = None

    # -- filter --------------------------------------------------------------

    def filter(self, callback: FilterCallback) -> ParamsBuilder[T]:
        """Build a new filter; placeholder numbering restarts for each call."""
        builder = FilterBuilder()
        callback(builder)
        self._filter_query = builder.query
        self._filter_values = dict(builder.values)
        return self

    def filter_if(self, condition: bool, callback: FilterCallback) -> ParamsBuilder[T]:
        if condition:
            return self.filter(callback)
        return self

    # -- field selection -----------------------------------------------------

    def fields(self, fields: Sequence[str]) -> ParamsBuilder[T]:
        self._selected_fields = list(fields)
        return self

    def fields_if(self, condition: bool, fields: Sequence[str]) -> ParamsBuilder[T]:
        if condition:
            return self.fields(fields)
        return self

    # -- sorting -------------------------------------------------------------

    def sort(self, fields: Sequence[str]) -> ParamsBuilder[T]:
        """Set sort order; prefix a field with ``-`` for descending."""
        self._sort_fields = list(fields)
        return self

    def sort_if(self, condition: bool, fields: Sequence[str]) -> ParamsBuilder[T]:
        if condition:
            return self.sort(fields)
        return self

    # -- pagination ----------------------------------------------------------

    def page(self, page: int, per_page: int | None = None) -> ParamsBuilder[T]:
        self._page = page
        self._per_page = (
            per_page if per_page is not None else self._config.default_per_page
        )
        return self

    # -- build ---------------------------------------------------------------

    def build(self) -> QueryParams:
        """Return the query parameters; does not modify the builder."""
        params: QueryParams = {}
        if self._filter_query:
            params["filter"] = self._filter_query
        if self._selected_fields:
            params["fields"] = ",".join(self._selected_fields)
        expand = self._expand_extractor.extract(self._selected_fields)
        if expand:
            params["expand"] = ",".join(expand)
        if self._sort_fields:
            params["sort"] = ",".join(self._sort_fields)
        if self._page is not None:
            params["page"] = self._page
        if self._per_page is not None:
            params["perPage"] = self._per_page
        logger.debug("Built query params: %s", ", ".join(params) or "<none>")
        return params

    def build_typed(self) -> BuildResult[T]:
        """Return ``build()`` output together with the unbound filter and values."""
        return BuildResult(
            params=self.build(),
            raw=RawFilter(filter=self._filter_query, values=dict(self._filter_values)),
            result_type=self._record_type,
        )


def pb_params(
    record_type: type[T] | None = None,
    *,
    config: ParamsConfig | None = None,
) -> ParamsBuilder[T]:
    """Create an independent :class:`ParamsBuilder`."""
    return ParamsBuilder(record_type, config=config)
