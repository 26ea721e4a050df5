"""QueryStringBuilder — QueryParams -> URL query string (links, logging)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .params import QueryParams

_KEY_ORDER = ("filter", "fields", "expand", "sort", "page", "perPage")


class QueryStringBuilder:
    """Build a query string from built parameters."""

    def build(
        self,
        params: QueryParams,
        *,
        extra: Mapping[str, Any] | None = None,
    ) -> str:
        """Produce ``filter=...&fields=...`` in a stable key order."""
        pairs: list[tuple[str, Any]] = [
            (key, params[key])  # type: ignore[literal-required]
            for key in _KEY_ORDER
            if key in params
        ]
        if extra:
            pairs.extend((k, v) for k, v in extra.items() if v is not None)
        return urlencode(pairs) if pairs else ""
