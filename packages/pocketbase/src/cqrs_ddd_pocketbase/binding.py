"""Bind placeholder values into a filter string, PocketBase SDK style."""

from __future__ import annotations

import json
import logging
import re
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any
from uuid import UUID

from .exceptions import UnboundPlaceholderError

logger = logging.getLogger("cqrs_ddd.pocketbase")

_PLACEHOLDER = re.compile(r"\{:([^}]+)\}")


def _quote(text: str) -> str:
    return "'" + text.replace("'", "\\'") + "'"


def _format_datetime(value: datetime) -> str:
    # Naive values are taken as UTC.
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    millis = value.microsecond // 1000
    return value.strftime("%Y-%m-%d %H:%M:%S") + f".{millis:03d}Z"


def format_filter_value(value: Any) -> str:
    """
    Render *value* as a filter literal.

    - ``bool`` → ``true`` / ``false``
    - ``int`` / ``float`` / ``Decimal`` → as-is
    - ``str`` / ``UUID`` → single-quoted, inner ``'`` escaped
    - ``None`` → ``null``
    - ``datetime`` / ``date`` → quoted UTC ``YYYY-MM-DD HH:MM:SS.mmmZ``;
      naive values are assumed to already be UTC
    - anything else → quoted compact JSON, non-JSON leaves via ``str()``
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, (str, UUID)):
        return _quote(str(value))
    if value is None:
        return "null"
    if isinstance(value, datetime):
        return _quote(_format_datetime(value))
    if isinstance(value, date):
        return _quote(_format_datetime(datetime.combine(value, time.min)))
    encoded = json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, default=str
    )
    return _quote(encoded)


def bind_filter(
    raw: str,
    values: dict[str, Any] | None = None,
    *,
    strict: bool = False,
) -> str:
    """
    Replace every ``{:key}`` in *raw* with the formatted value of ``values[key]``.

    Tokens without a value are left untouched, or raise
    :class:`UnboundPlaceholderError` when *strict* is set.  Substitution is
    a single pass, so bound values are never themselves re-scanned.
    """
    values = values or {}
    missing: list[str] = []

    def _substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in values:
            if key not in missing:
                missing.append(key)
            return match.group(0)
        return format_filter_value(values[key])

    bound = _PLACEHOLDER.sub(_substitute, raw)
    if missing:
        if strict:
            raise UnboundPlaceholderError(missing)
        logger.warning("Unbound filter placeholder(s): %s", ", ".join(missing))
    return bound
