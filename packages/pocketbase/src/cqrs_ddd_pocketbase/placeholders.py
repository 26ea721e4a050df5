"""ValuePlaceholderRegistry — collision-free ``{:key}`` names for filter values."""

from __future__ import annotations

from typing import Any


class ValuePlaceholderRegistry:
    """
    Assign placeholder keys to literal filter values.

    Keys are ``<field><ordinal>`` where the ordinal is a 1-based counter kept
    per field, so the second value registered for ``role`` is stored under
    ``role2``.  One registry lives for exactly one filter-building session.
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}
        self._values: dict[str, Any] = {}

    def reserve(self, field: str, value: Any) -> str:
        """Store *value* under the next key for *field* and return the key."""
        count = self._counters.get(field, 0) + 1
        self._counters[field] = count
        key = f"{field}{count}"
        self._values[key] = value
        return key

    @property
    def values(self) -> dict[str, Any]:
        return self._values

    def __len__(self) -> int:
        return len(self._values)
