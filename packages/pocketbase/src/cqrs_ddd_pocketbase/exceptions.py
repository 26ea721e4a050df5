"""
Exceptions for cqrs-ddd-pocketbase.

Building parameters never raises; these cover the helpers that sit next to
the builder (value binding).  All provide ``to_dict()`` for API-friendly
error responses.
"""

from __future__ import annotations

from typing import Any


class PocketBaseParamsError(Exception):
    """Base exception for all pocketbase parameter errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class UnboundPlaceholderError(PocketBaseParamsError):
    """A ``{:key}`` placeholder in a filter has no value to bind."""

    def __init__(self, keys: list[str]) -> None:
        self.keys = keys
        super().__init__(f"No value bound for placeholder(s): {', '.join(keys)}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNBOUND_PLACEHOLDER",
            "message": str(self),
            "keys": self.keys,
        }
