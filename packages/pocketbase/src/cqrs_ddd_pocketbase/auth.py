"""Typed auth response wrapper for record collections."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

R = TypeVar("R")


class RecordAuthResponse(BaseModel, Generic[R]):
    """
    Response of a record auth call: the authenticated record plus its token.

    ``meta`` carries provider data for OAuth2 logins and is ``None`` otherwise.
    Unknown top-level keys are kept so newer server fields are not lost.
    """

    model_config = ConfigDict(extra="allow")

    record: R
    token: str
    meta: dict[str, Any] | None = None
