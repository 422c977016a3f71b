"""Canonical Pydantic models shared across flarekit modules.

The models fall into two groups:

**API payload models** -- decoded from error responses:
    :class:`ResponseInfo` and :class:`ErrorEnvelope`.

**Settings models** -- resolved by :mod:`flarekit.config`:
    :class:`ErrorConfig`.

:class:`ErrorType` is the category tag carried by every
:class:`~flarekit.exceptions.APIError`.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorType(str, enum.Enum):
    """Classification bucket assigned to a failed API call."""

    REQUEST = "request"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    SERVICE = "service"


# --- API payloads ---


class ResponseInfo(BaseModel):
    """One error (or message) item reported by the API.

    A ``code`` of ``0`` means the API did not supply one; JSON ``null`` for
    either field decodes to its default. Extra keys such as
    ``documentation_url`` or ``error_chain`` are ignored.

    Example::

        ResponseInfo(code=1003, message="Invalid or missing zone id.")
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    code: int = Field(default=0, description="API error code, 0 when absent")
    message: str = Field(default="", description="Human-readable message")

    @field_validator("code", mode="before")
    @classmethod
    def _null_code_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("message", mode="before")
    @classmethod
    def _null_message_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ErrorEnvelope(BaseModel):
    """The v4 response envelope, as far as error handling needs it."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    errors: list[ResponseInfo] = Field(default_factory=list)
    messages: list[ResponseInfo] = Field(default_factory=list)
    result: Optional[Any] = None

    @field_validator("errors", "messages", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("success", mode="before")
    @classmethod
    def _null_as_false(cls, value: Any) -> Any:
        return False if value is None else value


# --- Settings ---


class ErrorConfig(BaseModel):
    """Settings for turning HTTP responses into typed errors."""

    trace_header: str = Field(
        default="cf-ray",
        min_length=1,
        description="Response header carrying the request trace identifier",
    )
    body_preview_chars: int = Field(
        default=200,
        ge=0,
        description="Max characters of an undecodable body kept in error messages",
    )
