"""Shared test fixtures for flarekit.

Provides helpers for building :class:`httpx.Response` objects in-process
and for isolating ``FLAREKIT_*`` environment variables.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from flarekit.models import ResponseInfo


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear flarekit env vars so a developer's shell never leaks into tests."""
    for var in ["FLAREKIT_TRACE_HEADER", "FLAREKIT_BODY_PREVIEW_CHARS"]:
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """Factory for httpx.Response objects attached to a dummy request."""

    def _make(
        status_code: int,
        json_data: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        request = httpx.Request("GET", "https://api.example.com/client/v4/zones")
        if json_data is not None:
            return httpx.Response(
                status_code=status_code,
                json=json_data,
                headers=headers or {},
                request=request,
            )
        return httpx.Response(
            status_code=status_code,
            content=content or b"",
            headers=headers or {},
            request=request,
        )

    return _make


@pytest.fixture
def two_errors() -> list[ResponseInfo]:
    """Two error items, the first without a code."""
    return [
        ResponseInfo(code=0, message="bad zone"),
        ResponseInfo(code=1001, message="rate"),
    ]
