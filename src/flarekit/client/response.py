"""Error-response decoding -- maps :class:`httpx.Response` to typed errors.

After an HTTP call completes, :func:`raise_for_response` checks the status
code. For failures it decodes the v4 envelope into
:class:`~flarekit.models.ResponseInfo` items, reads the trace header and
hands both to :func:`~flarekit.classifier.classify`.

An error body that cannot be decoded raises
:class:`~flarekit.exceptions.ResponseDecodeError` instead of being coerced
into an empty :class:`~flarekit.exceptions.APIError`.

See Also:
    :mod:`flarekit.classifier` -- the status-code mapping.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from flarekit.classifier import classify
from flarekit.config import resolve_error_config
from flarekit.exceptions import APIError, ResponseDecodeError
from flarekit.models import ErrorConfig, ErrorEnvelope, ResponseInfo

logger = logging.getLogger(__name__)


def _trace_id(response: httpx.Response, config: ErrorConfig) -> str:
    return response.headers.get(config.trace_header, "")


def decode_error_body(
    response: httpx.Response,
    config: Optional[ErrorConfig] = None,
) -> list[ResponseInfo]:
    """Decode the error items from a response body.

    Args:
        response: The failed response.
        config: Settings; resolved from the environment when ``None``.

    Returns:
        The ``errors`` list of the envelope, in API order. An empty body, or
        a literal JSON ``null``, yields an empty list.

    Raises:
        ResponseDecodeError: If the body is not JSON or does not match the
            envelope shape.
    """
    config = config or resolve_error_config()

    # Handle empty or null body
    body = response.content.strip()
    if not body or body == b"null":
        return []

    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except ValidationError as exc:
        ray_id = _trace_id(response, config)
        preview = response.text[: config.body_preview_chars]
        logger.warning(
            "Could not decode error body of HTTP %d (ray %s): %d validation error(s)",
            response.status_code,
            ray_id or "-",
            exc.error_count(),
        )
        raise ResponseDecodeError(
            f"error unmarshalling the JSON response error body "
            f"(HTTP {response.status_code}): {preview}",
            status_code=response.status_code,
            ray_id=ray_id,
        ) from exc

    return envelope.errors


def error_from_response(
    response: httpx.Response,
    config: Optional[ErrorConfig] = None,
) -> APIError:
    """Build the classified error for a failed response without raising it.

    Raises:
        ResponseDecodeError: If the error body cannot be decoded.
    """
    config = config or resolve_error_config()
    errors = decode_error_body(response, config)
    return classify(response.status_code, errors, _trace_id(response, config))


def raise_for_response(
    response: httpx.Response,
    config: Optional[ErrorConfig] = None,
) -> httpx.Response:
    """Return *response* if it succeeded, otherwise raise its typed error.

    Args:
        response: A completed response.
        config: Settings; resolved from the environment when ``None``.

    Returns:
        The same response, for chaining, when ``status_code < 400``.

    Raises:
        APIError: The category subclass matching the status code.
        ResponseDecodeError: If the error body cannot be decoded.
    """
    if response.status_code < 400:
        return response
    raise error_from_response(response, config)
