"""Status-code classification of failed API calls.

:func:`classify` is the single entry point used by the response bridge in
:mod:`flarekit.client.response`. It is a pure function of its inputs and
never raises: every integer status maps to exactly one
:class:`~flarekit.models.ErrorType`.

Mapping (first match wins)::

    401      -> authentication
    403      -> authorization
    404      -> not_found
    429      -> rate_limit
    500-599  -> service
    other    -> request
"""

from __future__ import annotations

import logging
from typing import Iterable

from flarekit.exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RatelimitError,
    RequestError,
    ServiceError,
)
from flarekit.models import ErrorType, ResponseInfo

logger = logging.getLogger(__name__)

_STATUS_CATEGORIES: dict[int, ErrorType] = {
    401: ErrorType.AUTHENTICATION,
    403: ErrorType.AUTHORIZATION,
    404: ErrorType.NOT_FOUND,
    429: ErrorType.RATE_LIMIT,
}

ERROR_CLASSES: dict[ErrorType, type[APIError]] = {
    ErrorType.REQUEST: RequestError,
    ErrorType.AUTHENTICATION: AuthenticationError,
    ErrorType.AUTHORIZATION: AuthorizationError,
    ErrorType.NOT_FOUND: NotFoundError,
    ErrorType.RATE_LIMIT: RatelimitError,
    ErrorType.SERVICE: ServiceError,
}
"""Exception class raised for each error category."""


def category_for_status(status_code: int) -> ErrorType:
    """Return the error category for an HTTP status code.

    Args:
        status_code: Any integer status, including out-of-range values.

    Returns:
        The matching :class:`ErrorType`; :attr:`ErrorType.REQUEST` for any
        code without a dedicated bucket.
    """
    category = _STATUS_CATEGORIES.get(status_code)
    if category is not None:
        return category
    if 500 <= status_code < 600:
        return ErrorType.SERVICE
    return ErrorType.REQUEST


def classify(
    status_code: int,
    errors: Iterable[ResponseInfo] = (),
    ray_id: str = "",
) -> APIError:
    """Build the typed error for a failed API call.

    The error is returned, not raised.

    Args:
        status_code: HTTP status of the response.
        errors: Decoded error items, in API order. May be empty.
        ray_id: Trace identifier from the response headers, or ``""``.

    Returns:
        An instance of the :class:`APIError` subclass for the status code.

    Example::

        err = classify(404, [ResponseInfo(code=1001, message="Unknown zone")])
        assert isinstance(err, NotFoundError)
        assert str(err) == "Unknown zone (1001)"
    """
    category = category_for_status(status_code)
    error = ERROR_CLASSES[category](status_code, errors, ray_id)
    logger.debug(
        "Classified HTTP %d as %s (ray %s, codes %s)",
        status_code,
        category.value,
        ray_id or "-",
        error.error_codes,
    )
    return error
