"""flarekit -- typed error handling for a Cloudflare-style v4 REST API client.

When an API call fails, the remote service answers with an HTTP status code,
an envelope listing ``{code, message}`` error items and a ``cf-ray`` trace
header. flarekit turns that exchange into one of six typed exceptions so
callers can branch on the failure kind instead of parsing status codes::

    from flarekit import NotFoundError, RatelimitError
    from flarekit.client import raise_for_response

    try:
        raise_for_response(response)
    except NotFoundError:
        ...
    except RatelimitError as exc:
        schedule_retry(exc.ray_id)

Modules:
    classifier: Status-code to error-category mapping.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes for CLI wrappers.
    models: Pydantic models for error items, envelopes and settings.
    config: Environment-aware settings resolution.
    validation: Pre-flight checks for required identifiers.
    client: Bridge from :class:`httpx.Response` to typed errors.
"""

from flarekit.classifier import category_for_status, classify
from flarekit.exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    ConfigError,
    FlarekitError,
    MissingAccountIDError,
    MissingIdentifierError,
    MissingResourceIdentifierError,
    MissingZoneIDError,
    NotFoundError,
    RatelimitError,
    RequestError,
    ResponseDecodeError,
    ServiceError,
)
from flarekit.models import ErrorType, ResponseInfo

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigError",
    "ErrorType",
    "FlarekitError",
    "MissingAccountIDError",
    "MissingIdentifierError",
    "MissingResourceIdentifierError",
    "MissingZoneIDError",
    "NotFoundError",
    "RatelimitError",
    "RequestError",
    "ResponseDecodeError",
    "ResponseInfo",
    "ServiceError",
    "category_for_status",
    "classify",
]
