"""Exception hierarchy for flarekit.

All exceptions inherit from :class:`FlarekitError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`flarekit.exit_codes`.

Subclass hierarchy::

    FlarekitError (exit 1)
    +-- APIError                           classified HTTP failure
    |   +-- RequestError        (exit 1)   other 4xx
    |   +-- AuthenticationError (exit 3)   401
    |   +-- AuthorizationError  (exit 3)   403
    |   +-- NotFoundError       (exit 4)   404
    |   +-- RatelimitError      (exit 8)   429
    |   +-- ServiceError        (exit 5)   5xx
    +-- MissingIdentifierError  (exit 2)   raised before any request is sent
    |   +-- MissingAccountIDError
    |   +-- MissingZoneIDError
    |   +-- MissingResourceIdentifierError
    +-- ResponseDecodeError     (exit 9)
    +-- ConfigError             (exit 1)

Build :class:`APIError` instances with :func:`flarekit.classifier.classify`,
which picks the subclass matching the status code. Constructing a subclass
directly skips that mapping: the category always comes from the class, so
``NotFoundError(500).category`` is ``not_found``. The subclasses add no
state of their own; they exist so callers can write ``except NotFoundError:``
instead of checking ``category``.
"""

from __future__ import annotations

from typing import ClassVar, Iterable

from flarekit.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_DECODE_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_RATE_LIMITED,
    EXIT_SERVER_ERROR,
)
from flarekit.models import ErrorType, ResponseInfo

_RETRYABLE = frozenset({ErrorType.RATE_LIMIT, ErrorType.SERVICE})


class FlarekitError(Exception):
    """Base exception for all flarekit errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


# --- Classified API errors ---


class APIError(FlarekitError):
    """An error reported by the API for a completed HTTP exchange.

    The instance is read-only: item lists are stored as tuples and exposed
    through properties. ``str(err)`` renders every item as its message
    followed by ``" (<code>)"`` when the code is non-zero, joined with
    ``", "``. An item with neither part renders as an empty segment, so
    ``[ResponseInfo(), ResponseInfo(code=7)]`` becomes ``", (7)"``. Callers
    match on this text, so the format is kept as is.

    ``category`` is a class attribute and is not re-derived from
    ``status_code``; use :func:`~flarekit.classifier.classify` to get the
    subclass that matches a status.

    Args:
        status_code: HTTP status of the response.
        errors: Error items in the order the API returned them.
        ray_id: Trace identifier of the request, ``""`` if unknown.
        exit_code: Optional override for the class-level exit code.
    """

    category: ClassVar[ErrorType] = ErrorType.REQUEST

    def __init__(
        self,
        status_code: int,
        errors: Iterable[ResponseInfo] = (),
        ray_id: str = "",
        exit_code: int | None = None,
    ):
        self._status_code = status_code
        self._errors: tuple[ResponseInfo, ...] = tuple(errors)
        self._ray_id = ray_id or ""
        super().__init__(self._render(self._errors), exit_code=exit_code)

    @staticmethod
    def _render(errors: tuple[ResponseInfo, ...]) -> str:
        segments = []
        for err in errors:
            segment = err.message
            if err.code != 0:
                segment += f" ({err.code})"
            segments.append(segment)
        return ", ".join(segments)

    def __str__(self) -> str:
        return self._render(self._errors)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self._status_code}, "
            f"errors={list(self._errors)!r}, ray_id={self._ray_id!r})"
        )

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def errors(self) -> tuple[ResponseInfo, ...]:
        return self._errors

    @property
    def error_codes(self) -> tuple[int, ...]:
        return tuple(err.code for err in self._errors)

    @property
    def error_messages(self) -> tuple[str, ...]:
        return tuple(err.message for err in self._errors)

    @property
    def ray_id(self) -> str:
        return self._ray_id

    @property
    def is_retryable(self) -> bool:
        """True for rate-limit and service errors, which may succeed later."""
        return self.category in _RETRYABLE

    def is_client_error(self) -> bool:
        """Return whether the failure was caused by the client (HTTP 4xx)."""
        return 400 <= self._status_code < 500

    def is_rate_limited(self) -> bool:
        """Return whether the client sent too many requests."""
        return self.category is ErrorType.RATE_LIMIT

    def has_error_code(self, code: int) -> bool:
        """Return whether *code* is among the API error codes."""
        return code in self.error_codes

    def message_contains(self, substring: str) -> bool:
        """Return whether any API error message contains *substring*.

        The match is case-sensitive and does no normalisation.
        """
        return any(substring in msg for msg in self.error_messages)


class RequestError(APIError):
    """Raised for 4xx responses not covered elsewhere (generally bad payloads)."""

    category = ErrorType.REQUEST


class AuthenticationError(APIError):
    """Raised when the API returns HTTP 401 (credentials missing or rejected)."""

    category = ErrorType.AUTHENTICATION
    exit_code = EXIT_AUTH_FAILURE


class AuthorizationError(APIError):
    """Raised when the API returns HTTP 403 (credentials lack permission)."""

    category = ErrorType.AUTHORIZATION
    exit_code = EXIT_AUTH_FAILURE


class NotFoundError(APIError):
    """Raised when the API returns HTTP 404 (resource not found)."""

    category = ErrorType.NOT_FOUND
    exit_code = EXIT_NOT_FOUND


class RatelimitError(APIError):
    """Raised for HTTP 429, where the service is telling the client to slow down."""

    category = ErrorType.RATE_LIMIT
    exit_code = EXIT_RATE_LIMITED


class ServiceError(APIError):
    """Raised when the API returns an HTTP 5xx server error."""

    category = ErrorType.SERVICE
    exit_code = EXIT_SERVER_ERROR


# --- Pre-flight errors ---


class MissingIdentifierError(FlarekitError):
    """Raised when a required identifier is empty, before any request is made.

    Subclasses carry a fixed default message so callers can compare them by
    type rather than by text.
    """

    exit_code = EXIT_INVALID_USAGE
    default_message: ClassVar[str] = "required missing identifier"

    def __init__(self, message: str | None = None, exit_code: int | None = None):
        super().__init__(message or self.default_message, exit_code=exit_code)


class MissingAccountIDError(MissingIdentifierError):
    default_message = "required missing account ID"


class MissingZoneIDError(MissingIdentifierError):
    default_message = "required missing zone ID"


class MissingResourceIdentifierError(MissingIdentifierError):
    default_message = "required missing resource identifier"


# --- Other failures ---


class ResponseDecodeError(FlarekitError):
    """Raised when an error response body cannot be decoded into error items.

    Not an :class:`APIError`; no error items exist to classify.

    Args:
        message: Description including a preview of the offending body.
        status_code: HTTP status of the undecodable response.
        ray_id: Trace identifier, ``""`` if the header was absent.
    """

    exit_code = EXIT_DECODE_ERROR

    def __init__(self, message: str, status_code: int, ray_id: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.ray_id = ray_id


class ConfigError(FlarekitError):
    """Raised for invalid settings (e.g. a non-numeric environment override)."""

    exit_code = EXIT_GENERIC_FAILURE
