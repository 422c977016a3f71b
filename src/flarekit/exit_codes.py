"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to an error category and is referenced by the
corresponding :class:`~flarekit.exceptions.FlarekitError` subclass.
CLI wrappers built on flarekit can ``sys.exit(exc.exit_code)`` so that
shell scripts can tell a rejected token from a missing zone without
parsing stderr.

Example::

    $ zones purge --zone example.com
    $ echo $?
    8   # EXIT_RATE_LIMITED -- try again later
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred, including generic 4xx request errors."""

EXIT_INVALID_USAGE = 2
"""A required identifier (account, zone, resource) was not supplied."""

EXIT_AUTH_FAILURE = 3
"""Authentication (HTTP 401) or authorisation (HTTP 403) failed."""

EXIT_NOT_FOUND = 4
"""The requested resource was not found (HTTP 404)."""

EXIT_SERVER_ERROR = 5
"""The remote API returned an HTTP 5xx server error."""

EXIT_RATE_LIMITED = 8
"""The remote API asked the client to slow down (HTTP 429)."""

EXIT_DECODE_ERROR = 9
"""The error body returned by the API could not be decoded."""
