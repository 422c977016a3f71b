"""Bridge between :mod:`httpx` responses and flarekit's typed errors.

The request-executing client (not part of flarekit) hands every completed
:class:`httpx.Response` to :func:`raise_for_response`, which returns
successful responses untouched and raises the classified
:class:`~flarekit.exceptions.APIError` otherwise.

Example::

    from flarekit.client import raise_for_response

    response = http.get(f"/zones/{zone_id}/dns_records")
    records = raise_for_response(response).json()["result"]
"""

from flarekit.client.response import (
    decode_error_body,
    error_from_response,
    raise_for_response,
)

__all__ = ["decode_error_body", "error_from_response", "raise_for_response"]
