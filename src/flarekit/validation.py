"""Pre-flight checks for identifiers required to build a request URL.

These run before any HTTP traffic, so a missing zone or account ID surfaces
as a :class:`~flarekit.exceptions.MissingIdentifierError` rather than as a
404 from the API.
"""

from __future__ import annotations

from typing import Optional

from flarekit.exceptions import (
    MissingAccountIDError,
    MissingResourceIdentifierError,
    MissingZoneIDError,
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def require_account_id(account_id: Optional[str]) -> str:
    """Return *account_id*, raising :class:`MissingAccountIDError` if blank."""
    if _is_blank(account_id):
        raise MissingAccountIDError()
    return account_id


def require_zone_id(zone_id: Optional[str]) -> str:
    """Return *zone_id*, raising :class:`MissingZoneIDError` if blank."""
    if _is_blank(zone_id):
        raise MissingZoneIDError()
    return zone_id


def require_identifier(identifier: Optional[str], name: str = "") -> str:
    """Return *identifier*, raising :class:`MissingResourceIdentifierError` if blank.

    Args:
        identifier: The resource ID (record, rule, list, ...).
        name: Optional resource name included in the error message.
    """
    if _is_blank(identifier):
        if name:
            raise MissingResourceIdentifierError(
                f"{MissingResourceIdentifierError.default_message}: {name}"
            )
        raise MissingResourceIdentifierError()
    return identifier
