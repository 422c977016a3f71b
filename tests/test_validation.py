"""Tests for flarekit.validation -- pre-flight identifier checks."""

from __future__ import annotations

import pytest

from flarekit.exceptions import (
    MissingAccountIDError,
    MissingResourceIdentifierError,
    MissingZoneIDError,
)
from flarekit.validation import require_account_id, require_identifier, require_zone_id


class TestRequireAccountID:
    def test_returns_value(self) -> None:
        assert require_account_id("01a7362d577a6c3019a474fd6f485823") == (
            "01a7362d577a6c3019a474fd6f485823"
        )

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_raises(self, value: str | None) -> None:
        with pytest.raises(MissingAccountIDError):
            require_account_id(value)


class TestRequireZoneID:
    def test_returns_value(self) -> None:
        assert require_zone_id("023e105f4ecef8ad9ca31a8372d0c353") == (
            "023e105f4ecef8ad9ca31a8372d0c353"
        )

    @pytest.mark.parametrize("value", [None, "", "\t"])
    def test_blank_raises(self, value: str | None) -> None:
        with pytest.raises(MissingZoneIDError):
            require_zone_id(value)


class TestRequireIdentifier:
    def test_returns_value(self) -> None:
        assert require_identifier("372e67954025e0ba6aaa6d586b9e0b59") == (
            "372e67954025e0ba6aaa6d586b9e0b59"
        )

    def test_blank_raises_default_message(self) -> None:
        with pytest.raises(MissingResourceIdentifierError) as exc_info:
            require_identifier("")
        assert str(exc_info.value) == "required missing resource identifier"

    def test_blank_raises_with_name(self) -> None:
        with pytest.raises(MissingResourceIdentifierError) as exc_info:
            require_identifier(None, name="dns record")
        assert str(exc_info.value) == "required missing resource identifier: dns record"
