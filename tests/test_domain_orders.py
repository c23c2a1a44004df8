"""
Tests for the order-management domain layer.

Pure functions and entities only; no IO.
"""

from decimal import Decimal

import pytest

from spot_gateway.domain.orders.entities import (
    Balance,
    Credentials,
    format_plain,
    format_two_places,
)
from spot_gateway.domain.orders.errors import (
    MissingCredentialsError,
    OrderValidationError,
    UpstreamError,
)


class TestFormatTwoPlaces:
    """Fixed-point normalization applied to limit order price and quantity."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("9.999", "10.00"),
            ("1", "1.00"),
            ("0.125", "0.13"),
            ("0.124", "0.12"),
            ("30000.5", "30000.50"),
            ("1E+2", "100.00"),
            ("1E+27", "1" + "0" * 27 + ".00"),
            ("123456789012345678901234567890.005", "123456789012345678901234567890.01"),
        ],
    )
    def test_rounds_half_up_to_two_decimals(self, value: str, expected: str) -> None:
        assert format_two_places(Decimal(value)) == expected


class TestFormatPlain:
    def test_no_exponent_notation(self) -> None:
        assert format_plain(Decimal("1E-3")) == "0.001"

    def test_keeps_caller_precision(self) -> None:
        assert format_plain(Decimal("0.00012345")) == "0.00012345"


class TestBalance:
    """Tests for the Balance entity built from exchange payloads."""

    def test_parses_string_amounts(self) -> None:
        balance = Balance.from_payload({"asset": "ETH", "free": "1.5", "locked": "0.25"})
        assert balance.asset == "ETH"
        assert balance.free == Decimal("1.5")
        assert balance.locked == Decimal("0.25")

    def test_zero_balance_is_not_held(self) -> None:
        balance = Balance.from_payload(
            {"asset": "BTC", "free": "0.00000000", "locked": "0.00000000"}
        )
        assert not balance.is_held

    def test_locked_only_is_held(self) -> None:
        balance = Balance.from_payload({"asset": "BNB", "free": "0", "locked": "2"})
        assert balance.is_held


class TestCredentials:
    def test_secret_not_in_repr(self) -> None:
        credentials = Credentials(api_key="key", secret_key="super-secret")
        assert "super-secret" not in repr(credentials)
        assert "key" in repr(credentials)


class TestErrors:
    def test_missing_credentials_is_validation_error(self) -> None:
        error = MissingCredentialsError()
        assert isinstance(error, OrderValidationError)
        assert error.message == "API key and secret key are required in headers"

    def test_upstream_error_carries_detail(self) -> None:
        error = UpstreamError("Error placing order", "Invalid symbol.")
        assert error.message == "Error placing order"
        assert error.detail == "Invalid symbol."
