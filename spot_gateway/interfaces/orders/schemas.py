"""
Pydantic schemas for order API request/response validation.

Request bodies arrive with camelCase keys and every field optional so
that missing fields produce the gateway's own 400 messages rather than
a generic parse error. ``to_command`` is the validation boundary: it
either returns a typed command DTO or raises ``OrderValidationError``.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from spot_gateway.application.orders.dtos import (
    PlaceLimitOrderCommand,
    PlaceMarketOrderCommand,
)
from spot_gateway.domain.orders.entities import TimeInForce
from spot_gateway.domain.orders.errors import OrderValidationError

SYMBOL_DESCRIPTION = "Exchange symbol, e.g. BTCUSDT"

MISSING_SYMBOL_MESSAGE = "symbol is required"
MISSING_AMOUNT_MESSAGE = "Either quantity or quoteOrderQty must be provided"
MISSING_LIMIT_FIELDS_MESSAGE = "symbol, price, and quantity are required"
AMOUNT_OUT_OF_RANGE_MESSAGE = "Amount out of range"

# Decimal exponent bounds for any amount, in powers of ten.
MAX_AMOUNT_EXPONENT = 30
MIN_AMOUNT_EXPONENT = -30


def _present(value: Decimal | None) -> bool:
    """An amount counts as provided only when set and non-zero."""
    return value is not None and value != 0


def _symbol(value: str | None) -> str | None:
    return value.strip() if value and value.strip() else None


def _check_range(*values: Decimal | None) -> None:
    """Reject amounts too large or too small to format for the wire."""
    for value in values:
        if value is None or value == 0:
            continue
        if not MIN_AMOUNT_EXPONENT <= value.adjusted() <= MAX_AMOUNT_EXPONENT:
            raise OrderValidationError(AMOUNT_OUT_OF_RANGE_MESSAGE)


class PlaceMarketOrderRequest(BaseModel):
    """Request schema for the market order endpoint.

    Attributes:
        symbol: Exchange symbol.
        quantity: Base asset amount to buy.
        quote_order_qty: Quote asset amount to spend.
    """

    model_config = ConfigDict(populate_by_name=True)

    symbol: str | None = Field(default=None, description=SYMBOL_DESCRIPTION)
    quantity: Decimal | None = Field(default=None, description="Base asset amount")
    quote_order_qty: Decimal | None = Field(
        default=None, alias="quoteOrderQty", description="Quote asset amount"
    )

    def to_command(self) -> PlaceMarketOrderCommand:
        symbol = _symbol(self.symbol)
        if symbol is None:
            raise OrderValidationError(MISSING_SYMBOL_MESSAGE)
        _check_range(self.quantity, self.quote_order_qty)
        if _present(self.quantity):
            return PlaceMarketOrderCommand(symbol=symbol, quantity=self.quantity)
        if _present(self.quote_order_qty):
            return PlaceMarketOrderCommand(
                symbol=symbol, quote_order_qty=self.quote_order_qty
            )
        raise OrderValidationError(MISSING_AMOUNT_MESSAGE)


class PlaceLimitOrderRequest(BaseModel):
    """Request schema for the limit order endpoint.

    Attributes:
        symbol: Exchange symbol.
        price: Limit price, any precision (sent with two decimals).
        quantity: Base asset amount, any precision (sent with two decimals).
        time_in_force: GTC (default), IOC or FOK.
    """

    model_config = ConfigDict(populate_by_name=True)

    symbol: str | None = Field(default=None, description=SYMBOL_DESCRIPTION)
    price: Decimal | None = None
    quantity: Decimal | None = None
    time_in_force: TimeInForce = Field(default=TimeInForce.GTC, alias="timeInForce")

    def to_command(self) -> PlaceLimitOrderCommand:
        symbol = _symbol(self.symbol)
        if symbol is None or not _present(self.price) or not _present(self.quantity):
            raise OrderValidationError(MISSING_LIMIT_FIELDS_MESSAGE)
        _check_range(self.price, self.quantity)
        return PlaceLimitOrderCommand(
            symbol=symbol,
            price=self.price,
            quantity=self.quantity,
            time_in_force=self.time_in_force,
        )


class DataResponse(BaseModel):
    """Success envelope carrying an exchange payload verbatim."""

    message: str
    data: Any


class BalancesResponse(BaseModel):
    """Success envelope for the balances endpoint."""

    message: str
    balances: list[dict[str, Any]]


class MessageResponse(BaseModel):
    """Success envelope with no payload."""

    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned by all error handlers."""

    message: str
    error: str | None = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    exchange: str
