"""
Data Transfer Objects for the order-management application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior and are only built
from input that has already passed validation.
"""

from dataclasses import dataclass
from decimal import Decimal

from spot_gateway.domain.orders.entities import TimeInForce


@dataclass(frozen=True)
class PlaceMarketOrderCommand:
    """Input DTO for a BUY MARKET order.

    Exactly one of ``quantity`` (base asset) or ``quote_order_qty``
    (quote asset) is set.
    """

    symbol: str
    quantity: Decimal | None = None
    quote_order_qty: Decimal | None = None


@dataclass(frozen=True)
class PlaceLimitOrderCommand:
    """Input DTO for a BUY LIMIT order.

    Attributes:
        symbol: Exchange symbol, e.g. BTCUSDT.
        price: Limit price, any precision.
        quantity: Base asset quantity, any precision.
        time_in_force: Order lifetime policy.
    """

    symbol: str
    price: Decimal
    quantity: Decimal
    time_in_force: TimeInForce = TimeInForce.GTC


@dataclass(frozen=True)
class FetchAllOrdersQuery:
    """Input DTO for listing orders of a symbol."""

    symbol: str
    order_id: int | None = None


@dataclass(frozen=True)
class CancelOrderCommand:
    """Input DTO for cancelling a single order."""

    symbol: str
    order_id: int

