"""
Port interfaces (ABCs) for the order-management bounded context.

Ports define the contracts the use cases require from the exchange.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any

from spot_gateway.domain.orders.entities import OrderSide, OrderType


class ExchangeTradingPort(ABC):
    """Port for a trading client scoped to one caller's credentials.

    One instance serves exactly one request. Implementations must raise
    ``ExchangeError`` for any upstream failure.
    """

    @abstractmethod
    async def new_order(
        self,
        symbol: str,
        side: OrderSide,
        order_type: OrderType,
        params: dict[str, str],
    ) -> dict[str, Any]:
        """Place a new order and return the exchange's order result."""
        raise NotImplementedError

    @abstractmethod
    async def account(self) -> dict[str, Any]:
        """Return account information, including the ``balances`` list."""
        raise NotImplementedError

    @abstractmethod
    async def open_orders(self, symbol: str) -> list[dict[str, Any]]:
        """Return all currently open orders for a symbol."""
        raise NotImplementedError

    @abstractmethod
    async def all_orders(
        self, symbol: str, order_id: int | None = None
    ) -> list[dict[str, Any]]:
        """Return orders for a symbol, optionally filtered by order id.

        The meaning of ``order_id`` is defined by the exchange
        (orders with id >= order_id on Binance).
        """
        raise NotImplementedError

    @abstractmethod
    async def cancel_order(self, symbol: str, order_id: int) -> dict[str, Any]:
        """Cancel a single order and return the cancellation result."""
        raise NotImplementedError
