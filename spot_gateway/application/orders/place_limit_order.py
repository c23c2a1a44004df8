"""
Use case: Place a BUY LIMIT order.

Input: PlaceLimitOrderCommand (symbol, price, quantity, time_in_force)
Output: the exchange's order result, verbatim.
Side effects: One order placed on the exchange.
Failure cases: UpstreamError.
"""

import logging
from typing import Any

from spot_gateway.application.orders.dtos import PlaceLimitOrderCommand
from spot_gateway.domain.orders.entities import (
    OrderSide,
    OrderType,
    format_two_places,
)
from spot_gateway.domain.orders.errors import ExchangeError, UpstreamError
from spot_gateway.domain.orders.ports import ExchangeTradingPort

logger = logging.getLogger(__name__)


class PlaceLimitOrderUseCase:
    """Places a limit buy with price and quantity normalized to two decimals.

    Callers may submit any precision. The wire values always carry
    exactly two fractional digits, rounded half up.
    """

    def __init__(self, exchange: ExchangeTradingPort) -> None:
        self._exchange = exchange

    async def execute(self, command: PlaceLimitOrderCommand) -> Any:
        """Run the limit order use case.

        Args:
            command: Validated limit order request.

        Returns:
            The order result returned by the exchange.

        Raises:
            UpstreamError: If the exchange call fails.
        """
        params = {
            "price": format_two_places(command.price),
            "quantity": format_two_places(command.quantity),
            "timeInForce": command.time_in_force.value,
        }

        logger.info(
            "Placing limit order symbol=%s price=%s quantity=%s tif=%s",
            command.symbol,
            params["price"],
            params["quantity"],
            params["timeInForce"],
        )

        try:
            return await self._exchange.new_order(
                command.symbol, OrderSide.BUY, OrderType.LIMIT, params
            )
        except ExchangeError as exc:
            raise UpstreamError("Error placing limit order", exc.message) from exc
