"""
Use case: Place a BUY MARKET order.

Input: PlaceMarketOrderCommand (symbol, quantity | quote_order_qty)
Output: the exchange's order result, verbatim.
Side effects: One order placed on the exchange.
Failure cases: UpstreamError.
"""

import logging
from typing import Any

from spot_gateway.application.orders.dtos import PlaceMarketOrderCommand
from spot_gateway.domain.orders.entities import OrderSide, OrderType, format_plain
from spot_gateway.domain.orders.errors import ExchangeError, UpstreamError
from spot_gateway.domain.orders.ports import ExchangeTradingPort

logger = logging.getLogger(__name__)


class PlaceMarketOrderUseCase:
    """Places a market buy sized either in base or in quote asset.

    Only one amount is forwarded. When both are present on the command,
    ``quantity`` wins.
    """

    def __init__(self, exchange: ExchangeTradingPort) -> None:
        self._exchange = exchange

    async def execute(self, command: PlaceMarketOrderCommand) -> Any:
        """Run the market order use case.

        Args:
            command: Validated market order request.

        Returns:
            The order result returned by the exchange.

        Raises:
            UpstreamError: If the exchange call fails.
        """
        if command.quantity is not None:
            params = {"quantity": format_plain(command.quantity)}
        else:
            params = {"quoteOrderQty": format_plain(command.quote_order_qty)}

        logger.info(
            "Placing market order symbol=%s sizing=%s",
            command.symbol,
            next(iter(params)),
        )

        try:
            return await self._exchange.new_order(
                command.symbol, OrderSide.BUY, OrderType.MARKET, params
            )
        except ExchangeError as exc:
            raise UpstreamError("Error placing order", exc.message) from exc
