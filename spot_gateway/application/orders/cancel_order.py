"""
Use case: Cancel a single order.

Input: CancelOrderCommand (symbol, order_id)
Output: the exchange's cancellation result.
Side effects: One order canceled on the exchange.
Failure cases: UpstreamError. Cancelling an already canceled order
surfaces the exchange's own error unchanged.
"""

import logging
from typing import Any

from spot_gateway.application.orders.dtos import CancelOrderCommand
from spot_gateway.domain.orders.errors import ExchangeError, UpstreamError
from spot_gateway.domain.orders.ports import ExchangeTradingPort

logger = logging.getLogger(__name__)


class CancelOrderUseCase:
    """Cancels one order by id."""

    def __init__(self, exchange: ExchangeTradingPort) -> None:
        self._exchange = exchange

    async def execute(self, command: CancelOrderCommand) -> Any:
        logger.info(
            "Canceling order symbol=%s order_id=%d", command.symbol, command.order_id
        )
        try:
            return await self._exchange.cancel_order(command.symbol, command.order_id)
        except ExchangeError as exc:
            raise UpstreamError("Error canceling order", exc.message) from exc
