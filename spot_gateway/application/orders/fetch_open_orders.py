"""
Use case: Fetch open orders for a symbol.

Input: symbol
Output: the exchange's open-order list, unfiltered.
Side effects: None.
Failure cases: UpstreamError.
"""

import logging
from typing import Any

from spot_gateway.domain.orders.errors import ExchangeError, UpstreamError
from spot_gateway.domain.orders.ports import ExchangeTradingPort

logger = logging.getLogger(__name__)


class FetchOpenOrdersUseCase:
    """Lists the currently open orders of one symbol."""

    def __init__(self, exchange: ExchangeTradingPort) -> None:
        self._exchange = exchange

    async def execute(self, symbol: str) -> list[dict[str, Any]]:
        logger.info("Fetching open orders symbol=%s", symbol)
        try:
            return await self._exchange.open_orders(symbol)
        except ExchangeError as exc:
            raise UpstreamError("Error fetching open orders", exc.message) from exc
