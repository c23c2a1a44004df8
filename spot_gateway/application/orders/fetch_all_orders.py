"""
Use case: Fetch all orders (open, filled, canceled) for a symbol.

Input: FetchAllOrdersQuery (symbol, optional order_id)
Output: the exchange's order list, unfiltered.
Side effects: None.
Failure cases: UpstreamError.
"""

import logging
from typing import Any

from spot_gateway.application.orders.dtos import FetchAllOrdersQuery
from spot_gateway.domain.orders.errors import ExchangeError, UpstreamError
from spot_gateway.domain.orders.ports import ExchangeTradingPort

logger = logging.getLogger(__name__)


class FetchAllOrdersUseCase:
    """Lists order history for a symbol.

    ``order_id`` is passed through untouched; the exchange decides what
    it filters on.
    """

    def __init__(self, exchange: ExchangeTradingPort) -> None:
        self._exchange = exchange

    async def execute(self, query: FetchAllOrdersQuery) -> list[dict[str, Any]]:
        logger.info(
            "Fetching all orders symbol=%s order_id=%s", query.symbol, query.order_id
        )
        try:
            return await self._exchange.all_orders(query.symbol, query.order_id)
        except ExchangeError as exc:
            raise UpstreamError("Error fetching all orders", exc.message) from exc
