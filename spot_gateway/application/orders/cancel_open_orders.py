"""
Use case: Cancel every open order of a symbol.

Input: symbol
Output: None.
Side effects: One cancellation per open order, issued concurrently.
Failure cases: UpstreamError if the open-order query fails or if any
single cancellation fails. The error does not say which cancellations
went through; callers re-query open orders to find out.
"""

import asyncio
import logging

from spot_gateway.domain.orders.errors import ExchangeError, UpstreamError
from spot_gateway.domain.orders.ports import ExchangeTradingPort

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Error canceling open orders"


class CancelOpenOrdersUseCase:
    """Fans out one cancel per open order, then joins on all of them.

    Every cancellation is issued and awaited even when some fail, so no
    order is left untouched because of an early exit. The first failure
    (in open-order order) is reported.
    """

    def __init__(self, exchange: ExchangeTradingPort) -> None:
        self._exchange = exchange

    async def execute(self, symbol: str) -> None:
        """Run the bulk cancel use case.

        Args:
            symbol: Exchange symbol whose open orders are canceled.

        Raises:
            UpstreamError: If the query or any cancellation fails.
        """
        try:
            open_orders = await self._exchange.open_orders(symbol)
        except ExchangeError as exc:
            raise UpstreamError(FAILURE_MESSAGE, exc.message) from exc

        logger.info(
            "Canceling %d open orders symbol=%s", len(open_orders), symbol
        )

        results = await asyncio.gather(
            *(
                self._exchange.cancel_order(symbol, order["orderId"])
                for order in open_orders
            ),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, BaseException)]
        if not failures:
            return

        logger.warning(
            "Bulk cancel symbol=%s: %d of %d cancellations failed",
            symbol,
            len(failures),
            len(results),
        )
        first = failures[0]
        if isinstance(first, ExchangeError):
            raise UpstreamError(FAILURE_MESSAGE, first.message) from first
        raise first
