"""
Use case: Fetch the non-empty balances of the account.

Input: none beyond the scoped exchange client.
Output: list of balance payloads where free > 0 or locked > 0.
Side effects: None.
Failure cases: UpstreamError.
"""

import logging
from typing import Any

from spot_gateway.domain.orders.entities import Balance
from spot_gateway.domain.orders.errors import ExchangeError, UpstreamError
from spot_gateway.domain.orders.ports import ExchangeTradingPort

logger = logging.getLogger(__name__)


class FetchBalancesUseCase:
    """Reads account info and drops assets with nothing free or locked."""

    def __init__(self, exchange: ExchangeTradingPort) -> None:
        self._exchange = exchange

    async def execute(self) -> list[dict[str, Any]]:
        try:
            account = await self._exchange.account()
        except ExchangeError as exc:
            raise UpstreamError("Error fetching balances", exc.message) from exc

        balances = account.get("balances", [])
        held = [b for b in balances if Balance.from_payload(b).is_held]
        logger.info("Fetched balances: %d held of %d", len(held), len(balances))
        return held
