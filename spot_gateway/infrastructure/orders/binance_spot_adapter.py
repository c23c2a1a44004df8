"""
Adapter: Binance Spot REST trading API.

Implements ExchangeTradingPort on top of the official binance-connector
``Spot`` client. The connector is synchronous (requests based), so every
call runs in a worker thread via ``asyncio.to_thread`` and the event loop
only waits on the result.

One adapter is built per request and bound to that caller's credentials.
Nothing is cached or pooled across requests.
"""

import asyncio
import logging
from typing import Any, Callable

import requests
from binance.error import ClientError, Error as BinanceError, ServerError
from binance.spot import Spot

from spot_gateway.domain.orders.entities import Credentials, OrderSide, OrderType
from spot_gateway.domain.orders.errors import ExchangeError
from spot_gateway.domain.orders.ports import ExchangeTradingPort

logger = logging.getLogger(__name__)


def _error_text(exc: Exception) -> str:
    """Extract the human-readable message from a connector error."""
    if isinstance(exc, ClientError):
        return str(exc.error_message)
    if isinstance(exc, ServerError):
        return str(exc.message)
    return str(exc) or type(exc).__name__


class BinanceSpotAdapter(ExchangeTradingPort):
    """Concrete adapter for the Binance Spot API.

    Args:
        credentials: The caller's API key pair.
        base_url: Exchange REST endpoint (testnet by default in settings).
        client: Optional pre-built ``Spot`` client, used by tests.
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str,
        client: Spot | None = None,
    ) -> None:
        self._client = client or Spot(
            api_key=credentials.api_key,
            api_secret=credentials.secret_key,
            base_url=base_url,
        )

    async def _call(self, operation: str, func: Callable[..., Any], *args, **kwargs) -> Any:
        try:
            return await asyncio.to_thread(func, *args, **kwargs)
        except ClientError as exc:
            logger.warning(
                "Binance %s rejected: status=%s code=%s",
                operation,
                exc.status_code,
                exc.error_code,
            )
            raise ExchangeError(
                _error_text(exc),
                operation=operation,
                status_code=exc.status_code,
                error_code=exc.error_code,
            ) from exc
        except (BinanceError, requests.RequestException) as exc:
            logger.warning("Binance %s failed: %s", operation, type(exc).__name__)
            raise ExchangeError(_error_text(exc), operation=operation) from exc

    async def new_order(
        self,
        symbol: str,
        side: OrderSide,
        order_type: OrderType,
        params: dict[str, str],
    ) -> dict[str, Any]:
        return await self._call(
            "new_order",
            self._client.new_order,
            symbol,
            side.value,
            order_type.value,
            **params,
        )

    async def account(self) -> dict[str, Any]:
        return await self._call("account", self._client.account)

    async def open_orders(self, symbol: str) -> list[dict[str, Any]]:
        return await self._call(
            "open_orders", self._client.get_open_orders, symbol=symbol
        )

    async def all_orders(
        self, symbol: str, order_id: int | None = None
    ) -> list[dict[str, Any]]:
        params = {} if order_id is None else {"orderId": order_id}
        return await self._call(
            "all_orders", self._client.get_orders, symbol, **params
        )

    async def cancel_order(self, symbol: str, order_id: int) -> dict[str, Any]:
        return await self._call(
            "cancel_order", self._client.cancel_order, symbol, orderId=order_id
        )
