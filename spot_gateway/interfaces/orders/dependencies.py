"""
Dependency injection for the order-management bounded context.

Provides the credential gate and the FastAPI dependency functions that
wire a per-request exchange client into use cases via constructor
injection. These are the composition root for the orders context.
"""

from collections.abc import Mapping

from fastapi import Depends, Query, Request

from spot_gateway.application.orders.cancel_open_orders import (
    CancelOpenOrdersUseCase,
)
from spot_gateway.application.orders.cancel_order import CancelOrderUseCase
from spot_gateway.application.orders.fetch_all_orders import FetchAllOrdersUseCase
from spot_gateway.application.orders.fetch_balances import FetchBalancesUseCase
from spot_gateway.application.orders.fetch_open_orders import (
    FetchOpenOrdersUseCase,
)
from spot_gateway.application.orders.place_limit_order import (
    PlaceLimitOrderUseCase,
)
from spot_gateway.application.orders.place_market_order import (
    PlaceMarketOrderUseCase,
)
from spot_gateway.core.config import settings
from spot_gateway.domain.orders.entities import Credentials
from spot_gateway.domain.orders.errors import (
    MissingCredentialsError,
    OrderValidationError,
)
from spot_gateway.domain.orders.ports import ExchangeTradingPort
from spot_gateway.infrastructure.orders.binance_spot_adapter import (
    BinanceSpotAdapter,
)

MISSING_ORDER_ID_MESSAGE = "orderId is required"
INVALID_ORDER_ID_MESSAGE = "orderId must be an integer"


def read_credentials(headers: Mapping[str, str]) -> Credentials | None:
    """Return the API key pair from request headers, or None if incomplete.

    ``headers`` is expected to be case-insensitive (Starlette ``Headers``).
    Blank values count as absent.
    """
    api_key = headers.get(settings.api_key_header, "").strip()
    secret_key = headers.get(settings.secret_key_header, "").strip()
    if not api_key or not secret_key:
        return None
    return Credentials(api_key=api_key, secret_key=secret_key)


def get_credentials(request: Request) -> Credentials:
    """Credential gate: read the API key pair from the request headers.

    Runs before the route's own body and query validation. Bodies that
    cannot be decoded at all fail earlier inside FastAPI; the request
    validation handler applies the same check for those.

    Raises:
        MissingCredentialsError: If either header is absent or blank.
    """
    credentials = read_credentials(request.headers)
    if credentials is None:
        raise MissingCredentialsError()
    return credentials


def get_exchange_client(
    credentials: Credentials = Depends(get_credentials),
) -> ExchangeTradingPort:
    """Build a trading client scoped to this request's credentials."""
    return BinanceSpotAdapter(credentials, base_url=settings.binance_base_url)


def _parse_order_id(raw: str | None) -> int | None:
    """Parse an ``orderId`` query value. Blank counts as absent."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise OrderValidationError(INVALID_ORDER_ID_MESSAGE) from None


def optional_order_id(
    raw: str | None = Query(default=None, alias="orderId"),
) -> int | None:
    """Return the optional ``orderId`` filter, or None when absent or blank."""
    return _parse_order_id(raw)


def require_order_id(
    raw: str | None = Query(default=None, alias="orderId"),
) -> int:
    """Return the mandatory ``orderId`` query parameter.

    Raises:
        OrderValidationError: If the parameter is missing, blank, or not
            an integer.
    """
    order_id = _parse_order_id(raw)
    if order_id is None:
        raise OrderValidationError(MISSING_ORDER_ID_MESSAGE)
    return order_id


def get_place_market_order_use_case(
    exchange: ExchangeTradingPort = Depends(get_exchange_client),
) -> PlaceMarketOrderUseCase:
    return PlaceMarketOrderUseCase(exchange=exchange)


def get_place_limit_order_use_case(
    exchange: ExchangeTradingPort = Depends(get_exchange_client),
) -> PlaceLimitOrderUseCase:
    return PlaceLimitOrderUseCase(exchange=exchange)


def get_fetch_balances_use_case(
    exchange: ExchangeTradingPort = Depends(get_exchange_client),
) -> FetchBalancesUseCase:
    return FetchBalancesUseCase(exchange=exchange)


def get_fetch_open_orders_use_case(
    exchange: ExchangeTradingPort = Depends(get_exchange_client),
) -> FetchOpenOrdersUseCase:
    return FetchOpenOrdersUseCase(exchange=exchange)


def get_fetch_all_orders_use_case(
    exchange: ExchangeTradingPort = Depends(get_exchange_client),
) -> FetchAllOrdersUseCase:
    return FetchAllOrdersUseCase(exchange=exchange)


def get_cancel_order_use_case(
    exchange: ExchangeTradingPort = Depends(get_exchange_client),
) -> CancelOrderUseCase:
    return CancelOrderUseCase(exchange=exchange)


def get_cancel_open_orders_use_case(
    exchange: ExchangeTradingPort = Depends(get_exchange_client),
) -> CancelOpenOrdersUseCase:
    return CancelOpenOrdersUseCase(exchange=exchange)
