"""
FastAPI router for the order-management bounded context.

All routes delegate to use cases. No business logic here.
Every route sits behind the credential gate (router-level dependency).
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends

from spot_gateway.application.orders.cancel_open_orders import (
    CancelOpenOrdersUseCase,
)
from spot_gateway.application.orders.cancel_order import CancelOrderUseCase
from spot_gateway.application.orders.dtos import (
    CancelOrderCommand,
    FetchAllOrdersQuery,
)
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
from spot_gateway.interfaces.orders.dependencies import (
    get_cancel_open_orders_use_case,
    get_cancel_order_use_case,
    get_credentials,
    get_fetch_all_orders_use_case,
    get_fetch_balances_use_case,
    get_fetch_open_orders_use_case,
    get_place_limit_order_use_case,
    get_place_market_order_use_case,
    optional_order_id,
    require_order_id,
)
from spot_gateway.interfaces.orders.schemas import (
    BalancesResponse,
    DataResponse,
    ErrorResponse,
    MessageResponse,
    PlaceLimitOrderRequest,
    PlaceMarketOrderRequest,
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

router = APIRouter(tags=["orders"], dependencies=[Depends(get_credentials)])


@router.post(
    "/place-order",
    response_model=DataResponse,
    responses=ERROR_RESPONSES,
    summary="Place a market buy order",
    description="Buy at market, sized by quantity or by quoteOrderQty.",
)
async def place_order(
    request: PlaceMarketOrderRequest,
    use_case: PlaceMarketOrderUseCase = Depends(get_place_market_order_use_case),
) -> DataResponse:
    """Place a BUY MARKET order."""
    order = await use_case.execute(request.to_command())
    return DataResponse(message="Order placed successfully!", data=order)


@router.post(
    "/place-limit-order",
    response_model=DataResponse,
    responses=ERROR_RESPONSES,
    summary="Place a limit buy order",
    description="Buy at a limit price. Price and quantity are sent with two decimals.",
)
async def place_limit_order(
    request: PlaceLimitOrderRequest,
    use_case: PlaceLimitOrderUseCase = Depends(get_place_limit_order_use_case),
) -> DataResponse:
    """Place a BUY LIMIT order."""
    order = await use_case.execute(request.to_command())
    return DataResponse(message="Limit order placed successfully!", data=order)


@router.get(
    "/fetch-balances",
    response_model=BalancesResponse,
    responses=ERROR_RESPONSES,
    summary="Fetch account balances",
    description="Return the assets with a non-zero free or locked balance.",
)
async def fetch_balances(
    use_case: FetchBalancesUseCase = Depends(get_fetch_balances_use_case),
) -> BalancesResponse:
    """Fetch non-empty balances."""
    balances = await use_case.execute()
    return BalancesResponse(message="Balances fetched successfully", balances=balances)


@router.get(
    "/open-orders/{symbol}",
    response_model=DataResponse,
    responses=ERROR_RESPONSES,
    summary="Fetch open orders",
)
async def fetch_open_orders(
    symbol: str,
    use_case: FetchOpenOrdersUseCase = Depends(get_fetch_open_orders_use_case),
) -> DataResponse:
    """Fetch the open orders of a symbol."""
    orders = await use_case.execute(symbol)
    return DataResponse(message="Open orders fetched successfully", data=orders)


@router.get(
    "/all-orders/{symbol}",
    response_model=DataResponse,
    responses=ERROR_RESPONSES,
    summary="Fetch all orders",
    description="Return order history; orderId, when given, is passed to the exchange as a filter.",
)
async def fetch_all_orders(
    symbol: str,
    use_case: FetchAllOrdersUseCase = Depends(get_fetch_all_orders_use_case),
    order_id: int | None = Depends(optional_order_id),
) -> DataResponse:
    """Fetch every order of a symbol."""
    orders = await use_case.execute(FetchAllOrdersQuery(symbol=symbol, order_id=order_id))
    return DataResponse(message="All orders fetched successfully", data=orders)


@router.delete(
    "/cancel-order/{symbol}",
    response_model=DataResponse,
    responses=ERROR_RESPONSES,
    summary="Cancel one order",
)
async def cancel_order(
    symbol: str,
    use_case: CancelOrderUseCase = Depends(get_cancel_order_use_case),
    order_id: int = Depends(require_order_id),
) -> DataResponse:
    """Cancel a single order by id."""
    result = await use_case.execute(CancelOrderCommand(symbol=symbol, order_id=order_id))
    return DataResponse(message="Order canceled successfully", data=result)


@router.delete(
    "/cancel-open-orders/{symbol}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Cancel all open orders",
    description="Cancel every open order of a symbol concurrently. Failure is reported as a whole.",
)
async def cancel_open_orders(
    symbol: str,
    use_case: CancelOpenOrdersUseCase = Depends(get_cancel_open_orders_use_case),
) -> MessageResponse:
    """Cancel all open orders of a symbol."""
    await use_case.execute(symbol)
    return MessageResponse(message="All open orders canceled successfully")
