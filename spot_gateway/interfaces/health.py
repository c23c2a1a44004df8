"""
Health check router.

Liveness probe for the gateway. Sits outside the credential gate and
never contacts the exchange; it reports which exchange host the scoped
clients are configured to call.
"""

from urllib.parse import urlparse

from fastapi import APIRouter

from spot_gateway.core.config import settings
from spot_gateway.interfaces.orders.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns gateway status, version and the configured exchange host.",
)
def health_check() -> HealthResponse:
    """Return gateway status and the exchange endpoint in use."""
    exchange_host = urlparse(settings.binance_base_url).hostname or settings.binance_base_url
    return HealthResponse(status="ok", version=settings.version, exchange=exchange_host)
