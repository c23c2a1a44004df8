"""
Centralized error handlers for FastAPI.

Maps domain errors to the gateway's JSON envelopes:

- validation failures -> 400 ``{"message": ...}``
- upstream failures   -> 500 ``{"message": ..., "error": ...}``

No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from spot_gateway.domain.orders.errors import (
    GatewayError,
    MissingCredentialsError,
    OrderValidationError,
    UpstreamError,
)
from spot_gateway.interfaces.orders.dependencies import read_credentials

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500

INVALID_PAYLOAD_MESSAGE = "Invalid request payload"


def _error_response(
    status_code: int, message: str, error: str | None = None
) -> JSONResponse:
    """Build a consistent JSON error envelope."""
    body: dict[str, str] = {"message": message}
    if error is not None:
        body["error"] = error
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(OrderValidationError)
    async def handle_order_validation(
        _request: Request, exc: OrderValidationError
    ) -> JSONResponse:
        """Handle missing credentials and missing/malformed order fields."""
        logger.info("Rejected request: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle payloads FastAPI could not parse into request schemas.

        Undecodable JSON bodies are rejected before any dependency runs,
        so the credential check is repeated here first.
        """
        if read_credentials(request.headers) is None:
            return _error_response(HTTP_400, MissingCredentialsError().message)
        logger.info(
            "Rejected malformed request: %s",
            [".".join(str(p) for p in e.get("loc", ())) for e in exc.errors()],
        )
        return _error_response(HTTP_400, INVALID_PAYLOAD_MESSAGE)

    @app.exception_handler(UpstreamError)
    async def handle_upstream(
        _request: Request, exc: UpstreamError
    ) -> JSONResponse:
        """Handle exchange failures. The upstream text is passed through."""
        logger.warning("%s: %s", exc.message, exc.detail)
        return _error_response(HTTP_500, exc.message, exc.detail)

    @app.exception_handler(GatewayError)
    async def handle_gateway(
        _request: Request, exc: GatewayError
    ) -> JSONResponse:
        """Catch-all for unhandled gateway errors."""
        logger.error("Unhandled gateway error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
