"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, orders)
- Error handlers (centralized domain-to-HTTP mapping)
- Access log middleware
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from spot_gateway.core.config import settings
from spot_gateway.interfaces.health import router as health_router
from spot_gateway.interfaces.orders.router import router as orders_router
from spot_gateway.shared.access_log import AccessLogMiddleware
from spot_gateway.shared.errors.handlers import register_error_handlers
from spot_gateway.shared.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Middleware ---
    app.add_middleware(AccessLogMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(orders_router)

    return app


app = create_app()
