"""
Server entry point.

Usage:
    python -m spot_gateway

Binds to ``settings.host``/``settings.port`` (127.0.0.1:3000 by default).
"""

import logging

import uvicorn

from spot_gateway.core.config import settings
from spot_gateway.main import app

logger = logging.getLogger(__name__)


def main() -> None:
    logger.info("Server running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
