"""
Logging configuration for the gateway.

One pipe-separated format on stdout for every module logger.
Credential headers, request bodies and signed query strings never reach
the log: the access log records only method, path and status, and the
connector's own request logging is held at WARNING.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# binance/urllib3 debug lines carry signed URLs including the API key.
QUIET_LOGGERS = ("uvicorn.access", "binance", "urllib3")


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging and quiet third-party request loggers.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
