"""
Domain-specific errors for the order-management bounded context.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class GatewayError(Exception):
    """Base error for all gateway errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class OrderValidationError(GatewayError):
    """Raised when caller input is missing or malformed.

    Always produced before any upstream call is made.
    """


class MissingCredentialsError(OrderValidationError):
    """Raised when either credential header is absent or empty."""

    def __init__(self) -> None:
        super().__init__("API key and secret key are required in headers")


class ExchangeError(GatewayError):
    """Raised by exchange adapters when an upstream call fails.

    Attributes:
        operation: Name of the upstream operation that failed.
        status_code: HTTP status returned by the exchange, if any.
        error_code: Exchange-specific error code, if any.
    """

    def __init__(
        self,
        message: str,
        operation: str,
        status_code: int | None = None,
        error_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code
        self.error_code = error_code


class UpstreamError(GatewayError):
    """Raised by use cases when the exchange rejected or failed a request.

    Carries the static per-route reason in ``message`` and the upstream
    error text in ``detail``.
    """

    def __init__(self, message: str, detail: str) -> None:
        super().__init__(message)
        self.detail = detail
