"""
Domain entities for the order-management bounded context.

Entities are transient: nothing here is persisted.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum
from typing import Any

TWO_PLACES = Decimal("0.01")


class OrderSide(Enum):
    """Order direction."""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(Enum):
    """Order type accepted by the exchange."""

    MARKET = "MARKET"
    LIMIT = "LIMIT"


class TimeInForce(Enum):
    """How long a limit order stays active."""

    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"


@dataclass(frozen=True)
class Credentials:
    """API key pair supplied by the caller for a single request.

    The secret is kept out of ``repr`` so it never ends up in logs.
    """

    api_key: str
    secret_key: str = field(repr=False)


@dataclass(frozen=True)
class Balance:
    """A single asset balance as reported by the exchange.

    The exchange encodes amounts as decimal strings.
    """

    asset: str
    free: Decimal
    locked: Decimal

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Balance":
        return cls(
            asset=str(payload.get("asset", "")),
            free=Decimal(str(payload.get("free", "0"))),
            locked=Decimal(str(payload.get("locked", "0"))),
        )

    @property
    def is_held(self) -> bool:
        """True when any part of the balance is free or locked."""
        return self.free > 0 or self.locked > 0


def format_plain(value: Decimal) -> str:
    """Render a decimal without exponent notation (``1E-3`` -> ``0.001``)."""
    return format(value, "f")


def format_two_places(value: Decimal) -> str:
    """Render a decimal with exactly two fractional digits.

    Rounds half up: 9.999 -> "10.00", 0.125 -> "0.13", 1 -> "1.00".
    Context precision is widened to hold every integer digit.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return format(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP), "f")
