"""Orders submitted during a backtest."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from quantgrades.domain.instrument import Instrument

__all__ = ["Side", "OrderType", "Order"]


class Side(Enum):
    """Direction of an order."""

    BUY = "Buy"
    SELL = "Sell"


class OrderType(Enum):
    """Kind of order; only market orders are supported."""

    MARKET = "Market"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Order:
    """A single order for an instrument; the timestamp defaults to now (UTC)."""

    instrument: Instrument
    side: Side
    quantity: float
    type: OrderType = OrderType.MARKET
    timestamp: datetime = field(default_factory=_now)

    def is_valid(self) -> bool:
        """True when the quantity is positive."""
        return self.quantity > 0.0