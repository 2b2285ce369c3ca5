"""Executed trades (fills) produced from orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from quantgrades.domain.order import Order, Side

__all__ = ["Trade"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Trade:
    """Immutable record of a fill.

    ``entry_price`` is an optional reference price for :meth:`pnl`;
    zero or less means it is unset.
    """

    order: Order
    price: float
    quantity: float
    timestamp: datetime = field(default_factory=_now)
    entry_price: float = 0.0

    def __post_init__(self) -> None:
        if self.price <= 0.0:
            raise ValueError("Trade: executed_price must be > 0")
        if self.quantity <= 0.0:
            raise ValueError("Trade: executed_quantity must be > 0")

    @property
    def side(self) -> Side:
        """Side of the originating order."""
        return self.order.side

    def signed_cash(self) -> float:
        """Cash flow of the fill: negative for a buy, positive for a sell."""
        notional = self.price * self.quantity
        return -notional if self.side is Side.BUY else notional

    def pnl(self) -> float:
        """Profit or loss against the entry price, 0.0 if none was given."""
        if self.entry_price <= 0.0:
            return 0.0
        if self.side is Side.BUY:
            return (self.price - self.entry_price) * self.quantity
        return (self.entry_price - self.price) * self.quantity