"""Tradable instrument metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["AssetClass", "Currency", "Instrument"]


class AssetClass(Enum):
    """High-level classification of an instrument."""

    EQUITY = "Equity"
    ETF = "ETF"
    FUTURE = "Future"
    OPTION = "Option"
    FX = "FX"
    BOND = "Bond"
    CRYPTO = "Crypto"
    UNKNOWN = "Unknown"


class Currency(Enum):
    """Trading or settlement currency."""

    USD = "USD"
    EUR = "EUR"
    PLN = "PLN"
    GBP = "GBP"
    JPY = "JPY"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Instrument:
    """Immutable, validated description of a tradable instrument.

    Equality compares every field; the hash uses symbol and venue only.
    """

    symbol: str
    asset_class: AssetClass
    exchange_mic: str
    currency: Currency = Currency.USD
    tick_size: float = 0.01
    lot_size: int = 1
    multiplier: float = 1.0

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("Instrument: symbol must not be empty")
        if not self.exchange_mic:
            raise ValueError("Instrument: exchange MIC must not be empty")
        if self.tick_size <= 0.0:
            raise ValueError("Instrument: tick size must be positive")
        if self.lot_size <= 0:
            raise ValueError("Instrument: lot size must be positive")
        if self.multiplier <= 0.0:
            raise ValueError("Instrument: multiplier must be positive")

    def __hash__(self) -> int:
        return hash((self.symbol, self.exchange_mic))