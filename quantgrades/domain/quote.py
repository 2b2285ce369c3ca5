"""A single OHLCV market bar."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Quote"]


@dataclass(frozen=True, slots=True)
class Quote:
    """Immutable market bar; ``ts`` is epoch milliseconds."""

    ts: int = 0
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: float = 0.0