"""Observers notified about backtest events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from quantgrades.domain.quote import Quote
from quantgrades.domain.trade import Trade

__all__ = ["Reporter", "ReporterManager"]


class Reporter(ABC):
    """Receives quotes, trades and the final portfolio summary."""

    @abstractmethod
    def on_quote(self, quote: Quote) -> None:
        """Called after each processed bar."""

    @abstractmethod
    def on_trade(self, trade: Trade) -> None:
        """Called after each executed trade."""

    @abstractmethod
    def on_summary(self, portfolio: Any) -> None:
        """Called with the portfolio at the end of a run."""


class ReporterManager:
    """Dispatches events to every registered reporter, in registration order."""

    def __init__(self) -> None:
        self._reporters: list[Reporter] = []

    def add_reporter(self, reporter: Reporter) -> None:
        self._reporters.append(reporter)

    def notify_quote(self, quote: Quote) -> None:
        for reporter in self._reporters:
            reporter.on_quote(quote)

    def notify_trade(self, trade: Trade) -> None:
        for reporter in self._reporters:
            reporter.on_trade(trade)

    def notify_summary(self, portfolio: Any) -> None:
        for reporter in self._reporters:
            reporter.on_summary(portfolio)

    def __len__(self) -> int:
        return len(self._reporters)