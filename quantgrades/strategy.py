"""Trading strategies that emit a signal for each market bar."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from enum import Enum

from quantgrades.domain.quote import Quote

__all__ = ["Signal", "Strategy", "BuyHold", "MACrossover"]


class Signal(Enum):
    """Trading decision for one bar."""

    NONE = "None"
    BUY = "Buy"
    SELL = "Sell"


class Strategy(ABC):
    """Strategy driven by the backtest engine.

    ``on_start`` is called before the first bar, ``on_bar`` for every bar
    and ``on_finish`` after the last one.
    """

    def on_start(self) -> None:
        """Prepare internal state before bars are streamed."""

    @abstractmethod
    def on_bar(self, quote: Quote) -> Signal:
        """Consume the next bar and return a decision."""

    def on_finish(self) -> None:
        """Finalise state after the last bar."""


class BuyHold(Strategy):
    """Buy on the first bar and hold until the end."""

    def __init__(self) -> None:
        self._has_bought = False

    def on_start(self) -> None:
        self._has_bought = False

    def on_bar(self, quote: Quote) -> Signal:
        if self._has_bought:
            return Signal.NONE
        self._has_bought = True
        return Signal.BUY


class _RollingMean:
    def __init__(self, period: int) -> None:
        self._window: deque[float] = deque(maxlen=period)
        self._sum = 0.0

    def push(self, value: float) -> None:
        if len(self._window) == self._window.maxlen:
            self._sum -= self._window[0]
        self._window.append(value)
        self._sum += value

    @property
    def full(self) -> bool:
        return len(self._window) == self._window.maxlen

    @property
    def mean(self) -> float:
        return self._sum / len(self._window)


class MACrossover(Strategy):
    """Simple moving average crossover on closing prices.

    Emits BUY when the fast average crosses above the slow one and SELL
    when it crosses below. No signal is given until the slow window is
    full and a previous pair of averages exists.
    """

    def __init__(self, fast_period: int = 10, slow_period: int = 20) -> None:
        if fast_period < 1 or slow_period < 1:
            raise ValueError("MACrossover: periods must be positive")
        self.fast_period = fast_period
        self.slow_period = slow_period
        self._reset()

    def _reset(self) -> None:
        self._fast = _RollingMean(self.fast_period)
        self._slow = _RollingMean(self.slow_period)
        self._prev_fast = 0.0
        self._prev_slow = 0.0
        self._ready = False

    def on_start(self) -> None:
        self._reset()

    def on_bar(self, quote: Quote) -> Signal:
        self._fast.push(quote.close)
        self._slow.push(quote.close)
        if not (self._fast.full and self._slow.full):
            return Signal.NONE

        fast, slow = self._fast.mean, self._slow.mean
        if not self._ready:
            self._prev_fast, self._prev_slow = fast, slow
            self._ready = True
            return Signal.NONE

        signal = Signal.NONE
        if self._prev_fast <= self._prev_slow and fast > slow:
            signal = Signal.BUY
        elif self._prev_fast >= self._prev_slow and fast < slow:
            signal = Signal.SELL
        self._prev_fast, self._prev_slow = fast, slow
        return signal

    def on_finish(self) -> None:
        self._reset()