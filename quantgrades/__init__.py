"""Market data, trading strategies, loggers, basic statistics and file helpers for simple backtests."""

__version__ = "1.0.0"