"""Execution cost model and backtest summary."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExecParams", "BacktestResult", "apply_slippage", "commission_cost"]

_BPS = 10000.0


@dataclass
class ExecParams:
    """Commission and slippage settings for simulated fills."""

    commission_fixed: float = 0.0
    commission_bps: float = 0.0
    slippage_bps: float = 0.0


@dataclass
class BacktestResult:
    """Minimal summary returned by a backtest run."""

    initial_equity: float = 10000.0
    final_equity: float = 0.0
    trades_executed: int = 0


def apply_slippage(price: float, bps: float, is_buy: bool) -> float:
    """Move a price against the trader by ``bps`` basis points."""
    factor = bps / _BPS
    return price * (1.0 + factor) if is_buy else price * (1.0 - factor)


def commission_cost(price: float, quantity: float, fixed: float, bps: float) -> float:
    """Fixed commission plus ``bps`` basis points of the notional value."""
    return fixed + (bps / _BPS) * price * quantity