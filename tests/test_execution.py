import pytest

from quantgrades.domain.execution import (
    BacktestResult,
    ExecParams,
    apply_slippage,
    commission_cost,
)


def test_slippage_documented_example():
    assert apply_slippage(100.0, 10.0, True) == pytest.approx(100.10)
    assert apply_slippage(100.0, 10.0, False) == pytest.approx(99.90)


def test_slippage_zero_bps_is_identity():
    assert apply_slippage(123.45, 0.0, True) == 123.45
    assert apply_slippage(123.45, 0.0, False) == 123.45


def test_slippage_symmetric_around_price():
    price = 250.0
    up = apply_slippage(price, 7.5, True)
    down = apply_slippage(price, 7.5, False)
    assert up > price > down
    assert (up + down) / 2 == pytest.approx(price)


def test_commission_fixed_only():
    assert commission_cost(100.0, 50.0, 0.5, 0.0) == 0.5


def test_commission_full_notional():
    assert commission_cost(20.0, 3.0, 0.0, 10000.0) == pytest.approx(20.0 * 3.0)


def test_commission_adds_fixed_and_proportional():
    proportional = commission_cost(105.0, 10.0, 0.0, 5.0)
    total = commission_cost(105.0, 10.0, 0.5, 5.0)
    assert total == pytest.approx(proportional + 0.5)


def test_exec_params_defaults_and_fields():
    params = ExecParams(commission_fixed=0.5, commission_bps=5.0, slippage_bps=10.0)
    assert (params.commission_fixed, params.commission_bps, params.slippage_bps) == (
        0.5,
        5.0,
        10.0,
    )
    assert ExecParams() == ExecParams(0.0, 0.0, 0.0)


def test_backtest_result_defaults():
    result = BacktestResult()
    assert result.initial_equity == 10000.0
    assert result.final_equity == 0.0
    assert result.trades_executed == 0