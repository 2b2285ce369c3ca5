import dataclasses

import pytest

from quantgrades.domain.instrument import AssetClass, Currency, Instrument


def make(**overrides):
    fields = {"symbol": "AAPL", "asset_class": AssetClass.EQUITY, "exchange_mic": "XNAS"}
    fields.update(overrides)
    return Instrument(**fields)


def test_defaults():
    inst = make()
    assert inst.currency is Currency.USD
    assert inst.tick_size == 0.01
    assert inst.lot_size == 1
    assert inst.multiplier == 1.0


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"symbol": ""}, "symbol must not be empty"),
        ({"exchange_mic": ""}, "exchange MIC must not be empty"),
        ({"tick_size": 0.0}, "tick size must be positive"),
        ({"tick_size": -0.01}, "tick size must be positive"),
        ({"lot_size": 0}, "lot size must be positive"),
        ({"multiplier": -1.0}, "multiplier must be positive"),
    ],
)
def test_validation(overrides, message):
    with pytest.raises(ValueError, match=message):
        make(**overrides)


def test_equality_uses_all_fields():
    assert make() == make()
    assert make() != make(currency=Currency.EUR)
    assert make() != make(multiplier=100.0)
    assert make() != make(asset_class=AssetClass.ETF)


def test_hash_uses_symbol_and_venue():
    a = make(tick_size=0.01)
    b = make(tick_size=0.05)
    assert hash(a) == hash(b)
    assert len({make(), make()}) == 1
    lookup = {make(): "apple"}
    assert lookup[make()] == "apple"


def test_immutable():
    inst = make()
    with pytest.raises(dataclasses.FrozenInstanceError):
        inst.symbol = "MSFT"
    assert inst.symbol == "AAPL"
    assert inst == make()