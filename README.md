# quantgrades

Building blocks for small, readable backtests and quick descriptive
statistics, using only the Python standard library.

## What is inside

- `quantgrades.loglevel` — the `LogLevel` enum (`TRACE` to `OFF`),
  `to_string()` and `parse_log_level()`, which accepts names such as
  `warning`, `err`, `crit` or `none` case-insensitively, returns `None` for
  an unknown name and can append a warning to a list you pass in.
- `quantgrades.loggers` — a `Logger` base class whose `trace`, `debug`,
  `info`, `warn`, `error` and `critical` helpers accept a `{}`-style
  format string with positional arguments, plus:
  - `MockLogger`, which keeps messages at or above its level in memory
    (`all_logs()`, `logs_by_level()`);
  - `NullLogger`, which discards everything;
  - `FileLogger`, which appends lines such as
    `[2024-01-01 12:00:00] [INFO] message` to a file (by default
    `logs/app.log`, creating the directory), can switch files with
    `open_file()` and works as a context manager.
- `quantgrades.domain` — market data and trading objects:
  - `quote.Quote` — one immutable OHLCV bar with a millisecond timestamp;
  - `instrument.Instrument` with `AssetClass` and `Currency`; construction
    raises `ValueError` for an empty symbol or venue, or a non-positive
    tick size, lot size or multiplier;
  - `execution` — `ExecParams`, `BacktestResult`, `apply_slippage()` and
    `commission_cost()`;
  - `order.Order` with `Side`, `OrderType` and `is_valid()`;
  - `trade.Trade` with `side`, `signed_cash()` and `pnl()`; a non-positive
    price or quantity raises `ValueError`;
  - `barseries.BarSeries`, a time-ordered container of quotes with `add`,
    `at`, `first`, `last`, `clear`, `data`, `len()`, iteration and indexing.
- `quantgrades.strategy` — the `Strategy` base class with its
  `on_start` / `on_bar` / `on_finish` lifecycle and the `Signal` enum, plus
  two ready strategies: `BuyHold` (buys on the first bar) and the
  simple moving-average crossover `MACrossover(fast_period=10, slow_period=20)`.
- `quantgrades.reporting` — the `Reporter` observer interface and a
  `ReporterManager` that passes quotes, trades and summaries to every
  registered reporter in the order they were added.
- `quantgrades.stats` — `calculate_mean`, `calculate_median`,
  `calculate_stddev` (sample, n - 1), `calculate_min` and `calculate_max`;
  each returns `None` for an empty sample.
- `quantgrades.grades` — `Grades`, a collection of integer grades with
  `mean`, `median`, `stddev`, `maximum`, `minimum`, `format_grades` and a
  text `summary`.
- `quantgrades.filemanager` — plain text file helpers:
  `read_all_lines`, `write_all_lines`, `append_line`, `exists` and
  `remove_file`.

## Examples

Slippage and commissions, in basis points:

```python
from quantgrades.domain.execution import apply_slippage, commission_cost

buy_price = apply_slippage(100.0, 10.0, True)     # 10 bps worse for a buy
sell_price = apply_slippage(100.0, 10.0, False)   # 10 bps worse for a sell
fee = commission_cost(buy_price, 5.0, 0.5, 5.0)   # fixed 0.5 plus 5 bps of notional
```

A series of bars fed to a strategy:

```python
from quantgrades.domain.barseries import BarSeries
from quantgrades.domain.quote import Quote
from quantgrades.strategy import BuyHold

series = BarSeries()
for ts, price in enumerate([100.0, 105.0, 110.0, 108.0]):
    series.add(Quote(ts * 60_000, price, price, price, price, 0.0))

strategy = BuyHold()
strategy.on_start()
signals = [strategy.on_bar(quote) for quote in series]
strategy.on_finish()
```

Grades and their statistics:

```python
from quantgrades.grades import Grades

grades = Grades()
for grade in (5, 4, 3):
    grades.add(grade)

print(grades.format_grades())
print(grades.mean(), grades.median(), grades.stddev())
print(grades.summary())
```

Capturing log output in tests:

```python
from quantgrades.loggers import MockLogger
from quantgrades.loglevel import LogLevel

logger = MockLogger()
logger.info("Ingested {} bars", 4)
assert logger.logs_by_level(LogLevel.INFO) == ["Ingested 4 bars"]
```

## What it does not do

- There is no backtest engine that runs a strategy over a `BarSeries` and
  fills a `BacktestResult`; you drive `on_bar` and apply the execution
  helpers yourself.
- There are no portfolio or position classes; `Reporter.on_summary` and
  `ReporterManager.notify_summary` accept whatever object you pass.
- Market data is not loaded from or exported to CSV or JSON, and nothing
  is stored in a database.
- There is no configuration loading and no command-line program.