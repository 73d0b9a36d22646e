# tradeagg

`tradeagg` turns a stream of raw taker trades into candles. A candle is built
from small components, such as open, high, low and close prices, volume, trade
counts and ratios. A rule decides when one candle is finished and the next one
starts.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Concepts

- **Trade** (`tradeagg.types.Trade`): a frozen dataclass with an integer
  `timestamp` in milliseconds, a `price` and a signed `size`. A negative size
  is a sell that took liquidity from the bid. Any object with `timestamp`,
  `price` and `size` attributes can be used instead (see the
  `tradeagg.types.TakerTrade` protocol); the timing components also call its
  `timestamp_resolution()` method when it has one, and assume milliseconds
  when it has not.
- **TimestampResolution** and **By** (`tradeagg.types`): the unit of trade
  timestamps (`SECOND`, `MILLISECOND`, `MICROSECOND`, `NANOSECOND`) and whether
  volume is summed in quote (`QUOTE`, raw size) or base currency (`BASE`, size
  divided by price).
- **Candle periods** (`tradeagg.types`): `M1`, `M5`, `M15`, `M30`, `H1`, `H2`,
  `H4`, `H8`, `H12` and `D1`, in seconds.
- **Candle components** (`tradeagg.components`): each one tracks a single value
  across the trades of a candle and offers `value()`, `reset()` and
  `update(trade)`.
  - `tradeagg.components.price`: `Open`, `High`, `Low`, `Close`,
    `AveragePrice`, `MedianPrice`, `WeightedPrice`
  - `tradeagg.components.flow`: `Volume`, `VolumeBuys`, `VolumeSells`,
    `NumTrades`, `DirectionalTradeRatio`, `DirectionalVolumeRatio`, `Entropy`,
    `StdDevPrices`, `StdDevSizes`, `Trades`
  - `tradeagg.components.timing`: `OpenTimeStamp`, `CloseTimeStamp`,
    `OpenDateTime` (an aware UTC `datetime`), `TimeVelocity`

  Ratios and averages return NaN for a candle with no trades;
  `MedianPrice.value()` raises `ValueError` instead. The standard deviations
  use `tradeagg.welford.WelfordOnline` and are zero with fewer than two trades.
- **ModularCandle** (`tradeagg.candle`): a named set of components, updated and
  reset together. Each component's value is readable as an attribute of the
  same name (`candle.open`), through `candle.value("open")`, or all at once as
  a dict through `candle.values()`. `candle.copy()` gives an independent copy.
  Component names may not start with an underscore or be `update`, `reset`,
  `value`, `values` or `copy` (`ValueError`), and every component must be a
  `CandleComponent` (`TypeError`).
  `candle_factory(**components)` returns a callable that builds fresh candles
  from zero-argument callables, usually the component classes.
- **Aggregation rules** (`tradeagg.rules`):
  - `TimeRule(period_s, ts_res)`: a new candle once more than one period has
    passed since the first trade of the current candle.
  - `AlignedTimeRule(period_s, ts_res)`: periods aligned to multiples of the
    period length.
  - `TickRule(n_ticks)`: a new candle every `n_ticks` trades.
  - `VolumeRule(threshold_vol, by)`: a new candle once the traded volume
    exceeds the threshold.
  - `RelativePriceRule(threshold_fraction)`: a new candle once the price has
    moved by the given fraction from the reference price.

  `VolumeRule` and `RelativePriceRule` raise `InvalidParamError` (a
  `ValueError`) for a threshold that is not positive.
- **GenericAggregator** (`tradeagg.aggregator`): feeds trades to a candle and
  gives back a finished candle whenever the rule triggers.

## Aggregating a whole series

```python
from tradeagg.aggregator import GenericAggregator
from tradeagg.candle import candle_factory
from tradeagg.components.price import Close, High, Low, Open
from tradeagg.rules import TimeRule
from tradeagg.types import M1, TimestampResolution
from tradeagg.utils import aggregate_all_trades, load_trades_from_csv

trades = load_trades_from_csv("trades.csv")  # header row, then timestamp, price, size

factory = candle_factory(open=Open, high=High, low=Low, close=Close)
rule = TimeRule(M1, TimestampResolution.MILLISECOND)  # one-minute candles
aggregator = GenericAggregator(factory, rule, False)

candles = aggregate_all_trades(trades, aggregator)
print(f"got {len(candles)} candles")
```

`load_trades_from_csv` skips the header row and reads the first three columns
of each record. It raises `OSError` when the file cannot be read and
`ValueError` when a record has the wrong number of fields or a value does not
parse.

## Streaming, trade by trade

```python
for trade in trades:
    candle = aggregator.update(trade)
    if candle is not None:
        print(candle.values())
```

`aggregator.unfinished_candle()` gives the candle that is still being built.
It does not respect the rule, so prefer the candles returned by `update`.

The trade that triggers the rule always opens the next candle. Passing `True`
as the last argument of `GenericAggregator` also puts it into the finished
candle, so that a candle's close equals the following candle's open.

## Choosing a volume threshold

`tradeagg.utils.candle_volume_from_time_period(total_volume, total_time_days,
target_time_minutes)` returns the volume per candle that gives as many candles
as a time aggregation over the same period would.

## Command line

The `tradeagg` command loads trades from a CSV file and aggregates them into
time based OHLC candles:

```
tradeagg [csv_file] [--period SECONDS] [--resolution UNIT] [--stream] [--ticks]
```

- `csv_file`: the trades file (default `data/Bitmex_XBTUSD_1M.csv`).
- `--period`: candle period in seconds (default 60).
- `--resolution`: unit of the trade timestamps, one of `second`,
  `millisecond`, `microsecond`, `nanosecond` (default `millisecond`).
- `--stream`: print the open, high, low and close of every candle as it is
  created, instead of only the number of candles.
- `--ticks`: feed each trade as a tick with a whole, unsigned quantity and a
  bid or ask side instead of a signed size.

It exits with status 1 and a message on standard error when the file cannot be
loaded. For the full help:

```
tradeagg --help
```

## What it does not do

`tradeagg` computes candles only. It does not draw charts of them, fetch
trades from exchanges, or store candles anywhere; the command line tool prints
a count or one line per candle.